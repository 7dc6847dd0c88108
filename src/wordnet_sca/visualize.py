"""Generate visualization and statistics outputs."""

import json
from collections import Counter
from pathlib import Path

import networkx as nx

from .layout import (
    build_layout_graph,
    classify_edges,
    compute_depths,
    compute_positions,
    render_graph,
)
from .wordnet import WordNet


def hypernym_closure(wordnet: WordNet, sources: list[int]) -> dict[int, list[int]]:
    """Adjacency list of every synset reachable from ``sources``."""
    G = wordnet.graph.to_networkx()
    reachable: set[int] = set()
    for synset in sources:
        reachable.add(synset)
        reachable |= nx.descendants(G, synset)
    return {synset: list(G.successors(synset)) for synset in reachable}


def _label(wordnet: WordNet, synset_id: int) -> str:
    nouns = wordnet.synset(synset_id).nouns
    label = nouns[0]
    if len(nouns) > 1:
        label += f" (+{len(nouns) - 1})"
    return label


def _tooltip(wordnet: WordNet, synset_id: int) -> str:
    synset = wordnet.synset(synset_id)
    return f"{synset_id}: {' '.join(synset.nouns)}\n{synset.gloss}"


def generate_html(wordnet: WordNet, noun1: str, noun2: str, output_file: Path) -> None:
    """Render the hypernyms of two nouns with their shortest ancestral path.

    Args:
        wordnet: Loaded database.
        noun1: First noun.
        noun2: Second noun.
        output_file: Path to write the HTML file.
    """
    sources_a = wordnet.synsets_of(noun1)
    sources_b = wordnet.synsets_of(noun2)
    path = wordnet.path(noun1, noun2)
    ancestor = wordnet.sca_synset(noun1, noun2).id

    sources = sources_a + sources_b
    edges = hypernym_closure(wordnet, sources)
    _, synset_to_depth = compute_depths(edges, sources)
    classified = classify_edges(edges, path)
    layout_graph = build_layout_graph(edges, synset_to_depth)
    positions = compute_positions(layout_graph)

    render_graph(
        positions=positions,
        classified_edges=classified,
        labels={s: _label(wordnet, s) for s in positions},
        output_path=output_file,
        tooltips={s: _tooltip(wordnet, s) for s in positions},
        ancestor=ancestor,
        sources=set(sources),
        title=f"{noun1} / {noun2}: distance {len(path) - 1}",
    )


def compute_stats(wordnet: WordNet, top: int = 20) -> dict:
    """Summary statistics of a loaded database.

    Args:
        wordnet: Loaded database.
        top: How many of the most common hypernyms to list.

    Returns:
        JSON-serialisable dictionary.
    """
    graph = wordnet.graph
    hyponym_counts: Counter[int] = Counter()
    roots = []
    for synset_id in graph.ids():
        hypernyms = graph.neighbors(synset_id)
        if not hypernyms:
            roots.append(synset_id)
        hyponym_counts.update(hypernyms)

    return {
        "synsets": len(wordnet),
        "nouns": sum(1 for _ in wordnet.nouns()),
        "vertices": graph.vertex_count(),
        "edges": graph.edge_count(),
        "roots": roots,
        "top_hypernyms": [
            {"id": synset_id, "label": _label(wordnet, synset_id), "hyponyms": count}
            for synset_id, count in hyponym_counts.most_common(top)
        ],
    }


def generate_json(wordnet: WordNet, output_file: Path, top: int = 20) -> None:
    """Write compute_stats output as JSON.

    Args:
        wordnet: Loaded database.
        output_file: Path to write the JSON file.
        top: How many of the most common hypernyms to list.
    """
    with open(output_file, "w") as f:
        json.dump(compute_stats(wordnet, top=top), f, indent=2)
