"""Layer graph construction and node placement with networkx."""

import networkx as nx


def build_layout_graph(
    edges: dict[int, list[int]],
    synset_to_depth: dict[int, int],
) -> nx.DiGraph:
    """Build a DiGraph of the placed synsets, tagged with their depth.

    Only synsets with a depth are kept; edges to unplaced synsets are dropped.

    Args:
        edges: Adjacency list (synset -> hypernyms).
        synset_to_depth: Mapping from synset to its layer.

    Returns:
        NetworkX DiGraph with a ``depth`` attribute on every node.
    """
    G = nx.DiGraph()
    for synset, depth in synset_to_depth.items():
        G.add_node(synset, depth=depth)
    for synset, hypernyms in edges.items():
        if synset not in synset_to_depth:
            continue
        for hypernym in hypernyms:
            if hypernym in synset_to_depth:
                G.add_edge(synset, hypernym)
    return G


def compute_positions(
    layout_graph: nx.DiGraph,
    width: float = 1200.0,
    layer_spacing: float = 120.0,
) -> dict[int, tuple[float, float]]:
    """Place nodes in horizontal rows, one row per depth.

    Depth 0 is the bottom row; screen y grows downwards, so higher depths get
    smaller y values.

    Args:
        layout_graph: Graph from build_layout_graph.
        width: Horizontal extent of the widest row, in pixels.
        layer_spacing: Vertical distance between rows, in pixels.

    Returns:
        Dictionary mapping synset to (x, y).
    """
    if layout_graph.number_of_nodes() == 0:
        return {}

    pos = nx.multipartite_layout(
        layout_graph, subset_key="depth", align="horizontal", scale=width / 2
    )
    positions: dict[int, tuple[float, float]] = {}
    for synset, (x, _) in pos.items():
        depth = layout_graph.nodes[synset]["depth"]
        positions[synset] = (float(x), -depth * layer_spacing)
    return positions
