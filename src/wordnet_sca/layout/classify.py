"""Edge classification relative to a shortest ancestral path."""

from enum import Enum


class EdgeType(Enum):
    """Whether a hypernym edge lies on the highlighted path."""

    PATH = "path"
    HYPERNYM = "hypernym"


def classify_edges(
    edges: dict[int, list[int]],
    path: list[int],
) -> dict[EdgeType, list[tuple[int, int]]]:
    """Split edges into those on ``path`` and the rest.

    The path climbs to the ancestor and then descends, so its second half
    walks edges backwards; direction is ignored when matching.

    Args:
        edges: Adjacency list (synset -> hypernyms).
        path: Synset ids along the ancestral path.

    Returns:
        Dictionary mapping EdgeType to list of (synset, hypernym) tuples.
    """
    on_path = set()
    for a, b in zip(path, path[1:]):
        on_path.add((a, b))
        on_path.add((b, a))

    classified: dict[EdgeType, list[tuple[int, int]]] = {
        EdgeType.PATH: [],
        EdgeType.HYPERNYM: [],
    }
    for synset, hypernyms in edges.items():
        for hypernym in hypernyms:
            if (synset, hypernym) in on_path:
                classified[EdgeType.PATH].append((synset, hypernym))
            else:
                classified[EdgeType.HYPERNYM].append((synset, hypernym))
    return classified
