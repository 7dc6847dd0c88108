"""BFS level assignment from the queried synsets."""

from collections import deque
from collections.abc import Iterable


def compute_depths(
    edges: dict[int, list[int]],
    sources: Iterable[int],
) -> tuple[dict[int, list[int]], dict[int, int]]:
    """Assign each synset its hop count from the nearest source.

    Args:
        edges: Adjacency list (synset -> hypernyms).
        sources: Queried synsets (depth 0).

    Returns:
        synsets_by_depth: depth -> sorted list of synsets at that depth.
        synset_to_depth: synset -> its depth.
    """
    synset_to_depth: dict[int, int] = {}
    queue: deque[int] = deque()
    for synset in sources:
        if synset not in synset_to_depth:
            synset_to_depth[synset] = 0
            queue.append(synset)

    while queue:
        synset = queue.popleft()
        for hypernym in edges.get(synset, []):
            if hypernym not in synset_to_depth:
                synset_to_depth[hypernym] = synset_to_depth[synset] + 1
                queue.append(hypernym)

    synsets_by_depth: dict[int, list[int]] = {}
    for synset, depth in synset_to_depth.items():
        synsets_by_depth.setdefault(depth, []).append(synset)
    for depth in synsets_by_depth:
        synsets_by_depth[depth].sort()

    return synsets_by_depth, synset_to_depth
