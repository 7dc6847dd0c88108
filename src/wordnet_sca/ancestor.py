"""Shortest common ancestor search over an IndexedDigraph.

The search is a multi-source BFS with two colours: every vertex reached from
subset A is coloured 1, every vertex reached from subset B is coloured 2.
Whenever an edge joins the two colours, the vertex at its head is reachable
from both subsets and the path ``a -> ... -> head <- ... <- b`` is a candidate.
The shortest candidate seen over the whole traversal wins; the first contact
between the colours is not necessarily the shortest one, so the BFS always
runs until the queue is empty.
"""

from collections import deque
from collections.abc import Iterable, Sequence

from .digraph import DigraphView, IndexedDigraph

UNVISITED = 0
FROM_A = 1
FROM_B = 2


class NoCommonAncestorError(LookupError):
    """Raised when the two subsets share no reachable vertex."""


class AncestorFinder:
    """Answers shortest-common-ancestor queries against a frozen digraph.

    Each query allocates its own working lists, so one finder (or several)
    may be used from multiple threads as long as nobody adds edges to the
    graph in the meantime.
    """

    def __init__(self, graph: IndexedDigraph | DigraphView) -> None:
        self.graph = graph.view() if isinstance(graph, IndexedDigraph) else graph

    def ancestor_length(
        self, subset_a: Sequence[int], subset_b: Sequence[int]
    ) -> tuple[int, int]:
        """Find the shortest common ancestor of two sets of synset ids.

        Args:
            subset_a: External ids of the first set of sources.
            subset_b: External ids of the second set of sources.

        Returns:
            Tuple of (ancestor id, total path length).

        Raises:
            ValueError: If either subset is empty.
            KeyError: If an id is not in the graph.
            NoCommonAncestorError: If no vertex is reachable from both subsets.
        """
        if not subset_a or not subset_b:
            raise ValueError("both subsets must contain at least one synset id")

        graph = self.graph
        distance = [0] * len(graph)
        color = [UNVISITED] * len(graph)
        queue: deque[int] = deque()

        for synset_id in subset_a:
            vertex = graph.index_of(synset_id)
            color[vertex] = FROM_A
            queue.append(vertex)
        for synset_id in subset_b:
            vertex = graph.index_of(synset_id)
            if color[vertex] == FROM_A:
                return synset_id, 0
            color[vertex] = FROM_B
            queue.append(vertex)

        best_length: int | None = None
        best_vertex = -1
        while queue:
            vertex = queue.popleft()
            for target in graph.successors(vertex):
                if color[target] == UNVISITED:
                    color[target] = color[vertex]
                    distance[target] = distance[vertex] + 1
                    queue.append(target)
                elif color[target] != color[vertex]:
                    length = distance[target] + distance[vertex] + 1
                    if best_length is None or length < best_length:
                        best_length = length
                        best_vertex = target

        if best_length is None:
            raise NoCommonAncestorError(
                f"no common ancestor for {list(subset_a)} and {list(subset_b)}"
            )
        return graph.id_at(best_vertex), best_length

    def length(self, v: int, w: int) -> int:
        return self.ancestor_length([v], [w])[1]

    def ancestor(self, v: int, w: int) -> int:
        return self.ancestor_length([v], [w])[0]

    def length_subset(self, subset_a: Iterable[int], subset_b: Iterable[int]) -> int:
        """Length of the shortest ancestral path between any member of each set."""
        return self.ancestor_length(list(subset_a), list(subset_b))[1]

    def ancestor_subset(self, subset_a: Iterable[int], subset_b: Iterable[int]) -> int:
        """Shortest common ancestor of any member of each set."""
        return self.ancestor_length(list(subset_a), list(subset_b))[0]

    def ancestor_path(
        self, subset_a: Iterable[int], subset_b: Iterable[int]
    ) -> list[int]:
        """Synset ids along a shortest ancestral path.

        The path starts at a member of ``subset_a``, climbs to the shortest
        common ancestor and descends to a member of ``subset_b``. Its length
        in edges equals ``length_subset(subset_a, subset_b)``.
        """
        subset_a = list(subset_a)
        subset_b = list(subset_b)
        ancestor, _ = self.ancestor_length(subset_a, subset_b)
        target = self.graph.index_of(ancestor)

        up = self._path_to(subset_a, target)
        down = self._path_to(subset_b, target)
        down.reverse()
        return [self.graph.id_at(v) for v in up + down[1:]]

    def _path_to(self, sources: list[int], target: int) -> list[int]:
        """BFS from sources to target; returns dense indices source..target."""
        graph = self.graph
        parent: dict[int, int | None] = {}
        queue: deque[int] = deque()
        for synset_id in sources:
            vertex = graph.index_of(synset_id)
            if vertex not in parent:
                parent[vertex] = None
                queue.append(vertex)

        while queue and target not in parent:
            vertex = queue.popleft()
            for child in graph.successors(vertex):
                if child not in parent:
                    parent[child] = vertex
                    queue.append(child)

        path = [target]
        step = parent[target]
        while step is not None:
            path.append(step)
            step = parent[step]
        path.reverse()
        return path
