"""Directed graph over sparse synset ids, stored with dense vertex indices."""

from collections.abc import Sequence

import networkx as nx


class DigraphView:
    """Read-only window onto the index tables of an IndexedDigraph.

    The view borrows the graph's tables without copying them, so it reflects
    the graph as it is when queried. Callers must finish building the graph
    before handing out views.
    """

    __slots__ = ("_adjacency", "_vertex_of", "_id_of")

    def __init__(
        self,
        adjacency: list[list[int]],
        vertex_of: dict[int, int],
        id_of: list[int],
    ) -> None:
        self._adjacency = adjacency
        self._vertex_of = vertex_of
        self._id_of = id_of

    def __len__(self) -> int:
        return len(self._adjacency)

    def index_of(self, synset_id: int) -> int:
        """Dense index of an external id.

        Raises:
            KeyError: If the id was never registered.
        """
        try:
            return self._vertex_of[synset_id]
        except KeyError:
            raise KeyError(f"synset id {synset_id} is not in the graph") from None

    def id_at(self, vertex: int) -> int:
        return self._id_of[vertex]

    def successors(self, vertex: int) -> Sequence[int]:
        return self._adjacency[vertex]


class IndexedDigraph:
    """Add-only directed graph keyed by arbitrary non-negative ids.

    External ids are remapped to dense indices ``0..N`` in the order they are
    first seen, so adjacency lives in a flat list of lists.
    """

    def __init__(self) -> None:
        self._adjacency: list[list[int]] = []
        self._vertex_of: dict[int, int] = {}  # external id -> dense index
        self._id_of: list[int] = []  # dense index -> external id

    def reserve(self, capacity: int) -> None:
        """Hint the expected number of vertices.

        Python lists and dicts grow on demand, so this has no effect.
        """

    def _vertex(self, synset_id: int) -> int:
        vertex = self._vertex_of.get(synset_id)
        if vertex is None:
            vertex = len(self._id_of)
            self._vertex_of[synset_id] = vertex
            self._id_of.append(synset_id)
            self._adjacency.append([])
        return vertex

    def add_vertex(self, synset_id: int) -> None:
        """Register an id with no edges (no-op if already present)."""
        self._vertex(synset_id)

    def add_edge(self, from_id: int, to_id: int) -> None:
        """Add an edge, registering unseen endpoints.

        Self-loops and parallel edges are stored as given.
        """
        source = self._vertex(from_id)
        self._adjacency[source].append(self._vertex(to_id))

    def neighbors(self, synset_id: int) -> list[int]:
        """External ids of outgoing edges, in insertion order.

        Unknown ids have no neighbours.
        """
        vertex = self._vertex_of.get(synset_id)
        if vertex is None:
            return []
        return [self._id_of[n] for n in self._adjacency[vertex]]

    def vertex_count(self) -> int:
        return len(self._adjacency)

    def edge_count(self) -> int:
        return sum(len(targets) for targets in self._adjacency)

    def ids(self) -> list[int]:
        """All registered ids in dense-index order."""
        return list(self._id_of)

    def __len__(self) -> int:
        return self.vertex_count()

    def __contains__(self, synset_id: object) -> bool:
        return synset_id in self._vertex_of

    def view(self) -> DigraphView:
        return DigraphView(self._adjacency, self._vertex_of, self._id_of)

    def dump(self) -> str:
        """Debug listing: one line per vertex with its neighbours.

        Vertices appear in dense-index order. Not a stable format.
        """
        lines = ["vertex: its neighbours"]
        for vertex, targets in enumerate(self._adjacency):
            names = " ".join(str(self._id_of[t]) for t in targets)
            lines.append(f"{self._id_of[vertex]}: {names}".rstrip())
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.dump()

    def to_networkx(self) -> nx.DiGraph:
        """Export as a networkx DiGraph keyed by external id.

        Parallel edges collapse into one; self-loops are kept.
        """
        G = nx.DiGraph()
        G.add_nodes_from(self._id_of)
        for vertex, targets in enumerate(self._adjacency):
            source = self._id_of[vertex]
            for target in targets:
                G.add_edge(source, self._id_of[target])
        return G
