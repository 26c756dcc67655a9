
# wgraph/graph.py


from __future__ import annotations
import logging
import sys
from typing import IO, Iterator, List, Optional, Tuple, Union

from . import config
from .errors import EdgeNotFound, InvalidArgument, InvalidVertex, SelfLoop

logger = logging.getLogger(__name__)

Weight = Union[int, float]
Edge = Tuple[int, int, Weight]


def _is_index(x: object) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


class Graph:
    """
    Undirected weighted graph over the vertices 0..n-1:
    - n is fixed at construction
    - per-vertex adjacency kept in insertion order as (neighbor, weight) pairs
    - every edge is stored at both endpoints with the same weight
    - no self-loops, no parallel edges
    - getters return tuples (read-only snapshots), never internal lists
    """

    def __init__(self, n: int) -> None:
        if not _is_index(n) or n < 0:
            raise InvalidArgument("vertex count", n, "must be a non-negative integer")
        self._n = n
        self._adj: List[List[Tuple[int, Weight]]] = [[] for _ in range(n)]

    # ---------- internal helpers ----------

    def _check_vertex(self, v: int, operation: str) -> None:
        if not _is_index(v) or not 0 <= v < self._n:
            raise InvalidVertex(v, self._n, operation)

    def _index_of(self, u: int, v: int) -> int:
        for i, (nbr, _) in enumerate(self._adj[u]):
            if nbr == v:
                return i
        return -1

    # ---------- mutation ----------

    def add_edge(self, src: int, dest: int, weight: Weight = config.DEFAULT_WEIGHT) -> None:
        # validate first; nothing is touched until both endpoints pass
        self._check_vertex(src, "add_edge")
        self._check_vertex(dest, "add_edge")
        if src == dest:
            raise SelfLoop(src, "add_edge")

        if self._index_of(src, dest) != -1:
            logger.debug(f"add_edge({src}, {dest}): edge exists, keeping current weight")
            return

        self._adj[src].append((dest, weight))
        self._adj[dest].append((src, weight))

    def remove_edge(self, src: int, dest: int) -> None:
        self._check_vertex(src, "remove_edge")
        self._check_vertex(dest, "remove_edge")
        i = self._index_of(src, dest)
        if i == -1:
            raise EdgeNotFound(src, dest, "remove_edge")

        del self._adj[src][i]
        j = self._index_of(dest, src)
        if j != -1:
            del self._adj[dest][j]

    # ---------- queries ----------

    def vertex_count(self) -> int:
        return self._n

    def neighbor_count(self, v: int) -> int:
        self._check_vertex(v, "neighbor_count")
        return len(self._adj[v])

    get_size = neighbor_count

    def neighbors(self, v: int) -> Tuple[int, ...]:
        self._check_vertex(v, "neighbors")
        return tuple(nbr for nbr, _ in self._adj[v])

    def weights(self, v: int) -> Tuple[Weight, ...]:
        self._check_vertex(v, "weights")
        return tuple(w for _, w in self._adj[v])

    def adjacency(self, v: int) -> Tuple[Tuple[int, Weight], ...]:
        """(neighbor, weight) pairs of v in insertion order."""
        self._check_vertex(v, "adjacency")
        return tuple(self._adj[v])

    def has_edge(self, src: int, dest: int) -> bool:
        if not (_is_index(src) and _is_index(dest)):
            return False
        if not (0 <= src < self._n and 0 <= dest < self._n):
            return False
        return self._index_of(src, dest) != -1

    def edge_weight(self, src: int, dest: int) -> Weight:
        self._check_vertex(src, "edge_weight")
        self._check_vertex(dest, "edge_weight")
        i = self._index_of(src, dest)
        if i == -1:
            raise EdgeNotFound(src, dest, "edge_weight")
        return self._adj[src][i][1]

    def edges(self) -> Tuple[Edge, ...]:
        # undirected: emit each edge once, from its lower endpoint
        return tuple(
            (u, v, w)
            for u in range(self._n)
            for v, w in self._adj[u]
            if u < v
        )

    def edge_count(self) -> int:
        return sum(len(nbrs) for nbrs in self._adj) // 2

    def total_weight(self) -> Weight:
        return sum(w for _, _, w in self.edges())

    # ---------- copying ----------

    def copy(self) -> "Graph":
        g = Graph.__new__(Graph)
        g._n = self._n
        g._adj = [list(nbrs) for nbrs in self._adj]
        return g

    def __copy__(self) -> "Graph":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "Graph":
        g = self.copy()
        memo[id(self)] = g
        return g

    # ---------- output ----------

    def _lines(self) -> Iterator[str]:
        for i in range(self._n):
            body = ",  ".join(f"{nbr} ({w})" for nbr, w in self._adj[i])
            yield f"Vertex {i}: {{{body}}}"

    def print_graph(self, file: Optional[IO[str]] = None) -> None:
        out = sys.stdout if file is None else file
        for line in self._lines():
            print(line, file=out)

    # ---------- dunder ----------

    def __len__(self) -> int:
        return self._n

    def __contains__(self, v: object) -> bool:
        return _is_index(v) and 0 <= v < self._n  # type: ignore[operator]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self._n == other._n and self._adj == other._adj

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Graph(n={self._n}, edges={self.edge_count()})"

    def __str__(self) -> str:
        return "\n".join(self._lines())
