
# wgraph/algorithms.py


from __future__ import annotations
import logging
import math
from typing import List, Optional, Tuple

from .errors import InvalidVertex, NegativeWeight, NotConnected
from .graph import Graph, Weight
from .structures import PriorityQueueFactory, Queue, UnionFind, priority_queue_factory

logger = logging.getLogger(__name__)


class Algorithms:
    """
    Traversal and tree-building algorithms over one Graph.

    The graph is only read, through its public methods, and every call
    returns a new Graph with the same vertex count:
    - bfs / dfs: traversal tree (dfs: forest over all components)
    - dijkstra: shortest-path tree from a start vertex
    - prim / kruskal: minimum spanning tree

    Disconnected input is handled differently by the two spanning-tree
    builders: prim() returns the tree of vertex 0's component and leaves the
    rest isolated, kruskal() raises NotConnected.

    `priority_queue` picks the queue class used by dijkstra (defaults to
    config.PRIORITY_QUEUE_BACKEND). Distances never depend on it; the parent
    chosen between equally short paths may.
    """

    def __init__(self, graph: Graph, *, priority_queue: Optional[PriorityQueueFactory] = None) -> None:
        self.graph = graph
        self._pq_factory = priority_queue if priority_queue is not None else priority_queue_factory()

    def _check_start(self, start: int, operation: str) -> int:
        n = self.graph.vertex_count()
        if start not in self.graph:
            raise InvalidVertex(start, n, operation)
        return n

    # ---------- traversal ----------

    def bfs(self, start: int) -> Graph:
        g = self.graph
        n = self._check_start(start, "bfs")
        tree = Graph(n)
        visited = [False] * n
        q = Queue(n)
        visited[start] = True
        q.enqueue(start)

        while not q.is_empty():
            u = q.dequeue()
            for v, w in g.adjacency(u):
                if not visited[v]:
                    visited[v] = True
                    q.enqueue(v)
                    tree.add_edge(u, v, w)

        logger.debug(f"bfs({start}): tree with {tree.edge_count()} edges")
        return tree

    def dfs(self, start: int) -> Graph:
        g = self.graph
        n = self._check_start(start, "dfs")
        tree = Graph(n)
        visited = [False] * n

        self._dfs_visit(start, visited, tree)
        # remaining components, in index order
        for u in range(n):
            if not visited[u]:
                self._dfs_visit(u, visited, tree)

        logger.debug(f"dfs({start}): forest with {tree.edge_count()} edges")
        return tree

    def _dfs_visit(self, root: int, visited: List[bool], tree: Graph) -> None:
        # explicit stack of adjacency iterators; same visiting order as the recursive form
        g = self.graph
        visited[root] = True
        stack = [(root, iter(g.adjacency(root)))]
        while stack:
            u, it = stack[-1]
            for v, w in it:
                if not visited[v]:
                    visited[v] = True
                    tree.add_edge(u, v, w)
                    stack.append((v, iter(g.adjacency(v))))
                    break
            else:
                stack.pop()

    # ---------- shortest paths ----------

    def _check_weights(self) -> None:
        g = self.graph
        for u in range(g.vertex_count()):
            for v, w in g.adjacency(u):
                if w < 0:
                    raise NegativeWeight(u, v, w)

    def _shortest_paths(self, start: int, operation: str) -> Tuple[List[float], List[int], List[int]]:
        """Label-setting run; returns (dist, parent, settle order)."""
        g = self.graph
        n = self._check_start(start, operation)
        self._check_weights()

        dist: List[float] = [math.inf] * n
        parent = [-1] * n
        settled = [False] * n
        order: List[int] = []

        pq = self._pq_factory()
        dist[start] = 0
        pq.insert(start, 0)

        while not pq.is_empty():
            u = pq.extract_min().vertex
            if settled[u]:
                continue  # stale entry
            settled[u] = True
            order.append(u)
            for v, w in g.adjacency(u):
                if not settled[v] and dist[u] + w < dist[v]:
                    dist[v] = dist[u] + w
                    parent[v] = u
                    pq.insert(v, dist[v])

        return dist, parent, order

    def dijkstra(self, start: int) -> Graph:
        g = self.graph
        n = g.vertex_count()
        if n == 0:
            return Graph(0)

        _, parent, order = self._shortest_paths(start, "dijkstra")
        tree = Graph(n)
        for v in order:
            p = parent[v]
            if p != -1:
                tree.add_edge(p, v, g.edge_weight(p, v))

        logger.debug(f"dijkstra({start}): settled {len(order)} of {n} vertices")
        return tree

    def shortest_distances(self, start: int) -> List[Optional[Weight]]:
        """Distance from start to every vertex, None where unreachable."""
        if self.graph.vertex_count() == 0:
            return []
        dist, _, _ = self._shortest_paths(start, "shortest_distances")
        return [None if d == math.inf else d for d in dist]

    # ---------- spanning trees ----------

    def prim(self) -> Graph:
        g = self.graph
        n = g.vertex_count()
        if n == 0:
            return Graph(0)

        in_mst = [False] * n
        key: List[float] = [math.inf] * n
        parent = [-1] * n
        key[0] = 0
        added = 0

        for _ in range(n):
            # linear scan, lowest index wins ties
            u = -1
            min_key = math.inf
            for v in range(n):
                if not in_mst[v] and key[v] < min_key:
                    min_key = key[v]
                    u = v
            if u == -1:
                break  # rest is unreachable from vertex 0
            in_mst[u] = True
            added += 1

            for v, w in g.adjacency(u):
                if not in_mst[v] and w < key[v]:
                    key[v] = w
                    parent[v] = u

        mst = Graph(n)
        for v in range(n):
            if parent[v] != -1:
                mst.add_edge(parent[v], v, key[v])

        if added < n:
            logger.warning(f"prim: graph is disconnected, spanning {added} of {n} vertices")
        logger.debug(f"prim: total weight {mst.total_weight()}")
        return mst

    def kruskal(self) -> Graph:
        g = self.graph
        n = g.vertex_count()
        if n == 0:
            return Graph(0)

        # sorted() is stable: equal weights keep (vertex, adjacency) order
        edges = sorted(g.edges(), key=lambda e: e[2])

        mst = Graph(n)
        uf = UnionFind(n)
        added = 0
        for u, v, w in edges:
            if added >= n - 1:
                break
            if uf.union_sets(u, v):
                mst.add_edge(u, v, w)
                added += 1

        if added != n - 1:
            raise NotConnected(n, added, "kruskal")

        logger.debug(f"kruskal: total weight {mst.total_weight()}")
        return mst
