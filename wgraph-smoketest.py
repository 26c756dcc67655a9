# wgraph-smoketest.py
# Run with:  python -u wgraph-smoketest.py

import io
import os
import time
import traceback
from typing import Any, Callable, cast, List, Tuple

from wgraph import (
    Algorithms, EdgeNotFound, Graph, HeapPriorityQueue, InvalidArgument, InvalidVertex,
    NegativeWeight, NotConnected, SelfLoop,
)


class TestRunner:
    def __init__(self) -> None:
        self.passed: int = 0
        self.failed: int = 0
        self._tests: List[Tuple[str, Callable[[], None]]] = []

    def test(self, name: str) -> Callable[[Callable[[], None]], Callable[[], None]]:
        def deco(fn: Callable[[], None]) -> Callable[[], None]:
            self._tests.append((name, fn))
            return fn
        return deco

    def assert_true(self, expr: bool, msg: str = "") -> None:
        if not expr:
            raise AssertionError(msg or "Expected True, got False")

    def assert_false(self, expr: bool, msg: str = "") -> None:
        if expr:
            raise AssertionError(msg or "Expected False, got True")

    def assert_equal(self, a, b, msg: str = "") -> None:
        if a != b:
            raise AssertionError(msg or f"Expected {b!r}, got {a!r}")

    def run(self) -> bool:
        print("Running wgraph smoketests...\n")
        show_trace = os.getenv("SHOW_TRACE", "0") not in ("0", "", "false", "False")
        for name, fn in self._tests:
            try:
                fn()
            except Exception as ex:
                # keep all usage of `ex` inside the except block (mypy-friendly)
                print(f"✗ {name}  -- {type(ex).__name__}: {ex}")
                if show_trace:
                    traceback.print_exc()
                self.failed += 1
            else:
                print(f"✓ {name}")
                self.passed += 1
        print("\nFinished:", f"{self.passed} passed,", f"{self.failed} failed.")
        return self.failed == 0


def expect_raises(exc_types, fn, *args, **kwargs) -> None:
    try:
        fn(*args, **kwargs)
    except exc_types:
        return
    except Exception as ex:
        raise AssertionError(f"Expected {exc_types}, but got {type(ex).__name__}: {ex}") from ex
    else:
        raise AssertionError(f"Expected {exc_types}, but no exception was raised")


def canonical() -> Graph:
    g = Graph(5)
    for u, v, w in [(0, 1, 1), (0, 2, 4), (1, 2, 2), (1, 3, 5), (2, 3, 1), (2, 4, 3), (3, 4, 2)]:
        g.add_edge(u, v, w)
    return g


tr = TestRunner()

@tr.test("construction: vertex count fixed, negative rejected")
def _():
    tr.assert_equal(Graph(0).vertex_count(), 0)
    tr.assert_equal(Graph(5).vertex_count(), 5)
    expect_raises(InvalidArgument, Graph, -1)

@tr.test("add/remove: mirrored entries and neighbor counts")
def _():
    g = Graph(3)
    g.add_edge(0, 1, 10)
    g.add_edge(1, 2, 5)
    tr.assert_equal([g.get_size(v) for v in range(3)], [1, 2, 1])
    tr.assert_equal(g.neighbors(2), (1,))
    tr.assert_equal(g.weights(2), (5,))

    g.remove_edge(1, 2)
    tr.assert_equal(g.get_size(1), 1)
    tr.assert_equal(g.get_size(2), 0)

@tr.test("duplicates: re-adding either direction changes nothing")
def _():
    g = Graph(3)
    g.add_edge(1, 2, 5)
    g.add_edge(1, 2, 5)
    g.add_edge(2, 1, 8)
    tr.assert_equal(g.neighbor_count(1), 1)
    tr.assert_equal(g.edge_weight(2, 1), 5)

@tr.test("errors: invalid vertex, self-loop, missing edge")
def _():
    g = Graph(3)
    expect_raises(InvalidVertex, g.add_edge, -1, 0, 1)
    expect_raises(InvalidVertex, g.add_edge, 0, 3, 1)
    expect_raises(SelfLoop, g.add_edge, 0, 0, 1)
    expect_raises(InvalidVertex, g.remove_edge, 0, 3)
    g.add_edge(0, 1, 10)
    expect_raises(EdgeNotFound, g.remove_edge, 0, 2)
    expect_raises(InvalidVertex, g.get_size, -1)
    expect_raises(InvalidVertex, g.neighbors, 3)
    expect_raises(InvalidVertex, g.weights, 3)

@tr.test("getter immutability: adjacency is read-only snapshot")
def _():
    g = Graph(2)
    g.add_edge(0, 1)
    adj = g.neighbors(0)
    try:
        cast(Any, adj).append(1)  # force runtime error without mypy complaint
        raise AssertionError("adjacency should be immutable but append succeeded")
    except (AttributeError, TypeError):
        pass
    tr.assert_equal(g.neighbors(0), (1,))

@tr.test("deep copy: mutating the copy leaves the original alone")
def _():
    g = Graph(3)
    g.add_edge(0, 1, 10)
    g2 = g.copy()
    g2.add_edge(1, 2, 5)
    tr.assert_false(g.has_edge(1, 2))
    tr.assert_equal(g.get_size(1), 1)
    tr.assert_equal(g2.get_size(1), 2)

@tr.test("print_graph renders one line per vertex")
def _():
    g = Graph(2)
    g.add_edge(0, 1, 3)
    buf = io.StringIO()
    g.print_graph(file=buf)
    tr.assert_equal(buf.getvalue(), "Vertex 0: {1 (3)}\nVertex 1: {0 (3)}\n")

@tr.test("bfs/dfs: trees over source edges")
def _():
    g = canonical()
    algo = Algorithms(g)
    for tree in (algo.bfs(0), algo.dfs(0)):
        tr.assert_equal(tree.vertex_count(), 5)
        tr.assert_equal(tree.edge_count(), 4)
        for u, v, w in tree.edges():
            tr.assert_equal(g.edge_weight(u, v), w)
    expect_raises(InvalidVertex, algo.bfs, 5)
    expect_raises(InvalidVertex, algo.dfs, -1)

@tr.test("dijkstra: distances and negative-weight rejection")
def _():
    algo = Algorithms(canonical())
    tr.assert_equal(algo.shortest_distances(0), [0, 1, 3, 4, 6])
    tr.assert_equal(algo.dijkstra(0).edge_count(), 4)
    tr.assert_equal(Algorithms(Graph(0)).dijkstra(0).vertex_count(), 0)

    g = Graph(4)
    g.add_edge(0, 1, 1)
    g.add_edge(2, 3, -2)  # unreachable from 0, still rejected
    expect_raises(NegativeWeight, Algorithms(g).dijkstra, 0)

@tr.test("prim/kruskal: canonical graph weighs 6")
def _():
    algo = Algorithms(canonical())
    tr.assert_equal(algo.prim().total_weight(), 6)
    tr.assert_equal(algo.kruskal().total_weight(), 6)

@tr.test("disconnected: prim returns partial tree, kruskal raises")
def _():
    g = Graph(4)
    g.add_edge(0, 1, 1)
    g.add_edge(2, 3, 1)
    algo = Algorithms(g)
    prim = algo.prim()
    tr.assert_equal(prim.edges(), ((0, 1, 1),))
    tr.assert_equal(prim.get_size(2), 0)
    expect_raises(NotConnected, algo.kruskal)

@tr.test("perf: build and traverse ~10k vertices within budget")
def _():
    """
    Ring of N vertices with chords, then bfs/dfs/dijkstra/kruskal.
      PERF_N: number of vertices (default: 10000)
      PERF_MAX_SEC: max seconds allowed (default: 15.0)
    """
    N = int(os.getenv("PERF_N", "10000"))
    MAX_SEC = float(os.getenv("PERF_MAX_SEC", "15.0"))

    t0 = time.perf_counter()
    g = Graph(N)
    for i in range(N):
        g.add_edge(i, (i + 1) % N, 1 + i % 7)
    for i in range(0, N, 3):
        g.add_edge(i, (i + N // 2) % N, 5)
    algo = Algorithms(g, priority_queue=HeapPriorityQueue)
    trees = [algo.bfs(0), algo.dfs(0), algo.dijkstra(0), algo.kruskal()]
    elapsed = time.perf_counter() - t0

    for tree in trees:
        tr.assert_equal(tree.edge_count(), N - 1)
    if elapsed > MAX_SEC:
        raise AssertionError(f"Perf budget exceeded: {elapsed:.3f}s > {MAX_SEC:.3f}s")
    print(f"   (perf) {N} vertices, {g.edge_count()} edges, 4 algorithms in {elapsed:.3f}s")


if __name__ == "__main__":
    ok = tr.run()
    # Non-zero exit on failure helps CI or scripts detect problems.
    import sys
    sys.exit(0 if ok else 1)
