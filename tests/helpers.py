from typing import Iterable, Set, Tuple

from wgraph import Graph

# canonical 5-vertex example; both MSTs weigh 6
CANONICAL_EDGES = [(0, 1, 1), (0, 2, 4), (1, 2, 2), (1, 3, 5), (2, 3, 1), (2, 4, 3), (3, 4, 2)]


def expect_raises(exc_types, fn, *args, **kwargs) -> None:
    try:
        fn(*args, **kwargs)
    except exc_types:
        return
    except Exception as ex:
        raise AssertionError(f"Expected {exc_types}, but got {type(ex).__name__}: {ex}") from ex
    else:
        raise AssertionError(f"Expected {exc_types}, but no exception was raised")


def build_graph(n: int, edges: Iterable[Tuple[int, int, int]]) -> Graph:
    g = Graph(n)
    for u, v, w in edges:
        g.add_edge(u, v, w)
    return g


def canonical_graph() -> Graph:
    return build_graph(5, CANONICAL_EDGES)


def edge_set(g: Graph) -> Set[Tuple[int, int, int]]:
    """Undirected edges as (low, high, weight)."""
    return set(g.edges())


def assert_mirrored(g: Graph) -> None:
    for u in range(g.vertex_count()):
        for v, w in g.adjacency(u):
            assert g.has_edge(v, u), f"{u} -> {v} has no mirror"
            assert g.edge_weight(v, u) == w, f"{u} <-> {v} weights differ"


def assert_subtree(tree: Graph, source: Graph) -> None:
    """tree has n vertices, at most n-1 edges, and only edges of source (same weights)."""
    n = source.vertex_count()
    assert tree.vertex_count() == n
    assert tree.edge_count() <= max(n - 1, 0)
    for u, v, w in tree.edges():
        assert source.has_edge(u, v), f"tree edge {u}-{v} not in source"
        assert source.edge_weight(u, v) == w
    assert_mirrored(tree)


def is_acyclic(tree: Graph) -> bool:
    from wgraph import UnionFind

    uf = UnionFind(tree.vertex_count())
    return all(uf.union_sets(u, v) for u, v, _ in tree.edges())
