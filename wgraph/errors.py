
# wgraph/errors.py


from __future__ import annotations
from enum import Enum


class ErrorKind(Enum):
    INVALID_ARGUMENT = "invalid_argument"
    INVALID_VERTEX = "invalid_vertex"
    SELF_LOOP = "self_loop"
    EDGE_NOT_FOUND = "edge_not_found"
    EMPTY_CONTAINER = "empty_container"
    NEGATIVE_WEIGHT = "negative_weight"
    NOT_CONNECTED = "not_connected"


class GraphError(Exception):
    """
    Base class for every error raised by wgraph.
    - `kind` tags the failure so callers can switch on it
    - subclasses also derive from the closest builtin (ValueError, IndexError, ...)
    """

    kind: ErrorKind


class InvalidArgument(GraphError, ValueError):
    kind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, argument: str, value: object, reason: str = "") -> None:
        self.argument = argument
        self.value = value
        msg = f"Invalid value for {argument}: {value!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class InvalidVertex(GraphError, IndexError):
    kind = ErrorKind.INVALID_VERTEX

    def __init__(self, vertex: object, vertex_count: int, operation: str) -> None:
        self.vertex = vertex
        self.vertex_count = vertex_count
        self.operation = operation
        super().__init__(
            f"{operation}: vertex {vertex!r} out of range [0, {vertex_count})"
        )


class SelfLoop(GraphError, ValueError):
    kind = ErrorKind.SELF_LOOP

    def __init__(self, vertex: int, operation: str = "add_edge") -> None:
        self.vertex = vertex
        self.operation = operation
        super().__init__(f"{operation}: self-loops are not allowed (vertex {vertex})")


class EdgeNotFound(GraphError, LookupError):
    kind = ErrorKind.EDGE_NOT_FOUND

    def __init__(self, src: int, dest: int, operation: str) -> None:
        self.src = src
        self.dest = dest
        self.operation = operation
        super().__init__(f"{operation}: no edge {src} -> {dest}")


class EmptyContainer(GraphError, IndexError):
    kind = ErrorKind.EMPTY_CONTAINER

    def __init__(self, container: str, operation: str) -> None:
        self.container = container
        self.operation = operation
        super().__init__(f"{operation} from empty {container}")


class NegativeWeight(GraphError, ValueError):
    kind = ErrorKind.NEGATIVE_WEIGHT

    def __init__(self, src: int, dest: int, weight: float) -> None:
        self.src = src
        self.dest = dest
        self.weight = weight
        super().__init__(
            f"Dijkstra does not support negative weights (edge {src} -> {dest} has weight {weight})"
        )


class NotConnected(GraphError, ValueError):
    kind = ErrorKind.NOT_CONNECTED

    def __init__(self, vertex_count: int, edges_added: int, operation: str = "kruskal") -> None:
        self.vertex_count = vertex_count
        self.edges_added = edges_added
        self.operation = operation
        super().__init__(
            f"{operation}: graph is not connected, no spanning tree exists "
            f"({edges_added} of {vertex_count - 1} edges added)"
        )
