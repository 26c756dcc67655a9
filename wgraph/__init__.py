"""Undirected weighted graphs over 0..n-1 and classic tree-building algorithms."""
from .graph import Graph
from .algorithms import Algorithms
from .structures import (
    Queue, PriorityQueue, HeapPriorityQueue, PQItem, UnionFind, priority_queue_factory
)
from .errors import (
    ErrorKind, GraphError, InvalidArgument, InvalidVertex, SelfLoop,
    EdgeNotFound, EmptyContainer, NegativeWeight, NotConnected
)

__version__ = "0.1.0"

__all__ = [
    'Graph', 'Algorithms',
    'Queue', 'PriorityQueue', 'HeapPriorityQueue', 'PQItem', 'UnionFind',
    'priority_queue_factory',
    'ErrorKind', 'GraphError', 'InvalidArgument', 'InvalidVertex', 'SelfLoop',
    'EdgeNotFound', 'EmptyContainer', 'NegativeWeight', 'NotConnected',
]
