"""Supporting data structures and helpers."""

from .disjoint_set import DisjointSet, DisjointSetSet
from .id_allocator import AllocatorExhaustedError, IdAllocator
from .logging_utils import setup_logging

__all__ = [
    "AllocatorExhaustedError",
    "DisjointSet",
    "DisjointSetSet",
    "IdAllocator",
    "setup_logging",
]
