"""Adaptors and views built on top of the graph core."""

from .contraction import ContractedGraph

__all__ = [
    "ContractedGraph",
]
