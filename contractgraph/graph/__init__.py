"""Public graph API surface."""

from contractgraph.graph.core import (
    Arc,
    ArcFilter,
    CustomGraph,
    Directedness,
    Graph,
    Node,
)
from contractgraph.graph.ops import ContractedGraph

__all__ = [
    "Arc",
    "ArcFilter",
    "ContractedGraph",
    "CustomGraph",
    "Directedness",
    "Graph",
    "Node",
]
