"""contractgraph - node contraction views over mutable graphs.

Example:
    from contractgraph import ContractedGraph, CustomGraph

    graph = CustomGraph()
    a, b = graph.add_node(), graph.add_node()
    arc = graph.add_arc(a, b)

    view = ContractedGraph(graph)
    merged = view.contract(arc)
    assert view.node_count() == 1
"""

__version__ = "0.1.0"

from contractgraph.config import AllocatorConfig
from contractgraph.graph import (
    Arc,
    ArcFilter,
    ContractedGraph,
    CustomGraph,
    Directedness,
    Graph,
    Node,
)
from contractgraph.utils import (
    AllocatorExhaustedError,
    DisjointSet,
    DisjointSetSet,
    IdAllocator,
    setup_logging,
)

__all__ = [
    "AllocatorConfig",
    "AllocatorExhaustedError",
    "Arc",
    "ArcFilter",
    "ContractedGraph",
    "CustomGraph",
    "Directedness",
    "DisjointSet",
    "DisjointSetSet",
    "Graph",
    "IdAllocator",
    "Node",
    "setup_logging",
]
