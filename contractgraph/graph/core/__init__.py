"""Core graph APIs."""

from .backend import Arc, ArcFilter, Directedness, Graph, Node, arc_passes, is_side_selective
from .custom import CustomGraph

__all__ = [
    "Arc",
    "ArcFilter",
    "CustomGraph",
    "Directedness",
    "Graph",
    "Node",
    "arc_passes",
    "is_side_selective",
]
