"""Graph capability shared by base graphs and adaptors.

Nodes and arcs are opaque identity tokens; everything else about an arc (its
endpoints and whether it is an undirected edge) is reported by the graph that
owns it. Adaptors implement the same interface so they can be stacked on top
of any base graph.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Iterator


@dataclass(frozen=True, order=True)
class Node:
    """Identity token of a graph vertex."""

    id: int

    def __repr__(self) -> str:
        return f"Node(#{self.id})"


@dataclass(frozen=True, order=True)
class Arc:
    """Identity token of a directed arc or an undirected edge."""

    id: int

    def __repr__(self) -> str:
        return f"Arc(#{self.id})"


class ArcFilter(str, Enum):
    """Selects which arcs a query reports.

    For incident queries, FORWARD and BACKWARD keep undirected edges and the
    directed arcs leaving (FORWARD) or entering (BACKWARD) the queried node.
    Global queries treat FORWARD and BACKWARD like ALL.
    """

    ALL = "all"
    EDGE = "edge"
    DIRECTED = "directed"
    FORWARD = "forward"
    BACKWARD = "backward"


class Directedness(str, Enum):
    """Whether a newly added arc is directed."""

    DIRECTED = "directed"
    UNDIRECTED = "undirected"


class Graph(ABC):
    """Abstract graph capability.

    Enumerations are lazy. Mutating the graph (or, for adaptors, its
    internal state) while consuming an enumeration is undefined.
    """

    @abstractmethod
    def u(self, arc: Arc) -> Node:
        """Get the first endpoint (the tail of a directed arc)."""
        pass

    @abstractmethod
    def v(self, arc: Arc) -> Node:
        """Get the second endpoint (the head of a directed arc)."""
        pass

    @abstractmethod
    def is_edge(self, arc: Arc) -> bool:
        """Check if the arc is an undirected edge."""
        pass

    @abstractmethod
    def nodes(self) -> Iterator[Node]:
        """Iterate over nodes."""
        pass

    @abstractmethod
    def arcs(self, arc_filter: ArcFilter = ArcFilter.ALL) -> Iterator[Arc]:
        """Iterate over all arcs selected by ``arc_filter``."""
        pass

    @abstractmethod
    def incident_arcs(
        self, node: Node, arc_filter: ArcFilter = ArcFilter.ALL
    ) -> Iterator[Arc]:
        """Iterate over arcs incident to ``node``; loops are reported once."""
        pass

    @abstractmethod
    def arcs_between(
        self, u: Node, v: Node, arc_filter: ArcFilter = ArcFilter.ALL
    ) -> Iterator[Arc]:
        """Iterate over arcs incident to ``u`` whose other endpoint is ``v``."""
        pass

    @abstractmethod
    def node_count(self) -> int:
        """Get number of nodes."""
        pass

    @abstractmethod
    def arc_count(self, arc_filter: ArcFilter = ArcFilter.ALL) -> int:
        """Get number of arcs selected by ``arc_filter``."""
        pass

    @abstractmethod
    def incident_arc_count(self, node: Node, arc_filter: ArcFilter = ArcFilter.ALL) -> int:
        """Get number of arcs reported by incident_arcs."""
        pass

    @abstractmethod
    def arc_count_between(
        self, u: Node, v: Node, arc_filter: ArcFilter = ArcFilter.ALL
    ) -> int:
        """Get number of arcs reported by arcs_between."""
        pass

    @abstractmethod
    def has_node(self, node: Node) -> bool:
        """Check if node exists."""
        pass

    @abstractmethod
    def has_arc(self, arc: Arc) -> bool:
        """Check if arc exists."""
        pass

    def other(self, arc: Arc, node: Node) -> Node:
        """Return the endpoint of ``arc`` that is not ``node``.

        For a loop, ``node`` itself is returned.
        """
        first = self.u(arc)
        if first != node:
            return first
        return self.v(arc)


def arc_passes(graph: Graph, arc: Arc, node: Node, arc_filter: ArcFilter) -> bool:
    """Check whether an arc incident to ``node`` is selected by ``arc_filter``.

    Args:
        graph: Graph that owns the arc.
        arc: An arc incident to ``node``.
        node: The node the incident query is issued for.
        arc_filter: Filter of the incident query.

    Returns:
        bool: True if the incident query should report the arc.
    """
    if arc_filter == ArcFilter.ALL:
        return True
    if arc_filter == ArcFilter.EDGE:
        return graph.is_edge(arc)
    if arc_filter == ArcFilter.DIRECTED:
        return not graph.is_edge(arc)
    if graph.is_edge(arc):
        return True
    if arc_filter == ArcFilter.FORWARD:
        return graph.u(arc) == node
    return graph.v(arc) == node


def is_side_selective(graph: Graph, arc: Arc, arc_filter: ArcFilter) -> bool:
    """Check whether ``arc_filter`` reports ``arc`` from at most one endpoint.

    Holds for directed arcs under FORWARD or BACKWARD: only the tail (or
    only the head) lets such an arc through.
    """
    if arc_filter not in (ArcFilter.FORWARD, ArcFilter.BACKWARD):
        return False
    return not graph.is_edge(arc)
