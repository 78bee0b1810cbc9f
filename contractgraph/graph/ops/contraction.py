"""Contraction adaptor: identify nodes of a graph without modifying it.

ContractedGraph is a read view over a base graph in which arbitrary nodes can
be merged into equivalence classes. Each class is surfaced through one of its
original nodes (its representative). Arcs are shared with the base graph; an
arc whose endpoints end up in the same class becomes a loop of the view but
is never removed.

The base graph may gain nodes and arcs while wrapped, but nodes that took
part in a merge must not be deleted from it.
"""

import logging
from typing import Iterator

import networkx as nx

from contractgraph.utils.disjoint_set import DisjointSet

from ..core.backend import Arc, ArcFilter, Graph, Node, is_side_selective

logger = logging.getLogger("contractgraph.graph.ops.contraction")


class ContractedGraph(Graph):
    """Adaptor merging nodes of an underlying graph.

    Node and Arc tokens are interchangeable between the adaptor and the
    underlying graph. Every enumeration re-reads the current merge state when
    it is started; merging while one is being consumed is undefined.
    """

    def __init__(self, graph: Graph) -> None:
        """Wrap a graph.

        Args:
            graph: The underlying graph. It is shared, never written to.
        """
        self._graph = graph
        self._node_groups: DisjointSet[Node] = DisjointSet()
        self._merge_count = 0
        self.reset()

    @property
    def graph(self) -> Graph:
        """The underlying graph."""
        return self._graph

    @property
    def merge_count(self) -> int:
        """Number of merges that united two previously distinct classes."""
        return self._merge_count

    def reset(self) -> None:
        """Undo every merge."""
        self._node_groups.clear()
        self._merge_count = 0
        logger.debug("Contraction reset")

    def _representative(self, node: Node) -> Node:
        return self._node_groups.find(node).representative

    def merge(self, u: Node, v: Node) -> Node:
        """Identify two nodes so they become one.

        Args:
            u: A node of the underlying graph (or a node of this adaptor).
            v: Another node of the underlying graph (or of this adaptor).

        Returns:
            Node: The representative of the merged node, either ``u``'s or
            ``v``'s; which one is unspecified.
        """
        x = self._node_groups.find(u)
        y = self._node_groups.find(v)
        if x == y:
            return x.representative

        self._merge_count += 1
        merged = self._node_groups.union(x, y).representative
        logger.debug("Merged %r and %r into %r", u, v, merged)
        return merged

    def contract(self, arc: Arc) -> Node:
        """Merge the two endpoints of an arc.

        The arc is kept and becomes a loop of the adaptor.

        Returns:
            Node: The node resulting from the contraction.
        """
        return self.merge(self._graph.u(arc), self._graph.v(arc))

    def members(self, node: Node) -> Iterator[Node]:
        """Iterate over the underlying nodes merged into ``node``."""
        return self._node_groups.elements(self._node_groups.find(node))

    def u(self, arc: Arc) -> Node:
        return self._representative(self._graph.u(arc))

    def v(self, arc: Arc) -> Node:
        return self._representative(self._graph.v(arc))

    def is_edge(self, arc: Arc) -> bool:
        return self._graph.is_edge(arc)

    def nodes(self) -> Iterator[Node]:
        for node in self._graph.nodes():
            if self._representative(node) == node:
                yield node

    def arcs(self, arc_filter: ArcFilter = ArcFilter.ALL) -> Iterator[Arc]:
        return self._graph.arcs(arc_filter)

    def incident_arcs(
        self, node: Node, arc_filter: ArcFilter = ArcFilter.ALL
    ) -> Iterator[Arc]:
        """Iterate over arcs incident to any member of ``node``'s class.

        Every arc is reported exactly once. An arc joining two members of the
        class is a loop of the adaptor and would be found from both of its
        original endpoints, so it is only reported from its underlying ``u``
        endpoint. Directed arcs under FORWARD or BACKWARD are the exception:
        the underlying graph reports them from one endpoint only, so they are
        reported from wherever they turn up.
        """
        group = self._node_groups.find(node)
        for member in self._node_groups.elements(group):
            for arc in self._graph.incident_arcs(member, arc_filter):
                if self.u(arc) != self.v(arc):
                    yield arc
                elif is_side_selective(self._graph, arc, arc_filter):
                    yield arc
                elif self._graph.u(arc) == member:
                    yield arc

    def arcs_between(
        self, u: Node, v: Node, arc_filter: ArcFilter = ArcFilter.ALL
    ) -> Iterator[Arc]:
        u = self._representative(u)
        v = self._representative(v)
        for arc in self.incident_arcs(u, arc_filter):
            if self.other(arc, u) == v:
                yield arc

    def node_count(self) -> int:
        return self._graph.node_count() - self._merge_count

    def arc_count(self, arc_filter: ArcFilter = ArcFilter.ALL) -> int:
        return self._graph.arc_count(arc_filter)

    def incident_arc_count(self, node: Node, arc_filter: ArcFilter = ArcFilter.ALL) -> int:
        return sum(1 for _ in self.incident_arcs(node, arc_filter))

    def arc_count_between(
        self, u: Node, v: Node, arc_filter: ArcFilter = ArcFilter.ALL
    ) -> int:
        return sum(1 for _ in self.arcs_between(u, v, arc_filter))

    def has_node(self, node: Node) -> bool:
        return node == self._representative(node)

    def has_arc(self, arc: Arc) -> bool:
        return self._graph.has_arc(arc)

    def to_networkx(self) -> nx.MultiDiGraph:
        """Materialize the current view as a NetworkX graph.

        Returns:
            nx.MultiDiGraph: One node per class carrying a sorted ``members``
            list, and one edge per arc from its normalized ``u`` to its
            normalized ``v``, keyed by the arc id with ``arc`` and
            ``directed`` attributes.
        """
        view = nx.MultiDiGraph()
        for node in self.nodes():
            members = sorted(self.members(node))
            view.add_node(node, members=members, member_count=len(members))

        for arc in self.arcs():
            view.add_edge(
                self.u(arc),
                self.v(arc),
                key=arc.id,
                arc=arc,
                directed=not self.is_edge(arc),
            )

        logger.debug(
            "Materialized contracted view: %d nodes, %d arcs",
            view.number_of_nodes(),
            view.number_of_edges(),
        )
        return view
