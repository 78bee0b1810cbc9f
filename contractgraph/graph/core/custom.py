"""Mutable in-memory graph backed by NetworkX.

CustomGraph is the base graph the adaptors wrap. Nodes and arcs are stored
in a ``networkx.MultiDiGraph``: every arc becomes one edge from its ``u`` to
its ``v`` endpoint, keyed by the Arc token, with a ``directed`` attribute.
Undirected edges are stored in the orientation they were added in. Node and
arc identifiers come from IdAllocator instances probing the graph itself.
"""

import logging
from typing import Dict, Iterator, Optional, Tuple

import networkx as nx

from contractgraph.config.schema import AllocatorConfig
from contractgraph.utils.id_allocator import IdAllocator

from .backend import Arc, ArcFilter, Directedness, Graph, Node, arc_passes

logger = logging.getLogger("contractgraph.graph.core.custom")


class CustomGraph(Graph):
    """Graph supporting addition and deletion of nodes and arcs.

    Mixed graphs are allowed: directed arcs and undirected edges may coexist,
    as may parallel arcs and loops.
    """

    def __init__(self, allocator_config: Optional[AllocatorConfig] = None) -> None:
        """Initialize an empty graph.

        Args:
            allocator_config: Optional settings shared by the node and arc
                identifier allocators.
        """
        self._graph = nx.MultiDiGraph()
        self._endpoints: Dict[Arc, Tuple[Node, Node]] = {}
        self._edge_count = 0

        self._node_allocator = IdAllocator(
            lambda ident: Node(ident) in self._graph,
            self._graph.number_of_nodes,
            allocator_config,
        )
        self._arc_allocator = IdAllocator(
            lambda ident: Arc(ident) in self._endpoints,
            lambda: len(self._endpoints),
            allocator_config,
        )
        logger.debug("CustomGraph initialized")

    @property
    def native_graph(self) -> nx.MultiDiGraph:
        """Get native graph object for advanced operations.

        Mutating it directly bypasses the arc bookkeeping of this class.
        """
        return self._graph

    def add_node(self) -> Node:
        """Add a new node and return it."""
        node = Node(self._node_allocator.allocate())
        self._graph.add_node(node)
        return node

    def add_arc(
        self, u: Node, v: Node, directedness: Directedness = Directedness.DIRECTED
    ) -> Arc:
        """Add an arc (or an undirected edge) between two existing nodes.

        Args:
            u: First endpoint (tail of a directed arc).
            v: Second endpoint (head of a directed arc).
            directedness: Whether the new arc is directed.

        Returns:
            Arc: The new arc.

        Raises:
            KeyError: If either endpoint is not a node of this graph.
        """
        for endpoint in (u, v):
            if endpoint not in self._graph:
                raise KeyError(f"Node {endpoint!r} is not in the graph")

        arc = Arc(self._arc_allocator.allocate())
        directed = directedness == Directedness.DIRECTED
        self._graph.add_edge(u, v, key=arc, directed=directed)
        self._endpoints[arc] = (u, v)
        if not directed:
            self._edge_count += 1
        return arc

    def delete_node(self, node: Node) -> bool:
        """Delete a node together with its incident arcs.

        Returns:
            bool: True if the node existed.
        """
        if node not in self._graph:
            return False
        for arc in list(self.incident_arcs(node)):
            self.delete_arc(arc)
        self._graph.remove_node(node)
        return True

    def delete_arc(self, arc: Arc) -> bool:
        """Delete an arc.

        Returns:
            bool: True if the arc existed.
        """
        endpoints = self._endpoints.pop(arc, None)
        if endpoints is None:
            return False
        u, v = endpoints
        if not self._graph.edges[u, v, arc]["directed"]:
            self._edge_count -= 1
        self._graph.remove_edge(u, v, key=arc)
        return True

    def clear(self) -> None:
        """Delete every node and arc; identifiers are allocated from 1 again."""
        self._graph.clear()
        self._endpoints.clear()
        self._edge_count = 0
        self._node_allocator.rewind()
        self._arc_allocator.rewind()
        logger.debug("CustomGraph cleared")

    def u(self, arc: Arc) -> Node:
        return self._endpoints[arc][0]

    def v(self, arc: Arc) -> Node:
        return self._endpoints[arc][1]

    def is_edge(self, arc: Arc) -> bool:
        u, v = self._endpoints[arc]
        return not self._graph.edges[u, v, arc]["directed"]

    def nodes(self) -> Iterator[Node]:
        return iter(self._graph.nodes)

    def arcs(self, arc_filter: ArcFilter = ArcFilter.ALL) -> Iterator[Arc]:
        for _, _, arc, directed in self._graph.edges(keys=True, data="directed"):
            if arc_filter == ArcFilter.EDGE and directed:
                continue
            if arc_filter == ArcFilter.DIRECTED and not directed:
                continue
            yield arc

    def incident_arcs(
        self, node: Node, arc_filter: ArcFilter = ArcFilter.ALL
    ) -> Iterator[Arc]:
        for _, _, arc in self._graph.out_edges(node, keys=True):
            if arc_passes(self, arc, node, arc_filter):
                yield arc
        for u, v, arc in self._graph.in_edges(node, keys=True):
            # Loops were already reported as out-edges.
            if u == v:
                continue
            if arc_passes(self, arc, node, arc_filter):
                yield arc

    def arcs_between(
        self, u: Node, v: Node, arc_filter: ArcFilter = ArcFilter.ALL
    ) -> Iterator[Arc]:
        for arc in self.incident_arcs(u, arc_filter):
            if self.other(arc, u) == v:
                yield arc

    def node_count(self) -> int:
        return self._graph.number_of_nodes()

    def arc_count(self, arc_filter: ArcFilter = ArcFilter.ALL) -> int:
        if arc_filter == ArcFilter.EDGE:
            return self._edge_count
        if arc_filter == ArcFilter.DIRECTED:
            return len(self._endpoints) - self._edge_count
        return len(self._endpoints)

    def incident_arc_count(self, node: Node, arc_filter: ArcFilter = ArcFilter.ALL) -> int:
        return sum(1 for _ in self.incident_arcs(node, arc_filter))

    def arc_count_between(
        self, u: Node, v: Node, arc_filter: ArcFilter = ArcFilter.ALL
    ) -> int:
        return sum(1 for _ in self.arcs_between(u, v, arc_filter))

    def has_node(self, node: Node) -> bool:
        return node in self._graph

    def has_arc(self, arc: Arc) -> bool:
        return arc in self._endpoints
