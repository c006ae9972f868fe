"""
View Graph.

Indexed, read-only view over one `Elements` build, backed by NetworkX.
The state machine uses it to answer neighbourhood questions (which nodes are
adjacent to the tapped node, which edges enter or leave it) without scanning
the element lists.
"""

from collections import Counter
from typing import Any, Dict, Iterator, List, Optional, Set

import networkx as nx

from ..graph.elements import EdgeData, Elements, NodeData


class ViewGraph:
    """
    Type-safe wrapper around a NetworkX DiGraph of rendered elements.

    Nodes are keyed by node id and carry the NodeData under "data"; edges
    carry the EdgeData under "data".
    """

    def __init__(self):
        self._graph = nx.DiGraph()

    @classmethod
    def from_elements(cls, elements: Elements) -> "ViewGraph":
        graph = cls()
        for node in elements.nodes:
            graph.add_node(node)
        for edge in elements.edges:
            graph.add_edge(edge)
        return graph

    def add_node(self, node: NodeData) -> None:
        self._graph.add_node(node.id, data=node)

    def add_edge(self, edge: EdgeData) -> None:
        """
        Add a directed edge.

        Endpoints missing from the graph are added without data; project
        builds can reference files that the manifest itself does not list.
        """
        self._graph.add_edge(edge.source, edge.target, data=edge)

    def get_node(self, node_id: str) -> Optional[NodeData]:
        """Retrieve a node by ID."""
        if node_id not in self._graph:
            return None
        return self._graph.nodes[node_id].get("data")

    def has_node(self, node_id: str) -> bool:
        return node_id in self._graph

    def has_edge(self, source_id: str, target_id: str) -> bool:
        return self._graph.has_edge(source_id, target_id)

    def closed_neighborhood(self, node_id: str) -> Set[str]:
        """The node itself plus every node sharing an edge with it."""
        if node_id not in self._graph:
            return set()
        neighbours = set(self._graph.successors(node_id)) | set(self._graph.predecessors(node_id))
        neighbours.add(node_id)
        return neighbours

    def in_edge_ids(self, node_id: str) -> List[str]:
        """Ids of edges pointing at the node (its dependencies)."""
        if node_id not in self._graph:
            return []
        return [data["data"].id for _, _, data in self._graph.in_edges(node_id, data=True)]

    def out_edge_ids(self, node_id: str) -> List[str]:
        """Ids of edges leaving the node (its dependents)."""
        if node_id not in self._graph:
            return []
        return [data["data"].id for _, _, data in self._graph.out_edges(node_id, data=True)]

    def connected_edge_ids(self, node_ids: Set[str]) -> Set[str]:
        """Ids of every edge with at least one endpoint in `node_ids`."""
        result: Set[str] = set()
        for node_id in node_ids:
            result.update(self.in_edge_ids(node_id))
            result.update(self.out_edge_ids(node_id))
        return result

    def iter_nodes(self) -> Iterator[NodeData]:
        """Iterate over all nodes that carry data."""
        for node_id in self._graph.nodes():
            node = self.get_node(node_id)
            if node:
                yield node

    def iter_edges(self) -> Iterator[EdgeData]:
        for _, _, data in self._graph.edges(data=True):
            yield data["data"]

    @property
    def node_count(self) -> int:
        return self._graph.number_of_nodes()

    @property
    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    def get_stats(self) -> Dict[str, Any]:
        """Node and edge counts, broken down by kind."""
        nodes = list(self.iter_nodes())
        symbol_types = Counter(node.symbol_type for node in nodes if node.is_symbol)
        return {
            "total_nodes": len(nodes),
            "total_edges": self.edge_count,
            "file_nodes": sum(1 for node in nodes if not node.is_symbol),
            "symbol_nodes": sum(1 for node in nodes if node.is_symbol),
            "external_nodes": sum(1 for node in nodes if node.is_external),
            "symbols_by_type": dict(symbol_types),
        }
