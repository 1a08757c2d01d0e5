"""
Graph view of nodes and links for path-finding.

Path search itself is left to the caller; ``Network.to_graph`` returns a
networkx DiGraph that works with the networkx shortest-path functions.

Example:
    >>> graph = Network(nodes, links).to_graph()
    >>> networkx.dijkstra_path(graph, nodes[0].gen_id(), nodes[3].gen_id())
"""

import math
from typing import List, Sequence, Tuple

import networkx as nx

from .link import NodeLink
from .node import Node


class Network:
    """Nodes keyed by identity and the links between them."""

    def __init__(self, nodes: Sequence[Node], links: Sequence[NodeLink]):
        self.nodes = nodes
        self.links = links

    def node_ids(self) -> List[str]:
        return [node.gen_id() for node in self.nodes]

    def edges(self) -> List[Tuple[str, str, bool]]:
        """Return ``(from_id, to_id, omnidirectional)`` for every link."""
        return [link.ids(self.nodes) for link in self.links]

    def to_graph(self) -> nx.DiGraph:
        """
        Build a directed graph keyed by node identity.

        Omnidirectional links become a pair of opposite edges. Edge weights
        are the Euclidean distance between node positions.
        """
        graph = nx.DiGraph()
        for node in self.nodes:
            graph.add_node(
                node.gen_id(),
                position=(node.position.x, node.position.y),
                color=node.color,
            )

        for link in self.links:
            source = link.source(self.nodes)
            target = link.target(self.nodes)
            weight = math.hypot(
                source.position.x - target.position.x,
                source.position.y - target.position.y,
            )
            graph.add_edge(
                source.gen_id(),
                target.gen_id(),
                weight=weight,
                omnidirectional=link.omnidirectional,
            )
            if link.omnidirectional:
                graph.add_edge(
                    target.gen_id(),
                    source.gen_id(),
                    weight=weight,
                    omnidirectional=True,
                )
        return graph
