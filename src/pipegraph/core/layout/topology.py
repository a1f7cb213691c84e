# src/pipegraph/core/layout/topology.py
"""Path-keyed topology and geometry checks over a LayoutResult.

Generated node ids differ between builds, so layouts are compared by the
tree paths of edge endpoints instead. Nodes without a path (synthetic label
groups) are keyed by label.
"""

from __future__ import annotations

import itertools

import networkx as nx

from pipegraph.contracts.graph import GraphEdge, GraphNode, LayoutResult


def node_key(node: GraphNode) -> str:
    """Build-independent key of a node: its path, else its label, else its id."""
    if node.data.path:
        return node.data.path
    if node.data.label is not None:
        return f"label:{node.data.label}"
    return node.id


def path_graph(result: LayoutResult) -> nx.DiGraph:
    """Directed graph of the layout keyed by node_key().

    Node attributes: ``kind`` and ``node_id`` of the graph node. Endpoints of
    dangling edges appear as bare node ids without attributes.
    """
    graph: nx.DiGraph = nx.DiGraph()
    keys = {node.id: node_key(node) for node in result.nodes}
    for node in result.nodes:
        graph.add_node(keys[node.id], kind=node.data.kind, node_id=node.id)
    for edge in result.edges:
        graph.add_edge(keys.get(edge.source, edge.source), keys.get(edge.target, edge.target))
    return graph


def edge_paths(result: LayoutResult) -> set[tuple[str, str]]:
    """Edges of the layout as (source key, target key) pairs."""
    keys = {node.id: node_key(node) for node in result.nodes}
    return {(keys.get(edge.source, edge.source), keys.get(edge.target, edge.target)) for edge in result.edges}


def is_acyclic(result: LayoutResult) -> bool:
    return nx.is_directed_acyclic_graph(path_graph(result))


def cycles(result: LayoutResult) -> list[list[str]]:
    """Simple cycles of the path graph, as lists of node keys.

    A well-formed tree never produces one; entries sharing a path do.
    """
    return [list(cycle) for cycle in nx.simple_cycles(path_graph(result))]


def dangling_edges(result: LayoutResult) -> list[GraphEdge]:
    """Edges whose source or target is not a node of the layout."""
    ids = {node.id for node in result.nodes}
    return [edge for edge in result.edges if edge.source not in ids or edge.target not in ids]


def overlapping_nodes(result: LayoutResult) -> list[tuple[GraphNode, GraphNode]]:
    """Pairs of nodes whose boxes overlap with positive area.

    Boxes that merely touch (zero padding) do not count.
    """
    overlaps: list[tuple[GraphNode, GraphNode]] = []
    for a, b in itertools.combinations(result.nodes, 2):
        if (
            a.position.x < b.position.x + b.width
            and b.position.x < a.position.x + a.width
            and a.position.y < b.position.y + b.height
            and b.position.y < a.position.y + a.height
        ):
            overlaps.append((a, b))
    return overlaps
