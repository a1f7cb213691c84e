# src/pipegraph/core/layout/factory.py
"""Node and edge construction.

create_node() sizes one tree entry independently of its neighbours.
Edges record the sides they attach to, and resolve_anchors() derives the
has_source / has_target anchors of every node from the final edge set, so
an edge and its endpoints can never disagree.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType

from pipegraph.contracts.enums import Anchor, Axis, NodeClass, NodeRenderType
from pipegraph.contracts.graph import GraphEdge, GraphNode, NodeData, NodePos
from pipegraph.contracts.tree import TreeNode
from pipegraph.contracts.types import NodeID
from pipegraph.core.layout.models import LayoutContext
from pipegraph.core.logging import get_logger

logger = get_logger(__name__)

KIND_TO_CLASS: Mapping[str, NodeClass] = MappingProxyType(
    {
        "buffer": NodeClass.BUFFER,
        "cache": NodeClass.RESOURCE,
        "input": NodeClass.INPUT,
        "output": NodeClass.OUTPUT,
        "processor": NodeClass.PROCESSOR,
        "scanner": NodeClass.RESOURCE,
        "rate_limit": NodeClass.RESOURCE,
        "metric": NodeClass.RESOURCE,
    }
)


def class_for_kind(kind: str | None) -> NodeClass:
    """Visual class of a node: titles for label groups, resource for unknown kinds."""
    if kind is None:
        return NodeClass.TITLE
    return KIND_TO_CLASS.get(kind, NodeClass.RESOURCE)


def create_node(node_id: NodeID, pos: NodePos, component: TreeNode, ctx: LayoutContext) -> GraphNode:
    """Create the sized graph node for one tree entry.

    Args:
        node_id: Identifier from the build's id generator
        pos: Top-left corner of the node box
        component: Tree entry the node represents
        ctx: Layout context (settings, hooks, nesting)

    Returns:
        GraphNode without anchors; anchors are resolved after layout.
    """
    settings = ctx.settings
    class_name = class_for_kind(component.kind)
    height = settings.component_height

    render_type = NodeRenderType.COMPONENT if component.kind is not None else NodeRenderType.TITLE
    if ctx.config.is_child and class_name is NodeClass.TITLE:
        render_type = NodeRenderType.COMPONENT_TITLE
        height = settings.component_title_height

    data = NodeData(
        kind=component.kind,
        type=component.type,
        label=component.label,
        path=component.path,
        lint_errors=component.lint_errors,
        actions=component.actions,
        has_children=len(component.children) > 0,
        root_action=component.root_action,
        node_hooks=ctx.node_hooks,
    )
    return GraphNode(
        id=node_id,
        class_name=class_name,
        type=render_type,
        selectable=component.kind is not None,
        data=data,
        position=pos,
        width=settings.component_width,
        height=height,
    )


def create_edge(source: NodeID, target: NodeID, axis: Axis) -> GraphEdge:
    return GraphEdge(
        id=f"e{source}-{target}",
        source=source,
        target=target,
        source_handle=axis.source_anchor,
        target_handle=axis.target_anchor,
    )


def link(sources: Sequence[NodeID], targets: Sequence[NodeID], axis: Axis) -> tuple[GraphEdge, ...]:
    """Connect every source to every target along one axis."""
    return tuple(create_edge(source, target, axis) for source in sources for target in targets)


def resolve_anchors(nodes: Iterable[GraphNode], edges: Sequence[GraphEdge]) -> tuple[GraphNode, ...]:
    """Set has_source / has_target on every node from the edges touching it.

    When a node leaves (or is entered) on two different sides, the later
    edge wins.
    """
    source_sides: dict[NodeID, Anchor] = {}
    target_sides: dict[NodeID, Anchor] = {}
    for edge in edges:
        previous = source_sides.get(edge.source)
        if previous is not None and previous is not edge.source_handle:
            logger.debug("anchor_conflict", node_id=edge.source, role="source", sides=[previous, edge.source_handle])
        source_sides[edge.source] = edge.source_handle

        previous = target_sides.get(edge.target)
        if previous is not None and previous is not edge.target_handle:
            logger.debug("anchor_conflict", node_id=edge.target, role="target", sides=[previous, edge.target_handle])
        target_sides[edge.target] = edge.target_handle

    resolved: list[GraphNode] = []
    for node in nodes:
        if node.id in source_sides or node.id in target_sides:
            node = node.with_anchors(
                has_target=target_sides.get(node.id),
                has_source=source_sides.get(node.id),
            )
        resolved.append(node)
    return tuple(resolved)
