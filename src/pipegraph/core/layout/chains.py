# src/pipegraph/core/layout/chains.py
"""Composition primitives: arrange laid-out subtrees along an axis.

vertical_chain and horizontal_chain share one implementation parameterised
by axis. resources_chain places independent groups side by side with no
edges between them.
"""

from __future__ import annotations

from collections.abc import Sequence

from pipegraph.contracts.enums import Axis
from pipegraph.contracts.graph import GraphEdge, GraphNode, NodePos
from pipegraph.contracts.tree import TreeNode
from pipegraph.contracts.types import NodeID
from pipegraph.core.layout.factory import create_node, link
from pipegraph.core.layout.models import LayoutContext, NodeChain


def vertical_chain(
    components: Sequence[TreeNode],
    *,
    linked: bool,
    pos: NodePos,
    ctx: LayoutContext,
) -> NodeChain:
    """Lay components out top to bottom.

    Args:
        components: Entries in top-to-bottom order
        linked: Wire each component's outputs to the next one's inputs
            (a sequential pipeline). Unlinked siblings stay independent and
            all of their inputs and outputs are exposed.
        pos: Top-left corner of the chain
        ctx: Layout context

    Returns:
        NodeChain whose width is the widest component and whose height is
        the sum of heights plus vertical padding between components.
    """
    return _chain(components, linked=linked, pos=pos, ctx=ctx, axis=Axis.VERTICAL)


def horizontal_chain(
    components: Sequence[TreeNode],
    *,
    linked: bool,
    pos: NodePos,
    ctx: LayoutContext,
) -> NodeChain:
    """Lay components out left to right; the mirror of vertical_chain."""
    return _chain(components, linked=linked, pos=pos, ctx=ctx, axis=Axis.HORIZONTAL)


def _chain(
    components: Sequence[TreeNode],
    *,
    linked: bool,
    pos: NodePos,
    ctx: LayoutContext,
    axis: Axis,
) -> NodeChain:
    # shapes and chains are mutually recursive
    from pipegraph.core.layout.shapes import component_to_nodes

    vertical = axis is Axis.VERTICAL
    padding = ctx.settings.vertical_padding if vertical else ctx.settings.horizontal_padding

    nodes: list[GraphNode] = []
    edges: list[GraphEdge] = []
    inputs: list[NodeID] = []
    outputs: list[NodeID] = []
    started = False

    extent = 0.0  # along the axis
    breadth = 0.0  # across the axis
    placed = 0

    for component in components:
        offset = extent + padding if placed else 0.0
        at = pos.moved(dy=offset) if vertical else pos.moved(dx=offset)
        last = component_to_nodes(component, at, ctx)
        if last.is_empty:
            continue

        placed += 1
        extent = offset + (last.height if vertical else last.width)
        breadth = max(breadth, last.width if vertical else last.height)
        nodes.extend(last.nodes)
        edges.extend(last.edges)

        if not linked:
            inputs.extend(last.inputs)
            outputs.extend(last.outputs)
            continue

        # Label-only entries are positioned but carry no data flow
        if not last.is_linkable:
            continue

        if not started:
            inputs = list(last.inputs)
            outputs = list(last.outputs)
            started = True
        else:
            edges.extend(link(outputs, last.inputs, axis))
            outputs = list(last.outputs)

    width, height = (breadth, extent) if vertical else (extent, breadth)
    return NodeChain(
        nodes=tuple(nodes),
        edges=tuple(edges),
        inputs=tuple(inputs),
        outputs=tuple(outputs),
        width=width,
        height=height,
    )


def resources_chain(
    components: Sequence[TreeNode],
    *,
    pos: NodePos,
    ctx: LayoutContext,
) -> NodeChain:
    """Lay independent top-level groups out side by side.

    Each group gets its own title node with its children in an unlinked
    horizontal chain beneath it. Resources do not carry data between each
    other, so the result has no inputs or outputs and no edges between
    groups (a member may still have internal edges of its own).
    """
    settings = ctx.settings
    child_ctx = ctx.nested()

    nodes: list[GraphNode] = []
    edges: list[GraphEdge] = []
    width = 0.0
    height = 0.0
    placed = 0

    for component in components:
        if component.is_elided:
            continue

        x = pos.x + width + (settings.horizontal_padding if placed else 0.0)
        title = create_node(ctx.next_id(), NodePos(x, pos.y), component, ctx)
        nodes.append(title)
        group_width, group_height = title.width, title.height

        if component.children:
            members = horizontal_chain(
                component.children,
                linked=False,
                pos=NodePos(x, pos.y + title.height + settings.vertical_padding),
                ctx=child_ctx,
            )
            if not members.is_empty:
                nodes.extend(members.nodes)
                edges.extend(members.edges)
                group_width = max(group_width, members.width)
                group_height = title.height + settings.vertical_padding + members.height

        placed += 1
        width = x - pos.x + group_width
        height = max(height, group_height)

    return NodeChain(nodes=tuple(nodes), edges=tuple(edges), width=width, height=height)
