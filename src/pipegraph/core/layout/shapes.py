# src/pipegraph/core/layout/shapes.py
"""Shape-specific layout functions, one per component kind.

Each function places its own node and its structurally distinct children,
delegating lists of children to the chain builders:

- input: sources to the LEFT, scanner / batching / processors BELOW
- output: processors / batching ABOVE, sinks to the RIGHT
- processor, scanner: a sequential pipeline BELOW, or parallel branches
  side by side below (fan-out)
- anything else: children in a linked column beneath; kind-less groups
  pass their children's inputs and outputs straight through

Coordinates are assigned top-down from ``pos``; sizes come back bottom-up in
the returned NodeChain.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from functools import partial
from typing import TypeAlias

from pipegraph.contracts.enums import Axis, ComponentKind
from pipegraph.contracts.graph import GraphEdge, GraphNode, NodePos
from pipegraph.contracts.tree import TreeNode
from pipegraph.contracts.types import NodeID
from pipegraph.core.layout.chains import vertical_chain
from pipegraph.core.layout.factory import create_node, link
from pipegraph.core.layout.models import LayoutContext, NodeChain

ShapeLayout: TypeAlias = Callable[[TreeNode, NodePos, LayoutContext], NodeChain]


def _is_input_source(child: TreeNode) -> bool:
    return child.kind == ComponentKind.INPUT or (child.kind is None and not child.is_batching_group)


def _is_output_sink(child: TreeNode) -> bool:
    return child.kind == ComponentKind.OUTPUT or (child.kind is None and not child.is_batching_group)


def _batching_group(component: TreeNode) -> TreeNode | None:
    return next((c for c in component.children if c.is_batching_group), None)


def _children_of_kind(component: TreeNode, kind: ComponentKind) -> tuple[TreeNode, ...]:
    return tuple(c for c in component.children if c.kind == kind)


def _unclaimed(component: TreeNode, claimed: Iterable[TreeNode | None]) -> tuple[TreeNode, ...]:
    """Children no stage of the shape has claimed, in sibling order."""
    seen = {id(c) for c in claimed if c is not None}
    return tuple(c for c in component.children if id(c) not in seen)


def _fan_out(
    groups: Sequence[Sequence[TreeNode]],
    upstream: Sequence[NodeID],
    *,
    pos: NodePos,
    ctx: LayoutContext,
) -> NodeChain:
    """Lay parallel branches out side by side, each fed from ``upstream``.

    Every branch is a linked column. The result's inputs are every branch's
    inputs; its outputs are the union of every branch's tail outputs. A
    branch without data-carrying entries (a lone case title) passes the
    upstream outputs through, so outputs equal the sum of the branch tails
    only when every branch carries data.
    """
    settings = ctx.settings
    nodes: list[GraphNode] = []
    edges: list[GraphEdge] = []
    inputs: list[NodeID] = []
    outputs: list[NodeID] = []
    width = 0.0
    height = 0.0
    x = pos.x

    for group in groups:
        branch = vertical_chain(group, linked=True, pos=NodePos(x, pos.y), ctx=ctx)
        if branch.is_empty:
            continue
        nodes.extend(branch.nodes)
        edges.extend(branch.edges)
        edges.extend(link(upstream, branch.inputs, Axis.VERTICAL))
        inputs.extend(branch.inputs)
        outputs.extend(branch.outputs if branch.is_linkable else upstream)

        width = x - pos.x + branch.width
        height = max(height, branch.height)
        x += branch.width + settings.branch_padding

    return NodeChain(
        nodes=tuple(nodes),
        edges=tuple(edges),
        inputs=tuple(dict.fromkeys(inputs)),
        outputs=tuple(dict.fromkeys(outputs)),
        width=width,
        height=height,
    )


def input_to_nodes(component: TreeNode, pos: NodePos, ctx: LayoutContext) -> NodeChain:
    """Lay out an input and everything feeding or following it.

    Stages, in order:
        1. Child inputs (and label groups such as switch cases) as an unlinked
           column to the LEFT, each feeding this node. This node shifts right
           to make room.
        2. A scanner child BELOW, indented.
        3. The batching processors group BELOW that, indented.
        4. Processor children as a linked column further BELOW.

    The chain's outputs are the last stage's outputs. Children of any other
    kind are placed in an unwired column at the bottom.
    """
    settings = ctx.settings
    child_ctx = ctx.nested()

    node = create_node(ctx.next_id(), pos, component, ctx)
    nodes: list[GraphNode] = []
    edges: list[GraphEdge] = []
    width, height = node.width, node.height
    inputs: tuple[NodeID, ...] = (node.id,)
    outputs: tuple[NodeID, ...] = (node.id,)

    sources = tuple(c for c in component.children if _is_input_source(c))
    if sources:
        column = vertical_chain(sources, linked=False, pos=pos, ctx=child_ctx)
        if not column.is_empty:
            shift = settings.horizontal_padding + column.width
            node = node.moved(dx=shift)
            width += shift
            height = max(height, column.height)
            nodes.extend(column.nodes)
            edges.extend(column.edges)
            edges.extend(link(column.outputs, (node.id,), Axis.HORIZONTAL))
            inputs = column.inputs or inputs

    scanner = next((c for c in component.children if c.kind == ComponentKind.SCANNER), None)
    batching = _batching_group(component)
    processors = _children_of_kind(component, ComponentKind.PROCESSOR)
    rest = _unclaimed(component, (*sources, scanner, batching, *processors))

    # (layout at a position, indent, wired into the data flow)
    stages: list[tuple[Callable[..., NodeChain], float, bool]] = []
    if scanner is not None:
        stages.append((partial(component_to_nodes, scanner, ctx=child_ctx), settings.child_bump_offset, True))
    if batching is not None:
        stages.append((partial(component_to_nodes, batching, ctx=child_ctx), settings.child_bump_offset, True))
    if processors:
        stages.append((partial(vertical_chain, processors, linked=True, ctx=child_ctx), 0.0, True))
    if rest:
        stages.append((partial(vertical_chain, rest, linked=False, ctx=child_ctx), 0.0, False))

    # Measured from the node's own top-left corner
    base_width, base_height = node.width, node.height
    for lay_out, indent, wired in stages:
        stage = lay_out(
            pos=NodePos(
                node.position.x + indent,
                node.position.y + base_height + settings.vertical_padding,
            )
        )
        if stage.is_empty:
            continue
        nodes.extend(stage.nodes)
        edges.extend(stage.edges)

        base_height += stage.height + settings.vertical_padding
        height = max(height, base_height)
        if stage.width + indent > base_width:
            width += stage.width + indent - base_width
            base_width = stage.width + indent

        if wired:
            edges.extend(link(outputs, stage.inputs, Axis.VERTICAL))
            if stage.is_linkable:
                outputs = stage.outputs

    return NodeChain(
        nodes=(node, *nodes),
        edges=tuple(edges),
        inputs=inputs,
        outputs=outputs,
        width=width,
        height=height,
    )


def output_to_nodes(component: TreeNode, pos: NodePos, ctx: LayoutContext) -> NodeChain:
    """Lay out an output: the mirror image of input_to_nodes.

    Data is processed before it drains out, so processor children (a linked
    column) and then the batching group (indented) stack ABOVE this node and
    flow down into it. Child outputs and label groups (e.g. switch cases)
    form an unlinked column to the RIGHT, fed from this node. Children of
    any other kind are placed in an unwired column below the node.
    """
    settings = ctx.settings
    child_ctx = ctx.nested()
    node_id = ctx.next_id()

    above: list[NodeChain] = []
    width = settings.component_width
    y = pos.y

    processors = _children_of_kind(component, ComponentKind.PROCESSOR)
    if processors:
        column = vertical_chain(processors, linked=True, pos=NodePos(pos.x, y), ctx=child_ctx)
        if not column.is_empty:
            above.append(column)
            y += column.height + settings.vertical_padding
            width = max(width, column.width)

    batching = _batching_group(component)
    if batching is not None:
        group = component_to_nodes(batching, NodePos(pos.x + settings.child_bump_offset, y), child_ctx)
        if not group.is_empty:
            above.append(group)
            y += group.height + settings.vertical_padding
            width = max(width, group.width + settings.child_bump_offset)

    node = create_node(node_id, NodePos(pos.x, y), component, ctx)
    height = y - pos.y + node.height
    nodes: list[GraphNode] = [node]
    edges: list[GraphEdge] = []

    # Wire bottom-up: each stage drains into whatever sits beneath it
    downstream: tuple[NodeID, ...] = (node.id,)
    for stage in reversed(above):
        edges.extend(link(stage.outputs, downstream, Axis.VERTICAL))
        if stage.is_linkable:
            downstream = stage.inputs
    for stage in above:
        nodes.extend(stage.nodes)
        edges.extend(stage.edges)
    inputs = downstream
    outputs: tuple[NodeID, ...] = (node.id,)

    sinks = tuple(c for c in component.children if _is_output_sink(c))
    rest = _unclaimed(component, (*processors, batching, *sinks))
    if rest:
        column = vertical_chain(
            rest,
            linked=False,
            pos=NodePos(pos.x, node.position.y + node.height + settings.vertical_padding),
            ctx=child_ctx,
        )
        if not column.is_empty:
            height += settings.vertical_padding + column.height
            width = max(width, column.width)
            nodes.extend(column.nodes)
            edges.extend(column.edges)

    if sinks:
        column = vertical_chain(
            sinks,
            linked=False,
            pos=NodePos(pos.x + width + settings.horizontal_padding, pos.y),
            ctx=child_ctx,
        )
        if not column.is_empty:
            width += settings.horizontal_padding + column.width
            height = max(height, column.height)
            nodes.extend(column.nodes)
            edges.extend(column.edges)
            edges.extend(link(outputs, column.inputs, Axis.HORIZONTAL))
            outputs = column.outputs or outputs

    return NodeChain(
        nodes=tuple(nodes),
        edges=tuple(edges),
        inputs=inputs,
        outputs=outputs,
        width=width,
        height=height,
    )


def processor_to_nodes(component: TreeNode, pos: NodePos, ctx: LayoutContext) -> NodeChain:
    """Lay out a processor (or scanner) and its nested pipelines.

    Plain children form one linked column below, indented, fed from this
    node. Grouped children (switch cases, group_by groups) fan out into
    parallel columns side by side below, all fed from the current outputs;
    the chain's outputs then become the union of every branch's tail.

    When a processor has both, the plain children come first and the
    branches hang beneath them.
    """
    settings = ctx.settings
    child_ctx = ctx.nested()

    node = create_node(ctx.next_id(), pos, component, ctx)
    nodes: list[GraphNode] = [node]
    edges: list[GraphEdge] = []
    width, height = node.width, node.height
    outputs: tuple[NodeID, ...] = (node.id,)

    if component.children:
        column = vertical_chain(
            component.children,
            linked=True,
            pos=NodePos(
                pos.x + settings.child_bump_offset,
                pos.y + height + settings.vertical_padding,
            ),
            ctx=child_ctx,
        )
        if not column.is_empty:
            height += settings.vertical_padding + column.height
            width = max(width, column.width + settings.child_bump_offset)
            nodes.extend(column.nodes)
            edges.extend(column.edges)
            edges.extend(link(outputs, column.inputs, Axis.VERTICAL))
            if column.is_linkable:
                outputs = column.outputs

    if component.grouped_children:
        branches = _fan_out(
            component.grouped_children,
            outputs,
            pos=NodePos(pos.x, pos.y + height + settings.vertical_padding),
            ctx=child_ctx,
        )
        if not branches.is_empty:
            width = max(width, branches.width)
            height += settings.vertical_padding + branches.height + settings.vertical_padding
            nodes.extend(branches.nodes)
            edges.extend(branches.edges)
            outputs = branches.outputs

    return NodeChain(
        nodes=tuple(nodes),
        edges=tuple(edges),
        inputs=(node.id,),
        outputs=outputs,
        width=width,
        height=height,
    )


def general_to_nodes(component: TreeNode, pos: NodePos, ctx: LayoutContext) -> NodeChain:
    """Lay out a label group, buffer, resource or unrecognised kind.

    Children form a linked column directly beneath. A node with a kind
    feeds that column; a kind-less group is a pass-through whose inputs and
    outputs are its children's, with its own node emitted only as a title.
    Grouped children, if any, fan out beneath the column.
    """
    settings = ctx.settings
    child_ctx = ctx.nested()

    node = create_node(ctx.next_id(), pos, component, ctx)
    nodes: list[GraphNode] = [node]
    edges: list[GraphEdge] = []
    width, height = node.width, node.height
    has_kind = component.kind is not None
    inputs: tuple[NodeID, ...] = (node.id,) if has_kind else ()
    outputs: tuple[NodeID, ...] = (node.id,) if has_kind else ()

    if component.children:
        column = vertical_chain(
            component.children,
            linked=True,
            pos=NodePos(pos.x, pos.y + height + settings.vertical_padding),
            ctx=child_ctx,
        )
        if not column.is_empty:
            height += settings.vertical_padding + column.height
            width = max(width, column.width)
            nodes.extend(column.nodes)
            edges.extend(column.edges)
            if has_kind:
                edges.extend(link(outputs, column.inputs, Axis.VERTICAL))
                if column.is_linkable:
                    outputs = column.outputs
            else:
                inputs = column.inputs
                outputs = column.outputs

    if component.grouped_children:
        branches = _fan_out(
            component.grouped_children,
            outputs,
            pos=NodePos(pos.x, pos.y + height + settings.vertical_padding),
            ctx=child_ctx,
        )
        if not branches.is_empty:
            width = max(width, branches.width)
            height += settings.vertical_padding + branches.height
            nodes.extend(branches.nodes)
            edges.extend(branches.edges)
            if not inputs:
                inputs = branches.inputs
            if branches.is_linkable:
                outputs = branches.outputs

    return NodeChain(
        nodes=tuple(nodes),
        edges=tuple(edges),
        inputs=inputs,
        outputs=outputs,
        width=width,
        height=height,
    )


_LAYOUT_BY_KIND: dict[str, ShapeLayout] = {
    ComponentKind.INPUT: input_to_nodes,
    ComponentKind.OUTPUT: output_to_nodes,
    ComponentKind.PROCESSOR: processor_to_nodes,
    ComponentKind.SCANNER: processor_to_nodes,
}


def layout_for(component: TreeNode) -> ShapeLayout:
    """Layout function for a component; unknown and absent kinds are general."""
    if component.kind is None:
        return general_to_nodes
    return _LAYOUT_BY_KIND.get(component.kind, general_to_nodes)


def component_to_nodes(component: TreeNode, pos: NodePos, ctx: LayoutContext) -> NodeChain:
    """Lay out one tree entry and its subtree at ``pos``.

    Kind-less entries with nothing beneath them and no actions are elided
    and produce an empty chain.
    """
    if component.is_elided:
        return NodeChain()
    return layout_for(component)(component, pos, ctx)
