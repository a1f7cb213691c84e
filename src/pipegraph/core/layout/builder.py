# src/pipegraph/core/layout/builder.py
"""Graph assembly: lay out every section of a tree into one LayoutResult.

Sections are placed top to bottom in a fixed order with a running vertical
offset: stream, resources (placeholders, then persisted), observability.
Each build creates its own id generator, so builds never share state.
"""

from __future__ import annotations

from collections.abc import Sequence

from pipegraph.contracts.graph import GraphEdge, GraphNode, LayoutResult, NodePos
from pipegraph.contracts.hooks import NodeHooks, NullNodeHooks
from pipegraph.contracts.tree import Tree, TreeNode
from pipegraph.contracts.types import IDGenerator
from pipegraph.core.config import LayoutSettings
from pipegraph.core.identifiers import new_id_generator
from pipegraph.core.layout.chains import horizontal_chain, resources_chain
from pipegraph.core.layout.factory import resolve_anchors
from pipegraph.core.layout.models import LayoutContext, NodeChain
from pipegraph.core.logging import get_logger

logger = get_logger(__name__)


def without_root_actions(components: Sequence[TreeNode]) -> tuple[TreeNode, ...]:
    """Drop "add new component" placeholders at every depth."""
    return tuple(_strip_root_actions(c) for c in components if not c.root_action)


def _strip_root_actions(component: TreeNode) -> TreeNode:
    if not component.children and not component.grouped_children:
        return component
    return component.model_copy(
        update={
            "children": without_root_actions(component.children),
            "grouped_children": tuple(without_root_actions(group) for group in component.grouped_children),
        }
    )


def build(
    tree: Tree,
    *,
    node_hooks: NodeHooks | None = None,
    settings: LayoutSettings | None = None,
    next_id: IDGenerator | None = None,
) -> LayoutResult:
    """Lay out a pipeline tree as positioned nodes and edges.

    Args:
        tree: Pipeline tree from the management API
        node_hooks: UI callbacks threaded onto every node; defaults to
            NullNodeHooks reporting the tree's read-only flag
        settings: Geometry constants; defaults to LayoutSettings()
        next_id: Id generator; a fresh one per build when omitted

    Returns:
        LayoutResult with anchors resolved on every node. In read-only
        trees no root-action placeholder appears anywhere.
    """
    settings = settings if settings is not None else LayoutSettings()
    ctx = LayoutContext(
        next_id=next_id if next_id is not None else new_id_generator(),
        settings=settings,
        node_hooks=node_hooks if node_hooks is not None else NullNodeHooks(read_only=tree.read_only),
    )
    read_only = tree.read_only

    def visible(components: Sequence[TreeNode]) -> tuple[TreeNode, ...]:
        return without_root_actions(components) if read_only else tuple(components)

    sections: list[NodeChain] = []
    top = 0.0

    def place(chain: NodeChain) -> None:
        nonlocal top
        if chain.is_empty:
            return
        sections.append(chain)
        top += settings.vertical_padding + chain.height

    if tree.stream is not None:
        stream = horizontal_chain(visible(tree.stream), linked=True, pos=NodePos(0, 0), ctx=ctx)
        if not stream.is_empty:
            sections.append(stream)
            top = stream.height

    if tree.resources is not None:
        if not read_only:
            placeholders = tuple(c for c in tree.resources if c.root_action)
            if placeholders:
                place(resources_chain(placeholders, pos=NodePos(0, top + settings.vertical_padding), ctx=ctx))

        persisted = visible(tuple(c for c in tree.resources if not c.root_action))
        if persisted:
            place(resources_chain(persisted, pos=NodePos(0, top + settings.vertical_padding), ctx=ctx))

    if tree.observability is not None:
        observability = visible(tree.observability)
        if observability:
            place(resources_chain(observability, pos=NodePos(0, top + settings.vertical_padding), ctx=ctx))

    nodes: list[GraphNode] = []
    edges: list[GraphEdge] = []
    for section in sections:
        nodes.extend(section.nodes)
        edges.extend(section.edges)

    result = LayoutResult(
        nodes=resolve_anchors(nodes, edges),
        edges=tuple(edges),
        width=max((s.width for s in sections), default=0.0),
        height=top,
    )
    logger.debug(
        "layout_built",
        node_count=len(result.nodes),
        edge_count=len(result.edges),
        sections=len(sections),
        read_only=read_only,
    )
    return result
