"""Positioned graph contracts: the output of the layout engine.

All types are frozen. A build produces a fresh LayoutResult; nothing in it
is patched afterwards. Live run-state is associated by pipegraph.core.overlay
without touching these objects.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from pipegraph.contracts.enums import Anchor, NodeClass, NodeRenderType
from pipegraph.contracts.hooks import NodeHooks
from pipegraph.contracts.tree import NodeAction
from pipegraph.contracts.types import NodeID


@dataclass(frozen=True, slots=True)
class NodePos:
    """Top-left corner of a node box."""

    x: float
    y: float

    def moved(self, dx: float = 0, dy: float = 0) -> NodePos:
        return NodePos(self.x + dx, self.y + dy)


@dataclass(frozen=True, slots=True)
class NodeData:
    """Payload the renderer needs to draw and wire one node.

    has_target / has_source name the side an incoming / outgoing edge
    attaches to; None when the node has no such edge.
    """

    kind: str | None
    type: str | None
    label: str | None
    path: str
    lint_errors: tuple[str, ...] | None
    actions: tuple[NodeAction, ...]
    has_children: bool
    root_action: bool
    node_hooks: NodeHooks | None = field(default=None, compare=False, repr=False)
    has_target: Anchor | None = None
    has_source: Anchor | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to renderer JSON (hooks are not serialisable and are omitted)."""
        return {
            "kind": self.kind,
            "type": self.type,
            "label": self.label,
            "path": self.path,
            "lintErrors": list(self.lint_errors) if self.lint_errors is not None else None,
            "actions": [action.model_dump() for action in self.actions],
            "hasChildren": self.has_children,
            "rootAction": self.root_action,
            "hasTarget": self.has_target.value if self.has_target is not None else None,
            "hasSource": self.has_source.value if self.has_source is not None else None,
        }


@dataclass(frozen=True, slots=True)
class GraphNode:
    """One positioned node of the diagram."""

    id: NodeID
    class_name: NodeClass
    type: NodeRenderType
    selectable: bool
    data: NodeData
    position: NodePos
    width: float
    height: float

    def moved(self, dx: float = 0, dy: float = 0) -> GraphNode:
        return replace(self, position=self.position.moved(dx, dy))

    def with_anchors(self, *, has_target: Anchor | None, has_source: Anchor | None) -> GraphNode:
        return replace(self, data=replace(self.data, has_target=has_target, has_source=has_source))

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "className": self.class_name.value,
            "type": self.type.value,
            "selectable": self.selectable,
            "data": self.data.to_dict(),
            "position": {"x": self.position.x, "y": self.position.y},
            "width": self.width,
            "height": self.height,
        }


@dataclass(frozen=True, slots=True)
class GraphEdge:
    """Directed edge between two nodes.

    source_handle / target_handle record the sides the edge leaves and
    enters; node anchors are derived from them.
    """

    id: str
    source: NodeID
    target: NodeID
    source_handle: Anchor
    target_handle: Anchor
    animated: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "source": self.source,
            "target": self.target,
            "animated": self.animated,
            "sourceHandle": self.source_handle.value,
            "targetHandle": self.target_handle.value,
        }


@dataclass(frozen=True, slots=True)
class LayoutResult:
    """Flat output of one build: positioned nodes and the edges between them."""

    nodes: tuple[GraphNode, ...] = ()
    edges: tuple[GraphEdge, ...] = ()
    width: float = 0
    height: float = 0

    def items(self) -> tuple[GraphNode | GraphEdge, ...]:
        """Nodes followed by edges, as one mixed sequence.

        Edges are the items carrying a ``source`` attribute.
        """
        return (*self.nodes, *self.edges)

    def node(self, node_id: str) -> GraphNode:
        """Look up a node by id.

        Raises:
            KeyError: If no node has this id
        """
        for candidate in self.nodes:
            if candidate.id == node_id:
                return candidate
        raise KeyError(node_id)

    def nodes_for_path(self, path: str) -> tuple[GraphNode, ...]:
        return tuple(n for n in self.nodes if n.data.path == path)

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }
