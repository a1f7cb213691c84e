# src/pipegraph/core/layout/models.py
"""Working types of the layout engine.

Leaf module of the layout package: no imports from chains, shapes or
builder (prevents import cycles).
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from pipegraph.contracts.graph import GraphEdge, GraphNode
from pipegraph.contracts.hooks import NodeHooks
from pipegraph.contracts.types import IDGenerator, NodeID
from pipegraph.core.config import LayoutSettings


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Placement context that changes how a node renders.

    is_child is True when the node is laid out inside another node's
    layout; nested label groups then render as compact title bars.
    """

    is_child: bool = False


@dataclass(frozen=True, slots=True)
class LayoutContext:
    """Everything a layout function needs besides the component and position.

    Created once per build and passed down explicitly; nested layouts derive
    a child context with nested().
    """

    next_id: IDGenerator
    settings: LayoutSettings
    node_hooks: NodeHooks | None = None
    config: RenderConfig = field(default_factory=RenderConfig)

    def nested(self) -> LayoutContext:
        if self.config.is_child:
            return self
        return replace(self, config=RenderConfig(is_child=True))


@dataclass(frozen=True, slots=True)
class NodeChain:
    """Laid-out subtree.

    Attributes:
        nodes: Every node of the subtree, owner first
        edges: Every edge internal to the subtree
        inputs: Nodes that receive an edge from whatever precedes the chain
        outputs: Nodes that emit an edge to whatever follows the chain
        width: Bounding width, measured from the chain's origin
        height: Bounding height, measured from the chain's origin
    """

    nodes: tuple[GraphNode, ...] = ()
    edges: tuple[GraphEdge, ...] = ()
    inputs: tuple[NodeID, ...] = ()
    outputs: tuple[NodeID, ...] = ()
    width: float = 0
    height: float = 0

    @property
    def is_empty(self) -> bool:
        return not self.nodes

    @property
    def is_linkable(self) -> bool:
        """Whether anything can be wired into or out of this chain."""
        return bool(self.inputs or self.outputs)
