"""Shared contracts for cross-boundary data types.

This package is a LEAF MODULE with no outbound dependencies to core.
Settings classes (LayoutSettings, PipegraphSettings) are NOT re-exported
here - import them from pipegraph.core.config.

Import patterns:
    # Contracts (lightweight, no heavy dependencies)
    from pipegraph.contracts import Tree, TreeNode, LayoutResult

    # Settings classes
    from pipegraph.core.config import LayoutSettings
"""

from pipegraph.contracts.enums import (
    Anchor,
    Axis,
    ComponentKind,
    NodeClass,
    NodeRenderType,
)
from pipegraph.contracts.events import NodeRunState, RunStateReported
from pipegraph.contracts.graph import (
    GraphEdge,
    GraphNode,
    LayoutResult,
    NodeData,
    NodePos,
)
from pipegraph.contracts.hooks import NodeHooks, NullNodeHooks
from pipegraph.contracts.tree import (
    BATCHING_PROCESSORS_LABEL,
    NodeAction,
    Tree,
    TreeNode,
)
from pipegraph.contracts.types import IDGenerator, NodeID

__all__ = [
    "BATCHING_PROCESSORS_LABEL",
    "Anchor",
    "Axis",
    "ComponentKind",
    "GraphEdge",
    "GraphNode",
    "IDGenerator",
    "LayoutResult",
    "NodeAction",
    "NodeClass",
    "NodeData",
    "NodeHooks",
    "NodeID",
    "NodePos",
    "NodeRenderType",
    "NodeRunState",
    "NullNodeHooks",
    "RunStateReported",
    "Tree",
    "TreeNode",
]
