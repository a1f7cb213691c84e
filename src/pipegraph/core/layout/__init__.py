# src/pipegraph/core/layout/__init__.py
"""Pipeline graph layout engine.

Package re-exports. build() is the entry point; the chain builders and
shape functions are exposed for composition and testing.
"""

from pipegraph.core.layout.builder import build, without_root_actions
from pipegraph.core.layout.chains import horizontal_chain, resources_chain, vertical_chain
from pipegraph.core.layout.factory import class_for_kind, create_edge, create_node, link, resolve_anchors
from pipegraph.core.layout.models import LayoutContext, NodeChain, RenderConfig
from pipegraph.core.layout.shapes import (
    component_to_nodes,
    general_to_nodes,
    input_to_nodes,
    layout_for,
    output_to_nodes,
    processor_to_nodes,
)
from pipegraph.core.layout.topology import (
    cycles,
    dangling_edges,
    edge_paths,
    is_acyclic,
    node_key,
    overlapping_nodes,
    path_graph,
)

__all__ = [
    "LayoutContext",
    "NodeChain",
    "RenderConfig",
    "build",
    "class_for_kind",
    "component_to_nodes",
    "create_edge",
    "create_node",
    "cycles",
    "dangling_edges",
    "edge_paths",
    "general_to_nodes",
    "horizontal_chain",
    "input_to_nodes",
    "is_acyclic",
    "layout_for",
    "link",
    "node_key",
    "output_to_nodes",
    "overlapping_nodes",
    "path_graph",
    "processor_to_nodes",
    "resolve_anchors",
    "resources_chain",
    "vertical_chain",
    "without_root_actions",
]
