# tests/strategies/__init__.py
"""Hypothesis strategies for property-based tests.

Re-exports commonly used strategies for convenience:
    from tests.strategies import tree_nodes, trees
"""

from tests.strategies.trees import component_kinds, paths, plain_components, tree_nodes, trees

__all__ = [
    "component_kinds",
    "paths",
    "plain_components",
    "tree_nodes",
    "trees",
]
