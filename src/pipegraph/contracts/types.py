"""Semantic type aliases for compile-time type safety.

NewType creates distinct types that mypy treats as incompatible,
preventing accidental misuse of semantically different string values.
"""

from collections.abc import Callable
from typing import NewType

NodeID = NewType("NodeID", str)
"""Identifier of a graph node, unique within one layout build (e.g., '1718000000000-3fa2c1d9-4')"""

IDGenerator = Callable[[], NodeID]
"""Produces the next node identifier for one layout build.

Created fresh per build by pipegraph.core.identifiers.new_id_generator and
passed explicitly through the layout context, never captured from module state.
"""
