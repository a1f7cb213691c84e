"""Callbacks carried on every graph node for the UI layer.

The layout engine threads a NodeHooks object onto each NodeData but never
calls it. Renderers invoke the hooks in response to user interaction.
"""

from collections.abc import Sequence
from typing import Protocol

from pipegraph.contracts.tree import NodeAction


class NodeHooks(Protocol):
    """Interaction callbacks supplied by the caller of build()."""

    def is_read_only(self) -> bool:
        """Whether the pipeline may be edited."""
        ...

    def open_action_modal(self, actions: Sequence[NodeAction]) -> None:
        """Open the edit dialog for actions that need user input (add, set)."""
        ...

    def headless_action(self, actions: Sequence[NodeAction]) -> None:
        """Apply actions that need no input (delete, move)."""
        ...


class NullNodeHooks:
    """No-op hooks for library and CLI use where no UI is present.

    Does NOT implement any action: both action hooks silently discard their
    arguments. Only the read-only flag is meaningful.
    """

    def __init__(self, *, read_only: bool = False) -> None:
        self._read_only = read_only

    def is_read_only(self) -> bool:
        return self._read_only

    def open_action_modal(self, actions: Sequence[NodeAction]) -> None:
        pass

    def headless_action(self, actions: Sequence[NodeAction]) -> None:
        pass
