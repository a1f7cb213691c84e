"""Run-state events published by trace pollers.

A trace poller outside this package observes a running pipeline and emits
RunStateReported on an EventBus. pipegraph.core.overlay subscribes and
associates the latest state with laid-out nodes by path (label as fallback).
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class NodeRunState:
    """Live counters for one pipeline component.

    Attributes:
        received: Messages the component has consumed
        sent: Messages the component has emitted
        errors: Most recent error messages, oldest first
    """

    received: int = 0
    sent: int = 0
    errors: tuple[str, ...] = ()

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0


@dataclass(frozen=True, slots=True)
class RunStateReported:
    """A trace poller observed new run-state for a component.

    At least one of path and label identifies the component. The path is
    authoritative; the label is used when the trace cannot resolve a path.
    """

    state: NodeRunState
    path: str | None = None
    label: str | None = None

    def __post_init__(self) -> None:
        if self.path is None and self.label is None:
            raise ValueError("RunStateReported requires a path or a label")
