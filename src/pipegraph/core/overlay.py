# src/pipegraph/core/overlay.py
"""Live run-state overlay for laid-out graphs.

Separates reactivity from geometry: the overlay listens for
RunStateReported events and answers lookups for already-built nodes. It
never mutates a LayoutResult; annotate() returns a separate mapping keyed
by node id, and a rebuilt layout can be annotated from the same overlay.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pipegraph.contracts.events import NodeRunState, RunStateReported
from pipegraph.contracts.graph import GraphNode, LayoutResult
from pipegraph.contracts.types import NodeID
from pipegraph.core.events import EventBusProtocol


class RunStateOverlay:
    """Latest run-state per component, looked up by path with label fallback.

    Example:
        bus = EventBus()
        overlay = RunStateOverlay(bus)
        bus.emit(RunStateReported(path="/input", state=NodeRunState(received=10)))
        states = overlay.annotate(build(tree))
    """

    def __init__(self, bus: EventBusProtocol | None = None) -> None:
        self._by_path: dict[str, NodeRunState] = {}
        self._by_label: dict[str, NodeRunState] = {}
        if bus is not None:
            bus.subscribe(RunStateReported, self.record)

    def record(self, event: RunStateReported) -> None:
        """Store the state carried by an event, replacing any earlier one."""
        if event.path is not None:
            self._by_path[event.path] = event.state
        if event.label is not None:
            self._by_label[event.label] = event.state

    def clear(self) -> None:
        self._by_path.clear()
        self._by_label.clear()

    def state_for(self, node: GraphNode) -> NodeRunState | None:
        """Run-state of a node: by path first, then by label."""
        if node.data.path and node.data.path in self._by_path:
            return self._by_path[node.data.path]
        if node.data.label is not None:
            return self._by_label.get(node.data.label)
        return None

    def annotate(self, result: LayoutResult) -> Mapping[NodeID, NodeRunState]:
        """Read-only mapping of node id to run-state for every node that has one."""
        states: dict[NodeID, NodeRunState] = {}
        for node in result.nodes:
            state = self.state_for(node)
            if state is not None:
                states[node.id] = state
        return MappingProxyType(states)
