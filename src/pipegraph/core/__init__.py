# src/pipegraph/core/__init__.py
"""Core infrastructure: Configuration, Logging, Identifiers, Events, Layout, Overlay."""

from pipegraph.core.config import (
    LayoutSettings,
    LoggingSettings,
    PipegraphSettings,
    load_settings,
)
from pipegraph.core.events import (
    EventBus,
    EventBusProtocol,
    NullEventBus,
)
from pipegraph.core.identifiers import new_id_generator
from pipegraph.core.layout import build
from pipegraph.core.overlay import RunStateOverlay

__all__ = [
    "EventBus",
    "EventBusProtocol",
    "LayoutSettings",
    "LoggingSettings",
    "NullEventBus",
    "PipegraphSettings",
    "RunStateOverlay",
    "build",
    "load_settings",
    "new_id_generator",
]
