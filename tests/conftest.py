# tests/conftest.py
"""Shared test fixtures.

Hypothesis Configuration:
- "ci" profile: Fast tests for CI (100 examples) - default
- "nightly" profile: Thorough tests (1000 examples)
- "debug" profile: Minimal tests with verbose output (10 examples)

Set profile via environment variable:
    HYPOTHESIS_PROFILE=nightly pytest tests/property/
"""

import logging
import os
from collections.abc import Iterator

import pytest
import structlog
from hypothesis import Phase, Verbosity, settings

from pipegraph.contracts import Tree
from pipegraph.contracts.types import IDGenerator
from pipegraph.core.config import LayoutSettings
from pipegraph.core.identifiers import new_id_generator
from pipegraph.core.layout import LayoutContext
from tests.helpers.trees import component

# =============================================================================
# Hypothesis Configuration
# =============================================================================

# CI profile: Fast tests for continuous integration
settings.register_profile(
    "ci",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,  # Disable deadline for CI (timing varies)
)

# Nightly profile: Thorough testing for scheduled runs
settings.register_profile(
    "nightly",
    max_examples=1000,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

# Debug profile: Minimal examples with verbose output for debugging
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

# Load profile from environment, default to "ci"
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci"))


# =============================================================================
# Layout fixtures
# =============================================================================


@pytest.fixture
def layout_settings() -> LayoutSettings:
    return LayoutSettings()


@pytest.fixture
def next_id() -> IDGenerator:
    """Deterministic id generator: "0-test-0", "0-test-1", ..."""
    return new_id_generator(seed="test", timestamp_ms=0)


@pytest.fixture
def ctx(next_id: IDGenerator, layout_settings: LayoutSettings) -> LayoutContext:
    return LayoutContext(next_id=next_id, settings=layout_settings)


@pytest.fixture
def simple_stream_tree() -> Tree:
    """/in -> /p (with one child /p/0) -> /out."""
    return Tree(
        stream=(
            component("input", "/in", type="generate"),
            component(
                "processor",
                "/p",
                type="branch",
                children=(component("processor", "/p/0", type="mapping"),),
            ),
            component("output", "/out", type="stdout"),
        )
    )


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Undo configure_logging() calls made by a test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    root.handlers = handlers
    root.setLevel(level)
