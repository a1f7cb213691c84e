"""Node identifier generation for layout builds.

Identifiers are unique within one build and carry a per-build random seed
and timestamp so ids from separate or overlapping builds never collide.
They are NOT stable across rebuilds of the same tree; consumers that need
stable identity key on TreeNode.path.
"""

from __future__ import annotations

import itertools
import time
import uuid

from pipegraph.contracts.types import IDGenerator, NodeID


def new_id_generator(*, seed: str | None = None, timestamp_ms: int | None = None) -> IDGenerator:
    """Create the id closure for one build.

    Args:
        seed: Per-build token; a random 8-hex-digit token when omitted
        timestamp_ms: Build timestamp; the current time when omitted

    Returns:
        Callable returning "{timestamp_ms}-{seed}-{counter}" with a counter
        starting at 0 and increasing by one per call.
    """
    if seed is None:
        seed = uuid.uuid4().hex[:8]
    if timestamp_ms is None:
        timestamp_ms = time.time_ns() // 1_000_000
    counter = itertools.count()

    def next_id() -> NodeID:
        return NodeID(f"{timestamp_ms}-{seed}-{next(counter)}")

    return next_id
