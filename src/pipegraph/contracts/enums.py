"""Kinds, anchors and render variants shared across the layout boundary.

Values are the literal strings exchanged with the management API (kinds) and
with the diagram renderer (classes, render types, anchor sides).
"""

from enum import StrEnum


class ComponentKind(StrEnum):
    """Structural role of a component in a pipeline tree.

    A TreeNode without a kind is a pure label group. Kinds outside this
    enum are accepted on input and laid out generically.
    """

    INPUT = "input"
    OUTPUT = "output"
    PROCESSOR = "processor"
    BUFFER = "buffer"
    CACHE = "cache"
    SCANNER = "scanner"
    RATE_LIMIT = "rate_limit"
    METRIC = "metric"


class NodeClass(StrEnum):
    """Visual category of a graph node (renderer CSS class)."""

    INPUT = "input"
    OUTPUT = "output"
    PROCESSOR = "processor"
    BUFFER = "buffer"
    RESOURCE = "resource"
    TITLE = "title"


class NodeRenderType(StrEnum):
    """Rendering variant of a graph node.

    Values:
        COMPONENT: Full component box (any node with a kind)
        TITLE: Top-level label group title
        COMPONENT_TITLE: Compact title bar for a label group nested inside
            another component's layout
    """

    COMPONENT = "componentEditMode"
    TITLE = "titleEditMode"
    COMPONENT_TITLE = "componentTitleEditMode"


class Anchor(StrEnum):
    """Side of a node at which an edge attaches."""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


class Axis(StrEnum):
    """Direction along which two laid-out chains are stitched together.

    VERTICAL edges leave the bottom of the upstream node and enter the top
    of the downstream one; HORIZONTAL edges go right to left.
    """

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"

    @property
    def source_anchor(self) -> Anchor:
        return Anchor.BOTTOM if self is Axis.VERTICAL else Anchor.RIGHT

    @property
    def target_anchor(self) -> Anchor:
        return Anchor.TOP if self is Axis.VERTICAL else Anchor.LEFT
