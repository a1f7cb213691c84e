"""Pipeline tree models: the input of the layout engine.

The tree is produced by the management API from a pipeline config and is
the trust boundary of this package. Pydantic validates it once on load;
everything downstream treats it as well-formed and immutable.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

# Label of the synthetic group holding an input's or output's batch policy
# processors. It has no kind and no path of its own.
BATCHING_PROCESSORS_LABEL = "batching processors"


def _none_to_empty(value: Any) -> Any:
    if value is None:
        return ()
    return value


class NodeAction(BaseModel):
    """An edit operation offered on a tree entry (add, set, delete, move...).

    Opaque to the layout engine; carried onto graph nodes for the UI.
    """

    model_config = {"frozen": True}

    operation: str
    path: str = ""
    kind: str | None = None


class TreeNode(BaseModel):
    """One component or label group of a pipeline tree.

    Attributes:
        label: Optional display label (component label or group name)
        path: Structural address (JSON pointer into the config)
        kind: Component role; None for a pure label group. Unknown kinds are
            accepted and laid out generically.
        type: Concrete component name (e.g. "kafka_franz", "mapping")
        children: Nested entries laid out according to this node's shape
        grouped_children: Parallel branches (switch cases, group_by groups)
        actions: Edit operations available on this entry
        root_action: True for "add new component" placeholders that are not
            part of the persisted config
        lint_errors: Lint messages attributed to this entry
        line_start: First config line of this entry (0 when unknown)
        line_end: Last config line of this entry (0 when unknown)
    """

    model_config = {"frozen": True}

    label: str | None = None
    path: str = ""
    kind: str | None = None
    type: str | None = None
    children: tuple[TreeNode, ...] = ()
    grouped_children: tuple[tuple[TreeNode, ...], ...] = ()
    actions: tuple[NodeAction, ...] = ()
    root_action: bool = False
    lint_errors: tuple[str, ...] | None = None
    line_start: int = Field(default=0, ge=0)
    line_end: int = Field(default=0, ge=0)

    @field_validator("kind", mode="before")
    @classmethod
    def _empty_kind_is_none(cls, v: Any) -> Any:
        if v == "":
            return None
        return v

    @field_validator("children", "actions", mode="before")
    @classmethod
    def _null_collection(cls, v: Any) -> Any:
        return _none_to_empty(v)

    @field_validator("grouped_children", mode="before")
    @classmethod
    def _drop_null_groups(cls, v: Any) -> Any:
        if v is None:
            return ()
        return tuple(group for group in v if group is not None)

    @property
    def is_batching_group(self) -> bool:
        return self.kind is None and self.label == BATCHING_PROCESSORS_LABEL

    @property
    def is_elided(self) -> bool:
        """A kind-less entry with nothing beneath it and nothing to offer.

        Such entries produce no graph node at all.
        """
        return self.kind is None and not self.children and not self.grouped_children and not self.actions


class Tree(BaseModel):
    """Full pipeline description: stream, resources and observability sections."""

    model_config = {"frozen": True}

    stream: tuple[TreeNode, ...] | None = None
    resources: tuple[TreeNode, ...] | None = None
    observability: tuple[TreeNode, ...] | None = None
    read_only: bool = False
    has_undo: bool = False
    has_redo: bool = False
