"""Tests for pipeline tree contracts."""

import pytest
from pydantic import ValidationError

from pipegraph.contracts import BATCHING_PROCESSORS_LABEL, NodeAction, Tree, TreeNode


class TestTreeNodeParsing:
    """TreeNode accepts the management API's JSON shape."""

    def test_minimal_node(self) -> None:
        node = TreeNode.model_validate({"kind": "input", "path": "/input"})

        assert node.kind == "input"
        assert node.children == ()
        assert node.grouped_children == ()
        assert node.actions == ()
        assert node.root_action is False
        assert node.lint_errors is None

    def test_null_collections_become_empty(self) -> None:
        node = TreeNode.model_validate(
            {"kind": "processor", "children": None, "grouped_children": None, "actions": None}
        )

        assert node.children == ()
        assert node.grouped_children == ()
        assert node.actions == ()

    def test_empty_kind_is_label_group(self) -> None:
        node = TreeNode.model_validate({"kind": "", "label": "cases"})

        assert node.kind is None

    def test_null_groups_dropped(self) -> None:
        node = TreeNode.model_validate(
            {
                "kind": "processor",
                "grouped_children": [[{"kind": "processor", "path": "/a"}], None, []],
            }
        )

        assert len(node.grouped_children) == 2
        assert node.grouped_children[0][0].path == "/a"
        assert node.grouped_children[1] == ()

    def test_nested_children_parsed(self) -> None:
        node = TreeNode.model_validate(
            {
                "kind": "input",
                "path": "/input",
                "children": [{"kind": "processor", "path": "/input/processors/0", "type": "mapping"}],
            }
        )

        assert isinstance(node.children[0], TreeNode)
        assert node.children[0].type == "mapping"

    def test_actions_parsed(self) -> None:
        node = TreeNode.model_validate(
            {"actions": [{"operation": "add", "path": "/cache_resources", "kind": "cache"}], "root_action": True}
        )

        assert node.actions == (NodeAction(operation="add", path="/cache_resources", kind="cache"),)

    def test_negative_line_numbers_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TreeNode(kind="input", line_start=-1)

    def test_node_is_frozen(self) -> None:
        node = TreeNode(kind="input")

        with pytest.raises(ValidationError):
            node.kind = "output"  # type: ignore[misc]


class TestTreeNodeProperties:
    def test_batching_group(self) -> None:
        assert TreeNode(label=BATCHING_PROCESSORS_LABEL).is_batching_group
        assert not TreeNode(kind="processor", label=BATCHING_PROCESSORS_LABEL).is_batching_group
        assert not TreeNode(label="cases").is_batching_group

    def test_elided_when_kindless_and_empty(self) -> None:
        assert TreeNode(label="nothing here").is_elided

    def test_not_elided_with_children(self) -> None:
        assert not TreeNode(label="group", children=(TreeNode(kind="processor"),)).is_elided

    def test_not_elided_with_groups(self) -> None:
        assert not TreeNode(label="group", grouped_children=((),)).is_elided

    def test_not_elided_with_actions(self) -> None:
        assert not TreeNode(label="add input", actions=(NodeAction(operation="add"),)).is_elided

    def test_component_never_elided(self) -> None:
        assert not TreeNode(kind="buffer").is_elided


class TestTree:
    def test_sections_optional(self) -> None:
        tree = Tree.model_validate({})

        assert tree.stream is None
        assert tree.resources is None
        assert tree.observability is None
        assert tree.read_only is False

    def test_full_document(self) -> None:
        tree = Tree.model_validate(
            {
                "stream": [{"kind": "input", "path": "/input"}],
                "resources": [{"label": "caches", "children": [{"kind": "cache", "path": "/cache_resources/0"}]}],
                "observability": [{"kind": "metric", "path": "/metrics"}],
                "read_only": True,
                "has_undo": True,
            }
        )

        assert tree.stream is not None and tree.stream[0].kind == "input"
        assert tree.resources is not None and tree.resources[0].children[0].kind == "cache"
        assert tree.read_only
        assert tree.has_undo
        assert not tree.has_redo

    def test_invalid_child_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Tree.model_validate({"stream": [{"kind": "input", "children": "not a list"}]})
