"""Tests for positioned graph contracts."""

from dataclasses import FrozenInstanceError

import pytest

from pipegraph.contracts import (
    Anchor,
    GraphEdge,
    GraphNode,
    LayoutResult,
    NodeAction,
    NodeClass,
    NodeData,
    NodeID,
    NodePos,
    NodeRenderType,
    NullNodeHooks,
)


def _node(node_id: str, path: str = "", x: float = 0, y: float = 0) -> GraphNode:
    return GraphNode(
        id=NodeID(node_id),
        class_name=NodeClass.PROCESSOR,
        type=NodeRenderType.COMPONENT,
        selectable=True,
        data=NodeData(
            kind="processor",
            type="mapping",
            label=None,
            path=path,
            lint_errors=None,
            actions=(),
            has_children=False,
            root_action=False,
        ),
        position=NodePos(x, y),
        width=170,
        height=50,
    )


class TestNodePos:
    def test_moved_returns_new_position(self) -> None:
        pos = NodePos(10, 20)

        assert pos.moved(dx=5) == NodePos(15, 20)
        assert pos.moved(dy=-20) == NodePos(10, 0)
        assert pos == NodePos(10, 20)

    def test_frozen(self) -> None:
        pos = NodePos(0, 0)

        with pytest.raises(FrozenInstanceError):
            pos.x = 1  # type: ignore[misc]


class TestGraphNode:
    def test_moved_keeps_everything_else(self) -> None:
        node = _node("n1", "/p", x=10, y=10)
        moved = node.moved(dx=100, dy=5)

        assert moved.position == NodePos(110, 15)
        assert moved.id == node.id
        assert moved.data == node.data
        assert node.position == NodePos(10, 10)

    def test_with_anchors(self) -> None:
        node = _node("n1").with_anchors(has_target=Anchor.LEFT, has_source=Anchor.BOTTOM)

        assert node.data.has_target is Anchor.LEFT
        assert node.data.has_source is Anchor.BOTTOM

    def test_hooks_ignored_in_equality(self) -> None:
        a = NodeData(
            kind=None,
            type=None,
            label="x",
            path="",
            lint_errors=None,
            actions=(),
            has_children=False,
            root_action=False,
            node_hooks=NullNodeHooks(),
        )
        b = NodeData(
            kind=None,
            type=None,
            label="x",
            path="",
            lint_errors=None,
            actions=(),
            has_children=False,
            root_action=False,
        )

        assert a == b

    def test_to_dict_uses_renderer_keys(self) -> None:
        node = _node("n1", "/p", x=1, y=2).with_anchors(has_target=Anchor.TOP, has_source=None)
        data = node.to_dict()

        assert data["id"] == "n1"
        assert data["className"] == "processor"
        assert data["type"] == "componentEditMode"
        assert data["position"] == {"x": 1, "y": 2}
        assert data["data"]["hasTarget"] == "top"
        assert data["data"]["hasSource"] is None
        assert data["data"]["lintErrors"] is None
        assert "node_hooks" not in data["data"]

    def test_to_dict_serialises_actions(self) -> None:
        base = _node("n1")
        node = GraphNode(
            id=base.id,
            class_name=base.class_name,
            type=base.type,
            selectable=base.selectable,
            data=NodeData(
                kind="input",
                type="kafka",
                label=None,
                path="/input",
                lint_errors=("missing field addresses",),
                actions=(NodeAction(operation="delete", path="/input"),),
                has_children=True,
                root_action=False,
            ),
            position=base.position,
            width=base.width,
            height=base.height,
        )

        data = node.to_dict()["data"]

        assert data["actions"] == [{"operation": "delete", "path": "/input", "kind": None}]
        assert data["lintErrors"] == ["missing field addresses"]
        assert data["hasChildren"] is True


class TestGraphEdge:
    def test_to_dict(self) -> None:
        edge = GraphEdge(
            id="ea-b",
            source=NodeID("a"),
            target=NodeID("b"),
            source_handle=Anchor.RIGHT,
            target_handle=Anchor.LEFT,
        )

        assert edge.to_dict() == {
            "id": "ea-b",
            "source": "a",
            "target": "b",
            "animated": True,
            "sourceHandle": "right",
            "targetHandle": "left",
        }


class TestLayoutResult:
    def test_items_are_nodes_then_edges(self) -> None:
        a, b = _node("a"), _node("b")
        edge = GraphEdge(
            id="ea-b",
            source=a.id,
            target=b.id,
            source_handle=Anchor.BOTTOM,
            target_handle=Anchor.TOP,
        )
        result = LayoutResult(nodes=(a, b), edges=(edge,))

        assert result.items() == (a, b, edge)
        assert [hasattr(item, "source") for item in result.items()] == [False, False, True]

    def test_node_lookup(self) -> None:
        a = _node("a")
        result = LayoutResult(nodes=(a,))

        assert result.node("a") is a
        with pytest.raises(KeyError):
            result.node("missing")

    def test_nodes_for_path(self) -> None:
        result = LayoutResult(nodes=(_node("a", "/p"), _node("b", "/q"), _node("c", "/p")))

        assert [n.id for n in result.nodes_for_path("/p")] == ["a", "c"]
        assert result.nodes_for_path("/none") == ()

    def test_to_dict(self) -> None:
        result = LayoutResult(nodes=(_node("a"),))

        data = result.to_dict()

        assert set(data) == {"nodes", "edges"}
        assert data["nodes"][0]["id"] == "a"
        assert data["edges"] == []
