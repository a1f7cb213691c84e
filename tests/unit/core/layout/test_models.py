"""Tests for layout working types."""

from pipegraph.contracts import NodeID
from pipegraph.core.layout import LayoutContext, NodeChain


class TestLayoutContext:
    def test_nested_sets_child_flag(self, ctx: LayoutContext) -> None:
        nested = ctx.nested()

        assert not ctx.config.is_child
        assert nested.config.is_child
        assert nested.next_id is ctx.next_id
        assert nested.settings is ctx.settings

    def test_nested_twice_is_same(self, ctx: LayoutContext) -> None:
        nested = ctx.nested()

        assert nested.nested() is nested


class TestNodeChain:
    def test_empty(self) -> None:
        chain = NodeChain()

        assert chain.is_empty
        assert not chain.is_linkable
        assert (chain.width, chain.height) == (0, 0)

    def test_linkable_with_outputs_only(self) -> None:
        assert NodeChain(outputs=(NodeID("a"),)).is_linkable
