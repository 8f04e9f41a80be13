"""Tests for the layout tree and the LayoutEngine tree walker."""

import logging

from scenelayout.engine import (
    BaseLayoutStrategy,
    CanvasLayout,
    GridLayout,
    GridPlacement,
    GridPlacementError,
    LayoutEngine,
    LayoutNode,
    Size,
    StackLayout,
    Thickness,
    Vector2,
)


# ============================================================================
# Layout Tree Tests
# ============================================================================

class TestLayoutNode:
    """Tests for LayoutNode state and notifications."""

    def test_new_node_is_dirty(self, node) -> None:
        """Test nodes start layout-dirty."""
        assert node("n").is_layout_dirty is True

    def test_tree_relations(self, canvas_tree: dict) -> None:
        """Test parent/children/root links."""
        root, panel, leaf = canvas_tree["root"], canvas_tree["panel"], canvas_tree["leaf"]
        assert panel.parent is root
        assert leaf.root is root
        assert root.is_root and not leaf.is_root
        assert list(root.walk()) == [root, panel, leaf]

    def test_reparenting(self, node) -> None:
        """Test adding a child detaches it from its previous parent."""
        first, second, child = node("first"), node("second"), node("child")
        first.add_child(child)
        second.add_child(child)
        assert first.children == []
        assert child.parent is second

    def test_structure_change_marks_dirty(self, node) -> None:
        """Test adding and removing children marks the parent dirty."""
        parent = node("parent")
        child = parent.add_child(node("child"))
        parent.clear_layout_dirty()

        parent.remove_child(child)
        assert parent.is_layout_dirty is True
        assert child.parent is None

    def test_content_area(self, node) -> None:
        """Test the content area removes padding and never goes negative."""
        n = node("n", 100, 50, padding=Thickness(left=10, top=5, right=20, bottom=5))
        assert n.content_area == Size(70, 40)
        n.padding = Thickness.uniform(80)
        assert n.content_area == Size(0, 0)

    def test_canvas_parent_ignores_child_resize(self, node) -> None:
        """Test an empty dirty mask does not propagate child changes."""
        parent = node("parent", layout_engine=CanvasLayout.singleton())
        child = parent.add_child(node("child", 10, 10))
        parent.clear_layout_dirty()

        child.actual_size = Size(20, 20)
        assert parent.is_layout_dirty is False
        assert child.is_layout_dirty is True

    def test_unmasked_property_does_not_propagate(self, node) -> None:
        """Test a stack parent ignores margin changes outside its mask."""
        parent = node("parent", layout_engine=StackLayout.vertical())
        child = parent.add_child(node("child", 10, 10))
        parent.clear_layout_dirty()

        child.margin = Thickness.uniform(2)
        assert parent.is_layout_dirty is False

    def test_changing_strategy_marks_dirty(self, node) -> None:
        """Test attaching a new strategy requires a relayout."""
        n = node("n")
        n.clear_layout_dirty()
        n.layout_engine = StackLayout.horizontal()
        assert n.is_layout_dirty is True

    def test_external_data(self, node) -> None:
        """Test the per-node metadata store."""
        n = node("n")
        assert n.get_external_data("grid") is None
        assert n.get_external_data("grid", "fallback") == "fallback"
        n.add_external_data("grid", None)
        assert n.remove_external_data("grid") is True
        assert n.remove_external_data("grid") is False


# ============================================================================
# Layout Engine Tests
# ============================================================================

class TestLayoutEngine:
    """Tests for the LayoutEngine tree walker."""

    def test_canvas_then_stack_scenario(self, stack_tree: dict) -> None:
        """Test the canvas -> horizontal stack end-to-end scenario."""
        result = LayoutEngine().update(stack_tree["root"])

        assert result.success
        a, b = stack_tree["a"], stack_tree["b"]
        assert a.layout_area_pos == Vector2(0, 0)
        assert b.layout_area_pos == Vector2(50, 0)
        assert a.layout_area.height == 40
        assert b.layout_area.height == 40
        assert stack_tree["panel"].layout_area == Size(800, 600)

    def test_all_nodes_clean_after_pass(self, stack_tree: dict) -> None:
        """Test every node's dirty flag is cleared."""
        LayoutEngine().update(stack_tree["root"])
        assert not any(n.is_layout_dirty for n in stack_tree["root"].walk())

    def test_second_pass_is_noop(self, stack_tree: dict) -> None:
        """Test a pass over a clean tree updates nothing."""
        engine = LayoutEngine()
        engine.update(stack_tree["root"])
        result = engine.update(stack_tree["root"])
        assert result.updated == []
        assert result.success

    def test_incremental_update(self, stack_tree: dict) -> None:
        """Test only the invalidated panel is laid out again."""
        engine = LayoutEngine()
        engine.update(stack_tree["root"])

        stack_tree["a"].actual_size = Size(70, 20)
        result = engine.update(stack_tree["root"])

        assert stack_tree["panel"] in result.updated
        assert stack_tree["root"] not in result.updated
        assert stack_tree["b"].layout_area_pos == Vector2(70, 0)

    def test_default_strategy(self, node) -> None:
        """Test nodes without a strategy use the configured default."""
        root = node("root", 100, 100)
        a = root.add_child(node("a", 10, 30))
        b = root.add_child(node("b", 20, 5))

        LayoutEngine(default_strategy=StackLayout.vertical()).update(root)

        assert b.layout_area_pos == Vector2(0, 30)
        assert a.layout_area == Size(20, 30)

    def test_default_strategy_child_resize(self, node) -> None:
        """Test resizing a child relayouts a parent using the default strategy."""
        root = node("root", 100, 100)
        a = root.add_child(node("a", 10, 30))
        b = root.add_child(node("b", 10, 20))
        engine = LayoutEngine(default_strategy=StackLayout.vertical())
        engine.update(root)

        a.actual_size = Size(10, 50)
        assert root.is_layout_dirty is True

        result = engine.update(root)
        assert root in result.updated
        assert b.layout_area_pos == Vector2(0, 50)

    def test_failure_is_isolated(self, node, caplog) -> None:
        """Test one malformed grid does not abort the rest of the tree."""
        root = node("root", 800, 600)
        broken = root.add_child(node("broken", 200, 200, layout_engine=GridLayout(rows=["1*"])))
        orphan = broken.add_child(node("orphan"))
        below = orphan.add_child(node("below"))
        healthy = root.add_child(node("healthy", 200, 200, layout_engine=StackLayout.horizontal()))
        item = healthy.add_child(node("item", 40, 10))

        with caplog.at_level(logging.ERROR):
            result = LayoutEngine().update(root)

        assert not result.success
        failure = result.get_failure(broken)
        assert isinstance(failure.error, GridPlacementError)
        assert "'orphan'" in failure.message
        assert broken.is_layout_dirty is True
        assert result.skipped == [orphan, below]
        assert item.layout_area == Size(40, 10)
        assert healthy.is_layout_dirty is False
        assert "broken" in caplog.text

    def test_unexpected_error_is_isolated(self, node, caplog) -> None:
        """Test a strategy raising a non-layout error fails only its node."""

        class DividingLayout(BaseLayoutStrategy):
            name = "dividing"

            def _layout_children(self, node: LayoutNode) -> None:
                for child in node.children:
                    child.layout_area = Size(child.actual_size.width / 0, 0)

        root = node("root", 800, 600)
        broken = root.add_child(node("broken", 200, 200, layout_engine=DividingLayout()))
        broken.add_child(node("part", 10, 10))
        healthy = root.add_child(node("healthy", 200, 200, layout_engine=StackLayout.horizontal()))
        item = healthy.add_child(node("item", 40, 10))

        with caplog.at_level(logging.ERROR):
            result = LayoutEngine().update(root)

        assert not result.success
        assert isinstance(result.get_failure(broken).error, ZeroDivisionError)
        assert broken.is_layout_dirty is True
        assert item.layout_area == Size(40, 10)
        assert healthy.is_layout_dirty is False
        assert "broken" in caplog.text

    def test_failed_node_retried_next_pass(self, node) -> None:
        """Test a fixed node is laid out on the following pass."""
        root = node("root", 300, 300)
        grid = root.add_child(node("grid", 300, 300, layout_engine=GridLayout(columns=["1*", "2*"])))
        child = grid.add_child(node("child"))
        engine = LayoutEngine()

        assert not engine.update(root).success

        GridPlacement.attach(child, 0, 1)
        result = engine.update(root)

        assert result.success
        assert grid in result.updated
        assert child.layout_area == Size(200, 300)
        assert child.layout_area_pos == Vector2(100, 0)

    def test_nested_strategies(self, node) -> None:
        """Test a grid inside a stack inside the canvas."""
        root = node("root", 1000, 1000)
        column = root.add_child(node("column", 300, 400, layout_engine=StackLayout.vertical()))
        header = column.add_child(node("header", 300, 50))
        form = column.add_child(node(
            "form", 300, 200,
            layout_engine=GridLayout(rows=["auto", "1*"], columns=["100", "1*"]),
        ))
        label = form.add_child(node("label", 80, 24))
        GridPlacement.attach(label, 0, 0)
        field = form.add_child(node("field", 10, 10))
        GridPlacement.attach(field, 1, 1)

        assert LayoutEngine().update(root).success

        assert form.layout_area_pos == Vector2(0, 50)
        assert header.layout_area == Size(300, 50)
        assert label.layout_area == Size(100, 24)
        assert field.layout_area_pos == Vector2(100, 24)
        assert field.layout_area == Size(200, 176)
