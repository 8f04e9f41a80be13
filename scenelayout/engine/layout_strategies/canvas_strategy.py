"""
canvas_strategy.py — Free-form canvas layout strategy.

Used for: the tree root and any node whose children carry explicit coordinates.
Pattern: available area cascades down the tree, children keep their own position.
"""

from .base_strategy import BaseLayoutStrategy
from ..node import LayoutNode, NodeRole, classify_node


class CanvasLayout(BaseLayoutStrategy):
    """
    Canvas layout: a very simple (no) layout computing.

    The root and its direct children get the root's size as layout area;
    deeper descendants get the content area of their parent. No position is
    assigned, children are allowed to position themselves.
    """

    name = "canvas"

    @classmethod
    def singleton(cls) -> "CanvasLayout":
        """The shared, locked canvas layout."""
        return CANVAS_LAYOUT

    def _layout_children(self, node: LayoutNode) -> None:
        # The root has no parent strategy, it sizes itself here
        if node.is_root:
            self._update_area(node)

        for child in node.children:
            self._update_area(child)

    def _update_area(self, node: LayoutNode) -> None:
        role = classify_node(node)

        if role == NodeRole.IS_ROOT:
            node.layout_area = node.actual_size
        elif role == NodeRole.DIRECT_CHILD_OF_ROOT:
            node.layout_area = node.root.actual_size
        else:
            node.layout_area = node.parent.content_area

    @property
    def allows_child_positioning(self) -> bool:
        return True


CANVAS_LAYOUT = CanvasLayout()
CANVAS_LAYOUT.lock()
