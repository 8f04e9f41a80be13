"""
stack_strategy.py — Vertical/horizontal stacking layout strategy.

Used for: toolbars, lists, any panel whose children follow one another.
Pattern: children placed one after the other along the main axis, all sharing
the largest cross-axis extent.
"""

from enum import Enum

from .base_strategy import BaseLayoutStrategy
from ..geometry import Vector2
from ..node import LayoutNode, PropertyFlag


class Orientation(Enum):
    """Main axis of a stack."""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class StackLayout(BaseLayoutStrategy):
    """
    Stack layout strategy.

    Key features:
    - Children stacked in tree order starting at 0 on the main axis
    - Uniform cross-axis extent (the largest margin area of all children)
    - Shared locked instances through StackLayout.horizontal() / vertical()
    """

    name = "stack"

    def __init__(self, orientation: Orientation = Orientation.HORIZONTAL):
        super().__init__(dirty_mask=PropertyFlag.SIZE)
        self._orientation = Orientation(orientation)

    @classmethod
    def horizontal(cls) -> "StackLayout":
        """The shared, locked horizontal stack."""
        return HORIZONTAL_STACK

    @classmethod
    def vertical(cls) -> "StackLayout":
        """The shared, locked vertical stack."""
        return VERTICAL_STACK

    @property
    def orientation(self) -> Orientation:
        return self._orientation

    @orientation.setter
    def orientation(self, value: Orientation) -> None:
        self._set_config("_orientation", Orientation(value))

    @property
    def is_horizontal(self) -> bool:
        return self._orientation == Orientation.HORIZONTAL

    @is_horizontal.setter
    def is_horizontal(self, value: bool) -> None:
        self.orientation = Orientation.HORIZONTAL if value else Orientation.VERTICAL

    def _layout_children(self, node: LayoutNode) -> None:
        h = self.is_horizontal

        # Measure: margin areas and the largest cross extent
        max_cross = 0.0
        for child in node.children:
            child.layout_area = child.margin.compute_area(child.actual_size, child.layout_area)
            max_cross = max(max_cross, child.layout_area.extent(not h))

        # Place: advance along the main axis, share the cross extent
        x = 0.0
        y = 0.0
        for child in node.children:
            child.layout_area_pos = Vector2(x, y)
            area = child.layout_area

            if h:
                x += area.width
                child.layout_area = area.with_height(max_cross)
            else:
                y += area.height
                child.layout_area = area.with_width(max_cross)

    def __repr__(self) -> str:
        state = "locked" if self.is_locked() else "unlocked"
        return f"StackLayout({self._orientation.value}, {state})"


HORIZONTAL_STACK = StackLayout(Orientation.HORIZONTAL)
HORIZONTAL_STACK.lock()

VERTICAL_STACK = StackLayout(Orientation.VERTICAL)
VERTICAL_STACK.lock()
