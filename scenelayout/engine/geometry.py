"""
geometry.py — Value types shared by the layout tree and strategies.

All sizes and positions are in pixels. These types are immutable: strategies
never mutate a Size in place, they assign a new one.
"""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Size:
    """Width/height pair."""
    width: float = 0.0
    height: float = 0.0

    def with_width(self, width: float) -> "Size":
        return replace(self, width=width)

    def with_height(self, height: float) -> "Size":
        return replace(self, height=height)

    def extent(self, horizontal: bool) -> float:
        """Extent along the horizontal (width) or vertical (height) axis."""
        return self.width if horizontal else self.height


@dataclass(frozen=True)
class Vector2:
    """Position in the parent's layout space."""
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Thickness:
    """
    Spacing around a rectangle, one value per side.

    Used as a margin (space outside a node, added to its intrinsic size) and
    as a padding (space inside a node, removed from the area given to its
    children).
    """
    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    @classmethod
    def uniform(cls, value: float) -> "Thickness":
        return cls(value, value, value, value)

    @property
    def horizontal(self) -> float:
        return self.left + self.right

    @property
    def vertical(self) -> float:
        return self.top + self.bottom

    def compute_area(self, actual_size: Size, layout_area: Size) -> Size:
        """
        Compute the margin area of a node.

        The result is the node's intrinsic size grown by this thickness on
        every side. ``layout_area`` is the outer area currently allotted to the
        node; it bounds nothing here but is part of the contract so alignment
        aware margins can use it.
        """
        return Size(
            actual_size.width + self.horizontal,
            actual_size.height + self.vertical,
        )

    def shrink(self, size: Size) -> Size:
        """Inner area left once this thickness is removed from ``size``."""
        return Size(
            clamp(size.width - self.horizontal, 0.0, size.width),
            clamp(size.height - self.vertical, 0.0, size.height),
        )


ZERO_SIZE = Size()
ORIGIN = Vector2()
NO_THICKNESS = Thickness()


def clamp(value: float, min_val: float, max_val: float) -> float:
    """Clamp a value between min and max."""
    return max(min_val, min(max_val, value))
