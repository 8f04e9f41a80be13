"""scenelayout — Incremental layout engine for retained 2D node trees."""

from scenelayout.config import LayoutSettings, configure_logging, get_settings
from scenelayout.engine import (
    CanvasLayout,
    GridLayout,
    GridPlacement,
    LayoutEngine,
    LayoutError,
    LayoutNode,
    Orientation,
    Size,
    StackLayout,
    Thickness,
    Vector2,
)

__version__ = "0.1.0"

__all__ = [
    "LayoutSettings",
    "configure_logging",
    "get_settings",
    "CanvasLayout",
    "GridLayout",
    "GridPlacement",
    "LayoutEngine",
    "LayoutError",
    "LayoutNode",
    "Orientation",
    "Size",
    "StackLayout",
    "Thickness",
    "Vector2",
]
