"""
layout_strategies — Pluggable layout computation strategies.

This package contains the three layout strategies a node can be given:

- CanvasLayout: Area cascading only, children position themselves
- StackLayout: Horizontal/vertical stacking with uniform cross extent
- GridLayout: Rows/columns sized in pixels, stars or auto

Each strategy implements the BaseLayoutStrategy interface and is attached to
a node through LayoutNode.layout_engine.
"""

from .base_strategy import BaseLayoutStrategy
from .canvas_strategy import CanvasLayout, CANVAS_LAYOUT
from .stack_strategy import StackLayout, Orientation, HORIZONTAL_STACK, VERTICAL_STACK
from .grid_strategy import (
    GridLayout,
    GridPlacement,
    GridSettings,
    RowSetting,
    ColumnSetting,
    CellInfo,
    GRID_PLACEMENT_KEY,
)

__all__ = [
    'BaseLayoutStrategy',
    'CanvasLayout',
    'CANVAS_LAYOUT',
    'StackLayout',
    'Orientation',
    'HORIZONTAL_STACK',
    'VERTICAL_STACK',
    'GridLayout',
    'GridPlacement',
    'GridSettings',
    'RowSetting',
    'ColumnSetting',
    'CellInfo',
    'GRID_PLACEMENT_KEY',
    'get_strategy',
    'STRATEGIES',
]


# Shared strategy instances for lookup by name
STRATEGIES = {
    'canvas': CANVAS_LAYOUT,
    'horizontal': HORIZONTAL_STACK,
    'vertical': VERTICAL_STACK,
}


def get_strategy(strategy_name: str) -> BaseLayoutStrategy:
    """Get a shared strategy instance by name."""
    strategy = STRATEGIES.get(strategy_name.lower())
    if not strategy:
        raise ValueError(f"Unknown strategy: {strategy_name}. Available: {list(STRATEGIES.keys())}")
    return strategy
