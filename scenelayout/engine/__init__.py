# Scene Layout Engine

from .geometry import (
    Size,
    Vector2,
    Thickness,
    clamp,
)

from .node import (
    LayoutNode,
    PropertyFlag,
    NodeRole,
    classify_node,
)

from .errors import (
    LayoutError,
    DimensionParseError,
    GridPlacementError,
)

from .dimensions import (
    DimensionKind,
    DimensionDefinition,
    parse_dimension,
    parse_dimensions,
)

from .layout_strategies import (
    BaseLayoutStrategy,
    CanvasLayout,
    StackLayout,
    Orientation,
    GridLayout,
    GridPlacement,
    GridSettings,
    CellInfo,
    GRID_PLACEMENT_KEY,
    get_strategy,
)

from .layout_engine import (
    LayoutEngine,
    LayoutPassResult,
    NodeFailure,
)

__all__ = [
    # Geometry
    'Size',
    'Vector2',
    'Thickness',
    'clamp',
    # Tree
    'LayoutNode',
    'PropertyFlag',
    'NodeRole',
    'classify_node',
    # Errors
    'LayoutError',
    'DimensionParseError',
    'GridPlacementError',
    # Grid dimensions
    'DimensionKind',
    'DimensionDefinition',
    'parse_dimension',
    'parse_dimensions',
    # Strategies
    'BaseLayoutStrategy',
    'CanvasLayout',
    'StackLayout',
    'Orientation',
    'GridLayout',
    'GridPlacement',
    'GridSettings',
    'CellInfo',
    'GRID_PLACEMENT_KEY',
    'get_strategy',
    # Orchestrator
    'LayoutEngine',
    'LayoutPassResult',
    'NodeFailure',
]
