"""Errors raised during a layout pass."""


class LayoutError(ValueError):
    """A node could not be laid out; its dirty flag is left set."""


class DimensionParseError(LayoutError):
    """A grid row/column size string is not a valid dimension."""


class GridPlacementError(LayoutError):
    """A grid child has no placement, or its placement falls outside the grid."""
