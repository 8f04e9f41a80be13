"""
grid_strategy.py — Row/column grid layout strategy.

Used for: forms, dashboards, any panel with explicit rows and columns.
Pattern: children placed in cells by their GridPlacement, tracks sized in
pixels, proportional stars or by content (auto).
"""

import logging
from dataclasses import dataclass, field, replace
from itertools import accumulate
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .base_strategy import BaseLayoutStrategy
from ...config import LayoutSettings
from ..dimensions import DimensionDefinition, DimensionKind, parse_dimensions
from ..errors import GridPlacementError
from ..geometry import Size, Vector2
from ..node import LayoutNode, PropertyFlag

logger = logging.getLogger(__name__)

# External data key holding a child's GridPlacement
GRID_PLACEMENT_KEY = "grid"


# =============================================================================
# SETTINGS MODELS
# =============================================================================

class GridPlacement(BaseModel):
    """Cell of a grid child, stored on the child under GRID_PLACEMENT_KEY."""

    model_config = ConfigDict(frozen=True)

    row: int = Field(ge=0, description="First row occupied")
    column: int = Field(ge=0, description="First column occupied")
    row_span: int = Field(default=1, ge=1, description="Number of rows occupied")
    column_span: int = Field(default=1, ge=1, description="Number of columns occupied")

    @property
    def last_row(self) -> int:
        return self.row + self.row_span - 1

    @property
    def last_column(self) -> int:
        return self.column + self.column_span - 1

    @classmethod
    def attach(
        cls,
        node: LayoutNode,
        row: int,
        column: int,
        row_span: int = 1,
        column_span: int = 1,
    ) -> "GridPlacement":
        """Create a placement and store it on node."""
        placement = cls(row=row, column=column, row_span=row_span, column_span=column_span)
        node.add_external_data(GRID_PLACEMENT_KEY, placement)
        return placement


class RowSetting(BaseModel):
    """One row of a grid settings document."""
    height: str


class ColumnSetting(BaseModel):
    """One column of a grid settings document."""
    width: str


class GridSettings(BaseModel):
    """Settings document accepted by GridLayout.from_settings()."""
    rows: List[RowSetting] = Field(default_factory=list)
    columns: List[ColumnSetting] = Field(default_factory=list)


# =============================================================================
# CELL TABLE
# =============================================================================

@dataclass
class CellInfo:
    """A (row, column) slot of the cell table and the children claiming it."""
    row: int
    column: int
    children: List[LayoutNode] = field(default_factory=list)

    @property
    def is_shared(self) -> bool:
        return len(self.children) > 1


# =============================================================================
# GRID LAYOUT
# =============================================================================

class GridLayout(BaseLayoutStrategy):
    """
    Grid layout strategy for row/column arrangements.

    Key features:
    - Pixel, star (proportional) and auto (content sized) tracks
    - Row and column spans
    - Cell table built once and cached until reset_cells()

    The cell table remembers the children present when it was first built, so
    an instance must not be shared by nodes with different children.
    """

    name = "grid"

    def __init__(
        self,
        rows: Optional[Sequence[str]] = None,
        columns: Optional[Sequence[str]] = None,
        settings: Optional[LayoutSettings] = None,
    ):
        super().__init__(dirty_mask=PropertyFlag.SIZE)
        self._settings = settings
        self._rows = self._parse_tracks(rows)
        self._columns = self._parse_tracks(columns)

        self._cells: Optional[List[List[CellInfo]]] = None
        self._placements: List[Tuple[LayoutNode, GridPlacement]] = []

    @classmethod
    def from_settings(
        cls,
        grid_settings: Union[GridSettings, Dict[str, Any]],
        settings: Optional[LayoutSettings] = None,
    ) -> "GridLayout":
        """
        Build a grid from a settings document.

        Example:
            GridLayout.from_settings({
                "rows": [{"height": "auto"}, {"height": "1*"}],
                "columns": [{"width": "100"}, {"width": "2*"}],
            })
        """
        if not isinstance(grid_settings, GridSettings):
            grid_settings = GridSettings.model_validate(grid_settings)
        return cls(
            rows=[r.height for r in grid_settings.rows],
            columns=[c.width for c in grid_settings.columns],
            settings=settings,
        )

    # =========================================================================
    # CONFIGURATION
    # =========================================================================

    @property
    def row_definitions(self) -> List[DimensionDefinition]:
        return [replace(d) for d in self._rows]

    @property
    def column_definitions(self) -> List[DimensionDefinition]:
        return [replace(d) for d in self._columns]

    def set_rows(self, rows: Sequence[str]) -> bool:
        """Replace the row definitions. Dropped if locked."""
        if not self._check_unlocked("rows"):
            return False
        self._rows = self._parse_tracks(rows)
        self.reset_cells()
        return True

    def set_columns(self, columns: Sequence[str]) -> bool:
        """Replace the column definitions. Dropped if locked."""
        if not self._check_unlocked("columns"):
            return False
        self._columns = self._parse_tracks(columns)
        self.reset_cells()
        return True

    def _parse_tracks(self, specs: Optional[Sequence[str]]) -> List[DimensionDefinition]:
        tracks = parse_dimensions(specs, self._settings)
        if not tracks:
            # No definitions: one track taking the whole extent
            tracks = [DimensionDefinition(kind=DimensionKind.STARS, value=1.0)]
        return tracks

    # =========================================================================
    # CELL TABLE
    # =========================================================================

    @property
    def cells(self) -> Optional[List[List[CellInfo]]]:
        """The cached cell table, None until the first layout pass."""
        return self._cells

    @property
    def collisions(self) -> List[CellInfo]:
        """Cells claimed by more than one child."""
        if self._cells is None:
            return []
        return [cell for row in self._cells for cell in row if cell.is_shared]

    def reset_cells(self) -> None:
        """Forget the cell table; the next layout pass rebuilds it."""
        self._cells = None
        self._placements = []

    def get_cell(self, row: int, column: int) -> Optional[CellInfo]:
        if self._cells is None:
            return None
        return self._cells[row][column]

    def _update_cells_list(self, node: LayoutNode) -> None:
        if self._cells is not None:
            return

        num_rows = len(self._rows)
        num_cols = len(self._columns)
        cells = [[CellInfo(row=i, column=j) for j in range(num_cols)] for i in range(num_rows)]
        placements = []

        for child in node.children:
            placement = self._get_placement(child, node)

            if placement.last_row >= num_rows or placement.last_column >= num_cols:
                raise GridPlacementError(
                    f"Child {child.name!r} of {node.name!r} spans rows "
                    f"{placement.row}-{placement.last_row}, columns "
                    f"{placement.column}-{placement.last_column} outside a "
                    f"{num_rows}x{num_cols} grid"
                )

            # A spanning child claims every cell it covers
            for i in range(placement.row, placement.last_row + 1):
                for j in range(placement.column, placement.last_column + 1):
                    cell = cells[i][j]
                    if cell.children:
                        logger.debug(
                            f"Grid cell ({i}, {j}) of {node.name!r} shared by "
                            f"{cell.children[0].name!r} and {child.name!r}"
                        )
                    cell.children.append(child)

            placements.append((child, placement))

        self._cells = cells
        self._placements = placements

    @staticmethod
    def _get_placement(child: LayoutNode, node: LayoutNode) -> GridPlacement:
        data = child.get_external_data(GRID_PLACEMENT_KEY)
        if isinstance(data, GridPlacement):
            return data
        if isinstance(data, dict):
            try:
                return GridPlacement.model_validate(data)
            except ValidationError as e:
                raise GridPlacementError(
                    f"Child {child.name!r} of {node.name!r} has an invalid placement: {e}"
                ) from e
        raise GridPlacementError(
            f"Child {child.name!r} of {node.name!r} has no '{GRID_PLACEMENT_KEY}' placement"
        )

    # =========================================================================
    # SIZING
    # =========================================================================

    def _layout_children(self, node: LayoutNode) -> None:
        self._update_cells_list(node)

        area = node.content_area
        row_heights = self._update_constants(self._rows, area.height, horizontal=False)
        col_widths = self._update_constants(self._columns, area.width, horizontal=True)

        row_offsets = [0.0] + list(accumulate(row_heights))
        col_offsets = [0.0] + list(accumulate(col_widths))

        for child, p in self._placements:
            child.layout_area_pos = Vector2(col_offsets[p.column], row_offsets[p.row])
            child.layout_area = Size(
                col_offsets[p.last_column + 1] - col_offsets[p.column],
                row_offsets[p.last_row + 1] - row_offsets[p.row],
            )

    def _update_constants(
        self,
        tracks: List[DimensionDefinition],
        extent: float,
        horizontal: bool,
    ) -> List[float]:
        """Resolve the pixel length of every track along one axis."""
        for index, track in enumerate(tracks):
            if track.is_auto:
                track.resolved_pixels = self._auto_extent(index, horizontal)

        # First pass, stars/pixel total count
        total_stars = 0.0
        total_pixels = 0.0
        for track in tracks:
            if track.is_stars:
                total_stars += track.value
            else:
                total_pixels += track.resolved_pixels

        # Second pass, share what is left between star tracks
        remaining = max(0.0, extent - total_pixels)
        for track in tracks:
            if track.is_stars:
                if total_stars > 0:
                    track.resolved_pixels = remaining * track.value / total_stars
                else:
                    track.resolved_pixels = 0.0

        return [track.resolved_pixels for track in tracks]

    def _auto_extent(self, index: int, horizontal: bool) -> float:
        """Largest margin area of the non-spanning children in a track."""
        extent = 0.0
        for child, p in self._placements:
            start, span = (p.column, p.column_span) if horizontal else (p.row, p.row_span)
            if start != index or span != 1:
                continue
            area = child.margin.compute_area(child.actual_size, child.layout_area)
            extent = max(extent, area.extent(horizontal))
        return extent

    def __repr__(self) -> str:
        state = "locked" if self.is_locked() else "unlocked"
        return f"GridLayout({len(self._rows)}x{len(self._columns)}, {state})"
