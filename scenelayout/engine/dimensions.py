"""
dimensions.py — Grid row/column size definitions.

A size string follows one of three grammars (case-insensitive, surrounding
whitespace ignored):

- "auto"      sized by the content of the track
- "<number>*" proportional share of the remaining space, "*" alone weighs
              the configured default star weight
- "<number>"  absolute length in pixels
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from ..config import LayoutSettings, get_settings
from .errors import DimensionParseError

logger = logging.getLogger(__name__)


class DimensionKind(Enum):
    """Unit kind of a grid row or column."""
    PIXELS = "pixels"
    STARS = "stars"
    AUTO = "auto"


@dataclass
class DimensionDefinition:
    """
    A parsed row or column size.

    ``value`` is the star weight for STARS and the length for PIXELS (unused
    for AUTO). ``resolved_pixels`` is the final track length; it is known at
    parse time for PIXELS and filled by the grid layout pass otherwise.
    """
    kind: DimensionKind
    value: Optional[float] = None
    resolved_pixels: Optional[float] = None

    @property
    def is_auto(self) -> bool:
        return self.kind == DimensionKind.AUTO

    @property
    def is_stars(self) -> bool:
        return self.kind == DimensionKind.STARS

    @property
    def is_pixels(self) -> bool:
        return self.kind == DimensionKind.PIXELS


def parse_dimension(spec: str, settings: Optional[LayoutSettings] = None) -> DimensionDefinition:
    """
    Parse a size string into a DimensionDefinition.

    Raises:
        DimensionParseError: if the number is malformed or negative and the
            settings' invalid_dimension_policy is "reject"
    """
    settings = settings or get_settings()
    text = str(spec).strip().lower()

    if text.startswith("auto"):
        return DimensionDefinition(kind=DimensionKind.AUTO)

    if "*" in text:
        weight_text = text[:text.index("*")].strip()
        if not weight_text:
            weight = settings.default_star_weight
        else:
            weight = _parse_number(weight_text, spec, settings)
        return DimensionDefinition(kind=DimensionKind.STARS, value=weight)

    length = _parse_number(text, spec, settings)
    return DimensionDefinition(kind=DimensionKind.PIXELS, value=length, resolved_pixels=length)


def parse_dimensions(specs, settings: Optional[LayoutSettings] = None) -> List[DimensionDefinition]:
    """Parse an ordered sequence of size strings."""
    return [parse_dimension(spec, settings) for spec in specs or []]


def _parse_number(text: str, spec: str, settings: LayoutSettings) -> float:
    try:
        number = float(text)
    except ValueError:
        number = None

    if number is not None and math.isfinite(number) and number >= 0:
        return number

    if settings.invalid_dimension_policy == "zero":
        logger.warning(f"Invalid grid dimension {spec!r}, using 0")
        return 0.0

    raise DimensionParseError(
        f"Invalid grid dimension {spec!r}: expected 'auto', '<number>*' or '<number>'"
    )
