"""
base_strategy.py — Abstract base class for layout strategies.

All layout strategies inherit from BaseLayoutStrategy and implement
_layout_children() to assign the layout area (and, for authoritative
strategies, the position) of every direct child of a node.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

from ..node import LayoutNode, PropertyFlag

logger = logging.getLogger(__name__)


class BaseLayoutStrategy(ABC):
    """
    Abstract base class for layout computation strategies.

    A strategy instance may be shared by many nodes. Once locked, its
    configuration can no longer change: setters go through _set_config(),
    which drops the mutation instead of raising so that shared instances stay
    safe to hand out.
    """

    name = "base"

    def __init__(self, dirty_mask: PropertyFlag = PropertyFlag.NONE):
        self._dirty_mask = PropertyFlag(dirty_mask)
        self._locked = False

    def update_layout(self, node: LayoutNode) -> None:
        """
        Recompute the layout of node's direct children.

        Does nothing if the node is not layout-dirty. The dirty flag is only
        cleared once the children were laid out; if _layout_children() raises,
        the flag stays set and the error propagates to the caller.
        """
        if not node.is_layout_dirty:
            return

        self._layout_children(node)
        node.clear_layout_dirty()

    @abstractmethod
    def _layout_children(self, node: LayoutNode) -> None:
        """Assign layout_area / layout_area_pos of each child of node."""
        pass

    @property
    def allows_child_positioning(self) -> bool:
        """Whether children may set their own position under this strategy."""
        return False

    @property
    def dirty_on_property_changed_mask(self) -> PropertyFlag:
        """Child property changes that invalidate the owning node's layout."""
        return self._dirty_mask

    # =========================================================================
    # LOCKING
    # =========================================================================

    def is_locked(self) -> bool:
        return self._locked

    def lock(self) -> bool:
        """Freeze the configuration. Returns False if already locked."""
        if self._locked:
            return False
        self._locked = True
        return True

    def _check_unlocked(self, setting: str) -> bool:
        """Whether the configuration may change; logs the denied change otherwise."""
        if self._locked:
            logger.warning(f"Ignoring change of {setting} on locked {type(self).__name__}")
            return False
        return True

    def _set_config(self, attr: str, value: Any) -> bool:
        """Set a configuration field unless locked. Returns whether it was set."""
        if not self._check_unlocked(attr.lstrip("_")):
            return False
        setattr(self, attr, value)
        return True

    def __repr__(self) -> str:
        state = "locked" if self._locked else "unlocked"
        return f"{type(self).__name__}({state})"
