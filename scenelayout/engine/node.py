"""
node.py — The layout tree.

LayoutNode is the data model every strategy reads from and writes to. The
scene graph owns node lifetime and tree shape; strategies only ever write
``layout_area`` / ``layout_area_pos`` of the children of the node they lay
out, and clear that node's dirty flag.
"""

from enum import Enum, IntFlag
from typing import Any, Dict, List, Optional

from .geometry import Size, Vector2, Thickness, ZERO_SIZE, ORIGIN, NO_THICKNESS


class PropertyFlag(IntFlag):
    """Node properties whose change can invalidate the parent's layout."""
    NONE = 0
    SIZE = 1
    POSITION = 2
    MARGIN = 4
    PADDING = 8


class NodeRole(Enum):
    """Structural position of a node in its tree."""
    IS_ROOT = "is_root"
    DIRECT_CHILD_OF_ROOT = "direct_child_of_root"
    DESCENDANT = "descendant"


def classify_node(node: "LayoutNode") -> NodeRole:
    """Derive a node's structural role from its tree relations."""
    if node.parent is None:
        return NodeRole.IS_ROOT
    if node.parent.parent is None:
        return NodeRole.DIRECT_CHILD_OF_ROOT
    return NodeRole.DESCENDANT


class LayoutNode:
    """
    A node of the retained 2D tree taking part in layout.

    Attributes:
        name: Identifier used in logs and error messages
        layout_area: Size allotted by the parent's strategy
        layout_area_pos: Position within the parent's layout area
        layout_engine: Strategy laying out this node's children (None means
            the walker's default strategy)
        default_layout_engine: Strategy the walker used for this node when
            layout_engine is None
    """

    def __init__(
        self,
        name: str = "",
        actual_size: Size = ZERO_SIZE,
        margin: Thickness = NO_THICKNESS,
        padding: Thickness = NO_THICKNESS,
        layout_engine=None,
    ):
        self.name = name
        self.parent: Optional["LayoutNode"] = None
        self.children: List["LayoutNode"] = []
        self.layout_area: Size = ZERO_SIZE
        self.layout_area_pos: Vector2 = ORIGIN
        self._actual_size = actual_size
        self._margin = margin
        self._padding = padding
        self._layout_engine = layout_engine
        self.default_layout_engine = None
        self._layout_dirty = True
        self._external_data: Dict[str, Any] = {}

    def __repr__(self) -> str:
        return f"LayoutNode({self.name!r})"

    # =========================================================================
    # TREE
    # =========================================================================

    def add_child(self, child: "LayoutNode") -> "LayoutNode":
        """Append a child (detaching it from any previous parent)."""
        if child.parent is not None:
            child.parent.remove_child(child)
        child.parent = self
        self.children.append(child)
        self.mark_layout_dirty()
        return child

    def remove_child(self, child: "LayoutNode") -> None:
        self.children.remove(child)
        child.parent = None
        self.mark_layout_dirty()

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def root(self) -> "LayoutNode":
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def walk(self):
        """Yield this node and its descendants, parents before children."""
        yield self
        for child in self.children:
            yield from child.walk()

    # =========================================================================
    # SIZES
    # =========================================================================

    @property
    def actual_size(self) -> Size:
        return self._actual_size

    @actual_size.setter
    def actual_size(self, value: Size) -> None:
        if value != self._actual_size:
            self._actual_size = value
            self._on_property_changed(PropertyFlag.SIZE)
            # Content area, hence the children's available area, changed
            self.mark_layout_dirty()

    @property
    def margin(self) -> Thickness:
        return self._margin

    @margin.setter
    def margin(self, value: Thickness) -> None:
        if value != self._margin:
            self._margin = value
            self._on_property_changed(PropertyFlag.MARGIN)

    @property
    def padding(self) -> Thickness:
        return self._padding

    @padding.setter
    def padding(self, value: Thickness) -> None:
        if value != self._padding:
            self._padding = value
            self._on_property_changed(PropertyFlag.PADDING)
            # Children's available area changed
            self.mark_layout_dirty()

    @property
    def content_area(self) -> Size:
        """Area available to this node's children."""
        return self._padding.shrink(self._actual_size)

    # =========================================================================
    # LAYOUT STATE
    # =========================================================================

    @property
    def layout_engine(self):
        return self._layout_engine

    @layout_engine.setter
    def layout_engine(self, strategy) -> None:
        if strategy is not self._layout_engine:
            self._layout_engine = strategy
            self.mark_layout_dirty()

    @property
    def effective_layout_engine(self):
        """Strategy actually laying out this node's children."""
        return self._layout_engine or self.default_layout_engine

    @property
    def is_layout_dirty(self) -> bool:
        return self._layout_dirty

    def mark_layout_dirty(self) -> None:
        self._layout_dirty = True

    def clear_layout_dirty(self) -> None:
        self._layout_dirty = False

    def _on_property_changed(self, flag: PropertyFlag) -> None:
        """Mark the parent dirty if its strategy depends on this property."""
        parent = self.parent
        strategy = parent.effective_layout_engine if parent is not None else None
        if strategy is None:
            return
        if strategy.dirty_on_property_changed_mask & flag:
            parent.mark_layout_dirty()

    # =========================================================================
    # EXTERNAL DATA
    # =========================================================================

    def add_external_data(self, key: str, value: Any) -> None:
        """Attach strategy-specific metadata (e.g. grid placement)."""
        self._external_data[key] = value

    def get_external_data(self, key: str, default: Any = None) -> Any:
        return self._external_data.get(key, default)

    def remove_external_data(self, key: str) -> bool:
        """Remove an entry. Returns whether it existed."""
        if key not in self._external_data:
            return False
        del self._external_data[key]
        return True
