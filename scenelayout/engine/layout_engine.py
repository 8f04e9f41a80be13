"""
layout_engine.py — Layout pass orchestrator.

The LayoutEngine walks a tree top-down and asks the strategy attached to each
layout-dirty node to lay out that node's children:

1. A parent is always updated before its children, since it assigns the
   layout area the children's own strategies consume
2. Nodes without a strategy use the default one (the shared canvas layout),
   which is also recorded on the node so property changes of its children
   are checked against the strategy that actually lays them out
3. A node whose layout fails keeps its dirty flag, is reported in the result
   and its subtree is skipped; the rest of the tree is still laid out
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .layout_strategies import BaseLayoutStrategy, CANVAS_LAYOUT
from .node import LayoutNode

logger = logging.getLogger(__name__)


@dataclass
class NodeFailure:
    """A node whose layout pass failed."""
    node: LayoutNode
    error: Exception

    @property
    def message(self) -> str:
        return str(self.error)


@dataclass
class LayoutPassResult:
    """Result of one LayoutEngine.update() call."""
    updated: List[LayoutNode] = field(default_factory=list)
    failures: List[NodeFailure] = field(default_factory=list)
    skipped: List[LayoutNode] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.failures

    def get_failure(self, node: LayoutNode) -> Optional[NodeFailure]:
        """Find the failure recorded for a node."""
        for failure in self.failures:
            if failure.node is node:
                return failure
        return None


class LayoutEngine:
    """
    Tree walker driving layout strategies.

    Example:
        engine = LayoutEngine()
        result = engine.update(root)
        if not result.success:
            ...
    """

    def __init__(self, default_strategy: Optional[BaseLayoutStrategy] = None):
        """
        Initialize the layout engine.

        Args:
            default_strategy: Strategy for nodes with no layout_engine set.
                              Defaults to the shared canvas layout.
        """
        self.default_strategy = default_strategy or CANVAS_LAYOUT

    def strategy_for(self, node: LayoutNode) -> BaseLayoutStrategy:
        return node.layout_engine or self.default_strategy

    def update(self, root: LayoutNode) -> LayoutPassResult:
        """
        Run a layout pass over root and its descendants.

        Args:
            root: Top of the subtree to lay out

        Returns:
            LayoutPassResult listing updated, failed and skipped nodes
        """
        result = LayoutPassResult()
        self._update_node(root, result)

        if result.failures:
            logger.warning(
                f"Layout pass on {root.name!r}: {len(result.updated)} updated, "
                f"{len(result.failures)} failed, {len(result.skipped)} skipped"
            )
        else:
            logger.debug(f"Layout pass on {root.name!r}: {len(result.updated)} updated")

        return result

    def _update_node(self, node: LayoutNode, result: LayoutPassResult) -> None:
        node.default_layout_engine = self.default_strategy
        if node.is_layout_dirty:
            strategy = self.strategy_for(node)
            try:
                strategy.update_layout(node)
            except Exception as e:
                logger.error(f"Layout of {node.name!r} with {strategy!r} failed: {e}")
                result.failures.append(NodeFailure(node=node, error=e))
                result.skipped.extend(d for d in node.walk() if d is not node)
                return
            result.updated.append(node)

        for child in node.children:
            self._update_node(child, result)
