"""Pytest configuration and fixtures."""

import pytest

from scenelayout.config import LayoutSettings
from scenelayout.engine import LayoutNode, Size, StackLayout, Thickness


def make_node(name: str, width: float = 0, height: float = 0, **kwargs) -> LayoutNode:
    """Create a node with the given actual size."""
    return LayoutNode(name=name, actual_size=Size(width, height), **kwargs)


@pytest.fixture
def settings() -> LayoutSettings:
    """Settings with defaults, independent of the environment."""
    return LayoutSettings(_env_file=None)


@pytest.fixture
def canvas_tree() -> dict:
    """
    Create a three level tree laid out by the default canvas layout.

    root (800x600) -> panel (200x100, padding 10) -> leaf (20x20)
    """
    root = make_node("root", 800, 600)
    panel = make_node("panel", 200, 100)
    panel.padding = Thickness.uniform(10)
    leaf = make_node("leaf", 20, 20)
    root.add_child(panel)
    panel.add_child(leaf)
    return {"root": root, "panel": panel, "leaf": leaf}


@pytest.fixture
def stack_tree() -> dict:
    """
    Create the canvas -> horizontal stack scenario.

    root (800x600) -> panel (horizontal stack) -> a (50x20), b (30x40)
    """
    root = make_node("root", 800, 600)
    panel = make_node("panel", 400, 300, layout_engine=StackLayout.horizontal())
    a = make_node("a", 50, 20)
    b = make_node("b", 30, 40)
    root.add_child(panel)
    panel.add_child(a)
    panel.add_child(b)
    return {"root": root, "panel": panel, "a": a, "b": b}


@pytest.fixture
def node():
    """Factory creating nodes with a given actual size."""
    return make_node
