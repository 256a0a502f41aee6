"""Pytest configuration and shared fixtures for stratalayout tests."""

import pytest

from stratalayout import LayoutGraph, SugiyamaLayout, create_graph


@pytest.fixture
def layout_engine():
    """Default SugiyamaLayout instance."""
    return SugiyamaLayout()


@pytest.fixture
def simple_connections():
    """Simple linear connections."""
    return [("A", "B"), ("B", "C"), ("C", "D")]


@pytest.fixture
def branching_connections():
    """Branching and merging connections."""
    return [
        ("Start", "Process1"),
        ("Start", "Process2"),
        ("Process1", "End"),
        ("Process2", "End"),
    ]


@pytest.fixture
def simple_graph(simple_connections):
    """Pre-built simple graph."""
    return create_graph(simple_connections)


@pytest.fixture
def branching_graph(branching_connections):
    """Pre-built branching graph."""
    return create_graph(branching_connections)


@pytest.fixture
def shortcut_graph():
    """
    A reaches B directly and through C.

    Successors are explored in insertion order, so B is visited from A
    before C is and B and C share layer 1. Exploring the newest edge first
    would give [A], [C], [B] instead.
    """
    return create_graph([("A", "B"), ("A", "C"), ("C", "B")])


@pytest.fixture
def chain_abc():
    """Arena graph A -> B -> C; returns (graph, a, b, c)."""
    graph = LayoutGraph()
    a, b, c = graph.add_nodes(["A", "B", "C"])
    graph.add_edge(a, b)
    graph.add_edge(b, c)
    return graph, a, b, c

