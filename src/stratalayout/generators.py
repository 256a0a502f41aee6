"""
Fixture graph builders.

Small, well-known shapes used in tests and benchmarks. Every builder returns
a fresh LayoutGraph whose node payloads are readable names.
"""

import math
from typing import List

from .graph import LayoutGraph


def chain(length: int) -> LayoutGraph:
    """Linear chain N0 -> N1 -> ... of the given length."""
    graph = LayoutGraph()
    nodes = graph.add_nodes(f"N{i}" for i in range(length))
    for source, target in zip(nodes, nodes[1:]):
        graph.add_edge(source, target)
    return graph


def diamond() -> LayoutGraph:
    """Start fans out to Left and Right, which join again at End."""
    graph = LayoutGraph()
    start, left, right, end = graph.add_nodes(["Start", "Left", "Right", "End"])
    graph.add_edge(start, left)
    graph.add_edge(start, right)
    graph.add_edge(left, end)
    graph.add_edge(right, end)
    return graph


def star(leaves: int = 10) -> LayoutGraph:
    """One center node pointing at every leaf."""
    graph = LayoutGraph()
    center = graph.add_node("center")
    for i in range(leaves):
        graph.add_edge(center, graph.add_node(f"leaf{i}"))
    return graph


def crossing_graph() -> LayoutGraph:
    """
    Three-layer graph with one crossing before any reordering.

    A -> B1, B2, B3; B1 -> C3, B2 -> C1, B3 -> C2, B3 -> C3.
    Discovery order gives the bottom layer [C3, C1, C2], so B2 -> C1
    crosses B3 -> C3.
    """
    graph = LayoutGraph()
    a, b1, b2, b3, c1, c2, c3 = graph.add_nodes(
        ["A", "B1", "B2", "B3", "C1", "C2", "C3"]
    )
    graph.add_edge(a, b1)
    graph.add_edge(a, b2)
    graph.add_edge(a, b3)
    graph.add_edge(b1, c3)
    graph.add_edge(b2, c1)
    graph.add_edge(b3, c2)
    graph.add_edge(b3, c3)
    return graph


def stress_graph(size: int) -> LayoutGraph:
    """Every node i points at nodes i+1, i+2 and i+3."""
    graph = LayoutGraph()
    nodes = graph.add_nodes(f"Node{i}" for i in range(size))
    for i in range(size):
        for j in range(i + 1, min(i + 4, size)):
            graph.add_edge(nodes[i], nodes[j])
    return graph


def dense_dag(size: int) -> LayoutGraph:
    """Every node i points at nodes i+1 .. i+4."""
    graph = LayoutGraph()
    nodes = graph.add_nodes(f"N{i}" for i in range(size))
    for i in range(size):
        for j in range(i + 1, min(i + 5, size)):
            graph.add_edge(nodes[i], nodes[j])
    return graph


def layered_dag(size: int, edges_per_node: int = 2) -> LayoutGraph:
    """
    Roughly square hierarchy of ``size`` nodes.

    Nodes are split into about sqrt(size) consecutive bands; every node in a
    band connects to the first ``edges_per_node`` nodes of the next band.
    """
    graph = LayoutGraph()
    nodes = graph.add_nodes(f"Node{i}" for i in range(size))
    if size < 2:
        return graph

    bands = max(1, int(math.sqrt(size)))
    per_band = size // bands

    for band in range(bands - 1):
        band_start = band * per_band
        band_end = min((band + 1) * per_band, size)
        next_end = min((band + 2) * per_band, size)
        if band_end >= next_end:
            continue
        for i in range(band_start, band_end):
            for j in range(edges_per_node):
                target = band_end + (j % (next_end - band_end))
                graph.add_edge(nodes[i], nodes[target])

    return graph


def wide_graph(width: int, depth: int) -> LayoutGraph:
    """
    ``depth`` rows of ``width`` nodes; node i of a row points at node
    (i + 1) % width of the next row.
    """
    graph = LayoutGraph()
    rows: List[List[int]] = [
        graph.add_nodes(f"L{row}N{col}" for col in range(width))
        for row in range(depth)
    ]
    for row in range(depth - 1):
        for i, source in enumerate(rows[row]):
            graph.add_edge(source, rows[row + 1][(i + 1) % width])
    return graph
