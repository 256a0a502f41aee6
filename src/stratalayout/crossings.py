"""
Edge crossing metrics.

Two edges (u1, v1) and (u2, v2) between adjacent layers cross when u1 comes
before u2 in the upper layer but v1 comes after v2 in the lower layer.
"""

from typing import Hashable, List

from .graph import GraphView


def count_crossings(
    graph: GraphView, upper_layer: List[Hashable], lower_layer: List[Hashable]
) -> int:
    """Count edge crossings between two adjacent layers."""
    lower_positions = {node: pos for pos, node in enumerate(lower_layer)}

    # Lower-layer endpoint positions of each upper node's edges, in upper order
    endpoints = [
        [lower_positions[n] for n in graph.successors(node) if n in lower_positions]
        for node in upper_layer
    ]

    crossings = 0
    for i, first in enumerate(endpoints):
        for second in endpoints[i + 1 :]:
            for pos1 in first:
                for pos2 in second:
                    if pos1 > pos2:
                        crossings += 1

    return crossings


def total_crossings(graph: GraphView, layers: List[List[Hashable]]) -> int:
    """Sum edge crossings over every pair of adjacent layers."""
    return sum(
        count_crossings(graph, layers[i], layers[i + 1])
        for i in range(len(layers) - 1)
    )
