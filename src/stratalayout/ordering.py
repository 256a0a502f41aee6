"""
Crossing reduction using the barycenter heuristic.

Layers are reordered in place by alternating forward and backward sweeps.
Each sweep sorts a layer by the mean position of the node's neighbours in
the adjacent layer. This is a greedy local search: it stops after
``max_iterations`` iterations or as soon as an iteration changes nothing,
and does not guarantee that the crossing count decreases.
"""

import logging
from typing import Callable, Dict, Hashable, List, Optional

from .graph import GraphView

logger = logging.getLogger(__name__)

SweepCallback = Callable[[int, List[List[Hashable]]], None]


def reduce_crossings(
    graph: GraphView,
    layers: List[List[Hashable]],
    max_iterations: int,
    on_sweep: Optional[SweepCallback] = None,
) -> int:
    """
    Reorder nodes within layers to reduce edge crossings.

    Args:
        graph: The graph the layers were built from.
        layers: Layer sequence, modified in place.
        max_iterations: Maximum number of forward+backward iterations.
        on_sweep: Called with (iteration, layers) after each iteration.

    Returns:
        Number of iterations that were run.
    """
    if len(layers) < 2:
        return 0

    iterations = 0
    for iteration in range(max_iterations):
        iterations += 1
        changed = False

        # Forward pass: order layers 1..n based on their predecessors
        for i in range(1, len(layers)):
            new_order = order_by_barycenter(
                graph, layers[i], layers[i - 1], use_predecessors=True
            )
            if new_order != layers[i]:
                layers[i] = new_order
                changed = True

        # Backward pass: order layers n-1..0 based on their successors
        for i in range(len(layers) - 2, -1, -1):
            new_order = order_by_barycenter(
                graph, layers[i], layers[i + 1], use_predecessors=False
            )
            if new_order != layers[i]:
                layers[i] = new_order
                changed = True

        if on_sweep is not None:
            on_sweep(iteration, layers)

        if not changed:
            break

    logger.debug(
        "Crossing reduction ran %d of at most %d iterations",
        iterations,
        max_iterations,
    )
    return iterations


def order_by_barycenter(
    graph: GraphView,
    layer: List[Hashable],
    adjacent_layer: List[Hashable],
    use_predecessors: bool,
) -> List[Hashable]:
    """
    Order nodes by barycenter (average position of connected nodes).

    Nodes with no neighbour in the adjacent layer keep their own index as
    barycenter. Ties are broken by node identifier.
    """
    ref_positions = {node: i for i, node in enumerate(adjacent_layer)}
    own_positions = {node: i for i, node in enumerate(layer)}

    barycenters: Dict[Hashable, float] = {}
    for node in layer:
        if use_predecessors:
            neighbors = graph.predecessors(node)
        else:
            neighbors = graph.successors(node)

        positions = [ref_positions[n] for n in neighbors if n in ref_positions]

        if positions:
            barycenters[node] = sum(positions) / len(positions)
        else:
            barycenters[node] = float(own_positions[node])

    return sorted(layer, key=lambda node: (barycenters[node], node))
