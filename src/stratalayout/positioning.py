"""
Coordinate assignment for hierarchical layout.

Turns (layer index, index within layer) into 2D coordinates. Every layer is
centered against the widest layer. In TB mode layers are stacked along the
y axis; in LR mode along the x axis.
"""

from typing import Dict, Hashable, List, Tuple

from .models import LayoutOptions, Point, RankDir


def assign_coordinates(
    layers: List[List[Hashable]], options: LayoutOptions
) -> Tuple[Dict[Hashable, Point], float, float]:
    """
    Assign final coordinates to nodes with proper spacing.

    Args:
        layers: Final layer sequence.
        options: Spacing and direction configuration.

    Returns:
        (positions, width, height)
    """
    positions: Dict[Hashable, Point] = {}
    node_sep = options.node_sep
    rank_sep = options.rank_sep

    max_layer_width = max((len(layer) for layer in layers), default=0)

    for layer_idx, layer in enumerate(layers):
        # Center the layer
        start_offset = (max_layer_width - len(layer)) * node_sep * 0.5

        for node_idx, node in enumerate(layer):
            along = start_offset + node_idx * node_sep
            across = layer_idx * rank_sep
            if options.direction is RankDir.LEFT_TO_RIGHT:
                positions[node] = (across, along)
            else:
                positions[node] = (along, across)

    breadth = max_layer_width * node_sep
    depth = len(layers) * rank_sep
    if options.direction is RankDir.LEFT_TO_RIGHT:
        return positions, depth, breadth
    return positions, breadth, depth
