"""
Data models for hierarchical layout.

This module contains the configuration and result types shared by every
stage of the layout pipeline.

Classes:
    RankDir: Flow direction of the drawing (top-to-bottom or left-to-right).
    Ranker: Strategy used to compute layer depths.
    LayoutOptions: Immutable layout configuration.
    NodeLayout: Per-node view of a finished layout.
    LayoutResult: Positions, layers and dimensions produced by the engine.
"""

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Hashable, List, Tuple, Union

Point = Tuple[float, float]


class RankDir(Enum):
    """Primary flow direction of the layout."""

    TOP_TO_BOTTOM = "TB"
    LEFT_TO_RIGHT = "LR"

    @classmethod
    def coerce(cls, value: Union["RankDir", str]) -> "RankDir":
        """Accept a RankDir or its "TB"/"LR" short name (any case)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.upper())
            except ValueError:
                pass
        raise ValueError(
            "direction must be 'TB' (top-to-bottom) or 'LR' (left-to-right)"
        )


class Ranker(Enum):
    """
    Layer depth strategy.

    FIRST_VISIT freezes a node's depth the first time a depth-first traversal
    reaches it. LONGEST_PATH relaxes depths in topological order so every
    node sits one layer below its deepest predecessor.
    """

    FIRST_VISIT = "first-visit"
    LONGEST_PATH = "longest-path"


@dataclass(frozen=True)
class LayoutOptions:
    """
    Configuration for a layout computation.

    Attributes:
        direction: Flow direction, TOP_TO_BOTTOM or LEFT_TO_RIGHT.
        node_sep: Distance between neighbouring nodes in the same layer.
        rank_sep: Distance between consecutive layers.
        max_iterations: Upper bound on crossing-reduction iterations.
        ranker: Layer depth strategy.
    """

    direction: RankDir = RankDir.TOP_TO_BOTTOM
    node_sep: float = 50.0
    rank_sep: float = 100.0
    max_iterations: int = 24
    ranker: Ranker = Ranker.FIRST_VISIT

    def __post_init__(self):
        object.__setattr__(self, "direction", RankDir.coerce(self.direction))
        if not isinstance(self.ranker, Ranker):
            object.__setattr__(self, "ranker", Ranker(self.ranker))

        for name in ("node_sep", "rank_sep"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{name} must be a number, got {value!r}")
            if not (math.isfinite(value) and value > 0):
                raise ValueError(
                    f"{name} must be a positive finite number, got {value}"
                )
        if isinstance(self.max_iterations, bool) or not isinstance(
            self.max_iterations, int
        ):
            raise ValueError(
                f"max_iterations must be an integer, got {self.max_iterations!r}"
            )
        if self.max_iterations < 0:
            raise ValueError(
                f"max_iterations must be non-negative, got {self.max_iterations}"
            )

        object.__setattr__(self, "node_sep", float(self.node_sep))
        object.__setattr__(self, "rank_sep", float(self.rank_sep))

    def replace(self, **changes: Any) -> "LayoutOptions":
        """Return a copy of these options with the given fields changed."""
        return replace(self, **changes)


@dataclass
class NodeLayout:
    """Layout information for a single node."""

    node: Hashable
    layer: int = 0
    position: int = 0  # Index within layer
    x: float = 0.0
    y: float = 0.0


@dataclass
class LayoutResult:
    """Result of the layout algorithm."""

    node_positions: Dict[Hashable, Point] = field(default_factory=dict)
    layers: List[List[Hashable]] = field(default_factory=list)
    width: float = 0.0
    height: float = 0.0

    @property
    def is_empty(self) -> bool:
        return not self.layers

    def layer_index(self) -> Dict[Hashable, int]:
        """Map every node to the index of the layer holding it."""
        return {
            node: layer_idx
            for layer_idx, layer in enumerate(self.layers)
            for node in layer
        }

    @property
    def nodes(self) -> Dict[Hashable, NodeLayout]:
        """Per-node layout records, in layer order."""
        records: Dict[Hashable, NodeLayout] = {}
        for layer_idx, layer in enumerate(self.layers):
            for pos_idx, node in enumerate(layer):
                x, y = self.node_positions[node]
                records[node] = NodeLayout(
                    node=node, layer=layer_idx, position=pos_idx, x=x, y=y
                )
        return records
