"""
Hierarchical (Sugiyama) layout engine.

Runs the layout pipeline:
1. Layer assignment (``layering``)
2. Crossing reduction with the barycenter heuristic (``ordering``)
3. Coordinate assignment (``positioning``)

Cycle removal is not performed: input graphs must be acyclic. A cyclic
graph is not detected and gives an unspecified layout.
"""

import logging
from typing import Any, Hashable, Iterable, List, Optional, Tuple

from .crossings import total_crossings
from .graph import GraphView, create_graph
from .layering import assign_layers
from .models import LayoutOptions, LayoutResult
from .ordering import reduce_crossings
from .positioning import assign_coordinates
from .tracer import LayoutTrace

logger = logging.getLogger(__name__)


class SugiyamaLayout:
    """
    Layered graph layout.

    The engine only holds its options, so one instance can be reused for
    any number of graphs, including from several threads at once.

    Example:
        >>> graph = create_graph([("A", "B"), ("B", "C")])
        >>> result = SugiyamaLayout().compute(graph)
        >>> result.layers
        [['A'], ['B'], ['C']]
    """

    def __init__(self, options: Optional[LayoutOptions] = None, **overrides: Any):
        """
        Initialize the layout engine.

        Args:
            options: Layout options (defaults to LayoutOptions())
            **overrides: Individual option fields to change, e.g. direction="LR"
        """
        if options is None:
            options = LayoutOptions()
        if overrides:
            options = options.replace(**overrides)
        self._options = options

    @property
    def options(self) -> LayoutOptions:
        return self._options

    def compute(
        self, graph: GraphView, trace: Optional[LayoutTrace] = None
    ) -> LayoutResult:
        """
        Compute the layout for a directed acyclic graph.

        Args:
            graph: Graph to lay out (LayoutGraph, networkx.DiGraph, or any
                object with nodes, edges, predecessors and successors)
            trace: Optional trace that receives a snapshot of every stage

        Returns:
            LayoutResult with node positions, layers and dimensions
        """
        options = self._options
        if trace is not None:
            trace.direction = options.direction.value

        layers = assign_layers(graph, options.ranker)
        if trace is not None:
            trace.add_stage(
                "layers_assigned",
                {"ranker": options.ranker.value, "layers": layers},
            )
            crossings_before = total_crossings(graph, layers)

        def record_sweep(iteration: int, current: List[List[Hashable]]) -> None:
            trace.add_stage(f"sweep_{iteration + 1}", {"layers": current})

        iterations = reduce_crossings(
            graph,
            layers,
            options.max_iterations,
            on_sweep=record_sweep if trace is not None else None,
        )
        if trace is not None:
            trace.add_stage(
                "crossings_reduced",
                {
                    "layers": layers,
                    "iterations": iterations,
                    "crossings_before": crossings_before,
                    "crossings_after": total_crossings(graph, layers),
                },
            )

        positions, width, height = assign_coordinates(layers, options)
        if trace is not None:
            trace.add_stage(
                "coordinates_assigned",
                {"positions": positions, "width": width, "height": height},
            )

        logger.debug(
            "Laid out %d nodes in %d layers (%.1f x %.1f)",
            len(positions),
            len(layers),
            width,
            height,
        )
        return LayoutResult(
            node_positions=positions, layers=layers, width=width, height=height
        )

    def layout(
        self,
        connections: Iterable[Tuple[Hashable, Hashable]],
        trace: Optional[LayoutTrace] = None,
    ) -> LayoutResult:
        """
        Compute the layout for the given connections.

        Args:
            connections: List of (source, target) tuples
            trace: Optional trace that receives a snapshot of every stage

        Returns:
            LayoutResult with node positions, layers and dimensions
        """
        return self.compute(create_graph(connections), trace=trace)

    def __repr__(self) -> str:
        return f"SugiyamaLayout({self._options!r})"


def compute_layout(graph: GraphView, **options: Any) -> LayoutResult:
    """
    Lay out a graph in one call.

    Args:
        graph: Graph to lay out
        **options: LayoutOptions fields, e.g. direction="LR", node_sep=20

    Returns:
        LayoutResult
    """
    return SugiyamaLayout(LayoutOptions(**options)).compute(graph)
