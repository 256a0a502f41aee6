"""
stratalayout - Hierarchical layouts for directed acyclic graphs

A Python library that computes node coordinates for layered (Sugiyama)
drawings: layer assignment, barycenter crossing reduction and coordinate
assignment.

Example:
    >>> from stratalayout import SugiyamaLayout, create_graph
    >>> graph = create_graph([("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")])
    >>> result = SugiyamaLayout().compute(graph)
    >>> result.layers
    [['A'], ['B', 'C'], ['D']]

Debug Mode Example:
    >>> trace = LayoutTrace()
    >>> result = SugiyamaLayout().compute(graph, trace=trace)
    >>> print(trace.summary())
"""

from . import generators
from .crossings import count_crossings, total_crossings
from .graph import GraphView, LayoutGraph, create_graph, from_networkx, to_networkx
from .layering import assign_layers
from .layout import SugiyamaLayout, compute_layout
from .models import LayoutOptions, LayoutResult, NodeLayout, RankDir, Ranker
from .ordering import order_by_barycenter, reduce_crossings
from .parser import ParseError, Parser, ParseResult, parse_graph
from .positioning import assign_coordinates
from .tracer import LayoutTrace, PipelineStage

__version__ = "0.1.0"

__all__ = [
    # Main API
    "SugiyamaLayout",
    "compute_layout",
    "LayoutOptions",
    "LayoutResult",
    "NodeLayout",
    "RankDir",
    "Ranker",
    # Graph
    "GraphView",
    "LayoutGraph",
    "create_graph",
    "from_networkx",
    "to_networkx",
    # Pipeline stages
    "assign_layers",
    "reduce_crossings",
    "order_by_barycenter",
    "assign_coordinates",
    # Metrics
    "count_crossings",
    "total_crossings",
    # Parser
    "Parser",
    "ParseResult",
    "ParseError",
    "parse_graph",
    # Debug/Tracing
    "LayoutTrace",
    "PipelineStage",
    # Fixture graphs
    "generators",
]
