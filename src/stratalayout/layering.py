"""
Layer assignment for hierarchical layout.

Nodes are grouped into layers by their depth below the source nodes of the
graph. Two depth strategies are available (see ``Ranker``):

- FIRST_VISIT: a depth-first traversal from every source assigns each node
  the depth at which it is first reached. A node's depth is frozen once it
  has been visited, even if a later traversal reaches it by a longer path.
- LONGEST_PATH: depths are relaxed in topological order so that every node
  lies below its deepest predecessor.

Within a layer nodes appear in discovery order (FIRST_VISIT) or topological
order (LONGEST_PATH).
"""

import logging
from typing import Dict, Hashable, List, Set

import networkx as nx

from .graph import GraphView
from .models import Ranker

logger = logging.getLogger(__name__)


def assign_layers(
    graph: GraphView, ranker: Ranker = Ranker.FIRST_VISIT
) -> List[List[Hashable]]:
    """
    Partition the nodes of a graph into ordered, non-empty layers.

    Args:
        graph: Directed graph to layer. Must be acyclic; cyclic input gives
            an unspecified layering.
        ranker: Depth strategy.

    Returns:
        Layers ordered by increasing depth.
    """
    if ranker is Ranker.LONGEST_PATH:
        distances = longest_path_distances(graph)
    else:
        distances = first_visit_distances(graph)

    layers = group_by_distance(distances)
    logger.debug(
        "Assigned %d nodes to %d layers (%s)",
        len(distances),
        len(layers),
        ranker.value,
    )
    return layers


def first_visit_distances(graph: GraphView) -> Dict[Hashable, int]:
    """
    Compute node depths with a first-visit depth-first traversal.

    Traversal starts from every node without predecessors, in graph order.
    When every node has a predecessor only the first node is used as a seed.
    Nodes still unreached afterwards (other components) are seeded at depth 0.
    """
    nodes = list(graph.nodes)
    distances: Dict[Hashable, int] = {}
    visited: Set[Hashable] = set()

    sources = [node for node in nodes if _is_source(graph, node)]
    if not sources:
        sources = nodes[:1]

    for source in sources:
        _traverse(graph, source, distances, visited)

    for node in nodes:
        if node not in distances:
            _traverse(graph, node, distances, visited)

    return distances


def _is_source(graph: GraphView, node: Hashable) -> bool:
    for _ in graph.predecessors(node):
        return False
    return True


def _traverse(
    graph: GraphView,
    start: Hashable,
    distances: Dict[Hashable, int],
    visited: Set[Hashable],
) -> None:
    """
    Depth-first walk from start, recording the depth of each first visit.

    Uses an explicit stack. Successors are pushed in reverse so they are
    explored in the same order a recursive walk would explore them.
    """
    stack = [(start, 0)]
    while stack:
        node, distance = stack.pop()
        if node in visited:
            continue
        visited.add(node)

        distance = max(distance, distances.get(node, 0))
        distances[node] = distance

        for successor in reversed(list(graph.successors(node))):
            if successor not in visited:
                stack.append((successor, distance + 1))


def longest_path_distances(graph: GraphView) -> Dict[Hashable, int]:
    """
    Compute node depths as the longest path length from any source.

    Falls back to first-visit depths when the graph has a cycle.
    """
    if isinstance(graph, nx.DiGraph):
        working_graph = graph
    else:
        working_graph = nx.DiGraph()
        working_graph.add_nodes_from(graph.nodes)
        working_graph.add_edges_from(graph.edges)

    try:
        topo_order = list(nx.topological_sort(working_graph))
    except nx.NetworkXUnfeasible:
        logger.debug("Graph has a cycle, falling back to first-visit depths")
        return first_visit_distances(graph)

    distances: Dict[Hashable, int] = {}
    for node in topo_order:
        predecessors = list(working_graph.predecessors(node))
        if not predecessors:
            distances[node] = 0
        else:
            distances[node] = max(distances[p] for p in predecessors) + 1

    return distances


def group_by_distance(distances: Dict[Hashable, int]) -> List[List[Hashable]]:
    """Group nodes into layers by depth, dropping depths nobody holds."""
    if not distances:
        return []

    max_layer = max(distances.values())
    layers: List[List[Hashable]] = [[] for _ in range(max_layer + 1)]

    for node, layer in distances.items():
        layers[layer].append(node)

    return [layer for layer in layers if layer]
