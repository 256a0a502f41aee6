"""
Graph module for hierarchical layout.

Provides the graph interface consumed by the layout pipeline and an
arena-style directed graph whose nodes are stable integer handles.
"""

from typing import (
    Any,
    Dict,
    Hashable,
    Iterable,
    List,
    Optional,
    Protocol,
    Tuple,
    runtime_checkable,
)

import networkx as nx


@runtime_checkable
class GraphView(Protocol):
    """
    Directed graph as seen by the layout pipeline.

    Node identifiers must be hashable and mutually comparable; comparison is
    only used to break ordering ties. ``networkx.DiGraph`` satisfies this
    protocol directly.
    """

    @property
    def nodes(self) -> Iterable[Hashable]: ...

    @property
    def edges(self) -> Iterable[Tuple[Hashable, Hashable]]: ...

    def predecessors(self, node: Hashable) -> Iterable[Hashable]: ...

    def successors(self, node: Hashable) -> Iterable[Hashable]: ...


class LayoutGraph:
    """
    Directed graph with integer node handles.

    Nodes are numbered in insertion order starting at 0. Node and edge
    payloads are stored for the caller and never read by the layout.

    Example:
        >>> graph = LayoutGraph()
        >>> a = graph.add_node("A")
        >>> b = graph.add_node("B")
        >>> graph.add_edge(a, b)
        >>> graph.successors(a)
        [1]
    """

    def __init__(self):
        self._node_data: List[Any] = []
        self._edges: List[Tuple[int, int]] = []
        self._edge_data: List[Any] = []  # parallel to _edges
        self._adjacency: List[List[int]] = []  # source -> [targets]
        self._reverse_adjacency: List[List[int]] = []  # target -> [sources]

    def add_node(self, data: Any = None) -> int:
        """Add a node and return its handle."""
        self._node_data.append(data)
        self._adjacency.append([])
        self._reverse_adjacency.append([])
        return len(self._node_data) - 1

    def add_nodes(self, payloads: Iterable[Any]) -> List[int]:
        """Add one node per payload and return their handles."""
        return [self.add_node(data) for data in payloads]

    def add_edge(self, source: int, target: int, data: Any = None) -> None:
        """Add a directed edge from source to target."""
        self._check(source)
        self._check(target)
        self._edges.append((source, target))
        self._edge_data.append(data)
        self._adjacency[source].append(target)
        self._reverse_adjacency[target].append(source)

    def _check(self, node: int) -> None:
        if not isinstance(node, int) or not 0 <= node < len(self._node_data):
            raise KeyError(f"Unknown node handle: {node!r}")

    @property
    def nodes(self) -> List[int]:
        """All node handles in insertion order."""
        return list(range(len(self._node_data)))

    @property
    def edges(self) -> List[Tuple[int, int]]:
        """All edges as (source, target) pairs in insertion order."""
        return list(self._edges)

    def node_data(self, node: int) -> Any:
        self._check(node)
        return self._node_data[node]

    def edge_data(self, source: int, target: int) -> Any:
        """Payload of the first edge from source to target."""
        payloads = self.edge_payloads(source, target)
        if not payloads:
            raise KeyError(f"Unknown edge: ({source!r}, {target!r})")
        return payloads[0]

    def edge_payloads(self, source: int, target: int) -> List[Any]:
        """Payloads of every edge from source to target, in insertion order."""
        return [
            data
            for edge, data in zip(self._edges, self._edge_data)
            if edge == (source, target)
        ]

    def edges_with_data(self) -> List[Tuple[int, int, Any]]:
        """All edges as (source, target, payload), in insertion order."""
        return [(s, t, data) for (s, t), data in zip(self._edges, self._edge_data)]

    def has_parallel_edges(self) -> bool:
        return len(set(self._edges)) != len(self._edges)

    def successors(self, node: int) -> List[int]:
        """Get all nodes that this node points to."""
        self._check(node)
        return list(self._adjacency[node])

    def predecessors(self, node: int) -> List[int]:
        """Get all nodes that point to this node."""
        self._check(node)
        return list(self._reverse_adjacency[node])

    def in_degree(self, node: int) -> int:
        self._check(node)
        return len(self._reverse_adjacency[node])

    def out_degree(self, node: int) -> int:
        self._check(node)
        return len(self._adjacency[node])

    def node_count(self) -> int:
        return len(self._node_data)

    def edge_count(self) -> int:
        return len(self._edges)

    def __len__(self) -> int:
        return len(self._node_data)

    def __contains__(self, node: object) -> bool:
        return isinstance(node, int) and 0 <= node < len(self._node_data)

    def __repr__(self) -> str:
        return f"LayoutGraph(nodes={self.node_count()}, edges={self.edge_count()})"


def create_graph(
    connections: Iterable[Tuple[Hashable, Hashable]],
    nodes: Optional[Iterable[Hashable]] = None,
) -> nx.DiGraph:
    """
    Create a networkx DiGraph from a list of connections.

    Args:
        connections: Iterable of (source, target) tuples
        nodes: Optional nodes to add first, e.g. isolated ones

    Returns:
        networkx.DiGraph
    """
    graph = nx.DiGraph()
    if nodes is not None:
        graph.add_nodes_from(nodes)
    graph.add_edges_from(connections)
    return graph


def from_networkx(graph: nx.DiGraph) -> Tuple[LayoutGraph, Dict[Hashable, int]]:
    """
    Copy a networkx DiGraph into a LayoutGraph.

    Node keys become payloads of the new nodes. Edge attribute dicts become
    edge payloads.

    Returns:
        The new graph and a mapping from networkx node key to handle.
    """
    layout_graph = LayoutGraph()
    mapping: Dict[Hashable, int] = {}
    for node in graph.nodes:
        mapping[node] = layout_graph.add_node(node)
    for source, target, attrs in graph.edges(data=True):
        layout_graph.add_edge(mapping[source], mapping[target], dict(attrs) or None)
    return layout_graph, mapping


def to_networkx(graph: LayoutGraph) -> nx.DiGraph:
    """
    Copy a LayoutGraph into a networkx DiGraph keyed by node handle.

    Payloads are stored under the ``data`` attribute. A graph with parallel
    edges becomes a ``networkx.MultiDiGraph`` so every edge and its payload
    survives the copy.
    """
    nx_graph = nx.MultiDiGraph() if graph.has_parallel_edges() else nx.DiGraph()
    for node in graph.nodes:
        nx_graph.add_node(node, data=graph.node_data(node))
    for source, target, data in graph.edges_with_data():
        nx_graph.add_edge(source, target, data=data)
    return nx_graph
