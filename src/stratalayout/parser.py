"""
Parser module for edge-list graph descriptions.

Input format, one statement per line:

    # comment
    A -> B
    B -> C
    Lonely

A line with ``->`` declares an edge; a line holding a bare name declares a
node (useful for isolated nodes). Blank lines and ``#`` comments are ignored.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

import networkx as nx


class ParseError(Exception):
    """Raised when input parsing fails."""

    pass


@dataclass
class ParseResult:
    """Result of parsing input text."""

    nodes: List[str] = field(default_factory=list)
    connections: List[Tuple[str, str]] = field(default_factory=list)


class Parser:
    """Parses edge-list text into nodes and connections."""

    ARROW = "->"

    def parse(self, input_text: str) -> ParseResult:
        """
        Parse input text.

        Args:
            input_text: Multi-line string with connections in format "A -> B"

        Returns:
            ParseResult with nodes in first-appearance order and connections

        Raises:
            ParseError: If input format is invalid
        """
        nodes: List[str] = []
        seen = set()
        connections: List[Tuple[str, str]] = []

        def declare(name: str) -> None:
            if name not in seen:
                seen.add(name)
                nodes.append(name)

        for line_num, line in enumerate(input_text.splitlines(), 1):
            stripped = line.strip()

            # Skip empty lines and comments
            if not stripped or stripped.startswith("#"):
                continue

            if self.ARROW not in stripped:
                declare(stripped)
                continue

            parts = stripped.split(self.ARROW)
            if len(parts) != 2:
                raise ParseError(
                    f"Line {line_num}: Invalid connection format: {stripped}"
                )

            source = parts[0].strip()
            target = parts[1].strip()

            if not source:
                raise ParseError(f"Line {line_num}: Empty source node")
            if not target:
                raise ParseError(f"Line {line_num}: Empty target node")
            if source == target:
                raise ParseError(
                    f"Line {line_num}: Self-loop on '{source}' is not allowed"
                )

            declare(source)
            declare(target)
            connections.append((source, target))

        return ParseResult(nodes=nodes, connections=connections)


def parse_graph(input_text: str) -> nx.DiGraph:
    """
    Convenience function to parse edge-list text into a graph.

    Args:
        input_text: Multi-line string with connections

    Returns:
        networkx.DiGraph with nodes in first-appearance order
    """
    result = Parser().parse(input_text)
    graph = nx.DiGraph()
    graph.add_nodes_from(result.nodes)
    graph.add_edges_from(result.connections)
    return graph
