"""Unit tests for the parser module."""

import pytest

from stratalayout.parser import ParseError, Parser, ParseResult, parse_graph


@pytest.fixture
def parser():
    return Parser()


class TestParser:
    """Tests for edge-list parsing."""

    def test_simple_connections(self, parser):
        """Test parsing plain edges."""
        result = parser.parse("A -> B\nB -> C")
        assert result == ParseResult(
            nodes=["A", "B", "C"], connections=[("A", "B"), ("B", "C")]
        )

    def test_comments_and_blank_lines(self, parser):
        """Test that comments and blank lines are skipped."""
        result = parser.parse(
            """
            # header
            A -> B

            # trailing
            """
        )
        assert result.connections == [("A", "B")]

    def test_isolated_node(self, parser):
        """Test that a bare name declares a node."""
        result = parser.parse("Lonely\nA -> B")
        assert result.nodes == ["Lonely", "A", "B"]
        assert result.connections == [("A", "B")]

    def test_names_with_spaces(self, parser):
        """Test multi-word node names."""
        result = parser.parse("Load Data -> Clean Data")
        assert result.connections == [("Load Data", "Clean Data")]

    def test_empty_input(self, parser):
        """Test that empty input is an empty graph, not an error."""
        assert parser.parse("") == ParseResult()

    @pytest.mark.parametrize(
        "text, message",
        [
            ("A -> B -> C", "Invalid connection format"),
            ("-> B", "Empty source node"),
            ("A ->", "Empty target node"),
            ("A -> A", "Self-loop"),
        ],
    )
    def test_errors(self, parser, text, message):
        """Test malformed lines."""
        with pytest.raises(ParseError, match=message):
            parser.parse(text)

    def test_error_reports_line_number(self, parser):
        """Test that errors name the offending line."""
        with pytest.raises(ParseError, match="Line 3:"):
            parser.parse("A -> B\n\n -> C")


class TestParseGraph:
    """Tests for the parse_graph helper."""

    def test_builds_digraph(self):
        """Test that nodes keep first-appearance order."""
        graph = parse_graph("Z\nB -> A\nA -> C")
        assert list(graph.nodes) == ["Z", "B", "A", "C"]
        assert set(graph.edges) == {("B", "A"), ("A", "C")}
