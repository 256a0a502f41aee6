"""Unit tests for the fixture graph builders."""

from stratalayout import generators


class TestGenerators:
    """Tests for graph shapes."""

    def test_chain(self):
        graph = generators.chain(4)
        assert graph.edges == [(0, 1), (1, 2), (2, 3)]
        assert graph.node_data(3) == "N3"

    def test_diamond(self):
        graph = generators.diamond()
        assert [graph.node_data(n) for n in graph.nodes] == [
            "Start",
            "Left",
            "Right",
            "End",
        ]
        assert graph.edge_count() == 4

    def test_star(self):
        graph = generators.star(10)
        assert graph.node_count() == 11
        assert graph.successors(0) == list(range(1, 11))

    def test_crossing_graph(self):
        graph = generators.crossing_graph()
        assert graph.node_count() == 7
        assert graph.edge_count() == 7

    def test_stress_graph(self):
        graph = generators.stress_graph(5)
        assert graph.successors(0) == [1, 2, 3]
        assert graph.successors(3) == [4]
        assert graph.out_degree(4) == 0

    def test_dense_dag(self):
        graph = generators.dense_dag(6)
        assert graph.successors(0) == [1, 2, 3, 4]

    def test_layered_dag(self):
        """Test that every edge goes to a later node."""
        graph = generators.layered_dag(100, edges_per_node=3)
        assert graph.node_count() == 100
        assert graph.edge_count() > 0
        assert all(source < target for source, target in graph.edges)

    def test_layered_dag_tiny(self):
        assert generators.layered_dag(1).edge_count() == 0

    def test_wide_graph(self):
        graph = generators.wide_graph(3, 2)
        assert graph.node_count() == 6
        assert graph.edges == [(0, 4), (1, 5), (2, 3)]

    def test_exported_from_package(self):
        """Test that the builders are reachable from the package root."""
        import stratalayout

        assert stratalayout.generators is generators
        assert "generators" in stratalayout.__all__
