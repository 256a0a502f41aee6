"""Unit tests for the ordering (crossing reduction) module."""

from stratalayout import generators
from stratalayout.crossings import total_crossings
from stratalayout.graph import create_graph
from stratalayout.layering import assign_layers
from stratalayout.ordering import order_by_barycenter, reduce_crossings


class TestOrderByBarycenter:
    """Tests for single-layer barycenter ordering."""

    def test_orders_by_predecessor_position(self):
        """Test that nodes follow the positions of their predecessors."""
        graph = create_graph([("P", "Y"), ("Q", "X")])
        order = order_by_barycenter(graph, ["X", "Y"], ["P", "Q"], True)
        assert order == ["Y", "X"]

    def test_orders_by_successor_position(self):
        """Test the backward direction."""
        graph = create_graph([("P", "Y"), ("Q", "X")])
        order = order_by_barycenter(graph, ["P", "Q"], ["X", "Y"], False)
        assert order == ["Q", "P"]

    def test_mean_of_several_neighbors(self):
        """Test that the barycenter averages neighbour positions."""
        # X averages (0 + 2) / 2 = 1.0, Y sits at 0.0
        graph = create_graph([("P", "X"), ("R", "X"), ("P", "Y")])
        order = order_by_barycenter(graph, ["X", "Y"], ["P", "Q", "R"], True)
        assert order == ["Y", "X"]

    def test_ties_broken_by_identifier(self):
        """Test deterministic tie-breaking."""
        graph = create_graph([("P", "c"), ("P", "a"), ("P", "b")])
        order = order_by_barycenter(graph, ["c", "a", "b"], ["P"], True)
        assert order == ["a", "b", "c"]

    def test_unconnected_node_keeps_its_index(self):
        """Test that a node without neighbours keeps its own index."""
        # Z has no predecessor in the adjacent layer, so it stays at 1.0
        graph = create_graph([("P", "X"), ("R", "Y")], nodes=["Z"])
        order = order_by_barycenter(graph, ["Y", "Z", "X"], ["P", "Q", "R"], True)
        assert order == ["X", "Z", "Y"]

    def test_ignores_neighbors_outside_adjacent_layer(self):
        """Test that only neighbours in the adjacent layer count."""
        graph = create_graph([("Far", "X"), ("P", "Y")])
        order = order_by_barycenter(graph, ["X", "Y"], ["P"], True)
        # X has no neighbour in ["P"] and keeps index 0; Y moves to 0.0 too
        assert order == ["X", "Y"]

    def test_does_not_modify_input(self):
        """Test that a new list is returned."""
        graph = create_graph([("P", "Y"), ("Q", "X")])
        layer = ["X", "Y"]
        order_by_barycenter(graph, layer, ["P", "Q"], True)
        assert layer == ["X", "Y"]


class TestReduceCrossings:
    """Tests for the sweep loop."""

    def test_single_layer_is_noop(self):
        """Test that fewer than two layers are left alone."""
        layers = [["B", "A"]]
        assert reduce_crossings(create_graph([]), layers, 24) == 0
        assert layers == [["B", "A"]]

    def test_zero_iterations_is_noop(self, branching_graph):
        """Test that max_iterations=0 leaves the layers untouched."""
        layers = assign_layers(branching_graph)
        before = [list(layer) for layer in layers]

        assert reduce_crossings(branching_graph, layers, 0) == 0
        assert layers == before

    def test_stops_at_fixed_point(self, simple_graph):
        """Test early termination when nothing changes."""
        layers = [["A"], ["B"], ["C"], ["D"]]
        assert reduce_crossings(simple_graph, layers, 24) == 1

    def test_bounded_by_max_iterations(self):
        """Test that the loop never runs more than max_iterations times."""
        graph = generators.crossing_graph()
        layers = assign_layers(graph)
        assert reduce_crossings(graph, layers, 1) == 1

    def test_oscillation_is_bounded(self):
        """Test that an order that flips every iteration still terminates."""
        graph = generators.crossing_graph()
        layers = assign_layers(graph)

        assert reduce_crossings(graph, layers, 24) == 24
        assert layers == [[0], [2, 1, 3], [4, 6, 5]]

    def test_modifies_layers_in_place(self):
        """Test that the given list of layers is reordered in place."""
        graph = create_graph([("P", "Y"), ("Q", "X")])
        layers = [["P", "Q"], ["X", "Y"]]
        reduce_crossings(graph, layers, 24)

        assert layers == [["P", "Q"], ["Y", "X"]]

    def test_star_leaves_sorted(self):
        """Test that equal barycenters end up in identifier order."""
        graph = generators.star(10)
        layers = assign_layers(graph)
        reduce_crossings(graph, layers, 24)

        assert layers[0] == [0]
        assert layers[1] == list(range(1, 11))

    def test_removes_crossings_in_fixture(self):
        """Test that the crossing fixture is untangled."""
        graph = generators.crossing_graph()
        layers = assign_layers(graph)
        assert total_crossings(graph, layers) > 0

        reduce_crossings(graph, layers, 24)
        assert total_crossings(graph, layers) == 0

    def test_on_sweep_callback(self, branching_graph):
        """Test that the callback sees every iteration."""
        seen = []
        layers = assign_layers(branching_graph)
        iterations = reduce_crossings(
            branching_graph,
            layers,
            24,
            on_sweep=lambda i, current: seen.append((i, len(current))),
        )

        assert [i for i, _ in seen] == list(range(iterations))
        assert all(count == 3 for _, count in seen)

    def test_deterministic(self):
        """Test that repeated runs give the same order."""
        graph = generators.layered_dag(64, edges_per_node=3)
        first = assign_layers(graph)
        second = assign_layers(graph)
        reduce_crossings(graph, first, 24)
        reduce_crossings(graph, second, 24)

        assert first == second
