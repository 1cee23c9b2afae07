"""
Unit tests for Dijkstra shortest paths.
"""

from decimal import Decimal

import pytest

from graphpath import GraphStore, dijkstra, reconstruct_path
from graphpath.errors import NegativeWeightError, UnknownVertex


def path_weight(graph: GraphStore, path: list) -> float:
    """Sum edge weights along a path."""
    return sum(graph.weight(u, v) for u, v in zip(path, path[1:]))


class TestDistances:
    """Test distance and predecessor maps."""

    def test_cheaper_indirect_path(self, weighted_graph):
        """A->C->B (2) beats A->B (4)."""
        result = dijkstra(weighted_graph, "A")
        assert result.distances == {"A": 0, "C": 1, "B": 2, "D": 3}
        assert result.predecessors["B"] == "C"
        assert result.predecessors["D"] == "B"

    def test_source_distance_zero(self, weighted_graph):
        """Distance to the source is always 0 and it has no predecessor."""
        result = dijkstra(weighted_graph, "D")
        assert result.distances == {"D": 0}
        assert "D" not in result.predecessors

    def test_unreachable_absent(self, disconnected_graph):
        """Unreachable vertices are absent, not an error."""
        result = dijkstra(disconnected_graph, "A")
        assert result.distances == {"A": 0, "B": 2, "C": 5}
        assert not result.has_path("Y")
        assert "Y" not in result
        assert result.distance_to("Y") is None
        assert result.path_to("Y") is None

    def test_zero_weight_edges(self):
        """Zero-weight edges are allowed."""
        graph = GraphStore.from_edges([("a", "b", 0), ("b", "c", 0), ("a", "c", 1)])
        result = dijkstra(graph, "a")
        assert result.distances == {"a": 0, "b": 0, "c": 0}
        assert result.path_to("c") == ["a", "b", "c"]

    def test_float_weights(self):
        """Float weights are summed."""
        graph = GraphStore.from_edges([(1, 2, 0.5), (2, 3, 0.25), (1, 3, 1.0)])
        assert dijkstra(graph, 1).distances[3] == pytest.approx(0.75)

    def test_decimal_weights(self):
        """Decimal weights give exact Decimal distances."""
        graph = GraphStore.from_edges(
            [("a", "b", Decimal("1.5")), ("b", "c", Decimal("1.25")), ("a", "c", Decimal("3"))]
        )
        result = dijkstra(graph, "a")
        assert result.distances == {"a": 0, "b": Decimal("1.5"), "c": Decimal("2.75")}
        assert result.path_to("c") == ["a", "b", "c"]

    def test_undirected(self, tree_graph):
        """Undirected edges are followed both ways."""
        result = dijkstra(tree_graph, 4)
        assert result.distances[5] == 4
        assert result.path_to(5) == [4, 2, 1, 3, 5]

    def test_stale_entries_skipped(self):
        """A vertex improved after being queued is settled once."""
        graph = GraphStore.from_edges(
            [("s", "x", 10), ("s", "a", 1), ("a", "b", 1), ("b", "x", 1), ("x", "y", 1)]
        )
        result = dijkstra(graph, "s")
        assert result.distances["x"] == 3
        assert result.settled == len(result.distances)
        # x -> y is examined once, from the settled entry only
        assert result.relaxations == graph.edge_count()

    def test_stats(self, weighted_graph):
        """Search statistics are recorded."""
        result = dijkstra(weighted_graph, "A")
        assert result.relaxations == 4
        assert result.settled == 4
        assert result.max_frontier >= 1


class TestPaths:
    """Test path reconstruction."""

    def test_path_to(self, weighted_graph):
        """path_to() follows predecessors from source."""
        result = dijkstra(weighted_graph, "A")
        assert result.path_to("D") == ["A", "C", "B", "D"]
        assert result.path_to("A") == ["A"]

    def test_reconstruct_path(self):
        """reconstruct_path() walks back then reverses."""
        predecessors = {"b": "a", "c": "b"}
        assert reconstruct_path(predecessors, "a", "c") == ["a", "b", "c"]

    def test_reconstruct_path_broken_chain(self):
        """A chain that never reaches source yields None."""
        assert reconstruct_path({"c": "b"}, "a", "c") is None
        assert reconstruct_path({"b": "c", "c": "b"}, "a", "c") is None


class TestTarget:
    """Test target-directed early exit."""

    def test_target_distance_final(self, weighted_graph):
        """Stopping at the target still gives its true distance."""
        result = dijkstra(weighted_graph, "A", target="B")
        assert result.distances["B"] == 2
        assert result.path_to("B") == ["A", "C", "B"]
        assert result.settled < 4

    def test_unknown_target(self, weighted_graph):
        """Unknown target raises UnknownVertex."""
        with pytest.raises(UnknownVertex):
            dijkstra(weighted_graph, "A", target="Q")


class TestErrors:
    """Test precondition failures."""

    def test_negative_weight(self):
        """Any negative weight is rejected before the search."""
        graph = GraphStore()
        graph.add_edge("A", "B", 2)
        graph.add_edge("X", "Y", -1)
        with pytest.raises(NegativeWeightError) as exc_info:
            dijkstra(graph, "A")
        assert exc_info.value.edge.weight == -1
        assert isinstance(exc_info.value, ValueError)

    def test_unknown_source(self, weighted_graph):
        """Unknown source raises UnknownVertex."""
        with pytest.raises(UnknownVertex):
            dijkstra(weighted_graph, "Z")


class TestProperties:
    """Randomized correctness properties."""

    @pytest.mark.parametrize("seed", range(10))
    def test_relaxation_invariant(self, random_graph, seed):
        """No edge can improve a final distance."""
        graph = random_graph(seed)
        distances = dijkstra(graph, 0).distances
        for edge in graph.edges():
            if edge.source in distances:
                assert edge.target in distances
                assert distances[edge.target] <= distances[edge.source] + edge.weight

    @pytest.mark.parametrize("seed", range(10))
    def test_path_weight_equals_distance(self, random_graph, seed):
        """Every reconstructed path costs exactly its distance."""
        graph = random_graph(seed)
        result = dijkstra(graph, 0)
        assert result.distances[0] == 0
        for vertex, distance in result.distances.items():
            path = result.path_to(vertex)
            assert path[0] == 0
            assert path[-1] == vertex
            assert path_weight(graph, path) == distance

    @pytest.mark.parametrize("seed", range(5))
    def test_matches_brute_force(self, random_graph, seed):
        """Distances agree with Floyd-Warshall on the adjacency matrix."""
        graph = random_graph(seed, vertices=15, edges=40)
        matrix = graph.to_adjacency_matrix()
        n = len(matrix)
        for i in range(n):
            matrix[i, i] = min(matrix[i, i], 0)
        for k in range(n):
            for i in range(n):
                for j in range(n):
                    if matrix[i, k] + matrix[k, j] < matrix[i, j]:
                        matrix[i, j] = matrix[i, k] + matrix[k, j]
        distances = dijkstra(graph, 0).distances
        for v in graph.vertices():
            expected = matrix[0, v]
            if expected == float("inf"):
                assert v not in distances
            else:
                assert distances[v] == expected
