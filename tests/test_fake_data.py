"""Unit tests for random graph generation."""

import numpy as np

from graphmath import generate_random_weighted_graph


class TestGenerateRandomWeightedGraph:
    """Shape and reproducibility of generated graphs."""

    def test_reproducible(self):
        first = generate_random_weighted_graph(seed=7)
        second = generate_random_weighted_graph(seed=7)
        np.testing.assert_array_equal(first["v1"], second["v1"])
        np.testing.assert_array_equal(first["v2"], second["v2"])
        np.testing.assert_array_equal(first["w"], second["w"])

    def test_node_ids_in_range(self):
        data = generate_random_weighted_graph(n_nodes=10, edge_probability=0.5, seed=3)
        ids = np.concatenate([data["v1"], data["v2"]])
        assert ids.min() >= 1
        assert ids.max() <= 10
        assert sorted(data["graph"].nodes()) == list(range(1, 11))

    def test_integer_weights_within_bounds(self):
        data = generate_random_weighted_graph(weight_low=2, weight_high=4, seed=1)
        assert data["w"].min() >= 2
        assert data["w"].max() <= 4
        assert np.all(data["w"] == np.floor(data["w"]))

    def test_arrays_match_networkx_graph(self):
        data = generate_random_weighted_graph(seed=11)
        G = data["graph"]
        assert data["n_edges"] == G.number_of_edges() == data["v1"].shape[0]
        for u, v, weight in zip(data["v1"], data["v2"], data["w"]):
            assert G[int(u)][int(v)]["weight"] == weight

    def test_no_edges(self):
        data = generate_random_weighted_graph(n_nodes=5, edge_probability=0.0)
        assert data["n_edges"] == 0
        assert data["v1"].shape == (0,)
