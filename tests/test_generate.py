import numpy as np

from polysched.generate import example_network, generate_matrix, star_network


def test_generate_matrix_is_reproducible():
    first = generate_matrix(30, 100, np.random.default_rng(7))
    second = generate_matrix(30, 100, np.random.default_rng(7))
    assert np.array_equal(first, second)


def test_generate_matrix_shape(rng):
    network = generate_matrix(40, 100, rng, probability=0.5)
    assert network.shape == (40, 40)
    assert np.array_equal(network, network.T)
    assert not network.diagonal().any()
    assert network.min() >= 0
    assert network.max() < 100
    assert (network > 0).any()


def test_no_relationships(rng):
    assert not generate_matrix(20, 100, rng, probability=0.0).any()


def test_example_network():
    network, names = example_network()
    assert len(names) == 8
    assert np.array_equal(network, network.T)
    assert set(np.unique(network).tolist()) == {0, 16, 20, 40, 80}


def test_star_network():
    network = star_network(3, step=2)
    assert network[0].tolist() == [0, 2, 4, 6]
    assert np.array_equal(network, network.T)
    assert not network[1:, 1:].any()
