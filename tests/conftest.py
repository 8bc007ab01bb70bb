import numpy as np
import pytest

from polysched.generate import example_network, star_network


@pytest.fixture(scope="function")
def example():
    return example_network()


@pytest.fixture(scope="function")
def star():
    return star_network(3)


@pytest.fixture(scope="function")
def rng():
    return np.random.default_rng(1234)


@pytest.fixture(scope="function")
def triangle():
    return np.array(
        [
            [0, 1, 1],
            [1, 0, 1],
            [1, 1, 0],
        ]
    )
