"""
Sample networks: the documented example network and seeded random networks.
"""

import numpy as np

from polysched.config import DEFAULT_MAX_WEIGHT, EDGE_PROBABILITY

EXAMPLE_NAMES = ["Alice", "Belle", "Claire", "Daisy", "Emily", "Felix", "Grace", "Holly"]


def example_network() -> tuple[np.ndarray, list[str]]:
    """Eight participants with weights 16, 20, 40 and 80"""
    network = np.array(
        [
            [0, 40, 0, 80, 0, 40, 0, 0],
            [40, 0, 80, 0, 0, 0, 0, 0],
            [0, 80, 0, 16, 0, 0, 0, 0],
            [80, 0, 16, 0, 20, 0, 16, 0],
            [0, 0, 0, 20, 0, 40, 0, 80],
            [40, 0, 0, 0, 40, 0, 40, 0],
            [0, 0, 0, 16, 0, 40, 0, 0],
            [0, 0, 0, 0, 80, 0, 0, 0],
        ],
        dtype=np.int64,
    )
    return network, list(EXAMPLE_NAMES)


def star_network(leaves: int, step: int = 1) -> np.ndarray:
    """Participant 0 related to `leaves` others with weights step, 2*step, ..."""
    network = np.zeros((leaves + 1, leaves + 1), dtype=np.int64)
    for leaf in range(1, leaves + 1):
        network[0, leaf] = network[leaf, 0] = leaf * step
    return network


def generate_matrix(
    nodes: int,
    max_weight: int = DEFAULT_MAX_WEIGHT,
    rng: np.random.Generator | None = None,
    probability: float = EDGE_PROBABILITY,
) -> np.ndarray:
    """Random symmetric network

    Params
    ------
    nodes: int, number of participants
    max_weight: int, weights are drawn uniformly from [0, max_weight), a zero draw means no relationship
    rng: np.random.Generator, source of randomness, pass a seeded one for reproducible networks
    probability: float, chance of each pair having a relationship
    """
    rng = np.random.default_rng() if rng is None else rng
    related = rng.random((nodes, nodes)) < probability
    weights = rng.integers(0, max_weight, size=(nodes, nodes))
    network = np.triu(np.where(related, weights, 0), 1).astype(np.int64)
    return network + network.T
