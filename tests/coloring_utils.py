import numpy as np


def assert_proper(colors: np.ndarray):
    assert np.array_equal(colors, colors.T)
    for row in colors:
        used = row[row > 0]
        assert len(used) == len(set(used.tolist()))
