import numpy as np
import pytest

from coloring_utils import assert_proper

from polysched.coloring import Layer
from polysched.generate import generate_matrix, star_network


def test_triangle(triangle):
    layer = Layer(triangle)
    colors = layer.colors
    assert_proper(colors)
    assert layer.is_complete()
    assert [colors[0, 1], colors[0, 2], colors[1, 2]] == [4, 2, 3]
    assert layer.get_days() == {2: 1, 3: 1, 4: 1}
    # a duplicated day would stretch another day's gap to 4
    assert layer.order == [2, 3, 4]
    assert layer.schedule.days == [[(0, 2)], [(1, 2)], [(0, 1)]]


def test_star_balancing(star):
    layer = Layer(star)
    assert layer.get_days() == {1: 3, 2: 1, 3: 2}
    assert layer.order == [1, 2, 1, 3]
    assert layer.schedule.days == [[(0, 3)], [(0, 1)], [(0, 3)], [(0, 2)]]
    assert Layer.get_maximum_wait(layer.order, layer.get_days()) == (8, 3, 3, 7)


@pytest.mark.parametrize("leaves", [2, 5, 12, 30])
def test_balancer_terminates_on_star(leaves):
    layer = Layer(star_network(leaves, step=7))
    days = layer.get_days()
    assert len(days) == leaves
    initial = Layer.get_maximum_wait(sorted(days), days)[0]
    final = Layer.get_maximum_wait(layer.order, days)[0]
    assert final <= initial
    # every kept duplicate strictly lowered the worst wait weight
    assert len(layer.order) - len(days) <= initial - final
    assert set(layer.order) == set(days)


def test_maximum_wait():
    days = {1: 10, 2: 1}
    assert Layer.get_maximum_wait([1, 2], days) == (20, 1, 0, 2)
    assert Layer.get_maximum_wait([2, 1, 1], days) == (20, 1, 2, 4)
    assert Layer.get_maximum_wait([], days) == (0, 0, 0, 0)


def test_get_days_is_pure(example):
    network, _ = example
    layer = Layer(network)
    colors = layer.colors
    first = layer.get_days()
    assert layer.get_days() == first
    assert np.array_equal(layer.colors, colors)
    assert max(first.values()) == 80


def test_empty_layer():
    layer = Layer(np.zeros((4, 4), dtype=np.int64))
    assert layer.get_days() == {}
    assert layer.order == []
    assert len(layer.schedule) == 0


def test_relation_not_mutated(example):
    network, _ = example
    original = network.copy()
    Layer(network)
    assert np.array_equal(network, original)


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_random_layers(seed):
    relation = generate_matrix(40, 50, np.random.default_rng(seed), probability=0.2)
    layer = Layer(relation)
    assert layer.is_complete()
    assert layer.is_proper()
    scheduled = {meetup for day in layer.schedule for meetup in day}
    assert scheduled == set(layer.edges)
    for day in layer.schedule:
        participants = [p for meetup in day for p in meetup]
        assert len(participants) == len(set(participants))
