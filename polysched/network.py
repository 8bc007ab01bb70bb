"""
Network planner: splits a relationship matrix into weight layers, colours each
layer and interleaves the layer schedules into one repeating schedule.

Implements the approximation of "Polyamorous Scheduling" by Gąsieniec, Smith
and Wild (https://arxiv.org/pdf/2403.00465). Besides the schedule, the planner
reports the lower bound of an optimal schedule and the upper bound guaranteed
for the approximation.
"""

import logging
from typing import Iterator, Sequence

import dask
import numpy as np

from polysched.coloring import Layer
from polysched.config import SIMULATED_CYCLES
from polysched.schedule import Schedule

logger = logging.getLogger(__name__)


class Network:
    """Relationship network of n participants

    Params
    ------
    network: np.ndarray | Sequence[Sequence[int]], symmetric n x n matrix of non-negative
    integer weights, zero diagonal. Zero means no relationship
    names: Sequence[str] | None, display names of the participants
    """

    def __init__(self, network: np.ndarray | Sequence[Sequence[int]], names: Sequence[str] | None = None):
        self.network = np.array(network, dtype=np.int64)
        self.names = list(names) if names is not None else None

    def __len__(self) -> int:
        return len(self.network)

    def get_degree(self) -> int:
        """Maximum number of relationships of a single participant"""
        if self.network.size == 0:
            return 0
        return int((self.network > 0).sum(axis=1).max())

    def get_layers(self) -> int:
        """Number of weight layers carved out before the final remainder layer"""
        degree = (self.get_degree() + 1) // 3
        count = 0
        while degree >= 2:
            count += 1
            degree //= 2
        return count

    def get_max(self, network: np.ndarray | None = None) -> int:
        """Maximum weight of a relationship, of this network or of the given matrix"""
        network = self.network if network is None else network
        if network.size == 0:
            return 0
        return int(np.triu(network, 1).max())

    def get_number_of_relationships(self) -> int:
        return int((np.triu(self.network, 1) > 0).sum())

    def get_minimum_run(self) -> int:
        """Lower bound on the schedule weight of an optimal schedule

        A participant with k relationships needs k distinct days to meet all of them,
        so one of them waits at least k days.
        """
        maximum = self.get_max()
        for row in self.network:
            weights = row[row > 0]
            if len(weights):
                maximum = max(maximum, len(weights) * int(weights.min()))
        return maximum

    def get_approximation_limit(self) -> int:
        """Upper bound on the schedule weight produced by `optimized_schedule`, minimum run * ceil(log2(n^3))"""
        size = len(self) ** 3
        count = (size - 1).bit_length() if size > 0 else 0
        return self.get_minimum_run() * count

    def layer_sections(self) -> Iterator[np.ndarray]:
        """Weight-bucketed sub-matrices, heaviest first, the last one holding all remaining light edges"""
        size = self.get_max()
        for _ in range(self.get_layers()):
            section = self.network.copy()
            section[(section > size) | (section <= size // 2)] = 0
            yield section
            size //= 2
        section = self.network.copy()
        section[section > size] = 0
        yield section

    def build_layers(self, parallel: bool = False) -> list[Layer]:
        """Colour every section, in creation order

        Params
        ------
        parallel: bool, build the layers concurrently with dask's threaded scheduler.
        Layers are independent of each other, results are collected in creation order
        """
        sections = list(self.layer_sections())
        if parallel:
            layers = list(dask.compute(*[dask.delayed(Layer)(s) for s in sections], scheduler="threads"))
        else:
            layers = [Layer(s) for s in sections]
        logger.debug(f"built {len(layers)} layers: {[len(layer.schedule) for layer in layers]} days")
        return layers

    @staticmethod
    def interleave(schedule: Schedule, days: list) -> Schedule:
        """Merge `days` into `schedule` in place, alternating one running day with one new day

        The new days repeat cyclically until the running schedule is exhausted, so
        lighter relationships already in `schedule` keep recurring between them.
        """
        if not days:
            return schedule
        increment = 0
        day = 0
        while day < len(days) or increment < len(schedule):
            if increment >= len(schedule):
                schedule.add(list(days[day]))
                increment += 1
            else:
                schedule.insert(increment, list(days[day % len(days)]))
                increment += 2
            day += 1
        return schedule

    def optimized_schedule(self, parallel: bool = False) -> Schedule:
        """Approximately optimal repeating schedule for the network

        Layers are merged from the lightest to the heaviest, so heavy relationships,
        inserted last, end up evenly spread over the cycle.

        Params
        ------
        parallel: bool, build the layers concurrently, see `build_layers`

        Returns
        -------
        Schedule carrying the network's names
        """
        layers = self.build_layers(parallel=parallel)
        schedule = Schedule(self.names)
        for layer in reversed(layers):
            Network.interleave(schedule, layer.schedule.days)
        logger.debug(
            f"schedule {schedule.name}: {len(schedule)} days for {self.get_number_of_relationships()} relationships in {len(layers)} layers"
        )
        return schedule

    def get_schedule_weight(self, schedule: Schedule) -> int:
        """Maximum strain any relationship endures while the schedule repeats

        Every day each relationship's strain grows by its weight and drops back to
        its weight on the days it is met. Simulates the cycle twice so wrap-around
        gaps are observed.
        """
        weights = self.network.copy()
        maximum = self.get_max(weights)
        for _ in range(SIMULATED_CYCLES):
            for day in schedule:
                weights += self.network
                for first, second in day:
                    weights[first, second] = self.network[first, second]
                    weights[second, first] = self.network[second, first]
                maximum = max(maximum, self.get_max(weights))
        return maximum

    def __repr__(self) -> str:
        return "\n".join("  ".join(str(v) for v in row) for row in self.network.tolist())


def optimized_schedule(matrix: np.ndarray | Sequence[Sequence[int]], names: Sequence[str] | None = None) -> Schedule:
    return Network(matrix, names).optimized_schedule()


def get_schedule_weight(matrix: np.ndarray | Sequence[Sequence[int]], schedule: Schedule) -> int:
    return Network(matrix).get_schedule_weight(schedule)


def get_minimum_run(matrix: np.ndarray | Sequence[Sequence[int]]) -> int:
    return Network(matrix).get_minimum_run()


def get_approximation_limit(matrix: np.ndarray | Sequence[Sequence[int]]) -> int:
    return Network(matrix).get_approximation_limit()
