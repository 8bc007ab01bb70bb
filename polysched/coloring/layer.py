import logging

import numpy as np

from polysched.config import NO_EDGE, PENDING
from polysched.schedule import Day, Meetup, Schedule

from .fan import color_edge

logger = logging.getLogger(__name__)


class Layer:
    """Edge colouring of one weight layer and the balanced cycle of its colour classes

    Every colour class becomes a day. The cyclic order of days is then balanced
    by duplicating the day responsible for the worst wait weight, as long as
    that strictly improves it.

    Params
    ------
    relation: np.ndarray, symmetric weight matrix of the layer, not mutated
    """

    def __init__(self, relation: np.ndarray):
        self.relation = np.asarray(relation)
        self.edges = self.get_edges()
        self._colors = self.initialize_colors()
        self.make_map()
        self.order = self.optimize_order()
        self.schedule = self.build_schedule()
        logger.debug(
            f"layer of {len(self.edges)} edges: {len(self.get_days())} colours, {len(self.schedule)} days"
        )

    @property
    def colors(self) -> np.ndarray:
        return self._colors.copy()

    def initialize_colors(self) -> np.ndarray:
        colors = np.full(self.relation.shape, NO_EDGE, dtype=np.int64)
        colors[self.relation > 0] = PENDING
        return colors

    def get_edges(self) -> list[Meetup]:
        """All relationships (i, j) with i < j, row-major"""
        rows, cols = np.nonzero(np.triu(self.relation, 1) > 0)
        return list(zip(rows.tolist(), cols.tolist()))

    def make_map(self):
        edges = list(self.edges)
        while edges:
            root, child = edges.pop(0)
            color_edge(self._colors, root, child)
        assert self.is_complete(), "pending edge left after colouring"
        assert self.is_proper(), f"colouring is not proper:\n{self}"

    def is_complete(self) -> bool:
        return not (self._colors == PENDING).any()

    def is_proper(self) -> bool:
        if not np.array_equal(self._colors, self._colors.T):
            return False
        for row in self._colors:
            used = row[row > 0]
            if len(used) != len(np.unique(used)):
                return False
        return True

    def get_days(self) -> dict[int, int]:
        """Colours mapped to the maximum weight of a relationship of that colour"""
        days: dict[int, int] = {}
        for i, j in self.edges:
            color = int(self._colors[i, j])
            days[color] = max(days.get(color, 0), int(self.relation[i, j]))
        return days

    def get_day(self, color: int) -> Day:
        return [(i, j) for i, j in self.edges if self._colors[i, j] == color]

    @staticmethod
    def get_maximum_wait(order: list[int], days: dict[int, int]) -> tuple[int, int, int, int]:
        """Worst wait weight in a cyclic order of days

        Params
        ------
        order: list[int], cyclic order of colours, a colour may occur repeatedly
        days: dict[int, int], day weight of each colour

        Returns
        -------
        (weight, day, start, end) of the first maximum, where end is the (unwrapped)
        position of the next occurrence of day after start
        """
        maximum = (0, 0, 0, 0)
        for start, day in enumerate(order):
            end = start + 1
            while order[end % len(order)] != day:
                end += 1
            weight = days[day] * (end - start)
            if weight > maximum[0]:
                maximum = (weight, day, start, end)
        return maximum

    def optimize_order(self) -> list[int]:
        """Greedily duplicate days to split the worst gap, while the worst wait weight strictly decreases"""
        days = self.get_days()
        order = sorted(days)
        while True:
            weight, day, start, end = self.get_maximum_wait(order, days)
            if end - start <= 2:
                break
            added = (start + end + 1) // 2 % len(order)
            order.insert(added, day)
            new_weight = self.get_maximum_wait(order, days)[0]
            if new_weight >= weight:
                order.pop(added)
                break
            logger.debug(f"duplicated day {day} at {added}: wait weight {weight} -> {new_weight}")
        return order

    def build_schedule(self) -> Schedule:
        return Schedule(days=[self.get_day(color) for color in self.order])

    def __repr__(self) -> str:
        return "\n".join("  ".join(str(v) for v in row) for row in self._colors.tolist())
