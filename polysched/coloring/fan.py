"""
Fan construction and cd-path inversion for Vizing edge colouring.

Implements one extension step of the Misra & Gries algorithm
(https://www.cs.utexas.edu/~misra/psp.dir/vizing.pdf): given an uncoloured
edge (root, first_child), colour it without breaking the proper colouring of
the edges coloured so far.

The colour map is a square integer matrix shared with the caller and mutated
in place: `NO_EDGE` where there is no edge, `PENDING` for edges still to be
coloured, positive integers for colours.
"""

import logging

import numpy as np

from polysched.config import PENDING

logger = logging.getLogger(__name__)


class Fan:
    """Maximal fan around `root` whose first edge is the pending edge to `first_child`

    Params
    ------
    color_map: np.ndarray, square colour matrix, mutated by `invert_cd_path`
    root: int, fixed endpoint of the pending edge
    first_child: int, other endpoint of the pending edge
    """

    def __init__(self, color_map: np.ndarray, root: int, first_child: int):
        self.color_map = color_map
        self.root = root
        self.children: list[int] = [first_child]
        self.build_fan()
        self.c = self.find_c()
        self.d = self.find_d()

    def colors_from(self, vertex: int) -> set[int]:
        row = self.color_map[vertex]
        return set(row[row > 0].tolist())

    def connections_to(self, vertex: int) -> list[int]:
        """Neighbours of `vertex` over already coloured edges, ascending"""
        return np.flatnonzero(self.color_map[vertex] > 0).tolist()

    def find_connection(self, color: int, start: int) -> int:
        """Vertex joined to `start` by an edge of `color`, -1 if there is none"""
        matches = np.flatnonzero(self.color_map[start] == color)
        return int(matches[0]) if len(matches) else -1

    def build_fan(self):
        """Grow the fan greedily until a full pass over the root's neighbours adds nothing

        Maximal does not mean maximum length.
        """
        root_connections = self.connections_to(self.root)
        last = self.children[0]
        maximal = False
        while not maximal:
            maximal = True
            for vertex in root_connections:
                color = int(self.color_map[self.root, vertex])
                if vertex not in self.children and color not in self.colors_from(last):
                    self.children.append(vertex)
                    last = vertex
                    maximal = False

    def find_c(self) -> int:
        """Smallest colour free on the root"""
        used = self.colors_from(self.root)
        color = 1
        while color in used:
            color += 1
        return color

    def find_d(self) -> int:
        """Smallest colour free on the last child, distinct from c"""
        used = self.colors_from(self.children[-1])
        color = 1
        while color in used or color == self.c:
            color += 1
        return color

    def cd_path(self) -> list[int]:
        """Maximal path through the root alternating between colours c and d"""
        path = [self.root]
        pos, use_c = self.root, True
        while True:
            pos = self.find_connection(self.c if use_c else self.d, pos)
            if pos < 0 or pos in path:
                break
            path.append(pos)
            use_c = not use_c

        pos, use_c = self.root, False
        while True:
            pos = self.find_connection(self.c if use_c else self.d, pos)
            if pos < 0 or pos in path:
                break
            path.insert(0, pos)
            use_c = not use_c
        return path

    def invert_cd_path(self):
        """Swap c and d along the cd path, which frees d on the root, then rotate the fan"""
        path = self.cd_path()
        for v1, v2 in zip(path[:-1], path[1:]):
            color = self.d if self.color_map[v1, v2] == self.c else self.c
            self.color_map[v1, v2] = color
            self.color_map[v2, v1] = color
        logger.debug(f"root {self.root}: inverted cd path {path} with c={self.c}, d={self.d}")
        self.rotate()

    def find_reverse_count(self) -> int:
        """Length w of the subfan children[:w] which can be rotated keeping the colouring proper

        Longest prefix that is still a fan after the inversion, shortened until it
        ends on a child where d is free. The first child is always eligible.
        """
        count = 1
        while count < len(self.children) and int(
            self.color_map[self.root, self.children[count]]
        ) not in self.colors_from(self.children[count - 1]):
            count += 1
        while count > 1 and self.d in self.colors_from(self.children[count - 1]):
            count -= 1
        return count

    def rotate(self):
        """Shift each child of the subfan to its successor's colour, the pending slot gets d"""
        count = self.find_reverse_count()
        subfan = self.children[:count]
        colors = [int(self.color_map[self.root, subfan[(i + 1) % count]]) for i in range(count)]
        for i in reversed(range(count)):
            if colors[i] == PENDING:
                colors[i] = self.d
                break
        for child, color in zip(subfan, colors):
            self.color_map[self.root, child] = color
            self.color_map[child, self.root] = color

    def __repr__(self) -> str:
        return f"Fan(root={self.root}, children={self.children}, c={self.c}, d={self.d})"


def color_edge(color_map: np.ndarray, root: int, child: int):
    """Colour the pending edge (root, child) in place, keeping the colouring proper"""
    Fan(color_map, root, child).invert_cd_path()
