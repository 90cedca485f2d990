import logging
import random
from typing import List, Optional, Tuple

import numpy as np

from gridmaze.compare_lib import mazes_equal
from gridmaze.config_lib import MazeParams
from gridmaze.graph_lib import Graph, Vertex
from gridmaze.grid_lib import (
    Direction,
    InvalidDimensions,
    check_dimensions,
    neighbor_directions,
    neighbors,
)
from gridmaze.random_lib import SeededRandom


__all__ = ["Maze", "Direction", "InvalidDimensions", "MAX_RANDOM_SEED"]

MAX_RANDOM_SEED = 32768


class Maze(Graph):
    """Rectangular maze over `height` x `width` tiles.

    Tiles are vertices numbered in row-major order, 0 at the top left and
    height*width - 1 at the bottom right. For a 3x3 maze:

        0 1 2
        3 4 5
        6 7 8

    Passages are generated in the constructor. Mazes built with the same
    height, width and seed have the same layout.
    """

    def __init__(self, height: int, width: int, seed: Optional[int] = None):
        check_dimensions(height, width)
        super().__init__(height * width)
        self.height = height
        self.width = width
        if seed is None:
            seed = random.randrange(MAX_RANDOM_SEED)
        self.generation_seed = seed
        self._rnd = SeededRandom(seed)
        self._generate()

    @classmethod
    def from_params(cls, params: MazeParams) -> "Maze":
        return cls(params.height, params.width, params.seed)

    def tile_id(self, row, col):
        if not self.is_in(row, col):
            raise ValueError(f"({row}, {col}) is outside the maze")
        return row * self.width + col

    def tile_position(self, tile) -> Tuple[int, int]:
        if not 0 <= tile < self.num_vertices:
            raise ValueError(f"tile {tile} is outside the maze")
        return divmod(tile, self.width)

    def is_in(self, row, col):
        return (0 <= row < self.height) and (0 <= col < self.width)

    def get_neighbors(self, vertex: Vertex) -> List[Vertex]:
        return [self.vertices[n] for n in neighbors(vertex.id, self.height, self.width)]

    def has_path(self, tile, direction):
        direction = Direction(direction)
        for d, n in neighbor_directions(tile, self.height, self.width):
            if d == direction:
                return self.vertices[n] in self.vertices[tile].edges
        return False

    def open_directions(self, tile) -> List[Direction]:
        return [d for d in Direction.list_clockwise() if self.has_path(tile, d)]

    def __eq__(self, other):
        if not isinstance(other, Maze):
            return NotImplemented
        return mazes_equal(self, other)

    # equal mazes may be distinct objects; layouts are mutable through add_edge
    __hash__ = None

    def __repr__(self):
        return (
            f"Maze(height={self.height}, width={self.width}, "
            f"seed={self.generation_seed})"
        )

    def _generate(self):
        n_tiles = self.height * self.width
        visited = np.zeros(n_tiles, dtype=bool)
        stack: List[Vertex] = []
        last = self.vertices[n_tiles - 1]

        u = self.vertices[0]
        visited[u.id] = True
        while u is not last:
            stack.append(u)
            visited[u.id] = True
            v = self._carve_from(u, visited)
            while v is None:
                if not stack:
                    raise RuntimeError(
                        f"backtracked past the entrance of {self!r} "
                        f"before reaching tile {last.id}"
                    )
                u = stack.pop()
                v = self._carve_from(u, visited)
            u = v
            stack.append(u)
            visited[u.id] = True

        for tile in range(n_tiles):
            if not visited[tile]:
                self._attach_to_visited(self.vertices[tile], visited)

        log.info(
            "Generated %dx%d maze (seed=%d) with %d passages",
            self.height, self.width, self.generation_seed, self.num_edges(),
        )

    def _carve_from(self, u: Vertex, visited) -> Optional[Vertex]:
        """Opens a passage from `u` to an unvisited neighbor.

        Returns that neighbor, or None if `u` is a dead end.
        """
        options = self.get_neighbors(u)
        v = options[self._rnd.next_int(len(options))]
        if visited[v.id]:
            v = next((x for x in options if not visited[x.id]), None)
            if v is None:
                return None
        visited[v.id] = True
        self.add_edge(u.id, v.id)
        log.debug("Carved %d -> %d", u.id, v.id)
        return v

    def _attach_to_visited(self, u: Vertex, visited):
        options = self.get_neighbors(u)
        if not options:
            log.warning("Tile %d has no neighbors, left disconnected", u.id)
            return
        v = options[self._rnd.next_int(len(options))]
        if not visited[v.id]:
            v = next((x for x in options if visited[x.id]), None)
        if v is None:
            log.warning("Tile %d has no visited neighbor, left disconnected", u.id)
            return
        self.add_edge(u.id, v.id)
        visited[u.id] = True
        log.debug("Attached %d -> %d", u.id, v.id)


log = logging.getLogger(__name__)
