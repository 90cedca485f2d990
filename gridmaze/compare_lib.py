from dataclasses import dataclass
from typing import Dict, FrozenSet

from gridmaze.graph_lib import Graph


@dataclass(frozen=True)
class CleanedMaze:
    """Maze layout with vertex references replaced by plain tile ids."""

    rows: int
    cols: int
    connections: Dict[int, FrozenSet[int]]


def clean_maze(maze) -> CleanedMaze:
    connections = {
        vertex.id: frozenset(n.id for n in vertex.edges) for vertex in maze
    }
    return CleanedMaze(rows=maze.height, cols=maze.width, connections=connections)


def is_maze(value) -> bool:
    return (
        isinstance(value, Graph)
        and isinstance(getattr(value, "height", None), int)
        and isinstance(getattr(value, "width", None), int)
    )


def connections_contained(a: CleanedMaze, b: CleanedMaze) -> bool:
    """Whether every passage of `a` is also a passage of `b`."""
    for tile, tile_neighbors in a.connections.items():
        if not tile_neighbors <= b.connections.get(tile, frozenset()):
            return False
    return True


def mazes_equal(maze_a, maze_b, symmetric=True) -> bool:
    """Compares two mazes by layout and dimensions, not identity.

    With `symmetric=False` only the passages of `maze_a` are looked up in
    `maze_b`, so extra passages in `maze_b` go unnoticed.
    """
    if not is_maze(maze_a) or not is_maze(maze_b):
        return False
    a = clean_maze(maze_a)
    b = clean_maze(maze_b)
    if a.rows != b.rows or a.cols != b.cols:
        return False
    if not connections_contained(a, b):
        return False
    if symmetric:
        return connections_contained(b, a)
    return True
