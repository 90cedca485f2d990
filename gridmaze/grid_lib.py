import enum
from typing import List, Tuple


class InvalidDimensions(ValueError):
    pass


class Direction(str, enum.Enum):
    North = 'north'
    South = 'south'
    East = 'east'
    West = 'west'

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self.value]

    def apply(self, row, col, d=1):
        d_row, d_col = self.delta
        return row + d_row * d, col + d_col * d

    @classmethod
    def list_clockwise(cls):
        return [cls.North, cls.East, cls.South, cls.West]


# (row, col) offsets, rows grow downwards
_DELTAS = {
    'north': (-1, 0),
    'south': (1, 0),
    'east': (0, 1),
    'west': (0, -1),
}


def check_dimensions(height, width):
    for name, value in (("height", height), ("width", width)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidDimensions(f"{name} must be an int, got {value!r}")
        if value <= 0:
            raise InvalidDimensions(f"{name} must be positive, got {value}")


def neighbor_directions(tile: int, height: int, width: int) -> List[Tuple[Direction, int]]:
    """Grid neighbors of a row-major tile id, paired with their direction.

    Maze generation picks neighbors by index, so the order is fixed:
    top and bottom rows list horizontal neighbors first and then the single
    vertical one, every other row lists vertical neighbors first.
    Directions that fall off the grid are omitted.
    """
    check_dimensions(height, width)
    if not 0 <= tile < height * width:
        raise ValueError(f"tile {tile} is outside a {height}x{width} grid")
    row, col = divmod(tile, width)

    if row == 0:
        order = [Direction.West, Direction.East, Direction.South]
    elif row == height - 1:
        order = [Direction.West, Direction.East, Direction.North]
    else:
        order = [Direction.North, Direction.South, Direction.West, Direction.East]

    result = []
    for d in order:
        r1, c1 = d.apply(row, col)
        if 0 <= r1 < height and 0 <= c1 < width:
            result.append((d, r1 * width + c1))
    return result


def neighbors(tile: int, height: int, width: int) -> List[int]:
    return [n for _, n in neighbor_directions(tile, height, width)]
