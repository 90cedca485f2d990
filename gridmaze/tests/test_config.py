from gridmaze.config_lib import MazeParams
from gridmaze.maze_lib import Maze
from gridmaze.utils import load_from_yml
import dacite
import pytest


def test_load_params(tmp_path):
    path = tmp_path / "maze.yml"
    path.write_text("height: 4\nwidth: 5\nseed: 7\n")

    params = load_from_yml(MazeParams, path)

    assert params == MazeParams(height=4, width=5, seed=7)
    assert Maze.from_params(params) == Maze(4, 5, 7)


def test_seed_is_optional(tmp_path):
    path = tmp_path / "maze.yml"
    path.write_text("height: 2\nwidth: 3\n")

    params = load_from_yml(MazeParams, path)
    maze = Maze.from_params(params)

    assert params.seed is None
    assert (maze.height, maze.width) == (2, 3)
    assert maze.generation_seed is not None


def test_wrong_type(tmp_path):
    path = tmp_path / "maze.yml"
    path.write_text("height: three\nwidth: 3\n")

    with pytest.raises(dacite.WrongTypeError):
        load_from_yml(MazeParams, path)


def test_missing_field(tmp_path):
    path = tmp_path / "maze.yml"
    path.write_text("height: 3\n")

    with pytest.raises(dacite.MissingValueError):
        load_from_yml(MazeParams, path)
