from dataclasses import dataclass
from typing import Optional


@dataclass
class MazeParams:
    height: int
    """number of rows"""
    width: int
    """number of columns"""
    seed: Optional[int] = None  # if None, then picked at random
