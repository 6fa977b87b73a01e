from typing import Iterator
from pathviz.core.grid import Cell

def reconstruct_path(goal: Cell) -> Iterator[Cell]:
    """
    Walks predecessor links from goal back toward the start.
    Yields the goal first; the start (no predecessor) is not yielded, so a
    goal that is the start, or was never reached, gives an empty walk.
    """
    current = goal
    while current is not None and current.predecessor is not None:
        yield current
        current = current.predecessor
