import time
from dataclasses import dataclass
from typing import List, Optional

from pathviz.core.grid import Cell, Grid


@dataclass
class RunMetrics:
    visited_count: int = 0
    start_time: float = 0.0
    end_time: float = 0.0

    def stop(self):
        self.end_time = time.time()

    def elapsed(self, now: float = None) -> float:
        """Seconds since the run started; frozen once stop() is called."""
        if not self.start_time:
            return 0.0
        if self.end_time:
            return self.end_time - self.start_time
        if now is None:
            now = time.time()
        return now - self.start_time


class SearchState:
    """
    Open set, closed set and designated endpoints for one run.
    visited keeps expansion order so a renderer can replay it.
    """

    def __init__(self, start: Optional[Cell] = None, goal: Optional[Cell] = None):
        self.frontier: List[Cell] = []
        self.visited: List[Cell] = []
        self.start = start
        self.goal = goal
        self.metrics = RunMetrics()
        # Bumped on every reset so a stepper can tell it is stale.
        self.generation = 0

    def in_frontier(self, cell: Cell) -> bool:
        # Identity scan, not an index: keeps insertion-order semantics.
        return any(c is cell for c in self.frontier)

    def is_visited(self, cell: Cell) -> bool:
        return any(c is cell for c in self.visited)


def reset_search(state: SearchState, grid: Grid):
    """
    Wipes every cell's cost/predecessor and empties the open and closed sets.
    Start, goal and walls are left alone.
    """
    for cell in grid:
        cell.clear_search()
    state.frontier = []
    state.visited = []
    state.metrics = RunMetrics(visited_count=0, start_time=time.time())
    state.generation += 1


def heuristic(a: Cell, b: Cell) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)
