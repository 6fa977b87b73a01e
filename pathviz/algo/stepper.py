import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Union

from pathviz.core.grid import Cell, Grid
from pathviz.core.state import SearchState, reset_search
from pathviz.core.errors import UserInputError, InvalidStepInvocation
from pathviz.algo.base import FrontierPolicy
from pathviz.algo.solvers import get_policy
from pathviz.algo.path import reconstruct_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Expanded:
    cell: Cell
    terminal = False


@dataclass(frozen=True)
class Found:
    cell: Cell
    terminal = True


@dataclass(frozen=True)
class Exhausted:
    terminal = True


StepResult = Union[Expanded, Found, Exhausted]


class Stepper:
    """
    Drives one search over a SearchState, one dequeue-and-expand per step().
    Holds no state of its own between calls beyond the terminal result;
    everything the renderer needs lives in the SearchState.
    """

    def __init__(self, grid: Grid, state: SearchState, policy: FrontierPolicy):
        self.grid = grid
        self.state = state
        self.policy = policy
        self.generation = state.generation
        self.result: Optional[StepResult] = None

    @property
    def finished(self) -> bool:
        return self.result is not None and self.result.terminal

    def step(self) -> StepResult:
        if self.finished:
            raise InvalidStepInvocation(f"{self.policy.name} search already ended with {self.result!r}")
        if self.state.generation != self.generation:
            raise InvalidStepInvocation(f"{self.policy.name} search state was reset; start a new run")

        state = self.state
        if not state.frontier:
            self.result = Exhausted()
            return self.result

        current = self.policy.pop(state)
        state.metrics.visited_count += 1

        if current is state.goal:
            self.result = Found(current)
            return self.result

        state.visited.append(current)
        for neighbor in self.grid.neighbors(current):
            self.policy.relax(state, current, neighbor)

        self.result = Expanded(current)
        return self.result

    def run(self) -> Iterator[StepResult]:
        """Lazy sequence of step results, ending with Found or Exhausted."""
        while not self.finished:
            yield self.step()

    def run_all(self) -> StepResult:
        """Helper to run the search to completion."""
        for _ in self.run():
            pass
        return self.result

    def path(self) -> List[Cell]:
        if isinstance(self.result, Found):
            return list(reconstruct_path(self.result.cell))
        return []


def start_search(state: SearchState, grid: Grid, algorithm) -> Stepper:
    """
    Resets state and seeds the frontier for a fresh run of algorithm.
    Raises UserInputError (leaving state untouched) if start or goal is unset.
    """
    if state.start is None or state.goal is None:
        raise UserInputError("Start and goal must be selected.")

    policy = get_policy(algorithm)
    reset_search(state, grid)
    policy.seed(state)
    logger.debug(f"Seeded {policy.name} from {state.start.pos} to {state.goal.pos}")
    return Stepper(grid, state, policy)
