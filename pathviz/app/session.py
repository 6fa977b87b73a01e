import logging
from typing import List, Optional

from pathviz import config
from pathviz.core.grid import Cell, Grid
from pathviz.core.state import SearchState, reset_search
from pathviz.algo.solvers import Algorithm
from pathviz.algo.stepper import Found, StepResult, Stepper, start_search

logger = logging.getLogger(__name__)

NO_PATH_NOTICE = "No path found."


class StepScheduler:
    """
    Fixed-interval pacing, clocked by the caller (no threads, no timers).
    The owner asks due(now) each frame and runs that many steps.
    """

    def __init__(self, interval_ms: float, max_burst: int = config.MAX_STEPS_PER_TICK):
        self.interval_ms = interval_ms
        self.max_burst = max_burst
        self.active = False
        self.last_fire = 0.0

    def start(self, now_ms: float):
        self.active = True
        self.last_fire = now_ms

    def cancel(self):
        self.active = False

    def due(self, now_ms: float) -> int:
        if not self.active:
            return 0
        elapsed = now_ms - self.last_fire
        count = int(elapsed // self.interval_ms)
        if count <= 0:
            return 0
        if count > self.max_burst:
            # Drop the backlog rather than catching up in one frame
            self.last_fire = now_ms
            return self.max_burst
        self.last_fire += count * self.interval_ms
        return count


class Session:
    """
    Everything the window needs between frames: the grid, the endpoints the
    user picked, the selected algorithm and the run in progress.
    """

    def __init__(self, rows: int = config.ROWS, cols: int = config.COLS,
                 algorithm=config.DEFAULT_ALGO, delay_ms: float = config.DEFAULT_DELAY_MS):
        self.rows = rows
        self.cols = cols
        self.grid = Grid(rows, cols)
        self.state = SearchState()
        self.algorithm = Algorithm(algorithm)
        self.scheduler = StepScheduler(self.clamp_delay(delay_ms))
        self.stepper: Optional[Stepper] = None
        self.path: List[Cell] = []
        self.notice: Optional[str] = None

    @staticmethod
    def clamp_delay(delay_ms: float) -> float:
        return max(config.MIN_DELAY_MS, min(config.MAX_DELAY_MS, delay_ms))

    @property
    def delay_ms(self) -> float:
        return self.scheduler.interval_ms

    @property
    def running(self) -> bool:
        return self.stepper is not None and self.scheduler.active and not self.stepper.finished

    @property
    def start_cell(self) -> Optional[Cell]:
        return self.state.start

    @property
    def goal_cell(self) -> Optional[Cell]:
        return self.state.goal

    def set_delay(self, delay_ms: float):
        self.scheduler.interval_ms = self.clamp_delay(delay_ms)

    def select_algorithm(self, algorithm):
        # Applies to the next start(); a run in progress keeps its policy.
        self.algorithm = Algorithm(algorithm)
        logger.debug(f"Selected {self.algorithm.label}")

    def cancel(self):
        """Stops stepping and clears the search overlay."""
        if self.running:
            logger.info(f"Cancelled {self.stepper.policy.name} run")
        self.scheduler.cancel()
        if self.stepper is not None:
            reset_search(self.state, self.grid)
            self.stepper = None

    def click(self, x: int, y: int) -> Optional[Cell]:
        """
        First click picks the start, second (on another cell) the goal,
        every later click paints a wall. Off-grid clicks are ignored.
        """
        cell = self.grid.cell_at(x, y)
        if cell is None:
            return None

        if self.running:
            self.cancel()
        self.path = []
        self.notice = None

        if self.state.start is None:
            self.state.start = cell
            logger.debug(f"Start set to {cell.pos}")
        elif self.state.goal is None and cell is not self.state.start:
            self.state.goal = cell
            logger.debug(f"Goal set to {cell.pos}")
        elif cell is not self.state.start and cell is not self.state.goal:
            self.grid.toggle_wall(x, y)
        else:
            return None
        return cell

    def start(self, now_ms: float):
        # start_search raises UserInputError before touching anything
        stepper = start_search(self.state, self.grid, self.algorithm)
        self.scheduler.cancel()
        self.stepper = stepper
        self.path = []
        self.notice = None
        self.scheduler.start(now_ms)
        logger.info(f"Running {stepper.policy.name} from {self.state.start.pos} to {self.state.goal.pos}")

    def reset(self):
        self.scheduler.cancel()
        self.stepper = None
        self.grid = Grid(self.rows, self.cols)
        self.state = SearchState()
        self.path = []
        self.notice = None
        logger.debug("Grid reset")

    def tick(self, now_ms: float) -> List[StepResult]:
        """Runs whatever steps the scheduler says are due; returns their results."""
        if not self.running:
            return []

        results = []
        for _ in range(self.scheduler.due(now_ms)):
            result = self.stepper.step()
            results.append(result)
            if result.terminal:
                self.finish(result)
                break
        return results

    def finish(self, result: StepResult):
        self.scheduler.cancel()
        self.state.metrics.stop()
        metrics = self.state.metrics
        if isinstance(result, Found):
            self.path = self.stepper.path()
            logger.info(f"{self.stepper.policy.name} found the goal: path {len(self.path)}, "
                        f"visited {metrics.visited_count}, {metrics.elapsed():.3f}s")
        else:
            self.notice = NO_PATH_NOTICE
            logger.info(f"{self.stepper.policy.name} exhausted the frontier after {metrics.visited_count} visits")
