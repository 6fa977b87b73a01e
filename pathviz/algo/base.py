from abc import ABC, abstractmethod
from pathviz.core.grid import Cell
from pathviz.core.state import SearchState

class FrontierPolicy(ABC):
    """
    Ordering rule + relaxation rule for one search algorithm.
    The Stepper owns the loop; a policy only decides what comes off the
    frontier next and how a neighbour goes on.
    """
    name = "?"

    @abstractmethod
    def seed(self, state: SearchState):
        """Initialise the start cell and put it on the frontier."""
        pass

    @abstractmethod
    def pop(self, state: SearchState) -> Cell:
        pass

    @abstractmethod
    def relax(self, state: SearchState, current: Cell, neighbor: Cell):
        pass
