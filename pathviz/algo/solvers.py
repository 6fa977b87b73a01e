from enum import Enum
from pathviz.core.grid import Cell
from pathviz.core.state import SearchState, heuristic
from pathviz.algo.base import FrontierPolicy


class Algorithm(Enum):
    BFS = "bfs"
    DIJKSTRA = "dijkstra"
    ASTAR = "astar"

    @property
    def label(self) -> str:
        return {"bfs": "BFS", "dijkstra": "Dijkstra", "astar": "A*"}[self.value]


class BFS(FrontierPolicy):
    name = "BFS"

    def seed(self, state: SearchState):
        state.frontier.append(state.start)

    def pop(self, state: SearchState) -> Cell:
        return state.frontier.pop(0)

    def relax(self, state: SearchState, current: Cell, neighbor: Cell):
        # No cost tracking: queue order is the depth.
        if neighbor.is_wall or state.is_visited(neighbor) or state.in_frontier(neighbor):
            return
        neighbor.predecessor = current
        state.frontier.append(neighbor)


class Dijkstra(FrontierPolicy):
    """ Uniform-cost search; every edge costs 1. """
    name = "Dijkstra"

    def seed(self, state: SearchState):
        state.start.cost_so_far = 0
        state.frontier.append(state.start)

    def sort_key(self, cell: Cell):
        return cell.cost_so_far

    def pop(self, state: SearchState) -> Cell:
        # list.sort is stable, so equal keys keep insertion order.
        state.frontier.sort(key=self.sort_key)
        return state.frontier.pop(0)

    def relax(self, state: SearchState, current: Cell, neighbor: Cell):
        if neighbor.is_wall or state.is_visited(neighbor):
            return
        g = current.cost_so_far + 1
        if g < neighbor.cost_so_far:
            neighbor.cost_so_far = g
            self.update_estimate(state, neighbor)
            neighbor.predecessor = current
            if not state.in_frontier(neighbor):
                state.frontier.append(neighbor)

    def update_estimate(self, state: SearchState, cell: Cell):
        pass


class AStar(Dijkstra):
    """ Dijkstra ordered by g + Manhattan distance to the goal. """
    name = "A*"

    def seed(self, state: SearchState):
        super().seed(state)
        state.start.estimated_total = heuristic(state.start, state.goal)

    def sort_key(self, cell: Cell):
        return cell.estimated_total

    def update_estimate(self, state: SearchState, cell: Cell):
        cell.estimated_total = cell.cost_so_far + heuristic(cell, state.goal)


POLICIES = {
    Algorithm.BFS: BFS,
    Algorithm.DIJKSTRA: Dijkstra,
    Algorithm.ASTAR: AStar,
}


def get_policy(algorithm) -> FrontierPolicy:
    """Accepts an Algorithm or its string value ("bfs", "dijkstra", "astar")."""
    return POLICIES[Algorithm(algorithm)]()
