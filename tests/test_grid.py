import unittest
import sys
import os

# Add project root to path so we can import pathviz
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from pathviz.core.grid import Cell, Grid, INF
from pathviz.core.state import SearchState, reset_search, heuristic

class TestGrid(unittest.TestCase):
    def test_initialization(self):
        rows, cols = 4, 6
        grid = Grid(rows, cols)
        self.assertEqual(len(grid), rows * cols, f"Grid initialization size mismatch. Expected {rows*cols}, got {len(grid)}")
        for cell in grid:
            self.assertFalse(cell.is_wall)
            self.assertEqual(cell.cost_so_far, INF)
            self.assertEqual(cell.estimated_total, INF)
            self.assertIsNone(cell.predecessor)

    def test_coordinates(self):
        grid = Grid(5, 5)
        idx = grid.get_index(2, 2)
        self.assertEqual(idx, 12) # 2 * 5 + 2
        self.assertEqual(grid.get_cell(3, 1).pos, (3, 1))

        with self.assertRaises(IndexError):
            grid.get_index(-1, 0)
        with self.assertRaises(IndexError):
            grid.get_index(0, 5)

    def test_rectangular_bounds(self):
        # 2 rows, 3 cols: x runs to 2, y to 1
        grid = Grid(2, 3)
        self.assertEqual(grid.get_cell(2, 1).pos, (2, 1))
        with self.assertRaises(IndexError):
            grid.get_cell(1, 2)
        self.assertIsNone(grid.cell_at(3, 0))
        self.assertIsNone(grid.cell_at(0, -1))

    def test_one_cell_per_coordinate(self):
        grid = Grid(3, 3)
        self.assertIs(grid.get_cell(1, 2), grid.get_cell(1, 2))
        self.assertEqual(len({c.pos for c in grid}), 9)

    def test_coordinates_immutable(self):
        cell = Grid(2, 2).get_cell(1, 1)
        with self.assertRaises(AttributeError):
            cell.x = 0

    def test_toggle_wall(self):
        grid = Grid(3, 3)
        grid.toggle_wall(1, 1)
        self.assertTrue(grid.is_wall(1, 1))
        # Painting again keeps the wall
        grid.toggle_wall(1, 1)
        self.assertTrue(grid.is_wall(1, 1))
        self.assertEqual([c.pos for c in grid.walls()], [(1, 1)])

    def test_neighbors(self):
        grid = Grid(3, 3)
        # Center cell (1,1) has 4 neighbours in +x, -x, +y, -y order
        neighbors = [c.pos for c in grid.neighbors(grid.get_cell(1, 1))]
        self.assertEqual(neighbors, [(2, 1), (0, 1), (1, 2), (1, 0)])

        # Corner cell (0,0) has 2 neighbours, no wraparound
        corner = [c.pos for c in grid.neighbors(grid.get_cell(0, 0))]
        self.assertEqual(corner, [(1, 0), (0, 1)])

        far_corner = [c.pos for c in grid.neighbors(grid.get_cell(2, 2))]
        self.assertEqual(far_corner, [(1, 2), (2, 1)])

    def test_neighbors_include_walls(self):
        grid = Grid(3, 3)
        grid.toggle_wall(2, 1)
        neighbors = grid.neighbors(grid.get_cell(1, 1))
        self.assertIn(grid.get_cell(2, 1), neighbors)

    def test_predecessor_is_weak(self):
        parent = Cell(0, 0)
        child = Cell(1, 0)
        child.predecessor = parent
        self.assertIs(child.predecessor, parent)

        del parent
        self.assertIsNone(child.predecessor)

class TestSearchState(unittest.TestCase):
    def test_heuristic(self):
        grid = Grid(5, 5)
        self.assertEqual(heuristic(grid.get_cell(0, 0), grid.get_cell(4, 4)), 8)
        self.assertEqual(heuristic(grid.get_cell(3, 1), grid.get_cell(1, 2)), 3)
        self.assertEqual(heuristic(grid.get_cell(2, 2), grid.get_cell(2, 2)), 0)

    def test_reset_search(self):
        grid = Grid(3, 3)
        start, goal = grid.get_cell(0, 0), grid.get_cell(2, 2)
        state = SearchState(start=start, goal=goal)

        mid = grid.get_cell(1, 1)
        mid.cost_so_far = 2
        mid.estimated_total = 4
        mid.predecessor = start
        state.frontier.append(mid)
        state.visited.append(start)
        state.metrics.visited_count = 7
        grid.toggle_wall(2, 0)
        generation = state.generation

        reset_search(state, grid)

        self.assertEqual(state.frontier, [])
        self.assertEqual(state.visited, [])
        self.assertEqual(state.metrics.visited_count, 0)
        self.assertGreater(state.metrics.start_time, 0)
        self.assertEqual(state.generation, generation + 1)
        self.assertEqual(mid.cost_so_far, INF)
        self.assertEqual(mid.estimated_total, INF)
        self.assertIsNone(mid.predecessor)
        # Endpoints and walls survive
        self.assertIs(state.start, start)
        self.assertIs(state.goal, goal)
        self.assertTrue(grid.is_wall(2, 0))

    def test_membership_by_identity(self):
        grid = Grid(2, 2)
        state = SearchState()
        state.frontier.append(grid.get_cell(0, 1))
        self.assertTrue(state.in_frontier(grid.get_cell(0, 1)))
        self.assertFalse(state.in_frontier(Cell(0, 1)))
        self.assertFalse(state.is_visited(grid.get_cell(0, 1)))

    def test_elapsed_frozen_after_stop(self):
        state = SearchState()
        self.assertEqual(state.metrics.elapsed(), 0.0)
        reset_search(state, Grid(1, 1))
        state.metrics.stop()
        first = state.metrics.elapsed()
        self.assertEqual(state.metrics.elapsed(), first)
        self.assertGreaterEqual(first, 0.0)

if __name__ == '__main__':
    unittest.main()
