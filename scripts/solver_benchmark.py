import sys
import os
import time
import argparse

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from pathviz.core.grid import Grid
from pathviz.core.state import SearchState
from pathviz.algo.stepper import Found, start_search
from pathviz.algo.walls import scatter_walls

# ==========================================
# GLOBAL CONFIGURATION
# Add or remove algorithm names here to include/exclude them from the race.
# ==========================================
ENABLED_SOLVERS = [
    "bfs",
    "dijkstra",
    "astar",
]

def run_benchmark():
    parser = argparse.ArgumentParser(description="Solver Benchmark")
    parser.add_argument("--rows", type=int, default=20, help="Grid rows")
    parser.add_argument("--cols", type=int, default=20, help="Grid columns")
    parser.add_argument("--density", type=float, default=0.25, help="Wall density (0.0-1.0)")
    parser.add_argument("--trials", type=int, default=20, help="Number of random grids")
    parser.add_argument("--seed", type=int, default=0, help="Base random seed")
    args = parser.parse_args()

    print(f"=== PATHFINDING BENCHMARK ===")
    print(f"Size: {args.cols}x{args.rows} | Density: {args.density} | Trials: {args.trials}")
    print(f"Solvers: {', '.join(ENABLED_SOLVERS)}")
    print("-" * 50)

    totals = {name: {"time": 0.0, "visited": 0, "path": 0, "found": 0} for name in ENABLED_SOLVERS}
    mismatches = 0

    for trial in range(args.trials):
        grid = Grid(args.rows, args.cols)
        start = grid.get_cell(0, 0)
        goal = grid.get_cell(args.cols - 1, args.rows - 1)
        scatter_walls(grid, args.density, seed=args.seed + trial, keep=(start, goal))
        state = SearchState(start=start, goal=goal)

        lengths = set()
        for name in ENABLED_SOLVERS:
            t_start = time.time()
            stepper = start_search(state, grid, name)
            stepper.run_all()
            duration = time.time() - t_start

            path_len = len(stepper.path())
            found = isinstance(stepper.result, Found)
            lengths.add(path_len if found else None)

            totals[name]["time"] += duration
            totals[name]["visited"] += state.metrics.visited_count
            totals[name]["path"] += path_len
            totals[name]["found"] += int(found)

        # All three are optimal on unit-cost grids
        if len(lengths) != 1:
            mismatches += 1
            print(f"Trial {trial}: path lengths disagree {sorted(lengths, key=str)}")

    # Leaderboard
    print("=" * 60)
    print(f"{'RANK':<5} | {'ALGORITHM':<10} | {'TIME (s)':<10} | {'FOUND':<6} | {'AVG VISITED':<11}")
    print("-" * 60)

    ranked = sorted(ENABLED_SOLVERS, key=lambda n: totals[n]["visited"])
    for i, name in enumerate(ranked):
        res = totals[name]
        avg_visited = res["visited"] / max(1, args.trials)
        print(f"{i+1:<5} | {name.upper():<10} | {res['time']:<10.4f} | {res['found']:<6} | {avg_visited:<11.1f}")
    print("=" * 60)
    print(f"Path length mismatches: {mismatches}")

if __name__ == "__main__":
    run_benchmark()
