import argparse
import sys
import os
import logging

# Ensure project root is in path so we can import 'pathviz' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from pathviz import config

ALGO_CHOICES = ["bfs", "dijkstra", "astar"]


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def parse_point(text: str):
    """'x,y' -> (x, y)"""
    try:
        x, y = text.split(",")
        return int(x), int(y)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected 'x,y', got {text!r}")


def build_parser():
    parser = argparse.ArgumentParser(description="Pathviz: step-by-step grid pathfinding visualizer")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Visual Command
    vis_parser = subparsers.add_parser("visual", help="Open the interactive window")
    vis_parser.add_argument("--rows", type=int, default=config.ROWS, help="Grid rows")
    vis_parser.add_argument("--cols", type=int, default=config.COLS, help="Grid columns")
    vis_parser.add_argument("--cell-size", type=int, default=config.CELL_SIZE, help="Pixels per cell")
    vis_parser.add_argument("--delay", type=float, default=config.DEFAULT_DELAY_MS, help="Milliseconds between steps")
    vis_parser.add_argument("--algo", type=str, default=config.DEFAULT_ALGO, choices=ALGO_CHOICES, help="Initial algorithm")
    vis_parser.add_argument("--record", action="store_true", help="Record the window to MP4")

    # Solve Command
    solve_parser = subparsers.add_parser("solve", help="Run a search headless and print the result")
    solve_parser.add_argument("--rows", type=int, default=config.ROWS, help="Grid rows")
    solve_parser.add_argument("--cols", type=int, default=config.COLS, help="Grid columns")
    solve_parser.add_argument("--start", type=parse_point, default=(0, 0), help="Start cell as x,y")
    solve_parser.add_argument("--goal", type=parse_point, default=None, help="Goal cell as x,y (default: far corner)")
    solve_parser.add_argument("--wall", type=parse_point, action="append", default=[], help="Wall cell as x,y (repeatable)")
    solve_parser.add_argument("--density", type=float, default=0.0, help="Random wall density (0.0 - 1.0)")
    solve_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    solve_parser.add_argument("--algo", type=str, default="all", choices=ALGO_CHOICES + ["all"], help="Search algorithm")
    return parser


def run_visual(args, logger):
    from pathviz.app.session import Session
    from pathviz.viz.renderer import Renderer

    session = Session(rows=args.rows, cols=args.cols, algorithm=args.algo, delay_ms=args.delay)
    renderer = Renderer(session, cell_size=args.cell_size, record=args.record)

    if args.record:
        import datetime
        if not os.path.exists("recordings"):
            os.makedirs("recordings")

        ts = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
        fname = f"pathviz_{args.cols}x{args.rows}_{ts}.mp4"
        renderer.recorder.output_file = os.path.join("recordings", fname)
        logger.info(f"Recording video to {renderer.recorder.output_file}")

    renderer.init_window()
    renderer.run_loop()
    return 0


def run_solve(args, logger):
    from pathviz.core.grid import Grid
    from pathviz.core.state import SearchState
    from pathviz.algo.stepper import Found, start_search
    from pathviz.algo.walls import scatter_walls

    grid = Grid(args.rows, args.cols)
    goal_xy = args.goal if args.goal is not None else (args.cols - 1, args.rows - 1)
    start = grid.get_cell(*args.start)
    goal = grid.get_cell(*goal_xy)

    for x, y in args.wall:
        if (x, y) not in (start.pos, goal.pos):
            grid.toggle_wall(x, y)
    if args.density > 0.0:
        placed = scatter_walls(grid, args.density, seed=args.seed, keep=(start, goal))
        logger.info(f"Scattered {placed} walls (density={args.density}, seed={args.seed})")

    algos = ALGO_CHOICES if args.algo == "all" else [args.algo]
    state = SearchState(start=start, goal=goal)

    print(f"\n{'ALGORITHM':<10} | {'RESULT':<9} | {'PATH LEN':<8} | {'VISITED':<8}")
    print("-" * 45)
    for name in algos:
        stepper = start_search(state, grid, name)
        for result in stepper.run():
            logger.debug(f"{stepper.policy.name}: {result}")

        outcome = "found" if isinstance(stepper.result, Found) else "no path"
        print(f"{stepper.policy.name:<10} | {outcome:<9} | {len(stepper.path()):<8} | {state.metrics.visited_count:<8}")
    return 0


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("pathviz")

    if args.command is None:
        parser.print_help()
        return 0

    logger.info(f"Running command: {args.command}")

    from pathviz.core.errors import UserInputError
    try:
        if args.command == "visual":
            return run_visual(args, logger)
        elif args.command == "solve":
            return run_solve(args, logger)
    except (UserInputError, IndexError) as e:
        logger.error(str(e))
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
