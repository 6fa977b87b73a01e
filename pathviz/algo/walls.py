import random
from typing import Iterable
from pathviz.core.grid import Cell, Grid

def scatter_walls(grid: Grid, density: float = 0.25, seed: int = None, keep: Iterable[Cell] = ()) -> int:
    """
    Walls off roughly `density` of the grid at random.
    density: 0.0 = open field
             1.0 = every cell not in `keep`
    Cells in `keep` (start/goal) are never walled. Returns walls placed.
    """
    rng = random.Random(seed)

    keep_ids = {id(c) for c in keep}
    candidates = [c for c in grid if id(c) not in keep_ids and not c.is_wall]
    rng.shuffle(candidates)

    target = int(len(grid) * density)
    placed = 0
    for cell in candidates:
        if placed >= target:
            break
        grid.toggle_wall(cell.x, cell.y)
        placed += 1

    return placed
