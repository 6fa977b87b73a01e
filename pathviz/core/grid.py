import weakref
from typing import Iterator, List, Optional, Tuple

INF = float("inf")


class Cell:
    """
    One square of the grid plus the metadata a search writes into it.
    Coordinates are read-only; cells compare by identity.
    """
    __slots__ = ('_x', '_y', 'is_wall', 'cost_so_far', 'estimated_total', '_predecessor', '__weakref__')

    def __init__(self, x: int, y: int):
        self._x = x
        self._y = y
        self.is_wall = False
        self.cost_so_far = INF
        self.estimated_total = INF
        self._predecessor = None

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def pos(self) -> Tuple[int, int]:
        return (self._x, self._y)

    @property
    def predecessor(self) -> Optional["Cell"]:
        # Back-links never own the cell; the Grid does.
        if self._predecessor is None:
            return None
        return self._predecessor()

    @predecessor.setter
    def predecessor(self, cell: Optional["Cell"]):
        self._predecessor = weakref.ref(cell) if cell is not None else None

    def clear_search(self):
        self.cost_so_far = INF
        self.estimated_total = INF
        self._predecessor = None

    def __repr__(self):
        flag = " wall" if self.is_wall else ""
        return f"Cell({self._x}, {self._y}{flag})"


class Grid:
    # Neighbour offsets: +x, -x, +y, -y. Order drives tie-breaking.
    DIRECTIONS = ((1, 0), (-1, 0), (0, 1), (0, -1))

    __slots__ = ('rows', 'cols', 'cells')

    def __init__(self, rows: int, cols: int):
        self.rows = rows
        self.cols = cols
        # Row-major: index = y * cols + x
        self.cells: List[Cell] = [Cell(x, y) for y in range(rows) for x in range(cols)]

    @property
    def width(self) -> int:
        return self.cols

    @property
    def height(self) -> int:
        return self.rows

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.cols and 0 <= y < self.rows

    def get_index(self, x: int, y: int) -> int:
        if self.in_bounds(x, y):
            return y * self.cols + x
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    def get_cell(self, x: int, y: int) -> Cell:
        return self.cells[self.get_index(x, y)]

    def cell_at(self, x: int, y: int) -> Optional[Cell]:
        """Like get_cell, but returns None off the grid (mouse input lands anywhere)."""
        if not self.in_bounds(x, y):
            return None
        return self.cells[y * self.cols + x]

    def toggle_wall(self, x: int, y: int):
        """
        Marks (x, y) as a wall. Painting over an existing wall leaves it a wall;
        walls are only cleared by replacing the grid.
        """
        self.get_cell(x, y).is_wall = True

    def is_wall(self, x: int, y: int) -> bool:
        return self.get_cell(x, y).is_wall

    def neighbors(self, cell: Cell) -> List[Cell]:
        """
        Returns in-bounds 4-neighbours of cell in +x, -x, +y, -y order.
        Does NOT filter walls (that's for the search).
        """
        out = []
        for dx, dy in self.DIRECTIONS:
            nx, ny = cell.x + dx, cell.y + dy
            if 0 <= nx < self.cols and 0 <= ny < self.rows:
                out.append(self.cells[ny * self.cols + nx])
        return out

    def walls(self) -> List[Cell]:
        return [c for c in self.cells if c.is_wall]

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __len__(self) -> int:
        return len(self.cells)
