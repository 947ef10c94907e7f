"""Reading forest maps and helpers for working with the cell matrix."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import Cell

Matrix = list[list[int]]


@dataclass
class ForestInput:
    """A forest map as read from its input file."""

    rows: int
    cols: int
    fire: tuple[int, int]
    matrix: Matrix


def in_bounds(x: int, y: int, rows: int, cols: int) -> bool:
    """Tell whether (x, y) lies inside a grid of the given size."""
    return 0 <= x < rows and 0 <= y < cols


def parse_forest(text: str) -> ForestInput:
    """Parse forest data: a header 'rows cols fire_row fire_col' then the cells.

    The first empty cell becomes the animal, and the fire cell is set burning.
    """
    try:
        numbers = [int(token) for token in text.split()]
    except ValueError as exc:
        raise ValueError("forest data must be whitespace-separated integers") from exc
    if len(numbers) < 4:
        raise ValueError("forest data is missing its header")
    rows, cols, fire_x, fire_y = numbers[:4]
    if rows <= 0 or cols <= 0:
        raise ValueError(f"invalid forest size {rows}x{cols}")
    cells = numbers[4:4 + rows * cols]
    if len(cells) < rows * cols:
        raise ValueError(f"expected {rows * cols} cells, found {len(cells)}")
    if not in_bounds(fire_x, fire_y, rows, cols):
        raise ValueError(f"fire position ({fire_x}, {fire_y}) is outside the forest")

    matrix = [cells[r * cols:(r + 1) * cols] for r in range(rows)]
    empty = next(
        ((r, c) for r, row in enumerate(matrix) for c, cell in enumerate(row) if cell == Cell.EMPTY),
        None,
    )
    if empty is not None:
        matrix[empty[0]][empty[1]] = int(Cell.ANIMAL)
    matrix[fire_x][fire_y] = int(Cell.BURNING)
    return ForestInput(rows=rows, cols=cols, fire=(fire_x, fire_y), matrix=matrix)


def read_forest(path: str | Path) -> ForestInput:
    """Read and parse a forest file."""
    return parse_forest(Path(path).read_text())


def format_matrix(matrix: Matrix) -> str:
    """Render the matrix in the report layout."""
    lines = ["", "Matriz atual:"]
    lines.extend("".join(f"{int(cell)} " for cell in row) for row in matrix)
    return "\n".join(lines) + "\n\n"


def find_animal(matrix: Matrix) -> tuple[int, int] | None:
    """Return the first animal cell in row order, or None if there is none."""
    return next(
        ((r, c) for r, row in enumerate(matrix) for c, cell in enumerate(row) if cell == Cell.ANIMAL),
        None,
    )


def animal_present(matrix: Matrix) -> bool:
    """Tell whether any cell holds the animal."""
    return find_animal(matrix) is not None