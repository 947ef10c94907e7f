"""Fire spreading through a forest and an animal fleeing from it."""

from __future__ import annotations

import sys
from typing import TextIO

from .config import ANIMAL_DIRECTIONS, DEFAULT_WIND, Cell, wind_directions
from .grid import Matrix, find_animal, format_matrix, in_bounds

Position = tuple[int, int]

_ANIMAL_PRIORITIES = (Cell.WATER, Cell.EMPTY, Cell.TREE, Cell.BURNED)


class Simulation:
    """State of one forest fire run: the grid, the fire front and the animal."""

    def __init__(self, matrix: Matrix, wind: int = DEFAULT_WIND, out: TextIO | None = None):
        self.matrix: Matrix = [list(row) for row in matrix]
        self.rows = len(self.matrix)
        self.cols = len(self.matrix[0]) if self.matrix else 0
        self.fire_directions = wind_directions(wind)
        self.out = out
        self.animal_pos: Position | None = find_animal(self.matrix)
        self.animal_alive = True
        self.lives = 1
        self.visited: set[Position] = set()
        self._burning: list[Position] = []

    def _write(self, text: str) -> None:
        (self.out if self.out is not None else sys.stdout).write(text)

    def _inside(self, x: int, y: int) -> bool:
        return in_bounds(x, y, self.rows, self.cols)

    def _step(self, pos: Position) -> Position | None:
        """Move the animal away from pos; return its new position, or None."""
        if not self.animal_alive:
            return None
        grid = self.matrix
        x, y = pos
        for priority in _ANIMAL_PRIORITIES:
            for dx, dy in ANIMAL_DIRECTIONS:
                tx, ty = x + dx, y + dy
                if not self._inside(tx, ty) or grid[tx][ty] != priority:
                    continue
                if (tx, ty) in self.visited:
                    continue
                if priority == Cell.WATER:
                    for wx, wy in ANIMAL_DIRECTIONS:
                        nx, ny = tx + wx, ty + wy
                        if self._inside(nx, ny) and grid[nx][ny] != Cell.WATER:
                            grid[nx][ny] = Cell.TREE
                grid[x][y] = Cell.BURNED if grid[tx][ty] == Cell.BURNED else Cell.TREE
                grid[tx][ty] = Cell.ANIMAL
                self.visited.add((tx, ty))
                return (tx, ty)
        return None

    def move_animal(self) -> bool:
        """Move the animal one step by preference: water, empty, tree, burned."""
        if self.animal_pos is None:
            return False
        new_pos = self._step(self.animal_pos)
        if new_pos is None:
            return False
        self.animal_pos = new_pos
        return True

    def propagate_fire(self) -> None:
        """Advance the fire one step: old flames burn out and new ones spread."""
        grid = self.matrix
        fire_positions = [
            (r, c) for r, row in enumerate(grid) for c, cell in enumerate(row) if cell == Cell.BURNING
        ]
        while self._burning:
            x, y = self._burning.pop()
            if self._inside(x, y):
                grid[x][y] = Cell.BURNED

        for pos in reversed(fire_positions):
            self._burning.append(pos)
            for dx, dy in self.fire_directions:
                tx, ty = pos[0] + dx, pos[1] + dy
                if not self._inside(tx, ty):
                    continue
                cell = grid[tx][ty]
                if cell == Cell.ANIMAL:
                    if self.lives > 0:
                        self.lives -= 1
                        self._write(format_matrix(grid))
                        moved = self._step(pos)
                        if moved is not None:
                            pos = moved
                        grid[tx][ty] = Cell.BURNING
                        self._write(f"\nAnimal atingido pelo fogo! Vida restante: {self.lives}\n")
                    elif self.lives == 0:
                        grid[tx][ty] = Cell.DEAD_ANIMAL
                        self.animal_alive = False
                        self._write("\nAnimal atingido pelo fogo! Animal morreu!\n")
                elif cell == Cell.TREE:
                    grid[tx][ty] = Cell.BURNING

    def fire_extinguished(self) -> bool:
        """Tell whether no cell is burning."""
        return all(cell != Cell.BURNING for row in self.matrix for cell in row)

    def animal_report(self) -> str:
        """Describe the animal's state and every cell it has stepped on."""
        lines = [
            "",
            "Informacoes do animal:",
            f"Animal vivo: {'Sim' if self.animal_alive else 'Nao'}",
            f"Vidas Animal : {self.lives}",
            f"Passos:{len(self.visited)}",
            "Posicoes: ",
        ]
        lines.extend(f"[{x}, {y}]" for x, y in sorted(self.visited))
        return "\n".join(lines) + "\n"