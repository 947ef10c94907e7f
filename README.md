# forestfire

A small simulation of a fire spreading through a forest laid out on a grid,
while an animal tries to escape it.

Each round the animal takes one step to a neighbouring cell (up, down, left,
right). It prefers water, then empty ground, then healthy trees, then burnt
ground, and never steps onto a cell it has already visited. When it steps
into water, the non-water cells around that water become healthy trees.

Then the fire moves on. Trees that caught fire in the previous round burn
out, and every burning tree sets the healthy trees next to it alight in the
directions the wind allows. If the flames reach the animal while it still has
a life, it loses that life, the grid is written out, it takes a step away and
the cell it was on catches fire. With no lives left it dies where it stands
(cell value 8). The animal starts with one life.

The run stops when no cell is burning or the iteration limit is reached, and
ends with a report on the number of iterations, whether the fire is out, and
the animal's state and the cells it visited.

## Installing

```
pip install .
```

## Running

```
forestfire
```

The command reads a forest description, runs the simulation and writes the
grid before every round, followed by the final report, to the output file.

Options:

| option         | default            | meaning                        |
|----------------|--------------------|--------------------------------|
| `--input`      | `./src/input.dat`  | forest input file              |
| `--output`     | `./src/output.dat` | report output file             |
| `--iterations` | `10`               | maximum number of rounds       |
| `--wind`       | `0`                | wind setting, 0 to 14          |

If the input file is missing, or its contents cannot be parsed, a message is
printed to standard error and the command exits with status 1.

## Input format

Whitespace-separated integers: the number of rows, the number of columns, the
row and column where the fire starts, and then the grid itself, row by row.

```
5 5 1 1
1 1 1 1 4
1 1 1 1 1
1 1 1 1 0
1 0 1 1 1
1 1 1 1 1
```

The animal is placed on the first empty cell, scanning rows top to bottom, and
the starting fire cell is set burning. A size that is not positive, too few
cells, non-integer tokens or a fire position outside the grid raise
`ValueError`.

Cell values (`forestfire.config.Cell`):

| value | name          | meaning            |
|-------|---------------|--------------------|
| 0     | `EMPTY`       | empty, safe ground |
| 1     | `TREE`        | healthy tree       |
| 2     | `BURNING`     | burning tree       |
| 3     | `BURNED`      | burnt tree         |
| 4     | `WATER`       | water              |
| 8     | `DEAD_ANIMAL` | dead animal        |
| 9     | `ANIMAL`      | animal             |

## Wind

The wind setting, 0 to 14, chooses which neighbours a burning tree can ignite:
0 spreads in all four directions, 1 to 10 in combinations of two or three
directions, and 11 to 14 in a single direction (right, left, up, down).
`forestfire.config.wind_directions` returns the (row, column) offsets for a
setting; any value outside 1 to 14 behaves like 0.

## Library use

```python
import sys
from forestfire.grid import read_forest
from forestfire.program import run

forest = read_forest("input.dat")
sim = run(forest, sys.stdout, 10, 0)
print(sim.animal_alive, sim.lives)
```

- `forestfire.grid`: `parse_forest(text)` and `read_forest(path)` return a
  `ForestInput` (`rows`, `cols`, `fire`, `matrix`); `format_matrix`,
  `find_animal`, `animal_present` and `in_bounds` help with the grid.
- `forestfire.simulation.Simulation(matrix, wind, out)` drives the individual
  steps (`move_animal`, `propagate_fire`, `fire_extinguished`,
  `animal_report`) for anyone who wants to run the rounds themselves. Messages
  go to `out`, or to standard output when it is `None`.
- `forestfire.program.run(forest, out, iterations, wind)` runs a whole
  simulation, writes the report to `out` and returns the `Simulation`.

## Limits

The package only writes text reports; it has no graphical or animated view of
the grid.

## Tests

```
pip install .[test]
pytest
```