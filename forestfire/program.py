"""Running a full forest fire simulation and writing its report."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from .config import DEFAULT_ITERATIONS, DEFAULT_WIND
from .grid import ForestInput, format_matrix, read_forest
from .simulation import Simulation

_RULE = "______________________________________"


def run(
    forest: ForestInput,
    out: TextIO,
    iterations: int = DEFAULT_ITERATIONS,
    wind: int = DEFAULT_WIND,
) -> Simulation:
    """Run the simulation until the fire is out or the iterations run out."""
    sim = Simulation(forest.matrix, wind, out)
    count = 1
    while not sim.fire_extinguished() and count < iterations + 1:
        out.write(format_matrix(sim.matrix))
        out.write(f"Iteracao: {count} de {iterations}\n")
        sim.move_animal()
        sim.propagate_fire()
        count += 1

    out.write("Fim da execução\n\n")
    out.write(f"{_RULE}\n")
    out.write("\nRelatorio de execucao:\n")
    out.write(f"Iteracoes: {count - 1}\n")
    out.write(f"Fogo extinto: {'Sim' if sim.fire_extinguished() else 'Não'}\n")
    out.write(sim.animal_report())
    out.write(f"{_RULE}\n")
    out.write("Fim do relatorio\n")
    return sim


def main(argv: list[str] | None = None) -> int:
    """Command entry point: read the forest, simulate, write the report."""
    parser = argparse.ArgumentParser(prog="forestfire", description="Simulate a forest fire.")
    parser.add_argument("--input", default="./src/input.dat", help="forest input file")
    parser.add_argument("--output", default="./src/output.dat", help="report output file")
    parser.add_argument("--iterations", type=int, default=DEFAULT_ITERATIONS)
    parser.add_argument("--wind", type=int, default=DEFAULT_WIND, help="wind setting, 0 to 14")
    args = parser.parse_args(argv)

    try:
        forest = read_forest(args.input)
    except FileNotFoundError:
        print("Arquivo naao encontrado", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    with open(args.output, "w", encoding="utf-8") as out:
        run(forest, out, args.iterations, args.wind)
    return 0


if __name__ == "__main__":
    sys.exit(main())