import io

from forestfire.grid import parse_forest
from forestfire.program import main, run

FOREST = """4 4 0 0
1 1 1 1
1 0 1 1
1 1 4 1
1 1 1 1
"""


def test_run_writes_iterations_and_report():
    out = io.StringIO()
    run(parse_forest(FOREST), out, 10, 0)
    text = out.getvalue()
    assert text.startswith("\nMatriz atual:\n")
    assert "Iteracao: 1 de 10" in text
    assert "Relatorio de execucao:" in text
    assert text.endswith("Fim do relatorio\n")


def test_run_stops_at_iteration_limit():
    out = io.StringIO()
    sim = run(parse_forest(FOREST), out, 2, 0)
    text = out.getvalue()
    assert "Iteracoes: 2" in text
    assert "Iteracao: 3" not in text
    assert "Fogo extinto: Não" in text
    assert not sim.fire_extinguished()


def test_run_stops_when_fire_is_out():
    out = io.StringIO()
    sim = run(parse_forest("1 1 0 0\n1"), out, 10, 0)
    text = out.getvalue()
    assert sim.fire_extinguished()
    assert "Fogo extinto: Sim" in text
    assert "Iteracoes: 2" in text


def test_run_report_includes_animal_section():
    out = io.StringIO()
    sim = run(parse_forest(FOREST), out, 10, 0)
    assert sim.animal_report() in out.getvalue()


def test_main_writes_output_file(tmp_path):
    source = tmp_path / "input.dat"
    target = tmp_path / "output.dat"
    source.write_text(FOREST)
    code = main(["--input", str(source), "--output", str(target), "--iterations", "3"])
    assert code == 0
    text = target.read_text(encoding="utf-8")
    assert "Iteracao: 1 de 3" in text
    assert text.endswith("Fim do relatorio\n")


def test_main_reports_missing_input(tmp_path, capsys):
    code = main(["--input", str(tmp_path / "absent.dat"), "--output", str(tmp_path / "out.dat")])
    assert code == 1
    assert "Arquivo naao encontrado" in capsys.readouterr().err
    assert not (tmp_path / "out.dat").exists()