import io

from graphlabs.floyd_cli import EXAMPLE_WEIGHTS, main
from graphlabs.floyd_warshall import floyd, initial_predecessors, path


def _run(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main([])
    return code, capsys.readouterr().out


def test_path_between_vertices(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "1 6\n")
    result = floyd(EXAMPLE_WEIGHTS, initial_predecessors(EXAMPLE_WEIGHTS))
    route = " -> ".join(str(x) for x in path(0, 5, result.predecessors))
    assert code == 0
    assert out.startswith(result.format_trace())
    assert f"Shortest path from 1 to 6: {route}\n" in out
    assert out.endswith(f"Length: {result.distances[0][5]}\n")


def test_same_vertex(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "1 1\n")
    assert code == 0
    assert out.endswith("Shortest path from 1 to 1: No path exists.\nLength: 0\n")


def test_unreachable(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "6 1\n")
    assert code == 0
    assert out.endswith("No path from 6 to 1.\n")


def test_out_of_range(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "7 1\n")
    assert code == 1
    assert "Invalid vertex numbers." in out


def test_missing_input(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "1\n")
    assert code == 1
    assert "Invalid input." in out