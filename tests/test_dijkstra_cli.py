import io

from graphlabs.dijkstra import EXAMPLE_ADJACENCY, describe_all, describe_path, dijkstra
from graphlabs.dijkstra_cli import main


def _run(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main([])
    return code, capsys.readouterr().out


def test_mode_one(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "1\n0\n6\n")
    assert code == 0
    assert out.endswith(describe_path(dijkstra(EXAMPLE_ADJACENCY, 0), 6))


def test_mode_two(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "2 1\n")
    assert code == 0
    assert out.endswith(describe_all(dijkstra(EXAMPLE_ADJACENCY, 1)))


def test_invalid_start(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "1\n9\n")
    assert code == 1
    assert "Invalid start vertex." in out


def test_invalid_end(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "1 0 -1\n")
    assert code == 1
    assert "Invalid end vertex." in out


def test_invalid_mode(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "3 0\n")
    assert code == 1
    assert "Invalid mode." in out


def test_missing_input(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "")
    assert code == 1
    assert "Invalid input." in out