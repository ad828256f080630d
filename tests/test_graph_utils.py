import io

import pytest

from graphlabs.graph_utils import (
    INF,
    format_matrix,
    format_path,
    initialize_path_matrix,
    parse_weight_matrix,
    read_weight_matrix,
)


def test_parse_maps_minus_one_to_inf():
    assert parse_weight_matrix(["0", "-1", "3", "0"], 2) == [[0, INF], [3, 0]]


def test_parse_too_few_values():
    with pytest.raises(ValueError):
        parse_weight_matrix(["0", "1", "2"], 2)


def test_parse_bad_token():
    with pytest.raises(ValueError):
        parse_weight_matrix(["0", "x", "2", "0"], 2)


def test_read_weight_matrix(capsys):
    matrix = read_weight_matrix(2, io.StringIO("0 -1\n5 0\n"))
    assert matrix == [[0, INF], [5, 0]]
    assert capsys.readouterr().out == "Enter the weight matrix (use -1 for INF):\n"


def test_initialize_path_matrix():
    assert initialize_path_matrix(2) == [[-1, 0], [1, -1]]


def test_format_matrix():
    assert format_matrix([[0, INF], [12, 0]]) == "   0 INF \n  12    0 \n"


def test_format_path():
    assert format_path([0, 2]) == "Shortest path: v1 -> v3\n"


def test_format_empty_path():
    assert format_path([]) == "No path exists.\n"