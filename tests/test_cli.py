import io
import sys

import pytest

from cfsolve.arithmetic import can_make_ap, min_operations
from cfsolve.arrays import move_to_end_sums, raspberries_operations, twice_score
from cfsolve.cli import main
from cfsolve.geometry import max_doubled_area, target_score
from cfsolve.strings import count_ones_in_grid, fix_expression


def _run(monkeypatch, capsys, problem, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    code = main([problem])
    captured = capsys.readouterr()
    return code, captured.out.splitlines(), captured.err


def test_game(monkeypatch, capsys):
    code, lines, _ = _run(monkeypatch, capsys, "1373B", "3\n01\n1111\n0011\n")
    assert code == 0
    assert lines == ["DA", "NET", "NET"]


@pytest.mark.parametrize("weight, answer", [("8", "YES"), ("2", "NO"), ("7", "NO")])
def test_watermelon_single_case(monkeypatch, capsys, weight, answer):
    code, lines, _ = _run(monkeypatch, capsys, "4A", weight)
    assert code == 0
    assert lines == [answer]


def test_add_and_divide(monkeypatch, capsys):
    code, lines, _ = _run(monkeypatch, capsys, "1485A", "2\n9 2\n1337 1\n")
    assert code == 0
    assert lines == [str(min_operations(9, 2)), str(min_operations(1337, 1))]


def test_make_ap(monkeypatch, capsys):
    triples = [(10, 5, 30), (1, 2, 3), (2, 6, 3)]
    text = "3\n" + "\n".join(" ".join(map(str, t)) for t in triples)
    code, lines, _ = _run(monkeypatch, capsys, "1624B", text)
    assert code == 0
    assert lines == ["YES" if can_make_ap(*t) else "NO" for t in triples]


def test_triangles(monkeypatch, capsys):
    text = "1\n5 8\n2 1 2\n3 2 3 4\n3 1 4 6\n2 4 5\n"
    code, lines, _ = _run(monkeypatch, capsys, "1620B", text)
    assert code == 0
    assert lines == [str(max_doubled_area(5, 8, [1, 2], [2, 3, 4], [1, 4, 6], [4, 5]))]


def test_make_beautiful_no(monkeypatch, capsys):
    code, lines, _ = _run(monkeypatch, capsys, "1783A", "1\n3\n1 1 1\n")
    assert code == 0
    assert lines == ["NO"]


def test_make_beautiful_yes_prints_permutation(monkeypatch, capsys):
    code, lines, _ = _run(monkeypatch, capsys, "1783A", "1\n3\n1 2 3\n")
    assert code == 0
    assert lines[0] == "YES"
    assert sorted(map(int, lines[1].split())) == [1, 2, 3]


def test_one_and_two_impossible(monkeypatch, capsys):
    code, lines, _ = _run(monkeypatch, capsys, "1788A", "1\n3\n2 2 2\n")
    assert code == 0
    assert lines == ["-1"]


def test_buttons(monkeypatch, capsys):
    code, lines, _ = _run(monkeypatch, capsys, "1858A", "2\n5 1 0\n1 1 2\n")
    assert code == 0
    assert lines == ["First", "Second"]


def test_target_practice(monkeypatch, capsys):
    rows = ["." * 10] * 10
    rows[0] = "X" + "." * 9
    rows[5] = "....X....."
    code, lines, _ = _run(monkeypatch, capsys, "1873C", "1\n" + "\n".join(rows))
    assert code == 0
    assert lines == [str(target_score(rows))]


def test_raspberries(monkeypatch, capsys):
    code, lines, _ = _run(monkeypatch, capsys, "1883C", "2\n2 5\n7 3\n1 4\n1\n")
    assert code == 0
    assert lines == [
        str(raspberries_operations([7, 3], 5)),
        str(raspberries_operations([1], 4)),
    ]


def test_twice(monkeypatch, capsys):
    code, lines, _ = _run(monkeypatch, capsys, "2037A", "1\n4\n1 2 1 2\n")
    assert code == 0
    assert lines == [str(twice_score([1, 2, 1, 2]))]


def test_fix_expression(monkeypatch, capsys):
    code, lines, _ = _run(monkeypatch, capsys, "2038N", "2\n3<7\n3>7\n")
    assert code == 0
    assert lines == ["3<7", fix_expression("3>7")]


def test_move_to_end(monkeypatch, capsys):
    code, lines, _ = _run(monkeypatch, capsys, "2104B", "1\n4\n1 3 2 4\n")
    assert code == 0
    assert lines == [" ".join(map(str, move_to_end_sums([1, 3, 2, 4])))]


def test_dr_tc(monkeypatch, capsys):
    code, lines, _ = _run(monkeypatch, capsys, "2106A", "1\n3\n101\n")
    assert code == 0
    assert lines == [str(count_ones_in_grid("101"))]


def test_truncated_input_reports_error(monkeypatch, capsys):
    code, lines, err = _run(monkeypatch, capsys, "1829B", "1\n4\n0 1\n")
    assert code == 1
    assert lines == []
    assert "end of input" in err


def test_non_integer_input_reports_error(monkeypatch, capsys):
    code, _, err = _run(monkeypatch, capsys, "1485A", "1\nx 2\n")
    assert code == 1
    assert "'x'" in err


def test_invalid_values_report_error(monkeypatch, capsys):
    code, _, err = _run(monkeypatch, capsys, "1834A", "1\n2\n1 0\n")
    assert code == 1
    assert "cfsolve: error" in err


def test_unknown_problem_exits(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    with pytest.raises(SystemExit) as info:
        main(["9999Z"])
    assert info.value.code == 2