import random

import pytest

from pushswap.cli import main
from pushswap.stacks import Stacks


def _replay(values, output):
    stacks = Stacks(values)
    for move in output.splitlines():
        getattr(stacks, move)()
    return stacks


def test_no_arguments_prints_nothing(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_only_spaces_prints_nothing(capsys):
    assert main(["   "]) == 0
    captured = capsys.readouterr()
    assert (captured.out, captured.err) == ("", "")


def test_already_sorted_prints_nothing(capsys):
    assert main(["1", "2", "3", "4"]) == 0
    assert capsys.readouterr().out == ""


def test_two_values_swapped(capsys):
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out == "sa\n"


@pytest.mark.parametrize(
    "args",
    [["abc"], ["1", "2", "x"], ["1", "1"], ["2147483648"], ["-2147483649"], ["1 2 2"], ["+"], ["1-"]],
)
def test_invalid_input_reports_error(capsys, args):
    assert main(args) == 0
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_bounds_are_accepted(capsys):
    assert main(["2147483647", "-2147483648"]) == 0
    captured = capsys.readouterr()
    assert captured.err == ""
    stacks = _replay([2147483647, -2147483648], captured.out)
    assert stacks.a_values == [-2147483648, 2147483647]


def test_single_string_argument_is_split(capsys):
    main(["3 1 2"])
    out = capsys.readouterr().out
    stacks = _replay([3, 1, 2], out)
    assert stacks.a_values == [1, 2, 3]


@pytest.mark.parametrize("size", [3, 4, 5, 6, 20, 100])
def test_output_sorts_input(capsys, size):
    rng = random.Random(size)
    values = rng.sample(range(-1000, 1000), size)
    main([str(v) for v in values])
    out = capsys.readouterr().out
    stacks = _replay(values, out)
    assert stacks.a_values == sorted(values)
    assert stacks.b_values == []


def test_uses_sys_argv_when_none(capsys, monkeypatch):
    monkeypatch.setattr("sys.argv", ["prog", "2", "1"])
    assert main() == 0
    assert capsys.readouterr().out == "sa\n"