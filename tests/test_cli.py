import sys

import pytest

from pushswap.cli import main
from pushswap.stacks import Stacks


def _apply(values, ops):
    stacks = Stacks(values, (), lambda _name: None)
    actions = {
        "sa": stacks.swap_a,
        "pa": stacks.push_a,
        "pb": stacks.push_b,
        "ra": stacks.rotate_a,
        "rra": stacks.rev_rotate_a,
    }
    for op in ops:
        actions[op]()
    return stacks


@pytest.mark.parametrize("argv", [[], ["1 2", "3"]])
def test_wrong_argument_count_prints_nothing(argv, capsys):
    assert main(argv) == 0
    assert capsys.readouterr().out == ""


def test_sorted_input_prints_nothing(capsys):
    assert main(["1 2 3 4"]) == 0
    assert capsys.readouterr().out == ""


def test_three_numbers(capsys):
    assert main(["3 2 1"]) == 0
    assert capsys.readouterr().out == "ra\nsa\n"


def test_larger_input_is_sorted_by_printed_ops(capsys):
    values = [5, -3, 0, 12, -7, 8, 1]
    assert main(["  5 -3 0  12 -7 8 1 "]) == 0
    ops = capsys.readouterr().out.split()
    result = _apply(values, ops)
    assert result.a == sorted(values)
    assert result.b == []


def test_reads_sys_argv_by_default(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["push_swap", "2 1 3"])
    assert main() == 0
    assert capsys.readouterr().out == "sa\n"