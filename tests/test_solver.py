import random

import pytest

from pushswap.solver import main, sort_operations
from pushswap.stacks import Stacks

_NAMES = {"sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"}


def _replay(values, ops):
    stacks = Stacks(values)
    for op in ops:
        stacks.apply(op)
    return stacks


def test_sorted_input_needs_nothing():
    assert sort_operations([-5, 0, 7, 100]) == []
    assert sort_operations([]) == []


def test_single_adjacent_swap():
    assert sort_operations([1, 0, 2]) == ["sa"]


def test_reversed_three():
    assert sort_operations([2, 1, 0]) == ["sa", "rra"]


def test_duplicates_are_rejected():
    with pytest.raises(ValueError):
        sort_operations([3, 1, 3])


@pytest.mark.parametrize("seed", range(60))
def test_random_permutations_are_sorted(seed):
    rng = random.Random(seed)
    n = rng.randint(2, 14)
    values = rng.sample(range(-1000, 1000), n)
    ops = sort_operations(values)
    assert set(ops) <= _NAMES
    stacks = _replay(values, ops)
    assert stacks.is_solved()
    assert stacks.a == sorted(values)


def test_large_input_is_sorted():
    rng = random.Random(7)
    values = rng.sample(range(-(2**31), 2**31 - 1), 100)
    stacks = _replay(values, sort_operations(values))
    assert stacks.a == sorted(values)
    assert stacks.b == []


def test_all_permutations_of_five():
    from itertools import permutations

    for perm in permutations(range(5)):
        stacks = _replay(perm, sort_operations(perm))
        assert stacks.a == [0, 1, 2, 3, 4]
        assert stacks.b == []


def test_main_prints_sorting_operations(capsys):
    args = ["3", "-1", "10", "7", "0"]
    assert main(args) == 0
    out, err = capsys.readouterr()
    assert err == ""
    ops = out.splitlines()
    assert _replay([int(arg) for arg in args], ops).is_solved()


def test_main_reports_bad_token(capsys):
    assert main(["1", "two", "3"]) == 0
    out, err = capsys.readouterr()
    assert out == ""
    assert err == "Error\n"


def test_main_reports_duplicates(capsys):
    main(["4", "2", "4"])
    out, err = capsys.readouterr()
    assert (out, err) == ("", "Error\n")


def test_main_reports_out_of_range(capsys):
    main(["1", "2147483648"])
    assert capsys.readouterr().err == "Error\n"


def test_main_single_argument_prints_nothing(capsys):
    main(["42"])
    assert capsys.readouterr() == ("", "")


def test_main_single_bad_argument(capsys):
    main(["4x"])
    assert capsys.readouterr() == ("", "Error\n")


def test_main_without_arguments(capsys):
    main([])
    assert capsys.readouterr() == ("", "")