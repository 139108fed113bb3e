import pytest

from pushswap.stacks import Stacks

ALL_OPERATIONS = ["sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"]


def test_sa_swaps_top_two():
    stacks = Stacks([1, 2, 3])
    stacks.sa()
    assert stacks.a == [2, 1, 3]


def test_sa_on_single_element_does_nothing():
    stacks = Stacks([7])
    stacks.sa()
    assert stacks.a == [7]


@pytest.mark.parametrize("name", ["sa", "sb", "ss"])
def test_swap_twice_is_identity(name):
    stacks = Stacks([4, 5, 6], [9, 8, 7])
    stacks.apply(name)
    stacks.apply(name)
    assert stacks == Stacks([4, 5, 6], [9, 8, 7])


def test_sb_leaves_a_alone():
    stacks = Stacks([1, 2], [3, 4])
    stacks.sb()
    assert stacks.a == [1, 2]
    assert stacks.b == [4, 3]


def test_pb_moves_top_of_a():
    stacks = Stacks([1, 2, 3])
    stacks.pb()
    assert stacks.a == [2, 3]
    assert stacks.b == [1]


def test_pa_after_pb_restores():
    stacks = Stacks([1, 2, 3], [4])
    stacks.pb()
    stacks.pa()
    assert stacks == Stacks([1, 2, 3], [4])


def test_push_from_empty_does_nothing():
    stacks = Stacks([1, 2])
    stacks.pa()
    assert stacks == Stacks([1, 2])
    empty = Stacks([], [3])
    empty.pb()
    assert empty == Stacks([], [3])


def test_ra_moves_top_to_bottom():
    stacks = Stacks([1, 2, 3])
    stacks.ra()
    assert stacks.a[-1] == 1
    assert stacks.a[0] == 2


def test_rra_moves_bottom_to_top():
    stacks = Stacks([1, 2, 3])
    stacks.rra()
    assert stacks.a[0] == 3
    assert stacks.a[-1] == 2


@pytest.mark.parametrize("forward,backward", [("ra", "rra"), ("rb", "rrb"), ("rr", "rrr")])
def test_rotation_is_undone_by_reverse(forward, backward):
    stacks = Stacks([5, 1, 4, 2], [8, 6, 9])
    stacks.apply(forward)
    stacks.apply(backward)
    assert stacks == Stacks([5, 1, 4, 2], [8, 6, 9])


def test_full_rotation_cycle_is_identity():
    values = [3, 1, 4, 1, 5, 9]
    stacks = Stacks(values)
    for _ in values:
        stacks.ra()
    assert stacks.a == values


@pytest.mark.parametrize("name", ALL_OPERATIONS)
def test_operations_preserve_elements(name):
    stacks = Stacks([3, 0, 2], [5, 1])
    stacks.apply(name)
    assert sorted(stacks.a + stacks.b) == [0, 1, 2, 3, 5]


@pytest.mark.parametrize("name", ALL_OPERATIONS)
def test_operations_on_empty_stacks(name):
    stacks = Stacks()
    stacks.apply(name)
    assert stacks == Stacks()


def test_unknown_operation_raises():
    stacks = Stacks([1, 2])
    with pytest.raises(ValueError):
        stacks.apply("xx")


def test_apply_rejects_trailing_newline():
    with pytest.raises(ValueError):
        Stacks([1]).apply("sa\n")


def test_is_solved():
    assert Stacks([1, 2, 3]).is_solved() is True
    assert Stacks([2, 1, 3]).is_solved() is False
    assert Stacks([1, 2], [3]).is_solved() is False
    assert Stacks([]).is_solved() is True


def test_input_is_copied():
    values = [1, 2, 3]
    stacks = Stacks(values)
    stacks.ra()
    assert values == [1, 2, 3]