import random

import pytest

from pushswap.parsing import (
    INT_MAX,
    INT_MIN,
    InputError,
    is_integer_token,
    normalize,
    parse_arguments,
    parse_long,
)


@pytest.mark.parametrize("text", ["42", "-7", "+3", "  5", "\t\n-0", "2147483648"])
def test_integer_tokens_accepted(text):
    assert is_integer_token(text) is True


@pytest.mark.parametrize("text", ["", "-", "+", "abc", "1a", "5 ", "--1", "+-2", "1 2", "²"])
def test_integer_tokens_rejected(text):
    assert is_integer_token(text) is False


def test_parse_long_reads_leading_number():
    assert parse_long("  -123abc") == -123
    assert parse_long("+17") == 17


def test_parse_long_without_digits_is_zero():
    assert parse_long("abc") == 0
    assert parse_long("") == 0


def test_parse_long_handles_values_past_int_range():
    assert parse_long("2147483648") == INT_MAX + 1
    assert parse_long("-2147483649") == INT_MIN - 1


def test_parse_arguments_keeps_order():
    assert parse_arguments(["3", "1", "2"]) == [3, 1, 2]


def test_parse_arguments_accepts_limits():
    assert parse_arguments(["-2147483648", "2147483647"]) == [INT_MIN, INT_MAX]


def test_parse_arguments_empty():
    assert parse_arguments([]) == []


def test_parse_arguments_single_value():
    assert parse_arguments(["5"]) == [5]


@pytest.mark.parametrize("token", ["abc", "2147483648", "-2147483649", "", "4x"])
def test_parse_arguments_single_bad_value(token):
    with pytest.raises(InputError):
        parse_arguments([token])


@pytest.mark.parametrize(
    "args",
    [
        ["1", "2", "1"],
        ["1", "x"],
        ["1", "2147483648"],
        ["-2147483649", "0"],
        ["1", ""],
        ["1", "+1"],
    ],
)
def test_parse_arguments_errors(args):
    with pytest.raises(InputError):
        parse_arguments(args)


def test_input_error_message():
    with pytest.raises(InputError, match="^Error$"):
        parse_arguments(["2", "2"])


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_arguments(["z", "1"])


def test_normalize_small():
    assert normalize([30, 10, 20]) == [2, 0, 1]


def test_normalize_is_permutation_and_keeps_order():
    rng = random.Random(4)
    values = rng.sample(range(-1000, 1000), 50)
    ranks = normalize(values)
    assert sorted(ranks) == list(range(len(values)))
    for i, first in enumerate(values):
        for j, second in enumerate(values):
            assert (first < second) == (ranks[i] < ranks[j])


def test_normalize_of_ranks_is_identity():
    ranks = [4, 0, 3, 1, 2]
    assert normalize(ranks) == ranks


def test_normalize_rejects_duplicates():
    with pytest.raises(ValueError):
        normalize([1, 1, 2])