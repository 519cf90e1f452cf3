import pytest
from hypothesis import given, strategies as st

from pushswap.parsing import (
    InputError,
    has_syntax_error,
    parse_arguments,
    parse_long,
    split_words,
)


def test_split_words_drops_empty():
    assert split_words("  1 2   3 ") == ["1", "2", "3"]


def test_split_words_only_spaces_separate():
    assert split_words("1\t2") == ["1\t2"]


def test_split_words_blank():
    assert split_words("    ") == []


@pytest.mark.parametrize("text", ["0", "42", "-7", "+15", "007"])
def test_valid_syntax(text):
    assert has_syntax_error(text) is False


@pytest.mark.parametrize("text", ["", "+", "-", "+-1", "1-", "1.5", "a1", " 1", "1 "])
def test_invalid_syntax(text):
    assert has_syntax_error(text) is True


@pytest.mark.parametrize(
    "text, expected",
    [("42", 42), ("-42", -42), ("+42", 42), ("  \t-13", -13), ("", 0), ("-", 0)],
)
def test_parse_long(text, expected):
    assert parse_long(text) == expected


def test_parse_long_stops_at_non_digit():
    assert parse_long("12abc") == 12


def test_parse_arguments_separate():
    assert parse_arguments(["3", "-1", "2"]) == [3, -1, 2]


def test_parse_arguments_single_string_is_split():
    assert parse_arguments(["3 -1  2"]) == [3, -1, 2]


def test_parse_arguments_blank_single_string():
    assert parse_arguments(["   "]) == []


def test_parse_arguments_int_limits_accepted():
    assert parse_arguments(["2147483647", "-2147483648"]) == [2147483647, -2147483648]


@pytest.mark.parametrize(
    "args",
    [
        ["1", "2", "1"],
        ["1 1"],
        ["2147483648"],
        ["-2147483649"],
        ["1", "two"],
        ["1", ""],
        ["+"],
    ],
)
def test_parse_arguments_errors(args):
    with pytest.raises(InputError, match="Error"):
        parse_arguments(args)


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_arguments(["x"])


@given(
    st.lists(
        st.integers(min_value=-(2**31), max_value=2**31 - 1), unique=True, min_size=2
    )
)
def test_round_trip_many_arguments(numbers):
    assert parse_arguments([str(n) for n in numbers]) == numbers


@given(st.lists(st.integers(min_value=-(2**31), max_value=2**31 - 1), unique=True))
def test_round_trip_single_string(numbers):
    assert parse_arguments([" ".join(str(n) for n in numbers)]) == numbers