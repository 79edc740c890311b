import pytest

from pushswap.args import (
    InputError,
    is_number,
    parse_arguments,
    parse_integer,
    split_arguments,
)


def test_split_single_argument_with_spaces():
    assert split_arguments(["3 2 1"]) == ["3", "2", "1"]


def test_split_several_arguments_are_joined():
    assert split_arguments(["3 2", "1", "7"]) == ["3", "2", "1", "7"]


def test_split_drops_empty_tokens():
    assert split_arguments(["  4   5 ", "", "6"]) == ["4", "5", "6"]


def test_split_only_on_spaces():
    assert split_arguments(["1\t2 3"]) == ["1\t2", "3"]


def test_split_nothing():
    assert split_arguments(["   "]) == []


@pytest.mark.parametrize("token", ["0", "42", "+7", "-7", "007", "-2147483649"])
def test_is_number_accepts(token):
    assert is_number(token) is True


@pytest.mark.parametrize("token", ["", "+", "-", "+-1", "--1", "1a", "a1", "1-", " 1", "1.5"])
def test_is_number_rejects(token):
    assert is_number(token) is False


@pytest.mark.parametrize("token", ["0", "12", "-12", "+12", "2147483647", "-2147483648"])
def test_parse_integer_matches_int(token):
    assert parse_integer(token) == int(token)


def test_parse_integer_skips_whitespace_and_stops_at_non_digit():
    assert parse_integer(" \t-42abc") == -42


def test_parse_integer_without_digits_is_zero():
    assert parse_integer("abc") == 0
    assert parse_integer("+-5") == 0


def test_parse_arguments_keeps_order():
    assert parse_arguments(["3 -1", "2"]) == [3, -1, 2]


def test_parse_arguments_accepts_int_limits():
    assert parse_arguments(["2147483647", "-2147483648"]) == [2147483647, -2147483648]


def test_parse_arguments_empty():
    assert parse_arguments([" "]) == []


def test_parse_arguments_rejects_non_number():
    with pytest.raises(InputError):
        parse_arguments(["1", "two", "3"])


def test_parse_arguments_rejects_overflow():
    with pytest.raises(InputError):
        parse_arguments(["1", "2147483648"])


def test_parse_arguments_rejects_underflow():
    with pytest.raises(InputError):
        parse_arguments(["-2147483649"])


def test_parse_arguments_rejects_duplicates():
    with pytest.raises(InputError):
        parse_arguments(["1 2 3 2"])


def test_parse_arguments_signed_zeros_are_duplicates():
    with pytest.raises(InputError):
        parse_arguments(["+0", "-0"])


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_arguments(["x"])