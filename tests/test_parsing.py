import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.parsing import (
    INT_MAX,
    INT_MIN,
    PushSwapError,
    check_args,
    check_error,
    lenient_atoi,
    parse_arguments,
    parse_int,
    parse_quoted,
    split_words,
)

int32 = st.integers(min_value=INT_MIN, max_value=INT_MAX)


@given(int32)
def test_parse_int_round_trip(value):
    assert parse_int(str(value)) == value


@given(int32)
def test_parse_int_accepts_plus_and_whitespace(value):
    if value >= 0:
        assert parse_int(f" \t+{value}") == value
    else:
        assert parse_int(f"\n{value}") == value


def test_parse_int_limits():
    assert parse_int("2147483647") == 2147483647
    assert parse_int("-2147483648") == -2147483648


@pytest.mark.parametrize("text", ["2147483648", "-2147483649", "99999999999999"])
def test_parse_int_out_of_range(text):
    with pytest.raises(PushSwapError):
        parse_int(text)


@pytest.mark.parametrize("text", ["12a", "abc", "1 2", "--1", "+-3", "4 "])
def test_parse_int_rejects_non_digits(text):
    with pytest.raises(PushSwapError):
        parse_int(text)


def test_parse_int_bare_sign_reads_zero():
    assert parse_int("-") == 0
    assert parse_int("") == 0


@given(int32)
def test_lenient_atoi_round_trip(value):
    assert lenient_atoi(str(value)) == value


@given(int32, st.text(alphabet="abc xyz-", min_size=1))
def test_lenient_atoi_stops_at_non_digit(value, tail):
    assert lenient_atoi(f"{value}{tail}") == value


def test_lenient_atoi_overflow_values():
    assert lenient_atoi("2147483648") == -1
    assert lenient_atoi("-2147483649") == 0


def test_lenient_atoi_no_digits():
    assert lenient_atoi("xyz") == 0


@given(st.lists(st.text(alphabet="0123456789-+", min_size=1), max_size=8))
def test_split_words_round_trip(words):
    assert split_words("  ".join(words), " ") == words


def test_split_words_drops_empty_pieces():
    assert split_words("  1   2 3 ", " ") == ["1", "2", "3"]
    assert split_words("   ", " ") == []


@pytest.mark.parametrize("args", [["1", "2", "3"], ["-1", "+2"], ["1 2 3"], ["12 -4"]])
def test_check_error_accepts(args):
    assert check_error(args) is True


@pytest.mark.parametrize("args", [["1-"], ["-"], ["+"], ["12-"], ["1 -"], ["-a"]])
def test_check_error_rejects(args):
    assert check_error(args) is False


def test_check_args_accepts_numbers():
    assert check_args(["5", "-3", "+7"]) is True


def test_check_args_reports_bad_layout():
    assert check_args(["5-"]) is False


@pytest.mark.parametrize("args", [["1a"], ["1 2"], ["x"], ["3", "4.5"]])
def test_check_args_raises_on_invalid_characters(args):
    with pytest.raises(PushSwapError):
        check_args(args)


def test_parse_quoted_skips_first_word():
    assert parse_quoted(["prog 3 -1 7"]) == [3, -1, 7]


def test_parse_quoted_single_word():
    assert parse_quoted(["only"]) == []


def test_parse_quoted_requires_argument():
    with pytest.raises(PushSwapError):
        parse_quoted([])


@given(st.lists(int32, min_size=2, max_size=10))
def test_parse_arguments_separate(values):
    assert parse_arguments([str(v) for v in values]) == values


@given(st.lists(int32, min_size=1, max_size=10))
def test_parse_arguments_single_string(values):
    assert parse_arguments([" ".join(str(v) for v in values)]) == values


def test_parse_arguments_empty_string_gives_empty_stack():
    assert parse_arguments(["   "]) == []


def test_parse_arguments_requires_arguments():
    with pytest.raises(PushSwapError):
        parse_arguments([])


@pytest.mark.parametrize("args", [["1", "two"], ["1 2x"], ["2147483648", "1"]])
def test_parse_arguments_rejects_bad_numbers(args):
    with pytest.raises(PushSwapError):
        parse_arguments(args)