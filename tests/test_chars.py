import pytest

from pushswap.chars import (
    atoi,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    itoa,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("c", ["a", "z", "A", "Z", "m"])
def test_is_alpha_accepts_letters(c):
    assert is_alpha(c) is True
    assert is_alpha(ord(c)) is True


@pytest.mark.parametrize("c", ["0", "9", " ", "@", "[", "`", "{"])
def test_is_alpha_rejects_non_letters(c):
    assert is_alpha(c) is False


@pytest.mark.parametrize("c", "0123456789")
def test_is_digit_accepts_digits(c):
    assert is_digit(c) is True


@pytest.mark.parametrize("c", ["/", ":", "a", " "])
def test_is_digit_rejects_others(c):
    assert is_digit(c) is False


@pytest.mark.parametrize("c", ["a", "Q", "5"])
def test_is_alnum_accepts(c):
    assert is_alnum(c) is True


@pytest.mark.parametrize("c", ["-", " ", "~"])
def test_is_alnum_rejects(c):
    assert is_alnum(c) is False


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_is_print_bounds():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(127) is False
    assert is_print("\n") is False


def test_case_conversion_round_trip():
    for c in "abcdefghijklmnopqrstuvwxyz":
        upper = to_upper(c)
        assert upper == c.upper()
        assert to_lower(upper) == c


def test_case_conversion_keeps_int_form():
    assert to_upper(ord("q")) == ord("Q")
    assert to_lower(ord("Q")) == ord("q")


@pytest.mark.parametrize("c", ["1", "@", "[", "{", " "])
def test_case_conversion_leaves_non_letters(c):
    assert to_upper(c) == c
    assert to_lower(c) == c


def test_multichar_string_rejected():
    with pytest.raises(ValueError):
        is_digit("12")


def test_atoi_skips_whitespace_and_sign():
    assert atoi(" \t\n-42") == -42
    assert atoi("+17") == 17


def test_atoi_stops_at_non_digit():
    assert atoi("123abc") == 123
    assert atoi("abc") == 0
    assert atoi("--5") == 0


def test_atoi_limits():
    assert atoi("2147483647") == 2147483647
    assert atoi("-2147483648") == -2147483648


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648, 100000])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_minimum():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2147483648)