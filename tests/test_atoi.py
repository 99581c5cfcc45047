import pytest

from sigtalk.atoi import atoi


@pytest.mark.parametrize("n", [0, 1, 42, 4242, 2147483647, -1, -42, -2147483648])
def test_round_trip(n):
    assert atoi(str(n)) == n


def test_plus_sign():
    assert atoi("+42") == 42


def test_leading_whitespace_is_skipped():
    assert atoi(" \t\n\r\v\f42") == 42


def test_stops_at_first_non_digit():
    assert atoi("  -17abc99") == -17


def test_trailing_space_stops_parsing():
    assert atoi("12 34") == 12


@pytest.mark.parametrize("text", ["", "   ", "abc", "+", "-", "+-5", "--5", "-+5", "x12"])
def test_no_digits_gives_zero(text):
    assert atoi(text) == 0


def test_whitespace_after_sign_gives_zero():
    assert atoi("- 5") == 0


def test_only_ascii_digits_count():
    assert atoi("\u0663") == 0
    assert atoi("7\u0663") == 7


def test_leading_zeros():
    assert atoi("007") == 7


def test_rejects_non_string():
    with pytest.raises(TypeError):
        atoi(42)