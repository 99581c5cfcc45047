import pytest

from sigtalk.numfmt import itoa, itoa_hex, itoa_ptr, itoa_unsigned

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)
UINT_MAX = 2**32 - 1


def test_itoa_zero():
    assert itoa(0) == "0"


@pytest.mark.parametrize("n", [1, -1, 7, -7, 10, -10, 12345, -98765, INT_MAX, INT_MIN])
def test_itoa_round_trip(n):
    assert int(itoa(n)) == n


def test_itoa_sign_only_for_negatives():
    assert itoa(-5).startswith("-")
    assert not itoa(5).startswith("-")


def test_itoa_wraps_to_signed_32_bits():
    assert itoa(INT_MAX + 1) == itoa(INT_MIN)
    assert itoa(UINT_MAX) == itoa(-1)


def test_itoa_rejects_non_integers():
    with pytest.raises(TypeError):
        itoa(1.5)


def test_itoa_unsigned_zero():
    assert itoa_unsigned(0) == "0"


@pytest.mark.parametrize("n", [1, 9, 10, 4096, INT_MAX, UINT_MAX])
def test_itoa_unsigned_round_trip(n):
    assert int(itoa_unsigned(n)) == n


def test_itoa_unsigned_wraps_negatives():
    assert itoa_unsigned(-1) == itoa_unsigned(UINT_MAX)
    assert int(itoa_unsigned(-1)) == UINT_MAX


def test_itoa_hex_zero():
    assert itoa_hex(0) == "0"
    assert itoa_hex(0, upper=True) == "0"


@pytest.mark.parametrize("n", [1, 15, 16, 255, 0xDEADBEEF, UINT_MAX])
def test_itoa_hex_round_trip(n):
    assert int(itoa_hex(n), 16) == n
    assert int(itoa_hex(n, upper=True), 16) == n


@pytest.mark.parametrize("n", [10, 171, 0xCAFE, 0xDEADBEEF])
def test_itoa_hex_case(n):
    lower = itoa_hex(n)
    upper = itoa_hex(n, upper=True)
    assert upper == lower.upper()
    assert lower == lower.lower()


def test_itoa_hex_has_no_prefix_or_leading_zeros():
    text = itoa_hex(0x1F)
    assert not text.startswith("0")


def test_itoa_hex_wraps_negatives():
    assert itoa_hex(-1) == itoa_hex(UINT_MAX)


def test_itoa_ptr_null():
    assert itoa_ptr(0) == "(nil)"


@pytest.mark.parametrize("n", [1, 0x10, 0x7FFDEADBEEF, 2**64 - 1])
def test_itoa_ptr_round_trip(n):
    text = itoa_ptr(n)
    assert text.startswith("0x")
    assert int(text, 16) == n
    assert text == text.lower()


def test_itoa_ptr_matches_hex_for_small_values():
    assert itoa_ptr(0xABC) == "0x" + itoa_hex(0xABC)