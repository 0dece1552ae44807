import pytest

from oitools.bigutil import (
    add_leading_zeroes,
    add_trailing_zeroes,
    is_power_of_10,
    is_valid_number,
    larger_and_smaller,
    strip_leading_zeroes,
)


@pytest.mark.parametrize("text", ["0", "123", "0007", ""])
def test_valid_numbers(text):
    assert is_valid_number(text) is True


@pytest.mark.parametrize("text", ["-1", "12a", " 1", "1.5", "+3"])
def test_invalid_numbers(text):
    assert is_valid_number(text) is False


def test_strip_leading_zeroes():
    assert strip_leading_zeroes("000123") == "123"
    assert strip_leading_zeroes("100") == "100"
    assert strip_leading_zeroes("0000") == "0"
    assert strip_leading_zeroes("") == "0"


def test_leading_zeroes_round_trip():
    for count in range(5):
        padded = add_leading_zeroes("4096", count)
        assert len(padded) == 4 + count
        assert strip_leading_zeroes(padded) == "4096"


def test_trailing_zeroes_scale_value():
    for count in range(4):
        assert int(add_trailing_zeroes("37", count)) == 37 * 10**count


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        add_leading_zeroes("1", -1)
    with pytest.raises(ValueError):
        add_trailing_zeroes("1", -2)


def test_larger_and_smaller_pads_shorter():
    assert larger_and_smaller("12", "999") == ("999", "012")
    assert larger_and_smaller("999", "12") == ("999", "012")


def test_larger_and_smaller_same_length():
    larger, smaller = larger_and_smaller("345", "912")
    assert (larger, smaller) == ("912", "345")


@pytest.mark.parametrize("a,b", [("1", "1"), ("5", "123456"), ("8080", "99"), ("0", "7")])
def test_larger_and_smaller_invariants(a, b):
    larger, smaller = larger_and_smaller(a, b)
    assert len(larger) == len(smaller)
    assert int(larger) >= int(smaller)
    assert {int(larger), int(smaller)} == {int(a), int(b)}


@pytest.mark.parametrize("text", ["1", "10", "1000000000000000000000"])
def test_powers_of_ten(text):
    assert is_power_of_10(text) is True


@pytest.mark.parametrize("text", ["", "0", "11", "101", "20", "010"])
def test_not_powers_of_ten(text):
    assert is_power_of_10(text) is False