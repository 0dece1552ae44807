import pytest

from oitools.luogu import (
    RadixNumber,
    add_digit_lists,
    add_reverse,
    count_pairs_with_difference,
    is_palindrome_digits,
    longest_balanced,
    palindrome_steps,
    smallest_separating_modulus,
)


def digits_to_int(digits):
    return int("".join(str(d) for d in reversed(digits)) or "0")


def test_from_string_skips_noise():
    assert str(RadixNumber.from_string("xx123yy", 10)) == "123"


def test_from_string_hex_round_trip():
    number = RadixNumber.from_string("1A2F", 16)
    assert str(number) == "1A2F"
    assert number.base == 16


def test_from_string_without_digits_raises():
    with pytest.raises(ValueError):
        RadixNumber.from_string("abc", 10)


def test_digit_too_large_for_base_raises():
    with pytest.raises(ValueError):
        RadixNumber.from_string("19", 8)


def test_add_matches_int_arithmetic():
    a = RadixNumber.from_string("1A2F", 16)
    b = RadixNumber.from_string("FF", 16)
    assert int(str(a + b), 16) == 0x1A2F + 0xFF


def test_add_different_bases_raises():
    with pytest.raises(ValueError):
        RadixNumber.from_string("12", 10) + RadixNumber.from_string("12", 16)


def test_reversed_and_palindrome():
    number = RadixNumber.from_string("12321", 10)
    assert number.is_palindrome()
    assert str(RadixNumber.from_string("123", 10).reversed()) == "321"
    assert not RadixNumber.from_string("123", 10).is_palindrome()


def test_palindrome_steps_worked_example():
    assert palindrome_steps(10, "87") == 4


def test_palindrome_steps_lychrel_gives_none():
    assert palindrome_steps(10, "196") is None


def test_add_digit_lists_matches_ints():
    a, b = [9, 9, 9], [1]
    assert digits_to_int(add_digit_lists(a, b)) == digits_to_int(a) + digits_to_int(b)


def test_add_reverse_matches_ints():
    digits = [7, 8]
    assert digits_to_int(add_reverse(digits)) == 87 + 78


def test_is_palindrome_digits():
    assert is_palindrome_digits([1, 2, 1])
    assert not is_palindrome_digits([1, 2])
    assert is_palindrome_digits([])


def test_count_pairs_sample():
    assert count_pairs_with_difference([1, 1, 2, 3], 1) == 3


def test_count_pairs_negative_difference_symmetry():
    nums = [5, 2, 8, 5, 11, 2]
    assert count_pairs_with_difference(nums, 3) == count_pairs_with_difference(nums, -3)


def test_longest_balanced_sample():
    assert longest_balanced([0, 1, 0, 0, 0, 1, 1, 0, 0]) == 6


def test_longest_balanced_alternating_is_whole():
    bits = [1, 0] * 5
    assert longest_balanced(bits) == len(bits)


def test_longest_balanced_all_same():
    assert longest_balanced([1, 1, 1]) == 0


@pytest.mark.parametrize("nums", [[0, 3, 4, 7, 9], [1, 2, 3], [10, 10, 20], [5]])
def test_smallest_separating_modulus_invariant(nums):
    k = smallest_separating_modulus(nums)
    distinct = set(nums)
    assert k >= len(nums)
    assert len({v % k for v in distinct}) == len(distinct)
    for smaller in range(max(len(nums), 1), k):
        assert len({v % smaller for v in distinct}) < len(distinct)