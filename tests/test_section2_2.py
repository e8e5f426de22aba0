from itertools import combinations

import pytest

from algodrills.section2_2 import (
    answer_preface,
    answer_runround,
    answer_subset,
    is_runaround,
    preface,
    roman,
    runround,
    subset,
)

_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def _parse_roman(text):
    total = 0
    for current, following in zip(text, text[1:] + " "):
        value = _VALUES[current]
        if following != " " and _VALUES[following] > value:
            total -= value
        else:
            total += value
    return total


@pytest.mark.parametrize(
    "n, expected", [(9, "IX"), (90, "XC"), (400, "CD"), (3000, "MMM"), (4, "IV")]
)
def test_roman_pinned(n, expected):
    assert roman(n) == expected


def test_roman_zero_is_empty():
    assert roman(0) == ""


def test_roman_round_trip():
    for n in range(1, 4000):
        assert _parse_roman(roman(n)) == n


@pytest.mark.parametrize("n", [-1, 4000])
def test_roman_out_of_range(n):
    with pytest.raises(ValueError):
        roman(n)


def test_preface_sample():
    assert preface(5) == {"I": 7, "V": 2}


@pytest.mark.parametrize("n", [1, 17, 49, 399, 1234])
def test_preface_counts_all_letters(n):
    counts = preface(n)
    assert sum(counts.values()) == sum(len(roman(i)) for i in range(1, n + 1))
    assert list(counts) == [letter for letter in "IVXLCDM" if letter in counts]
    assert all(count > 0 for count in counts.values())


def test_answer_preface_format():
    counts = preface(40)
    expected = "".join(f"{letter} {count}\n" for letter, count in counts.items())
    assert answer_preface("40\n") == expected


def test_subset_sample():
    assert subset(7) == 4


@pytest.mark.parametrize("n", [1, 2, 5, 6, 9, 10])
def test_subset_odd_total_has_no_split(n):
    assert subset(n) == 0


@pytest.mark.parametrize("n", range(3, 13))
def test_subset_matches_brute_force(n):
    numbers = range(1, n + 1)
    total = sum(numbers)
    if total % 2:
        assert subset(n) == 0
        return
    count = sum(
        1
        for size in range(n + 1)
        for chosen in combinations(numbers, size)
        if sum(chosen) * 2 == total
    )
    assert subset(n) == count // 2


def test_subset_negative():
    with pytest.raises(ValueError):
        subset(-3)


def test_answer_subset_format():
    assert answer_subset("7\n") == f"{subset(7)}\n"


def test_is_runaround_rejects_unreturning():
    assert not is_runaround(12)


def test_is_runaround_single_digit():
    assert is_runaround(5)


def test_is_runaround_accepts_string():
    assert is_runaround("5") == is_runaround(5)


def test_is_runaround_bad_input():
    with pytest.raises(ValueError):
        is_runaround(-12)


def test_runround_sample():
    assert runround(81361) == 81362


def _distinct_nonzero(n):
    digits = str(n)
    return "0" not in digits and len(set(digits)) == len(digits)


@pytest.mark.parametrize("m", [0, 100, 500, 9000])
def test_runround_is_smallest(m):
    result = runround(m)
    assert result > m
    assert is_runaround(result)
    assert _distinct_nonzero(result)
    for k in range(m + 1, result):
        assert not (_distinct_nonzero(k) and is_runaround(k))


def test_runround_none_left():
    with pytest.raises(ValueError):
        runround(987654321)


def test_answer_runround_format():
    assert answer_runround("81361\n") == f"{runround(81361)}\n"