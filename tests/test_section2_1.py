from math import gcd

import pytest

from algodrills.section2_1 import (
    CastleReport,
    answer_castle,
    answer_frac1,
    answer_hamming,
    answer_holstein,
    answer_sort3,
    castle,
    frac1,
    hamming,
    holstein,
    sort3,
)

CASTLE_SAMPLE = """7 4
11 6 11 6 3 10 6
7 9 6 13 5 15 5
1 10 12 7 13 7 5
13 11 10 8 10 12 13
"""

HOLSTEIN_SAMPLE = """4
100 200 300 400
3
50 50 50 50
200 300 200 300
900 150 389 399
"""


def test_castle_sample():
    assert answer_castle(CASTLE_SAMPLE) == "5\n9\n16\n4 1 E\n"


def test_castle_report_invariants():
    numbers = [int(t) for t in CASTLE_SAMPLE.split()]
    grid = [numbers[2 + r * 7 : 2 + (r + 1) * 7] for r in range(4)]
    report = castle(grid)
    assert isinstance(report, CastleReport)
    assert report.largest <= report.merged <= 28
    assert 1 <= report.row <= 4 and 1 <= report.column <= 7
    assert str(report) == answer_castle(CASTLE_SAMPLE)


def test_castle_all_walls():
    report = castle([[15, 15], [15, 15]])
    assert report.rooms == 4
    assert report.merged == 2 * report.largest
    assert report.wall in ("N", "E")


@pytest.mark.parametrize("grid", [[[15]], [[11, 14]]])
def test_castle_single_room_raises(grid):
    with pytest.raises(ValueError):
        castle(grid)


def test_castle_rejects_ragged_grid():
    with pytest.raises(ValueError):
        castle([[15, 15], [15]])


@pytest.mark.parametrize("n", [1, 5, 12])
def test_frac1_invariants(n):
    fractions = frac1(n)
    assert fractions[0] == (0, 1)
    assert fractions[-1] == (1, 1)
    for (a, b), (c, d) in zip(fractions, fractions[1:]):
        assert a * d < c * b
    for a, b in fractions:
        assert b <= n
        assert gcd(a, b) == 1


def test_frac1_contains_extremes():
    fractions = frac1(5)
    assert (1, 5) in fractions
    assert (4, 5) in fractions


def test_answer_frac1_format():
    lines = answer_frac1("5\n").splitlines()
    assert lines[0] == "0/1"
    assert lines[-1] == "1/1"
    assert lines == [f"{a}/{b}" for a, b in frac1(5)]


def test_frac1_rejects_zero():
    with pytest.raises(ValueError):
        frac1(0)


def test_sort3_sample():
    assert answer_sort3("9\n2\n2\n1\n3\n3\n3\n2\n3\n1\n") == "4\n"


def test_sort3_sorted_needs_nothing():
    assert sort3([1, 1, 2, 2, 3, 3]) == 0


@pytest.mark.parametrize("values", [[3, 2, 1, 1, 2, 3], [2, 3, 1], [3, 3, 1, 2, 2, 1]])
def test_sort3_bounded(values):
    swaps = sort3(values)
    assert 0 < swaps < len(values)


def test_holstein_sample():
    assert answer_holstein(HOLSTEIN_SAMPLE) == "2 1 3\n"


def test_holstein_choice_meets_requirements():
    requirements = [10, 20]
    feeds = [[5, 5], [10, 0], [0, 20], [3, 30]]
    chosen = holstein(requirements, feeds)
    totals = [sum(feeds[i - 1][k] for i in chosen) for k in range(2)]
    assert all(t >= r for t, r in zip(totals, requirements))
    assert list(chosen) == sorted(chosen)


def test_holstein_impossible_raises():
    with pytest.raises(ValueError):
        holstein([100], [[1], [2]])


def test_holstein_rejects_mismatched_feed():
    with pytest.raises(ValueError):
        holstein([1, 2], [[1]])


def test_hamming_sample():
    assert answer_hamming("16 7 3") == (
        "0 7 25 30 42 45 51 52 75 76\n82 85 97 102 120 127\n"
    )


def test_hamming_invariants():
    words = hamming(10, 6, 2)
    assert len(words) == 10
    assert words[0] == 0
    assert words == sorted(words)
    assert all(w < 64 for w in words)
    for i, a in enumerate(words):
        for b in words[i + 1 :]:
            assert bin(a ^ b).count("1") >= 2


def test_hamming_single_word():
    assert hamming(1, 3, 2) == [0]


def test_hamming_impossible_raises():
    with pytest.raises(ValueError):
        hamming(5, 2, 3)