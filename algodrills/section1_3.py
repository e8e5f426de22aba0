"""Training tasks milk2, transform, namenum, palsquare and dualpal."""

from __future__ import annotations

import string
from typing import Iterable, Optional, Sequence

_DIGITS = string.digits + string.ascii_uppercase
_KEYPAD = dict(zip(string.ascii_uppercase, "2223334445556667777888999"))
_PALSQUARE_LIMIT = 300
_DUALPAL_BASES = range(2, 11)


def milk2(intervals: Iterable[tuple[int, int]]) -> tuple[int, int]:
    """Longest time with someone milking and longest time with nobody.

    Intervals are ``(begin, end)`` pairs; overlapping or touching ones merge.
    """
    ordered = sorted(intervals, key=lambda interval: interval[0])
    if not ordered:
        raise ValueError("at least one interval is required")
    continuous = idle = 0
    begin, end = ordered[0]
    for next_begin, next_end in ordered[1:]:
        if next_begin <= end:
            end = max(end, next_end)
        else:
            continuous = max(continuous, end - begin)
            idle = max(idle, next_begin - end)
            begin, end = next_begin, next_end
    continuous = max(continuous, end - begin)
    return continuous, idle


def answer_milk2(text: str) -> str:
    """Solve the milk2 task for its input text."""
    numbers = [int(token) for token in text.split()]
    count = numbers[0]
    values = numbers[1 : 1 + 2 * count]
    intervals = list(zip(values[::2], values[1::2]))
    continuous, idle = milk2(intervals)
    return f"{continuous} {idle}\n"


def _rotate(board: tuple[str, ...]) -> tuple[str, ...]:
    return tuple(
        "".join(row[col] for row in reversed(board)) for col in range(len(board))
    )


def _reflect(board: tuple[str, ...]) -> tuple[str, ...]:
    return tuple(row[::-1] for row in board)


def transform(before: Sequence[str], after: Sequence[str]) -> int:
    """Number (1-7) of the simplest transformation turning ``before`` into ``after``.

    1-3: rotation by 90, 180, 270 degrees clockwise; 4: reflection;
    5: reflection then a rotation; 6: no change; 7: none of these.
    """
    start = tuple(before)
    target = tuple(after)
    if any(len(row) != len(start) for row in start):
        raise ValueError("the board must be square")

    rotated = start
    for number in (1, 2, 3):
        rotated = _rotate(rotated)
        if rotated == target:
            return number

    reflected = _reflect(start)
    if reflected == target:
        return 4
    rotated = reflected
    for _ in range(3):
        rotated = _rotate(rotated)
        if rotated == target:
            return 5

    return 6 if start == target else 7


def answer_transform(text: str) -> str:
    """Solve the transform task for its input text."""
    lines = text.splitlines()
    size = int(lines[0].split()[0])
    rows = [line[:size] for line in lines[1 : 1 + 2 * size]]
    if len(rows) < 2 * size:
        raise ValueError("input holds fewer rows than announced")
    return f"{transform(rows[:size], rows[size:])}\n"


def to_base(n: int, base: int) -> str:
    """Write a non-negative integer in ``base`` (2-36) with upper-case digits."""
    if not 2 <= base <= len(_DIGITS):
        raise ValueError(f"unsupported base {base}")
    if n < 0:
        raise ValueError("negative numbers are not supported")
    if n == 0:
        return "0"
    digits = []
    while n:
        n, digit = divmod(n, base)
        digits.append(_DIGITS[digit])
    return "".join(reversed(digits))


def is_palindrome(text: str) -> bool:
    """Tell whether ``text`` reads the same both ways."""
    return text == text[::-1]


def _keypad_digits(word: str) -> Optional[str]:
    try:
        return "".join(_KEYPAD[ch] for ch in word)
    except KeyError:
        return None


def namenum(number: str, words: Iterable[str]) -> list[str]:
    """Words whose telephone keypad digits spell ``number``, in input order."""
    return [word for word in words if _keypad_digits(word) == number]


def answer_namenum(text: str, dictionary: str) -> str:
    """Solve the namenum task for its input text and dictionary text."""
    number = text.split()[0]
    matches = namenum(number, dictionary.split())
    if not matches:
        return "NONE\n"
    return "".join(f"{word}\n" for word in matches)


def palsquare(base: int) -> list[tuple[str, str]]:
    """Pairs ``(n, n*n)`` in ``base`` for 1 <= n <= 300 whose square is a palindrome."""
    pairs = []
    for n in range(1, _PALSQUARE_LIMIT + 1):
        square = to_base(n * n, base)
        if is_palindrome(square):
            pairs.append((to_base(n, base), square))
    return pairs


def answer_palsquare(text: str) -> str:
    """Solve the palsquare task for its input text."""
    base = int(text.split()[0])
    return "".join(f"{n} {square}\n" for n, square in palsquare(base))


def _is_dual_palindrome(n: int) -> bool:
    hits = (base for base in _DUALPAL_BASES if is_palindrome(to_base(n, base)))
    return next(hits, None) is not None and next(hits, None) is not None


def dualpal(count: int, start: int) -> list[int]:
    """First ``count`` numbers above ``start`` palindromic in two or more bases 2-10."""
    found: list[int] = []
    n = start
    while len(found) < count:
        n += 1
        if _is_dual_palindrome(n):
            found.append(n)
    return found


def answer_dualpal(text: str) -> str:
    """Solve the dualpal task for its input text."""
    count, start = (int(token) for token in text.split()[:2])
    return "".join(f"{n}\n" for n in dualpal(count, start))