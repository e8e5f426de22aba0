"""Training tasks preface, subset and runround."""

from __future__ import annotations

from collections import Counter
from itertools import permutations

_ROMAN_LETTERS = "IVXLCDM"
_ROMAN_PLACES = (
    ("", "I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX"),
    ("", "X", "XX", "XXX", "XL", "L", "LX", "LXX", "LXXX", "XC"),
    ("", "C", "CC", "CCC", "CD", "D", "DC", "DCC", "DCCC", "CM"),
    ("", "M", "MM", "MMM"),
)
_ROMAN_LIMIT = 3999
_RUNAROUND_DIGITS = "123456789"


def roman(n: int) -> str:
    """Write ``n`` (0-3999) in Roman numerals; zero gives the empty string."""
    if not 0 <= n <= _ROMAN_LIMIT:
        raise ValueError(f"{n} is outside the range 0..{_ROMAN_LIMIT}")
    parts = []
    for place in _ROMAN_PLACES:
        n, digit = divmod(n, 10)
        parts.append(place[digit])
    return "".join(reversed(parts))


def preface(n: int) -> dict[str, int]:
    """How often each Roman letter is used writing 1..n, in I V X L C D M order.

    Letters that are never used are left out.
    """
    counts: Counter[str] = Counter()
    for page in range(1, n + 1):
        counts.update(roman(page))
    return {letter: counts[letter] for letter in _ROMAN_LETTERS if counts[letter]}


def answer_preface(text: str) -> str:
    """Solve the preface task for its input text."""
    counts = preface(int(text.split()[0]))
    return "".join(f"{letter} {count}\n" for letter, count in counts.items())


def subset(n: int) -> int:
    """Ways to split 1..n into two sets with equal sums."""
    if n < 0:
        raise ValueError("n must not be negative")
    total = n * (n + 1) // 2
    if total % 2:
        return 0
    half = total // 2
    ways = [1] + [0] * half
    for item in range(1, n + 1):
        for target in range(half, item - 1, -1):
            ways[target] += ways[target - item]
    return ways[half] // 2


def answer_subset(text: str) -> str:
    """Solve the subset task for its input text."""
    return f"{subset(int(text.split()[0]))}\n"


def is_runaround(number: int | str) -> bool:
    """Tell whether hopping right by each digit visits every digit once and returns."""
    digits = str(number)
    if not digits.isdigit():
        raise ValueError(f"{number!r} is not a non-negative whole number")
    visited = [False] * len(digits)
    position = 0
    while not visited[position]:
        visited[position] = True
        position = (position + int(digits[position])) % len(digits)
    return position == 0 and all(visited)


def runround(m: int) -> int:
    """Smallest runaround number above ``m`` made of distinct non-zero digits."""
    for length in range(1, len(_RUNAROUND_DIGITS) + 1):
        if 10**length - 1 <= m:
            continue
        for digits in permutations(_RUNAROUND_DIGITS, length):
            number = int("".join(digits))
            if number > m and is_runaround(number):
                return number
    raise ValueError(f"no runaround number with distinct digits exceeds {m}")


def answer_runround(text: str) -> str:
    """Solve the runround task for its input text."""
    return f"{runround(int(text.split()[0]))}\n"