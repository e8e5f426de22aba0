"""Training tasks ariprog, milk3, numtri, pprime and sprime."""

from __future__ import annotations

from itertools import permutations
from typing import Iterator, Sequence

_PAL_HALF_LIMIT = 9999
_LEADING_DIGITS = (2, 3, 5, 7)
_TRAILING_DIGITS = (1, 3, 7, 9)


def ariprog(length: int, limit: int) -> list[tuple[int, int]]:
    """Arithmetic progressions of ``length`` terms made only of bisquares.

    Bisquares are ``p*p + q*q`` with ``0 <= q <= p <= limit``.  Each
    progression is given as ``(start, step)``, ordered by step, then start.
    """
    if length < 2:
        raise ValueError("a progression needs at least two terms")
    if limit < 0:
        raise ValueError("the limit must not be negative")
    bisquares = sorted({p * p + q * q for p in range(limit + 1) for q in range(p + 1)})
    present = set(bisquares)
    upper = 2 * limit * limit
    found: list[tuple[int, int]] = []
    for step in range(1, upper // (length - 1) + 1):
        last_start = upper - (length - 1) * step
        for start in bisquares:
            if start > last_start:
                break
            if all(start + k * step in present for k in range(1, length)):
                found.append((start, step))
    return found


def answer_ariprog(text: str) -> str:
    """Solve the ariprog task for its input text."""
    length, limit = (int(token) for token in text.split()[:2])
    progressions = ariprog(length, limit)
    if not progressions:
        return "NONE\n"
    return "".join(f"{start} {step}\n" for start, step in progressions)


def _pour(
    state: tuple[int, int, int], caps: tuple[int, int, int], src: int, dst: int
) -> tuple[int, int, int]:
    amount = min(state[src], caps[dst] - state[dst])
    levels = list(state)
    levels[src] -= amount
    levels[dst] += amount
    return (levels[0], levels[1], levels[2])


def milk3(a: int, b: int, c: int) -> list[int]:
    """Amounts possible in bucket C while bucket A is empty, ascending.

    Buckets A and B start empty and C starts full.
    """
    caps = (a, b, c)
    if any(cap < 0 for cap in caps):
        raise ValueError("capacities must not be negative")
    seen: set[tuple[int, int]] = set()
    amounts: set[int] = set()
    stack = [(0, 0, c)]
    while stack:
        state = stack.pop()
        key = (state[0], state[1])
        if key in seen:
            continue
        seen.add(key)
        if state[0] == 0:
            amounts.add(state[2])
        stack.extend(_pour(state, caps, src, dst) for src, dst in permutations(range(3), 2))
    return sorted(amounts)


def answer_milk3(text: str) -> str:
    """Solve the milk3 task for its input text."""
    a, b, c = (int(token) for token in text.split()[:3])
    return " ".join(map(str, milk3(a, b, c))) + "\n"


def numtri(rows: Sequence[Sequence[int]]) -> int:
    """Largest sum along a path from the apex to the base of a number triangle."""
    rows = [list(row) for row in rows]
    if not rows:
        raise ValueError("the triangle has no rows")
    for index, row in enumerate(rows):
        if len(row) != index + 1:
            raise ValueError(f"row {index + 1} must hold {index + 1} numbers")
    best = rows[-1]
    for row in reversed(rows[:-1]):
        best = [value + max(best[j], best[j + 1]) for j, value in enumerate(row)]
    return best[0]


def answer_numtri(text: str) -> str:
    """Solve the numtri task for its input text."""
    tokens = iter(int(token) for token in text.split())
    count = next(tokens)
    rows = [[next(tokens) for _ in range(size)] for size in range(1, count + 1)]
    return f"{numtri(rows)}\n"


def is_prime(n: int) -> bool:
    """Trial-division primality test."""
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    divisor = 3
    while divisor * divisor <= n:
        if n % divisor == 0:
            return False
        divisor += 2
    return True


def _palindromes() -> Iterator[int]:
    for half in range(1, _PAL_HALF_LIMIT):
        digits = str(half)
        yield int(digits + digits[::-1])
        yield int(digits + digits[:-1][::-1])


def pprime(low: int, high: int) -> list[int]:
    """Palindromic primes between ``low`` and ``high`` inclusive, ascending."""
    return sorted(p for p in _palindromes() if low <= p <= high and is_prime(p))


def answer_pprime(text: str) -> str:
    """Solve the pprime task for its input text."""
    low, high = (int(token) for token in text.split()[:2])
    return "".join(f"{p}\n" for p in pprime(low, high))


def _superprimes(prefix: int, remaining: int) -> Iterator[int]:
    if not is_prime(prefix):
        return
    if remaining == 0:
        yield prefix
        return
    for digit in _TRAILING_DIGITS:
        yield from _superprimes(prefix * 10 + digit, remaining - 1)


def sprime(length: int) -> list[int]:
    """Primes of ``length`` digits whose every leading prefix is prime, ascending."""
    if length < 1:
        raise ValueError("the length must be at least one digit")
    return [
        n for digit in _LEADING_DIGITS for n in _superprimes(digit, length - 1)
    ]


def answer_sprime(text: str) -> str:
    """Solve the sprime task for its input text."""
    return "".join(f"{n}\n" for n in sprime(int(text.split()[0])))