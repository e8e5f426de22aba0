"""Training tasks ride, gift1, friday and beads."""

from __future__ import annotations

from typing import Iterable, Sequence

_HASH_MODULUS = 47
_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_FIRST_YEAR = 1900


def name_hash(name: str) -> int:
    """Product of letter positions (A=1 .. Z=26) modulo 47."""
    result = 1
    for ch in name:
        result = (result * (ord(ch) - ord("A") + 1)) % _HASH_MODULUS
    return result


def ride(comet: str, group: str) -> str:
    """Return "GO" when both names hash alike, otherwise "STAY"."""
    comet_hash = name_hash(comet)
    group_hash = name_hash(group)
    if comet_hash == group_hash:
        return "GO"
    return "STAY"


def answer_ride(text: str) -> str:
    """Solve the ride task for its input text."""
    comet, group = text.split()[:2]
    return ride(comet, group) + "\n"


def gift1(
    names: Sequence[str], gifts: Iterable[tuple[str, int, Sequence[str]]]
) -> dict[str, int]:
    """Net money gained by each person, keyed in the order of ``names``.

    Each gift is ``(giver, amount, receivers)``; the amount is split evenly
    and the giver keeps the remainder.
    """
    totals = {name: 0 for name in names}

    def check(name: str) -> None:
        if name not in totals:
            raise ValueError(f"unknown person {name!r}")

    for giver, amount, receivers in gifts:
        check(giver)
        receivers = list(receivers)
        if not receivers:
            continue
        share = amount // len(receivers)
        for receiver in receivers:
            check(receiver)
            totals[receiver] += share
            totals[giver] -= share
    return totals


def answer_gift1(text: str) -> str:
    """Solve the gift1 task for its input text."""
    tokens = iter(text.split())
    count = int(next(tokens))
    names = [next(tokens) for _ in range(count)]
    gifts = []
    for giver in tokens:
        amount = int(next(tokens))
        receiver_count = int(next(tokens))
        gifts.append((giver, amount, [next(tokens) for _ in range(receiver_count)]))
    totals = gift1(names, gifts)
    return "".join(f"{name} {total}\n" for name, total in totals.items())


def _is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def friday(years: int) -> list[int]:
    """Count the weekdays of the 13th over ``years`` years from 1900.

    The counts run Saturday, Sunday, Monday, ..., Friday.
    """
    weeks = [0] * 7
    cursor = 2  # 1 January 1900 was a Monday
    for year in range(_FIRST_YEAR, _FIRST_YEAR + years):
        for month, days in enumerate(_MONTH_DAYS):
            weeks[(cursor + 12) % 7] += 1
            cursor += 29 if month == 1 and _is_leap_year(year) else days
    return weeks


def answer_friday(text: str) -> str:
    """Solve the friday task for its input text."""
    return " ".join(map(str, friday(int(text.split()[0])))) + "\n"


def _runs(beads_seq: str) -> tuple[list[int], list[int]]:
    """Lengths of the red-usable and blue-usable runs ending at each bead."""
    red = [0]
    blue = [0]
    for bead in beads_seq:
        red.append(0 if bead == "b" else red[-1] + 1)
        blue.append(0 if bead == "r" else blue[-1] + 1)
    return red, blue


def beads(necklace: str) -> int:
    """Most beads collectable by breaking the necklace at the best place."""
    n = len(necklace)
    doubled = necklace + necklace
    left_r, left_b = _runs(doubled)
    right_r, right_b = _runs(doubled[::-1])
    right_r.reverse()
    right_b.reverse()
    best = max(
        (
            max(left_r[i], left_b[i]) + max(right_r[i], right_b[i])
            for i in range(1, 2 * n)
        ),
        default=0,
    )
    return min(best, n)


def answer_beads(text: str) -> str:
    """Solve the beads task for its input text."""
    count, necklace = text.split()[:2]
    return f"{beads(necklace[: int(count)])}\n"