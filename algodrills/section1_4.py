"""Training tasks milk, barn1, crypt1, combo, wormhole and skidesign."""

from __future__ import annotations

from collections import Counter
from itertools import pairwise, product
from typing import Iterable, Iterator, Optional, Sequence

_SKI_SPAN = 17
_SKI_LOWEST_TOP = 83


def milk(need: int, offers: Iterable[tuple[int, int]]) -> int:
    """Cheapest cost of ``need`` units given ``(price, amount)`` offers."""
    supply: Counter[int] = Counter()
    for price, amount in offers:
        supply[price] += amount
    bought = cost = 0
    for price in sorted(supply):
        if bought >= need:
            break
        take = min(supply[price], need - bought)
        cost += price * take
        bought += take
    return cost


def answer_milk(text: str) -> str:
    """Solve the milk task for its input text."""
    numbers = [int(token) for token in text.split()]
    need, count = numbers[0], numbers[1]
    values = numbers[2 : 2 + 2 * count]
    return f"{milk(need, zip(values[::2], values[1::2]))}\n"


def barn1(max_boards: int, stalls: Iterable[int]) -> int:
    """Fewest stalls covered by at most ``max_boards`` boards over all occupied stalls."""
    ordered = sorted(stalls)
    if not ordered:
        raise ValueError("at least one occupied stall is required")
    if max_boards >= len(ordered):
        return len(ordered)
    covered = ordered[-1] - ordered[0] + 1
    gaps = sorted((b - a for a, b in pairwise(ordered)), reverse=True)
    return covered - sum(gap - 1 for gap in gaps[: max(max_boards - 1, 0)])


def answer_barn1(text: str) -> str:
    """Solve the barn1 task for its input text."""
    numbers = [int(token) for token in text.split()]
    max_boards, count = numbers[0], numbers[2]
    return f"{barn1(max_boards, numbers[3 : 3 + count])}\n"


def crypt1(digits: Iterable[int]) -> int:
    """Count solutions of the three-by-two digit multiplication using only ``digits``."""
    allowed = {str(digit) for digit in digits}

    def fits(n: int, width: int) -> bool:
        text = str(n)
        return n > 0 and len(text) == width and set(text) <= allowed

    tops = [i for i in range(111, 1000) if fits(i, 3)]
    bottoms = [j for j in range(11, 100) if fits(j, 2)]
    return sum(
        1
        for i, j in product(tops, bottoms)
        if fits(i * j, 4) and fits(i * (j % 10), 3) and fits(i * (j // 10), 3)
    )


def answer_crypt1(text: str) -> str:
    """Solve the crypt1 task for its input text."""
    numbers = [int(token) for token in text.split()]
    return f"{crypt1(numbers[1 : 1 + numbers[0]])}\n"


def combo(size: int, john: Sequence[int], master: Sequence[int]) -> int:
    """Count dial settings within two positions of either combination on every dial."""
    if len(john) != 3 or len(master) != 3:
        raise ValueError("a combination has exactly three numbers")

    def close(a: int, b: int) -> bool:
        distance = abs(a - b)
        return distance <= 2 or distance >= size - 2

    dials = range(1, size + 1)
    return sum(
        1
        for setting in product(dials, repeat=3)
        if any(
            all(close(dial, wanted) for dial, wanted in zip(setting, target))
            for target in (john, master)
        )
    )


def answer_combo(text: str) -> str:
    """Solve the combo task for its input text."""
    numbers = [int(token) for token in text.split()]
    return f"{combo(numbers[0], numbers[1:4], numbers[4:7])}\n"


def _pairings(items: list[int]) -> Iterator[dict[int, int]]:
    if not items:
        yield {}
        return
    first, rest = items[0], items[1:]
    for index, other in enumerate(rest):
        remaining = rest[:index] + rest[index + 1 :]
        for pairing in _pairings(remaining):
            yield {**pairing, first: other, other: first}


def _loops(partner: dict[int, int], next_on_right: list[Optional[int]]) -> bool:
    count = len(next_on_right)
    for start in range(count):
        pos: Optional[int] = start
        for _ in range(count):
            pos = next_on_right[partner[pos]]  # type: ignore[index]
            if pos is None:
                break
        else:
            return True
    return False


def wormhole(holes: Sequence[tuple[int, int]]) -> int:
    """Count pairings of wormholes that can trap a cow walking in the +x direction."""
    holes = list(holes)
    next_on_right: list[Optional[int]] = []
    for x, y in holes:
        ahead = [(hx, j) for j, (hx, hy) in enumerate(holes) if hy == y and hx > x]
        next_on_right.append(min(ahead)[1] if ahead else None)
    return sum(
        1
        for pairing in _pairings(list(range(len(holes))))
        if _loops(pairing, next_on_right)
    )


def answer_wormhole(text: str) -> str:
    """Solve the wormhole task for its input text."""
    numbers = [int(token) for token in text.split()]
    values = numbers[1 : 1 + 2 * numbers[0]]
    return f"{wormhole(list(zip(values[::2], values[1::2])))}\n"


def skidesign(hills: Iterable[int]) -> int:
    """Least cost to bring all hill heights within a span of 17."""
    heights = list(hills)

    def cost(low: int) -> int:
        high = low + _SKI_SPAN
        total = 0
        for height in heights:
            if height < low:
                total += (low - height) ** 2
            elif height > high:
                total += (height - high) ** 2
        return total

    return min(cost(low) for low in range(_SKI_LOWEST_TOP + 1))


def answer_skidesign(text: str) -> str:
    """Solve the skidesign task for its input text."""
    numbers = [int(token) for token in text.split()]
    return f"{skidesign(numbers[1 : 1 + numbers[0]])}\n"