"""Training tasks castle, frac1, sort3, holstein and hamming."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from itertools import combinations
from typing import Iterator, Sequence

_WEST, _NORTH, _EAST, _SOUTH = 1, 2, 4, 8
_MOVES = ((_NORTH, -1, 0), (_WEST, 0, -1), (_SOUTH, 1, 0), (_EAST, 0, 1))
_HAMMING_PER_LINE = 10


@dataclass(frozen=True)
class CastleReport:
    """Rooms of a castle and the best wall to remove."""

    rooms: int
    largest: int
    merged: int
    row: int
    column: int
    wall: str

    def __str__(self) -> str:
        return (
            f"{self.rooms}\n{self.largest}\n{self.merged}\n"
            f"{self.row} {self.column} {self.wall}\n"
        )


def castle(grid: Sequence[Sequence[int]]) -> CastleReport:
    """Analyse a castle whose squares hold wall bits (1 W, 2 N, 4 E, 8 S).

    Reports the number of rooms, the largest room, the largest room made by
    removing one wall, and that wall's square (1-based) and side, N or E.
    """
    cells = [list(row) for row in grid]
    height = len(cells)
    width = len(cells[0]) if cells else 0
    if width == 0 or any(len(row) != width for row in cells):
        raise ValueError("the castle must be a non-empty rectangle")

    room = [[0] * width for _ in range(height)]
    sizes = [0]
    for y, x in ((y, x) for y in range(height) for x in range(width)):
        if room[y][x]:
            continue
        sizes.append(0)
        number = len(sizes) - 1
        stack = [(y, x)]
        while stack:
            cy, cx = stack.pop()
            if room[cy][cx]:
                continue
            room[cy][cx] = number
            sizes[number] += 1
            walls = cells[cy][cx]
            for bit, dy, dx in _MOVES:
                ny, nx = cy + dy, cx + dx
                if not walls & bit and 0 <= ny < height and 0 <= nx < width:
                    stack.append((ny, nx))

    best: tuple[int, int, int, str] | None = None
    for x in range(width):
        for y in reversed(range(height)):
            here = room[y][x]
            neighbours = []
            if y > 0:
                neighbours.append(("N", room[y - 1][x]))
            if x < width - 1:
                neighbours.append(("E", room[y][x + 1]))
            for side, other in neighbours:
                if other != here:
                    total = sizes[here] + sizes[other]
                    if best is None or total > best[0]:
                        best = (total, y, x, side)
    if best is None:
        raise ValueError("the castle has a single room; no wall joins two rooms")
    total, y, x, side = best
    return CastleReport(
        rooms=len(sizes) - 1,
        largest=max(sizes[1:]),
        merged=total,
        row=y + 1,
        column=x + 1,
        wall=side,
    )


def answer_castle(text: str) -> str:
    """Solve the castle task for its input text."""
    numbers = [int(token) for token in text.split()]
    width, height = numbers[0], numbers[1]
    values = numbers[2 : 2 + width * height]
    grid = [values[row * width : (row + 1) * width] for row in range(height)]
    return str(castle(grid))


def frac1(n: int) -> list[tuple[int, int]]:
    """Reduced fractions in [0, 1] with denominators up to ``n``, ascending."""
    if n < 1:
        raise ValueError("the largest denominator must be at least 1")

    def between(left: tuple[int, int], right: tuple[int, int]) -> Iterator[tuple[int, int]]:
        mediant = (left[0] + right[0], left[1] + right[1])
        if mediant[1] > n:
            return
        yield from between(left, mediant)
        yield mediant
        yield from between(mediant, right)

    return [(0, 1), *between((0, 1), (1, 1)), (1, 1)]


def answer_frac1(text: str) -> str:
    """Solve the frac1 task for its input text."""
    return "".join(f"{a}/{b}\n" for a, b in frac1(int(text.split()[0])))


def sort3(values: Sequence[int]) -> int:
    """Fewest exchanges that sort ``values``."""
    values = list(values)
    target = sorted(values)
    misplaced = Counter(
        (have, want) for have, want in zip(values, target) if have != want
    )
    direct = sum(
        min(count, misplaced[(want, have)])
        for (have, want), count in misplaced.items()
        if have < want
    )
    remaining = sum(misplaced.values()) - 2 * direct
    return direct + remaining // 3 * 2


def answer_sort3(text: str) -> str:
    """Solve the sort3 task for its input text."""
    numbers = [int(token) for token in text.split()]
    return f"{sort3(numbers[1 : 1 + numbers[0]])}\n"


def holstein(
    requirements: Sequence[int], feeds: Sequence[Sequence[int]]
) -> tuple[int, ...]:
    """Fewest feed types (1-based) whose vitamins meet every requirement.

    Among equally small choices the one with the lowest bit mask wins.
    """
    needs = list(requirements)
    rows = [list(feed) for feed in feeds]
    if any(len(row) != len(needs) for row in rows):
        raise ValueError("every feed must list one amount per vitamin")

    def meets(choice: tuple[int, ...]) -> bool:
        totals = (sum(column) for column in zip(*(rows[i] for i in choice)))
        return all(total >= need for total, need in zip(totals, needs))

    for size in range(1, len(rows) + 1):
        fitting = [choice for choice in combinations(range(len(rows)), size) if meets(choice)]
        if fitting:
            chosen = min(fitting, key=lambda choice: sum(1 << i for i in choice))
            return tuple(i + 1 for i in chosen)
    raise ValueError("no combination of feeds meets the requirements")


def answer_holstein(text: str) -> str:
    """Solve the holstein task for its input text."""
    tokens = iter(int(token) for token in text.split())
    vitamins = next(tokens)
    requirements = [next(tokens) for _ in range(vitamins)]
    count = next(tokens)
    feeds = [[next(tokens) for _ in range(vitamins)] for _ in range(count)]
    chosen = holstein(requirements, feeds)
    return " ".join(map(str, (len(chosen), *chosen))) + "\n"


def _distance(a: int, b: int) -> int:
    return bin(a ^ b).count("1")


def hamming(count: int, bits: int, distance: int) -> list[int]:
    """Smallest set of ``count`` codewords of ``bits`` bits pairwise ``distance`` apart."""
    if count < 1:
        raise ValueError("at least one codeword is required")
    limit = 1 << bits
    chosen = [0]

    def extend(start: int) -> bool:
        if len(chosen) == count:
            return True
        for value in range(start, limit):
            if all(_distance(word, value) >= distance for word in chosen):
                chosen.append(value)
                if extend(value + 1):
                    return True
                chosen.pop()
        return False

    if not extend(1):
        raise ValueError("no such set of codewords exists")
    return chosen


def answer_hamming(text: str) -> str:
    """Solve the hamming task for its input text."""
    count, bits, distance = (int(token) for token in text.split()[:3])
    words = [str(word) for word in hamming(count, bits, distance)]
    lines = (
        " ".join(words[at : at + _HAMMING_PER_LINE])
        for at in range(0, len(words), _HAMMING_PER_LINE)
    )
    return "".join(f"{line}\n" for line in lines)