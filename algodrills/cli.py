"""Command line: solve a training task from its input file."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Optional, Sequence

from algodrills import section1_2, section1_3, section1_4, section1_5
from algodrills import section2_1, section2_2

_TASKS: dict[str, Callable[[str], str]] = {
    "ride": section1_2.answer_ride,
    "gift1": section1_2.answer_gift1,
    "friday": section1_2.answer_friday,
    "beads": section1_2.answer_beads,
    "milk2": section1_3.answer_milk2,
    "transform": section1_3.answer_transform,
    "palsquare": section1_3.answer_palsquare,
    "dualpal": section1_3.answer_dualpal,
    "milk": section1_4.answer_milk,
    "barn1": section1_4.answer_barn1,
    "crypt1": section1_4.answer_crypt1,
    "combo": section1_4.answer_combo,
    "wormhole": section1_4.answer_wormhole,
    "skidesign": section1_4.answer_skidesign,
    "ariprog": section1_5.answer_ariprog,
    "milk3": section1_5.answer_milk3,
    "numtri": section1_5.answer_numtri,
    "pprime": section1_5.answer_pprime,
    "sprime": section1_5.answer_sprime,
    "castle": section2_1.answer_castle,
    "frac1": section2_1.answer_frac1,
    "sort3": section2_1.answer_sort3,
    "holstein": section2_1.answer_holstein,
    "hamming": section2_1.answer_hamming,
    "preface": section2_2.answer_preface,
    "subset": section2_2.answer_subset,
    "runround": section2_2.answer_runround,
}
_DICTIONARY_TASK = "namenum"
_TASK_NAMES = sorted([*_TASKS, _DICTIONARY_TASK])


def run_task(task: str, text: str, dictionary: Optional[str] = None) -> str:
    """Solve ``task`` for its input text and return the output text.

    The namenum task also needs the dictionary text.
    """
    if task == _DICTIONARY_TASK:
        if dictionary is None:
            raise ValueError("the namenum task needs a dictionary")
        return section1_3.answer_namenum(text, dictionary)
    try:
        solve = _TASKS[task]
    except KeyError:
        raise ValueError(f"unknown task {task!r}") from None
    return solve(text)


def _read(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def _write(path: str, text: str) -> None:
    if path == "-":
        sys.stdout.write(text)
        return
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(text)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read ``<task>.in``, solve the task and write ``<task>.out``."""
    parser = argparse.ArgumentParser(
        prog="algodrills", description="Solve a training task from its input file."
    )
    parser.add_argument("task", choices=_TASK_NAMES)
    parser.add_argument("-i", "--input", help="input file, '-' for stdin")
    parser.add_argument("-o", "--output", help="output file, '-' for stdout")
    parser.add_argument(
        "-d", "--dictionary", default="dict.txt", help="word list for namenum"
    )
    args = parser.parse_args(argv)

    input_path = args.input or f"{args.task}.in"
    output_path = args.output or f"{args.task}.out"
    try:
        text = _read(input_path)
        dictionary = _read(args.dictionary) if args.task == _DICTIONARY_TASK else None
        result = run_task(args.task, text, dictionary)
        _write(output_path, result)
    except (OSError, ValueError, IndexError, StopIteration) as exc:
        print(f"algodrills: {args.task}: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())