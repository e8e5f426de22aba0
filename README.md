# algodrills

Worked solutions to a set of classic algorithm drills, as plain Python
functions with no third-party dependencies:

- **Linked lists** (`algodrills.linked_list`): the `ListNode` class,
  `from_values` / `to_values` to convert to and from Python lists,
  `has_cycle`, `remove_elements` and `reverse_list`.
- **Binary trees** (`algodrills.tree`): the `TreeNode` class,
  `build_from_preorder_inorder`, `build_from_inorder_postorder`,
  `build_from_preorder_postorder`, and iterative `preorder_traversal`,
  `inorder_traversal` and `postorder_traversal`.
- **USACO training problems**, sections 1.2 to 2.2:
  - `algodrills.section1_2`: ride, gift1, friday, beads
  - `algodrills.section1_3`: milk2, transform, namenum, palsquare, dualpal
  - `algodrills.section1_4`: milk, barn1, crypt1, combo, wormhole, skidesign
  - `algodrills.section1_5`: ariprog, milk3, numtri, pprime, sprime
  - `algodrills.section2_1`: castle, frac1, sort3, holstein, hamming
  - `algodrills.section2_2`: preface, subset, runround

Requires Python 3.10 or later.

## Installation

```
pip install .
```

The tests need pytest, which the `test` extra installs:

```
pip install ".[test]"
```

## Using the library

Linked lists are built from and turned back into ordinary Python lists:

```python
from algodrills.linked_list import from_values, to_values, reverse_list, remove_elements

head = from_values([1, 2, 6, 3, 6])
to_values(remove_elements(head, 6))               # [1, 2, 3]
to_values(reverse_list(from_values([1, 2, 3])))   # [3, 2, 1]
```

Trees can be rebuilt from two traversals and traversed again. The builders
raise `ValueError` when the traversals differ in length or do not match:

```python
from algodrills.tree import build_from_preorder_inorder, postorder_traversal

root = build_from_preorder_inorder([3, 9, 20, 15, 7], [9, 3, 15, 20, 7])
postorder_traversal(root)                # [9, 15, 7, 20, 3]
```

Each training problem has two entry points. One takes the problem's values
as Python arguments and returns the answer; the other, named `answer_<task>`,
takes the full text of the task's input file and returns the text of its
output file:

```python
from algodrills.section1_2 import ride, answer_ride

ride("COMETQ", "HVNGAT")          # "GO"
answer_ride("COMETQ\nHVNGAT\n")   # "GO\n"
```

A few helpers are public as well, for example `section1_3.to_base`,
`section1_3.is_palindrome`, `section1_5.is_prime`, `section2_2.roman` and
`section2_2.is_runaround`. `section2_1.castle` returns a `CastleReport`
whose `str()` is the task's output text.

`algodrills.cli.run_task(task, text, dictionary=None)` solves any task by
name; the `namenum` task needs the dictionary text, and an unknown task name
raises `ValueError`.

## Command line

The `algodrills` command runs one training task. By default it reads
`<task>.in` and writes `<task>.out` in the current directory:

```
algodrills ride
algodrills friday -i friday.in -o -
algodrills namenum -d dict.txt
```

Options:

- `-i`, `--input`: input file, or `-` for standard input.
- `-o`, `--output`: output file, or `-` for standard output.
- `-d`, `--dictionary`: word list for `namenum` (default `dict.txt`).

On a missing file or malformed input the command prints a message to
standard error and exits with status 1. See `algodrills --help` for the list
of task names.

## What it does not include

The package ships no word list: the `namenum` task only works with a
dictionary file you supply.

## Running the tests

```
pytest
```