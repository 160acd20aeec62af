# adventpuzzles

Solutions to seasonal programming puzzles for the years 2015, 2016 and 2023.
Each day lives in its own module, `adventpuzzles.y<year>.day<NN>`, with a
`part1(text)` and a `part2(text)` function. Both take the puzzle input as a
string and return the answer. Every day module also has a `NAME` constant
holding a title.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

The only runtime dependency is `networkx`, used by 2023 day 25.

## Solving a single day

```python
from pathlib import Path

from adventpuzzles.y2023 import day01

text = Path("input.txt").read_text()
print(day01.part1(text))
print(day01.part2(text))
```

Many modules also expose the building blocks behind their parts. Some
examples:

```python
from adventpuzzles.y2015 import day04, day10
from adventpuzzles.y2023 import day08, day15

day04.find_suffix("abcdef", 5)       # 609043
day10.look_and_say("1211")           # "111221"
day15.holiday_hash("HASH")           # 52
day08.lcm([4, 6, 10])                # 60
```

Malformed input raises `ValueError`.

## Coverage

- 2015: days 1–12 and 14–25
- 2016: days 1–5
- 2023: days 1–9, 11–13, 15–18, 22 and 25

Some solutions use fixed values from the puzzle text rather than the input:
2015 day 21 and day 22 have the opponent's stats built in and ignore the text
they are given. 2015 day 25 and 2023 day 25 have no second puzzle; their
`part2` checks the input and returns the string `"NO PUZZLE"`.

## What the package does not do

There is no command-line program and no index of the available days: import
the module for the day you want and call its functions yourself. The package
does not fetch puzzle inputs; reading them from a file is up to the caller.