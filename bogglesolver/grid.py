"""Render and generate Boggle grids."""

import random

from bogglesolver.trie import LETTER_A

# https://www.bananagrammer.com/2013/10/the-boggle-cube-redesign-and-its-effect.html
# "New" Boggle dice, 1987 to ~2008. The "q" face reads "Qu".
DICE = [
    "aaeegn",
    "achops",
    "affkps",
    "abjoob",
    "ciimot",
    "delrvy",
    "deilrx",
    "eeinsu",
    "eeghnw",
    "hlnnrz",
    "distty",
    "aoottw",
    "elrtty",
    "eiosst",
    "ehrtuv",
    "himnqu",
]


def to_rows(grid: str, cols: int) -> list[str]:
    return [grid[i : i + cols] for i in range(0, len(grid), cols)]


def grid_string(grid: str, cols: int, rows: int) -> str:
    """Draw a boxed version of the grid, e.g.

    +---+---+
    | Qu| A |
    +---+---+
    | D | F |
    +---+---+

    Callers must check the grid length first.
    """
    assert len(grid) == cols * rows, "number of letters in grid must equal cols * rows"
    hline = "+" + "---+" * cols + "\n"
    lines = [hline]
    for row in to_rows(grid.upper(), cols):
        cells = [" Qu" if let == "Q" else f" {let} " for let in row]
        lines.append("|" + "|".join(cells) + "|\n")
        lines.append(hline)
    return "".join(lines)


def bench_grid(n: int) -> str:
    """abcd...zabc... of length n."""
    return "".join(chr(LETTER_A + i % 26) for i in range(n))


def random_grid(n: int, rng=random) -> str:
    return "".join(chr(LETTER_A + rng.randint(0, 25)) for _ in range(n))


def roll_dice(rng=random, dice=DICE) -> str:
    """Shake the dice into a 4x4 grid."""
    order = [*dice]
    rng.shuffle(order)
    return "".join(rng.choice(die) for die in order)
