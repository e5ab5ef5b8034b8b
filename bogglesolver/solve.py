#!/usr/bin/env python
"""Find words in X by Y Boggle grids and display the results.

The dictionary is loaded once, then each grid is solved in turn. Grids come
from --grid, --random, --bench or are typed in at the prompt. Use the letter
"q" for "qu"; "qadfetriihkriflv" is the 4x4 grid

    +---+---+---+---+
    | Qu| A | D | F |
    +---+---+---+---+
    | E | T | R | I |
    +---+---+---+---+
    | I | H | K | R |
    +---+---+---+---+
    | I | F | L | V |
    +---+---+---+---+
"""

import argparse
import random
import sys
import time
from typing import IO, Iterator

from tqdm import tqdm

from bogglesolver.args import add_standard_args, get_solver_from_args
from bogglesolver.grid import bench_grid, grid_string, random_grid, roll_dice
from bogglesolver.solver import BoggleSolver, SolveError


def show_words(words: list[str], out: IO[str] | None = None):
    """Print words in four columns, longest first."""
    out = out or sys.stdout
    for i, w in enumerate(sorted(words, key=lambda w: (-len(w), w))):
        if i % 4 == 0:
            print(file=out)
        print(f"{w:<18}", end="", file=out)
    print(file=out)


def show_paths(paths: dict[str, list[int]], out: IO[str] | None = None):
    out = out or sys.stdout
    for word, path in sorted(paths.items()):
        print(f"{word}: {' '.join(str(cell) for cell in path)}", file=out)


def read_grid_from_user(
    board_size: int, stdin: IO[str] | None = None, out: IO[str] | None = None
) -> str:
    """Prompt for letters until there are enough to fill the board.

    Lines with anything other than letters are rejected. Returns "" on an
    empty line or end of input.
    """
    stdin = stdin or sys.stdin
    out = out or sys.stdout
    print(f"\nEnter {board_size} letters into boggle grid: ", end="", file=out)
    out.flush()
    grid = ""
    while len(grid) < board_size:
        line = stdin.readline()
        if not line:
            return ""
        line = line.rstrip("\r\n").lower()
        if not line:
            return ""
        if all("a" <= let <= "z" for let in line):
            grid += line
        else:
            sys.stderr.write("input contains invalid characters\n")
        if len(grid) < board_size:
            print(f"\n{board_size - len(grid)} more letters needed: ", end="", file=out)
            out.flush()
    return grid[:board_size]


def user_grids(board_size: int) -> Iterator[str]:
    while grid := read_grid_from_user(board_size):
        yield grid


def report(solver: BoggleSolver, grid: str, quiet_level: int, with_paths: bool):
    start_s = time.time()
    if with_paths:
        paths = solver.find_paths(grid)
        words = sorted(paths)
    else:
        words = solver.solve(grid)
    elapsed_s = time.time() - start_s
    if not words:
        return

    cols, rows = solver.dimensions()
    print(f"\nFound {len(words)} solutions for {cols}x{rows} grid in {elapsed_s:.4f}s")
    if quiet_level < 2:
        if quiet_level < 1:
            print(grid_string(grid, cols, rows), end="")
        show_words(words)
        if with_paths:
            show_paths(paths)


def run_bench(solver: BoggleSolver, runs: int, quiet_level: int, with_paths: bool):
    grid = bench_grid(solver.board_size())
    report(solver, grid, quiet_level, with_paths)
    start_s = time.time()
    for _ in tqdm(range(runs), smoothing=0):
        solver.solve(grid)
    elapsed_s = time.time() - start_s
    rate = runs / elapsed_s if elapsed_s else 0.0
    sys.stderr.write(f"{runs} grids in {elapsed_s:.2f}s = {rate:.2f} grids/s\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Find all the words in an X by Y Boggle grid.",
    )
    add_standard_args(parser, random_seed=True)
    parser.add_argument(
        "--grid",
        type=str,
        default="",
        help="Grid letters, row by row (must be X*Y long). Omit to be prompted.",
    )
    parser.add_argument(
        "--random",
        action="store_true",
        help="Solve a random grid. 4x4 grids are rolled from Boggle dice.",
    )
    parser.add_argument(
        "-b",
        "--bench",
        action="store_true",
        help="Run a benchmark, repeatedly solving an abcd... grid.",
    )
    parser.add_argument(
        "--bench_runs",
        type=int,
        default=100,
        help="Number of solves to time with --bench.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Do not display the grid.",
    )
    parser.add_argument(
        "--qq",
        dest="very_quiet",
        action="store_true",
        help="Do not display the grid or the words found.",
    )
    parser.add_argument(
        "--paths",
        action="store_true",
        help="Also print the cells visited to spell each word.",
    )
    args = parser.parse_args(argv)
    if args.random_seed >= 0:
        random.seed(args.random_seed)

    print(f"board size (X={args.cols} Y={args.rows}): {args.cols * args.rows}")
    print("grid:", args.grid)
    print("words file:", args.words)
    print("bench:", args.bench)
    print("quiet:", args.quiet)
    print("very quiet:", args.very_quiet)

    quiet_level = 0
    if args.very_quiet:
        quiet_level = 2
    elif args.quiet:
        quiet_level = 1

    try:
        solver = get_solver_from_args(args)
    except ValueError as e:
        sys.stderr.write(f"{e}\n")
        return 1
    print(f"Loaded {solver.word_count()} words from {args.words}")

    n = solver.board_size()
    if args.bench:
        grids = None
    elif args.grid:
        grids = [args.grid]
    elif args.random:
        grids = [roll_dice() if solver.dimensions() == (4, 4) else random_grid(n)]
    else:
        grids = user_grids(n)

    try:
        if grids is None:
            run_bench(solver, args.bench_runs, quiet_level, args.paths)
        else:
            for grid in grids:
                report(solver, grid, quiet_level, args.paths)
    except SolveError as e:
        sys.stderr.write(f"{e}\n")
        return 1
    return 0


def cli():
    sys.exit(main())


if __name__ == "__main__":
    cli()
