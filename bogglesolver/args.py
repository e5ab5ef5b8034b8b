"""Standard command-line arguments shared across tools."""

import argparse

from bogglesolver.solver import BoggleSolver

DEFAULT_WORDS = "wordlists/boggle_dict.txt.gz"


def add_standard_args(parser: argparse.ArgumentParser, *, random_seed=False):
    parser.add_argument(
        "-x",
        "--cols",
        type=int,
        default=4,
        help="Width (X-length) of the board.",
    )
    parser.add_argument(
        "-y",
        "--rows",
        type=int,
        default=4,
        help="Height (Y-length) of the board.",
    )
    parser.add_argument(
        "--words",
        type=str,
        default=DEFAULT_WORDS,
        help="File containing valid words, one per line. May be gzipped (.gz).",
    )
    parser.add_argument(
        "--no_precalc",
        action="store_true",
        help="Compute adjacent cells on demand instead of building a table up front.",
    )

    if random_seed:
        parser.add_argument(
            "--random_seed",
            help="Explicitly set the random seed.",
            type=int,
            default=-1,
        )


def get_solver_from_args(args: argparse.Namespace) -> BoggleSolver:
    return BoggleSolver.from_file(
        args.words, args.cols, args.rows, precalc_adjacency=not args.no_precalc
    )
