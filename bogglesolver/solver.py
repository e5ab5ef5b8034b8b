"""Find all the words in an X by Y Boggle grid.

A BoggleSolver is created once with the board dimensions and a dictionary,
then solve() can be called repeatedly with different grids. The grid is a
string of cols * rows letters, read row by row from the top left. The letter
"q" always stands for "qu".

For example, "qadfetriihkriflv" is the 4x4 grid:

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

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator

from bogglesolver.neighbors import init_neighbors, neighbors
from bogglesolver.trie import MIN_WORD_LENGTH, Trie, load_words


class InvalidDimensionsError(ValueError):
    pass


class SolveError(ValueError):
    """A grid could not be searched. Repeating the call won't help."""


class DictionaryUnavailableError(SolveError):
    pass


class NotEnoughLettersError(SolveError):
    pass


class TooManyLettersError(SolveError):
    pass


@dataclass(frozen=True)
class PathState:
    """One partial path in the search frontier.

    States are never mutated; extend() returns a new state with its own
    visited set, so sibling branches can't see each other's cells.
    """

    cell: int
    node: Trie
    prefix: str
    path: tuple[int, ...]
    visited: frozenset[int]

    def extend(self, cell: int, node: Trie, letter: str) -> "PathState":
        return PathState(
            cell=cell,
            node=node,
            prefix=self.prefix + letter,
            path=(*self.path, cell),
            visited=self.visited | {cell},
        )


def rehydrate_word(word: str) -> str:
    """Dictionary words starting with "qu" are stored as "q"."""
    if word[0] == "q":
        return "qu" + word[1:]
    return word


def unique_sorted_words(words: Iterable[str]) -> list[str]:
    return sorted(set(words))


class BoggleSolver:
    _trie: Trie | None
    _neighbors: tuple[tuple[int, ...], ...] | None

    def __init__(
        self,
        trie: Trie | None,
        dims: tuple[int, int],
        word_count: int | None = None,
        precalc_adjacency=True,
    ):
        cols, rows = dims
        if cols < 1 or rows < 1:
            raise InvalidDimensionsError(f"invalid board dimensions: {cols}x{rows}")
        self._trie = trie
        self._cols = cols
        self._rows = rows
        self._n = cols * rows
        if word_count is None:
            word_count = trie.size() if trie else 0
        self._word_count = word_count
        # Immutable and cached per geometry.
        self._neighbors = init_neighbors(cols, rows) if precalc_adjacency else None

    @staticmethod
    def from_file(
        words_file: str, cols: int, rows: int, precalc_adjacency=True
    ) -> "BoggleSolver":
        """Load words_file (optionally gzipped) and build a solver.

        Words longer than the board or shorter than three letters are skipped.
        """
        if cols < 1 or rows < 1:
            raise InvalidDimensionsError(f"invalid board dimensions: {cols}x{rows}")
        t, word_count = load_words(words_file, cols * rows, MIN_WORD_LENGTH)
        return BoggleSolver(t, (cols, rows), word_count, precalc_adjacency)

    def board_size(self):
        return self._n

    def dimensions(self):
        return self._cols, self._rows

    def word_count(self):
        return self._word_count

    def adjacent(self, cell: int):
        if self._neighbors is not None:
            return self._neighbors[cell]
        return neighbors(self._cols, self._rows, cell)

    def _check_grid(self, grid: str) -> str:
        if self._trie is None or self._trie.is_empty():
            raise DictionaryUnavailableError("no words loaded for solver")
        if len(grid) < self._n:
            raise NotEnoughLettersError(
                f"not enough letters for board: got {len(grid)}, need {self._n}"
            )
        if len(grid) > self._n:
            raise TooManyLettersError(
                f"too many letters for board: got {len(grid)}, need {self._n}"
            )
        return grid.lower()

    def _search(self, board: str) -> Iterator[tuple[str, tuple[int, ...]]]:
        """Yield (word, path) for every path that spells a dictionary word.

        The same word is yielded once for each path that spells it.
        """
        for start in range(0, self._n):
            root_child = self._trie.child(board[start])
            if root_child is None:
                continue
            q = deque(
                [
                    PathState(
                        cell=start,
                        node=root_child,
                        prefix=board[start],
                        path=(start,),
                        visited=frozenset((start,)),
                    )
                ]
            )
            while q:
                state = q.popleft()
                for idx in self.adjacent(state.cell):
                    if idx in state.visited:
                        continue
                    let = board[idx]
                    d = state.node.child(let)
                    if d is None:
                        continue
                    next_state = state.extend(idx, d, let)
                    q.append(next_state)
                    if d.is_word():
                        yield rehydrate_word(next_state.prefix), next_state.path

    def solve(self, grid: str) -> list[str]:
        """Return all the words in grid, sorted and without duplicates."""
        board = self._check_grid(grid)
        return unique_sorted_words(word for word, _ in self._search(board))

    def find_paths(self, grid: str) -> dict[str, list[int]]:
        """Map each word in grid to the first path found that spells it."""
        board = self._check_grid(grid)
        out: dict[str, list[int]] = {}
        for word, path in self._search(board):
            out.setdefault(word, [*path])
        return out
