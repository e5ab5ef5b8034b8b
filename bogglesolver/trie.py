import gzip
from typing import IO, Iterable, Self

LETTER_A = ord("a")
MIN_WORD_LENGTH = 3


class WordsFileError(ValueError):
    """The words file could not be opened, decompressed or read."""


class Trie:
    _children: list[Self | None]
    _is_word: bool

    def __init__(self):
        self._is_word = False
        self._children = [None] * 26

    def starts_word(self, i: int):
        return self._children[i] is not None

    def descend(self, i: int):
        return self._children[i]

    def child(self, letter: str):
        i = ord(letter) - LETTER_A
        if 0 <= i < 26:
            return self._children[i]
        return None

    def contains_letter(self, letter: str):
        return self.child(letter) is not None

    def is_word(self):
        return self._is_word

    def is_empty(self):
        return not any(self._children)

    # ---

    def set_is_word(self):
        self._is_word = True

    def add_word(self, word: str) -> Self:
        node = self
        for let in word:
            c = ord(let) - LETTER_A
            assert 0 <= c < 26, word
            if not node.starts_word(c):
                node._children[c] = Trie()
            node = node.descend(c)
        node.set_is_word()
        return node

    def find_word(self, word: str):
        node = self
        for let in word:
            node = node.child(let)
            if node is None:
                return None
        return node

    def contains_word(self, word: str):
        node = self.find_word(word)
        return node is not None and node.is_word()

    def size(self):
        return (1 if self.is_word() else 0) + sum(c.size() for c in self._children if c)

    def num_nodes(self):
        return 1 + sum(c.num_nodes() for c in self._children if c)

    @staticmethod
    def create_from_wordlist(words: Iterable[str]) -> Self:
        """words should already be "bogglified"."""
        trie = Trie()
        for word in words:
            trie.add_word(word)
        return trie


def is_boggle_word(word: str):
    return all("a" <= let <= "z" for let in word)


def bogglify_word(
    word: str, max_length: int, min_length: int = MIN_WORD_LENGTH
) -> str | None:
    """Filter a dictionary word and fold a leading "qu" to "q".

    Lengths are checked on the word as written, before folding. Capitalized
    words (proper nouns) and "q" words without a following "u" are dropped;
    the rest of a mixed-case word is lower-cased.
    """
    size = len(word)
    if size > max_length or size < min_length:
        return None
    if not "a" <= word[0] <= "z":
        return None
    if word[0] == "q":
        if word[1:2] != "u":
            return None
        word = "q" + word[2:]
    word = word.lower()
    if not is_boggle_word(word):
        return None
    return word


def load_words_from_lines(
    lines: Iterable[str], max_length: int, min_length: int = MIN_WORD_LENGTH
) -> tuple[Trie, int]:
    """Build a Trie from newline-delimited words. Returns (trie, num_words)."""
    t = Trie()
    num_words = 0
    for line in lines:
        word = bogglify_word(line.rstrip(), max_length, min_length)
        if word is None:
            continue
        if not t.contains_word(word):
            num_words += 1
            t.add_word(word)
    return t, num_words


def open_words_file(words_file: str) -> IO[str]:
    try:
        if str(words_file).endswith(".gz"):
            return gzip.open(words_file, "rt", encoding="utf-8")
        return open(words_file, encoding="utf-8")
    except OSError as e:
        raise WordsFileError(f"error opening words file: {e}") from e


def load_words(
    words_file: str, max_length: int, min_length: int = MIN_WORD_LENGTH
) -> tuple[Trie, int]:
    """Read a (possibly gzipped) words file into a Trie."""
    with open_words_file(words_file) as f:
        try:
            return load_words_from_lines(f, max_length, min_length)
        except gzip.BadGzipFile as e:
            raise WordsFileError(f"error unzipping words file: {e}") from e
        except (OSError, EOFError, UnicodeDecodeError) as e:
            raise WordsFileError(f"error reading words file: {e}") from e
