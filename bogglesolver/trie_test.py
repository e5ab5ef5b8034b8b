import gzip

import pytest

from bogglesolver.trie import (
    Trie,
    WordsFileError,
    bogglify_word,
    load_words,
    load_words_from_lines,
)


def test_trie():
    t = Trie.create_from_wordlist(["hello", "world", "worldwide"])
    assert not t.is_word()
    assert t.size() == 3

    assert t.contains_word("hello")
    assert t.contains_word("world")
    assert t.contains_word("worldwide")

    assert not t.contains_word("hell")
    assert not t.contains_word("worldw")
    assert not t.contains_word("foo")
    assert not t.contains_word("hello!")

    # Every step along "hell" is a live prefix, it just isn't a word.
    node = t
    for let in "hell":
        assert node.contains_letter(let)
        node = node.child(let)
    assert not node.is_word()
    assert node.child("o").is_word()


def test_path():
    t = Trie()
    t.add_word("hi")

    assert not t.contains_letter("a")
    assert t.contains_letter("h")
    assert t.child("a") is None
    assert t.child("H") is None
    assert t.child("'") is None

    child = t.child("h")
    assert child is not None
    assert not child.is_word()

    child = child.child("i")
    assert child is not None
    assert child.is_word()
    assert child.is_empty()


def test_num_nodes():
    t = Trie.create_from_wordlist(["tea", "teapot", "sea"])
    assert t.size() == 3
    assert t.num_nodes() == 10
    assert Trie().is_empty()
    assert not t.is_empty()


def test_bogglify_word():
    assert bogglify_word("quart", 16) == "qart"
    assert bogglify_word("qi", 16) is None
    assert bogglify_word("qat", 16) is None
    assert bogglify_word("is", 16) is None
    assert bogglify_word("boggle", 16) == "boggle"
    assert bogglify_word("boggle", 5) is None
    assert bogglify_word("Boston", 16) is None
    assert bogglify_word("don't", 16) is None
    # Only a leading "qu" is folded.
    assert bogglify_word("quinquennia", 16) == "qinquennia"
    assert bogglify_word("equal", 16) == "equal"
    # Length limits apply before folding.
    assert bogglify_word("quit", 4) == "qit"
    assert bogglify_word("quits", 4) is None


def test_load_words_from_lines():
    lines = ["cat\n", "cats\r\n", "Cats\n", "cat\n", "qat\n", "quit\n", "ox\n", "\n"]
    t, num_words = load_words_from_lines(lines, 16)
    assert num_words == 3
    assert t.size() == 3
    assert t.contains_word("cat")
    assert t.contains_word("cats")
    assert t.contains_word("qit")
    assert not t.contains_word("quit")
    assert not t.contains_word("ox")


def test_load_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("wood\nwoods\nwoodsman\nxi\n")
    t, num_words = load_words(str(path), 5)
    assert num_words == 2
    assert t.contains_word("wood")
    assert t.contains_word("woods")
    assert not t.contains_word("woodsman")
    assert not t.contains_word("woxd")


def test_load_gzip_file(tmp_path):
    path = tmp_path / "words.txt.gz"
    path.write_bytes(gzip.compress(b"quack\nquick\nduck\n"))
    t, num_words = load_words(str(path), 16)
    assert num_words == 3
    assert t.contains_word("qack")
    assert t.contains_word("qick")
    assert t.contains_word("duck")


def test_load_missing_file(tmp_path):
    with pytest.raises(WordsFileError, match="error opening words file"):
        load_words(str(tmp_path / "_not_here_"), 16)


def test_load_bad_gzip(tmp_path):
    path = tmp_path / "words.txt.gz"
    path.write_bytes(b"this is not gzipped\n")
    with pytest.raises(WordsFileError, match="error unzipping words file"):
        load_words(str(path), 16)


def test_load_truncated_gzip(tmp_path):
    path = tmp_path / "words.txt.gz"
    path.write_bytes(gzip.compress(b"apple\nbanana\ncherry\n" * 100)[:-12])
    with pytest.raises(WordsFileError, match="error reading words file"):
        load_words(str(path), 16)


def test_load_undecodable(tmp_path):
    path = tmp_path / "words.txt"
    path.write_bytes(b"cat\n\xff\xfe\xfd\ndog\n")
    with pytest.raises(WordsFileError, match="error reading words file"):
        load_words(str(path), 16)


def test_load_mixed_case_words():
    # Only the first letter decides whether a word is a proper noun.
    t, num_words = load_words_from_lines(["caT\n", "iPod\n", "Ipod\n", "qUit\n"], 4)
    assert num_words == 2
    assert t.contains_word("cat")
    assert t.contains_word("ipod")
    assert bogglify_word("QUIT", 4) is None
    assert bogglify_word("quIT", 4) == "qit"
