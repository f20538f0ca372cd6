# tests/test_trie.py
import pytest

from trie_autocompleter.core.trie import Trie, TrieNode


@pytest.fixture
def trie():
    t = Trie()
    for w in ["cat", "cat", "cat", "cap", "car", "c"]:
        t.insert(w)
    return t


def terminal_nodes(t):
    """Every terminal node reachable from the root, found without walk()."""
    out, stack = [], [t.root]
    while stack:
        n = stack.pop()
        if n.is_word:
            out.append(n)
        stack.extend(n.children.values())
    return out


def test_fresh_trie_is_empty():
    t = Trie()
    assert len(t) == 0
    assert not t.root.is_word
    assert t.root.children == {}
    assert list(t.walk()) == []


def test_insert_marks_terminal_and_stores_word(trie):
    node = trie.find("cat")
    assert node.is_word
    assert node.word == "cat"
    assert node.freq == 3


def test_intermediate_nodes_stay_non_terminal():
    t = Trie()
    t.insert("dog")
    node = t.find("do")
    assert not node.is_word
    assert node.word == ""
    assert node.freq == 0


def test_repeated_insert_keeps_single_record():
    t = Trie()
    for _ in range(7):
        t.insert("hello")
    matches = [n for n in terminal_nodes(t) if n.word == "hello"]
    assert len(matches) == 1
    assert matches[0].freq == 7
    assert len(t) == 1


def test_case_sensitive_words_are_distinct():
    t = Trie()
    t.insert("Cat")
    t.insert("cat")
    t.insert("cat")
    assert t.frequency("Cat") == 1
    assert t.frequency("cat") == 2
    assert len(t) == 2


def test_prefix_of_a_word_becomes_terminal_later():
    t = Trie()
    t.insert("abc")
    assert "ab" not in t
    t.insert("ab")
    assert "ab" in t
    assert t.frequency("abc") == 1
    assert t.frequency("ab") == 1


def test_empty_word_marks_root():
    t = Trie()
    t.insert("")
    assert t.root.is_word
    assert t.root.word == ""
    assert t.root.freq == 1
    assert "" in t


def test_find(trie):
    assert trie.find("") is trie.root
    assert isinstance(trie.find("ca"), TrieNode)
    assert trie.find("cb") is None
    assert trie.find("cats") is None


def test_walk_includes_anchor(trie):
    got = sorted(trie.walk(trie.find("cat")))
    assert got == [(3, "cat")]


def test_walk_subtree(trie):
    got = sorted(trie.walk(trie.find("ca")), key=lambda p: p[1])
    assert got == [(1, "cap"), (1, "car"), (3, "cat")]


def test_walk_whole_trie(trie):
    words = {w for _f, w in trie.walk()}
    assert words == {"c", "cat", "cap", "car"}


def test_frequency_and_contains(trie):
    assert trie.frequency("cat") == 3
    assert trie.frequency("ca") == 0
    assert trie.frequency("zebra") == 0
    assert "car" in trie
    assert "ca" not in trie
    assert "cars" not in trie


def test_non_ascii_characters():
    t = Trie()
    t.insert("café")
    t.insert("cafe")
    assert t.frequency("café") == 1
    assert t.frequency("cafe") == 1
    assert set(w for _f, w in t.walk(t.find("caf"))) == {"café", "cafe"}


def test_deep_chain_has_no_recursion_limit():
    t = Trie()
    long_word = "a" * 5000
    t.insert(long_word)
    assert list(t.walk()) == [(1, long_word)]
    assert t.frequency(long_word) == 1
