# trie.py
# Character-indexed Trie (prefix tree) for prefix-based autocompletion.
# Each terminal node remembers the full word and how many times it was inserted,
# that count is the "rank" used when ordering completions.
# Matching is case sensitive: characters are compared by raw code point.

from __future__ import annotations
import logging
from typing import Dict, Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)

Word = str
Freq = int
Ranked = Tuple[Freq, Word]


class TrieNode:
    """
    A single node in the Trie.
    children: char -> TrieNode, owned by this node only
    is_word: True if the path from the root to here spells an inserted word
    word: the full word for terminal nodes, "" otherwise
    freq: how often the word was inserted (0 for non-terminal nodes)
    """

    __slots__ = ("children", "is_word", "word", "freq")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = {}
        self.is_word = False
        self.word = ""
        self.freq = 0

    def __repr__(self) -> str:
        return (
            f"TrieNode(word={self.word!r}, freq={self.freq}, "
            f"is_word={self.is_word}, children={len(self.children)})"
        )


class Trie:
    """
    Trie storing words with insertion counts, used by the Autocompleter for:
     - locating the node for a prefix (the "anchor")
     - collecting every finished word below that anchor
    Structure is only ever mutated through insert().
    """

    def __init__(self) -> None:
        self._root = TrieNode()
        self._words = 0

    @property
    def root(self) -> TrieNode:
        """Root node (the empty prefix). Read it, don't mutate it."""
        return self._root

    # insertion -----------------------------------------------------
    def insert(self, word: str) -> None:
        """
        Insert a word into the trie.
        Missing children are created on the way down. The final node is marked
        terminal and stores the word the first time it is seen; its frequency is
        bumped on every insertion.
        No normalization happens here, "Cat" and "cat" are different words.
        The empty string marks the root itself as terminal.
        """
        node = self._root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                child = TrieNode()
                node.children[ch] = child
            node = child

        if not node.is_word:
            node.is_word = True
            node.word = word
            self._words += 1
        node.freq += 1
        logger.debug("inserted %r (freq=%d)", word, node.freq)

    # search/traversal ---------------------------------------------------------
    def find(self, prefix: str) -> Optional[TrieNode]:
        """Descend along prefix. Returns the anchor node, or None on a miss."""
        node = self._root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def walk(self, node: Optional[TrieNode] = None) -> Iterator[Ranked]:
        """
        Depth-first walk yielding (freq, word) for every terminal node
        in the sub-tree of `node` (root by default), `node` itself included.
        Uses an explicit stack so long words can't blow the recursion limit.
        Yield order follows dict order and carries no meaning.
        """
        stack: List[TrieNode] = [self._root if node is None else node]
        while stack:
            current = stack.pop()
            if current.is_word:
                yield current.freq, current.word
            stack.extend(current.children.values())

    # convenience -----------------------------------------------------
    def frequency(self, word: str) -> int:
        """Insertion count for an exact word, 0 if it was never inserted."""
        node = self.find(word)
        if node is None or not node.is_word:
            return 0
        return node.freq

    def __contains__(self, word: str) -> bool:
        node = self.find(word)
        return node is not None and node.is_word

    def __len__(self) -> int:
        """Number of distinct words stored."""
        return self._words
