# autocompleter.py
"""
Autocompleter - prefix completion on top of the frequency Trie.

Public API:
  - add_word(word) / add_words(words)
  - predict_completions(prefix) -> up to 10 words, most popular first
  - from_file(path) -> Autocompleter filled from a dictionary file
  - frequency(word), `word in ac`, len(ac)

Prediction walks the trie down to the prefix anchor, collects every finished
word under it with a depth-first walk and then ranks them:
  - higher frequency first
  - equal frequency -> ascending code-point order of the word
Case sensitive, no normalization: callers clean their input.
"""

from __future__ import annotations
import logging
from typing import Iterable, List

from trie_autocompleter.core.trie import Ranked, Trie
from trie_autocompleter.utils.dictionary_loader import load_dictionary

logger = logging.getLogger(__name__)

MIN_PREFIX_LEN = 1
MAX_COMPLETIONS = 10


def rank_two_pass(pairs: Iterable[Ranked]) -> List[Ranked]:
    """
    Order (freq, word) pairs with two sorts.
    First pass fixes an alphabetical order, second pass is a stable sort on
    descending frequency, so equal-frequency words keep the alphabetical order.
    """
    ranked = sorted(pairs, key=lambda p: p[1])
    ranked.sort(key=lambda p: p[0], reverse=True)
    return ranked


def rank_single_key(pairs: Iterable[Ranked]) -> List[Ranked]:
    """Same ordering as rank_two_pass with one composite key."""
    return sorted(pairs, key=lambda p: (-p[0], p[1]))


class Autocompleter:
    """Word completion engine. Owns its Trie and holds no other state."""

    def __init__(
        self,
        max_completions: int = MAX_COMPLETIONS,
        min_prefix_len: int = MIN_PREFIX_LEN,
    ) -> None:
        """
        max_completions: how many words a prediction returns, 0..MAX_COMPLETIONS
        min_prefix_len: shortest prefix that gets completions, at least 1 so the
            empty prefix never matches
        Raises ValueError for anything outside those bounds.
        """
        if isinstance(max_completions, bool) or not isinstance(max_completions, int):
            raise ValueError(f"max_completions must be an int, got {max_completions!r}")
        if not 0 <= max_completions <= MAX_COMPLETIONS:
            raise ValueError(
                f"max_completions must be in 0..{MAX_COMPLETIONS}, got {max_completions}"
            )
        if isinstance(min_prefix_len, bool) or not isinstance(min_prefix_len, int):
            raise ValueError(f"min_prefix_len must be an int, got {min_prefix_len!r}")
        if min_prefix_len < MIN_PREFIX_LEN:
            raise ValueError(
                f"min_prefix_len must be at least {MIN_PREFIX_LEN}, got {min_prefix_len}"
            )
        self.trie = Trie()
        self.max_completions = max_completions
        self.min_prefix_len = min_prefix_len

    @classmethod
    def from_file(cls, path: str, **kwargs) -> "Autocompleter":
        """
        Build a completer from a dictionary file (whitespace separated words,
        trailing punctuation stripped).
        Raises DictionaryLoadError if the file can't be opened or read.
        """
        ac = cls(**kwargs)
        load_dictionary(path, ac)
        return ac

    # insertion ---------------------------------------------------------
    def add_word(self, word: str) -> None:
        """Add one word (or one more occurrence of it)."""
        self.trie.insert(word)

    def add_words(self, words: Iterable[str]) -> int:
        n = 0
        for w in words:
            self.trie.insert(w)
            n += 1
        return n

    # prediction ---------------------------------------------------------
    def predict_completions(self, prefix: str) -> List[str]:
        """
        Return the most popular words starting with `prefix` (at most
        max_completions of them). Too-short prefixes and prefixes that aren't
        in the trie both give an empty list. Never mutates the trie.
        """
        if len(prefix) < self.min_prefix_len:
            return []

        anchor = self.trie.find(prefix)
        if anchor is None:
            return []

        ranked = rank_two_pass(self.trie.walk(anchor))
        out = [word for _freq, word in ranked[: self.max_completions]]
        logger.debug(
            "predict %r: %d matches, returning %d", prefix, len(ranked), len(out)
        )
        return out

    # convenience ---------------------------------------------------------
    def frequency(self, word: str) -> int:
        return self.trie.frequency(word)

    def __contains__(self, word: str) -> bool:
        return word in self.trie

    def __len__(self) -> int:
        return len(self.trie)
