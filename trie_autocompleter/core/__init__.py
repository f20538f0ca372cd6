"""
trie_autocompleter.core

The completion engine itself:
 - Trie / TrieNode: character trie with per-word insertion counts
 - Autocompleter: prefix lookup, depth-first collection and frequency ranking
"""

from .trie import Trie, TrieNode
from .autocompleter import (
    Autocompleter,
    rank_two_pass,
    rank_single_key,
    MAX_COMPLETIONS,
    MIN_PREFIX_LEN,
)

__all__ = [
    "Trie",
    "TrieNode",
    "Autocompleter",
    "rank_two_pass",
    "rank_single_key",
    "MAX_COMPLETIONS",
    "MIN_PREFIX_LEN",
]
