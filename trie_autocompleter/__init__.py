"""
trie_autocompleter

Prefix word completion backed by a character trie that counts how often
each word was inserted. Completions come back most popular first, ties in
alphabetical (code point) order.

    >>> ac = Autocompleter()
    >>> for w in ["cat", "cat", "cap"]:
    ...     ac.add_word(w)
    >>> ac.predict_completions("ca")
    ['cat', 'cap']
"""

from .core import Autocompleter, Trie, TrieNode
from .errors import AutocompleterError, ConfigError, DictionaryLoadError

__all__ = [
    "Autocompleter",
    "Trie",
    "TrieNode",
    "AutocompleterError",
    "ConfigError",
    "DictionaryLoadError",
]

__version__ = "0.1.0"
