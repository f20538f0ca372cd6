# trie_autocompleter/context/__init__.py
# text handling used when building the dictionary

from .tokenizer import tokenize_line, iter_tokens, TRAILING_PUNCTUATION

__all__ = [
    "tokenize_line",
    "iter_tokens",
    "TRAILING_PUNCTUATION",
]
