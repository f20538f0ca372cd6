# trie_autocompleter/context/tokenizer.py
# whitespace tokenizer for dictionary files

import string
from typing import Iterable, Iterator, List

# ASCII punctuation only, non-ASCII symbols are left alone
TRAILING_PUNCTUATION = string.punctuation


def tokenize_line(line: str) -> List[str]:
    """
    Split a line on whitespace and strip trailing ASCII punctuation from each token.
    Leading and internal punctuation stays: "'twas" and "don't" survive intact,
    "end." becomes "end". A token made only of punctuation ends up as "".
    Separators are whatever str.split() treats as whitespace, which includes
    the ASCII information separators (0x1C-0x1F) as well as the usual blanks.
    """
    if not line:
        return []
    return [tok.rstrip(TRAILING_PUNCTUATION) for tok in line.split()]


def iter_tokens(lines: Iterable[str]) -> Iterator[str]:
    """Flatten an iterable of lines into tokens."""
    for line in lines:
        yield from tokenize_line(line)
