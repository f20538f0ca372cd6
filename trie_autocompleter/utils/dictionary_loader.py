# dictionary_loader.py - fills a completer from a plain text word file

# Reads a text file line by line, splits each line on whitespace, strips
# trailing ASCII punctuation and hands every token to completer.add_word().
# The trie never sees files or raw lines, only already-cleaned strings.

import logging
from typing import Protocol

from trie_autocompleter.context.tokenizer import iter_tokens
from trie_autocompleter.errors import DictionaryLoadError
from trie_autocompleter.utils.logger_utils import Log

logger = logging.getLogger(__name__)


class WordSink(Protocol):
    def add_word(self, word: str) -> None:
        ...


def load_dictionary(path: str, completer: WordSink) -> int:
    """
    Feed every token of the file at `path` into `completer`.
    Returns:
        int: number of tokens added (duplicates counted each time).
    Raises:
        DictionaryLoadError: file missing/unreadable, or a line can't be decoded.
    """
    try:
        f = open(path, "r", encoding="utf-8")
    except OSError as e:
        raise DictionaryLoadError(f"Error opening file `{path}`: {e}") from e

    added = 0
    with Log.time_block(f"dictionary load ({path})"), f:
        try:
            for word in iter_tokens(f):
                completer.add_word(word)
                added += 1
        except (OSError, UnicodeDecodeError) as e:
            raise DictionaryLoadError(f"Error reading line from file: {e}") from e

    logger.info("loaded %d words from %s", added, path)
    return added
