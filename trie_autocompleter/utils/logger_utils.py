# logger_utils.py - logging setup and timing helpers

import logging
import time
from typing import Optional, Union

from rich.logging import RichHandler

# Everything in the package logs under this name
PACKAGE_LOGGER = "trie_autocompleter"

FILE_FORMAT = "[%(asctime)s] %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: Union[int, str] = logging.WARNING, log_path: Optional[str] = None
) -> logging.Logger:
    """
    Configure the package logger once, for applications (the CLI, tools).
    Library code only calls logging.getLogger(__name__) and never touches handlers.
    - console output goes through rich so it matches the rest of the terminal UI
    - if log_path is given, entries are also appended there as plain text lines:
        [YYYY-MM-DD HH:MM:SS] LEVEL   | module | message
    Calling it again replaces the previous handlers instead of stacking them.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    log = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(log.handlers):
        log.removeHandler(handler)
        handler.close()

    console = RichHandler(show_path=False, rich_tracebacks=True)
    console.setFormatter(logging.Formatter("%(message)s", datefmt=DATE_FORMAT))
    log.addHandler(console)

    if log_path:
        fh = logging.FileHandler(log_path, encoding="utf-8")
        fh.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        log.addHandler(fh)

    log.setLevel(level)
    log.propagate = False
    return log


class Log:
    """Small helpers around the package logger."""

    @staticmethod
    def metric(tag: str, value, unit: str = "") -> None:
        """
        Record a metric (timing, counts) at INFO level.
        Example: "dictionary load done: 0.123s"
        """
        logging.getLogger(PACKAGE_LOGGER).info("%s: %s%s", tag, value, unit)

    @staticmethod
    def time_block(label: str) -> "_Timer":
        """
        Measure execution time of a code block.
        To use:
            with Log.time_block("dictionary load"):
                load_dictionary(path, completer)
        """
        return _Timer(label)


class _Timer:
    """Context manager used internally to measure time for a code block."""

    def __init__(self, label: str):
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        """Record how long the block took, even if it raised."""
        self.elapsed = round(time.perf_counter() - self.start, 3)
        Log.metric(f"{self.label} done", self.elapsed, "s")
