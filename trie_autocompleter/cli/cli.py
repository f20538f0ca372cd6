"""
cli.py - interactive command line front end
Features:
- Optional dictionary file loaded at start-up (words split on whitespace,
  trailing punctuation stripped)
- Three commands: (p)redict completions, (a)dd word, (q)uit
- Predictions shown most to least popular, with a Rich table of frequencies
- JSON config file for completion limits, default dictionary and logging
"""

import argparse
import json
import logging
import sys
from typing import List, Optional, TextIO

# ui styling with Rich
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from trie_autocompleter.core.autocompleter import Autocompleter
from trie_autocompleter.errors import AutocompleterError
from trie_autocompleter.utils.config_manager import Config
from trie_autocompleter.utils.logger_utils import setup_logging

logger = logging.getLogger(__name__)

PROMPT = "Enter a command ((p)redict completions, (a)dd word, (q)uit): "
ADD_PROMPT = "Enter string to add to completer: "
PREDICT_PROMPT = "Enter prefix to get completions for: "


class CLI:
    """Read-eval loop around an Autocompleter."""

    def __init__(
        self,
        completer: Autocompleter,
        console: Optional[Console] = None,
        stream: Optional[TextIO] = None,
    ):
        """
        completer: the engine to drive
        console: Rich console used for all output (a fresh one by default)
        stream: read commands from here instead of stdin (tests, piped scripts)
        """
        self.ac = completer
        self.console = console or Console()
        self.stream = stream
        self.running = True

    def run(self) -> int:
        """
        Main loop. Prompts for a command until (q)uit or end of input.
        Returns the process exit status.
        """
        self.console.print()
        while self.running:
            try:
                cmd = self._grab_input(PROMPT)
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                break
            self._handle_command(cmd)
        return 0

    # COMMAND HANDLING -----------------------------------------------------------
    def _handle_command(self, cmd: str) -> None:
        if cmd == "q":
            self.running = False
            return

        try:
            if cmd == "a":
                self._add_word()
                return
            if cmd == "p":
                self._predict()
                return
        except (EOFError, KeyboardInterrupt):
            # input ended half way through a command
            self.console.print()
            self.running = False
            return

        self.console.print(f"Command {escape(cmd)} is not valid", style="red")

    def _add_word(self) -> None:
        word = self._grab_input(ADD_PROMPT)
        self.ac.add_word(word)
        self.console.print("String added!", style="green")

    def _predict(self) -> None:
        prefix = self._grab_input(PREDICT_PROMPT)
        result = self.ac.predict_completions(prefix)
        self.console.print(
            f"Completions for {escape(prefix)} (most to least popular): "
            f"{escape(json.dumps(result, ensure_ascii=False))}"
        )
        if result:
            self._display_completions(result)

    # DISPLAY -------------------------------------------------------------------------------
    def _display_completions(self, words: List[str]) -> None:
        table = Table(box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Word", style="bold")
        table.add_column("Freq", justify="right", style="magenta")
        for i, w in enumerate(words, 1):
            table.add_row(str(i), escape(w), str(self.ac.frequency(w)))
        self.console.print(table)

    # INPUT -------------------------------------------------------------------------------
    def _grab_input(self, prompt: str) -> str:
        """Print the prompt, read one line and strip surrounding whitespace."""
        line = self.console.input(escape(prompt), stream=self.stream)
        if self.stream is not None and not line:
            raise EOFError
        return line.strip()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trie-autocompleter",
        description="Interactive prefix word completion ranked by frequency.",
    )
    parser.add_argument(
        "dictionary",
        nargs="?",
        default=None,
        help="path/to/dictionary/file (optional), words separated by whitespace",
    )
    parser.add_argument(
        "--config", default="config.json", help="JSON config file (default: config.json)"
    )
    parser.add_argument(
        "--show-config", action="store_true", help="print the effective config and exit"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(
    argv: Optional[List[str]] = None,
    console: Optional[Console] = None,
    err_console: Optional[Console] = None,
) -> int:
    """
    Parse arguments, build the completer and run the loop.
    Errors go to err_console (stderr by default), everything else to console.
    Exit status: 0 on quit, 1 when the config or dictionary can't be loaded,
    2 for bad arguments (argparse).
    """
    args = build_parser().parse_args(argv)
    console = console or Console()
    err_console = err_console or Console(stderr=True)

    try:
        cfg = Config(args.config)
    except AutocompleterError as e:
        err_console.print(escape(str(e)), style="red")
        return 1

    if args.show_config:
        console.print(cfg.show())
        return 0

    setup_logging(
        logging.DEBUG if args.verbose else cfg["log_level"],
        cfg["log_file"] or None,
    )

    settings = {
        "max_completions": cfg["max_completions"],
        "min_prefix_len": cfg["min_prefix_len"],
    }
    dictionary = args.dictionary or cfg["dictionary"]
    if dictionary:
        try:
            ac = Autocompleter.from_file(dictionary, **settings)
        except AutocompleterError as e:
            logger.debug("dictionary load failed", exc_info=True)
            err_console.print(escape(str(e)), style="red")
            return 1
    else:
        ac = Autocompleter(**settings)

    return CLI(ac, console=console).run()


if __name__ == "__main__":
    sys.exit(main())
