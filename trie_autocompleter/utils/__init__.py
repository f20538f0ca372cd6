# trie_autocompleter/utils/__init__.py
# config, logging and dictionary loading helpers

from .config_manager import Config
from .dictionary_loader import load_dictionary
from .logger_utils import Log, setup_logging

__all__ = ["Config", "load_dictionary", "Log", "setup_logging"]
