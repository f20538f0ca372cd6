# errors.py - exception types raised by the autocompleter package

class AutocompleterError(Exception):
    """Base class for everything this package raises on purpose."""


class DictionaryLoadError(AutocompleterError):
    """Dictionary file could not be opened, read or decoded."""


class ConfigError(AutocompleterError):
    """Config file is not valid JSON, or an option/value was rejected."""
