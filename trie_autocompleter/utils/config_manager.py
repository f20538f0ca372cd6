# config_manager.py - JSON config manager

import json
import os

from rich.table import Table

from trie_autocompleter.errors import ConfigError

DEFAULTS = {
    "max_completions": 10,
    "min_prefix_len": 1,
    "dictionary": "",  # used when no dictionary is given on the command line
    "log_level": "WARNING",
    "log_file": "",
}

# inclusive (low, high) bounds for numeric options, None = unbounded
RANGES = {
    "max_completions": (0, 10),
    "min_prefix_len": (1, None),
}


def _coerce(key, val):
    """Convert val to the type of the option's default and check its range."""
    default = DEFAULTS[key]
    if val is None or isinstance(val, (list, dict)):
        raise ConfigError(f"Bad value for {key}: {val!r}")
    try:
        out = type(default)(val)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Bad value for {key}: {val!r}") from e

    low, high = RANGES.get(key, (None, None))
    if (low is not None and out < low) or (high is not None and out > high):
        raise ConfigError(f"Bad value for {key}: {val!r} (allowed {low}..{high or ''})")
    return out


class Config:
    def __init__(self, path="config.json", create=False):
        self.path = path
        self.data = dict(DEFAULTS)
        self._load(create)

    def _load(self, create):
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf8") as f:
                    loaded = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                raise ConfigError(f"Bad config file `{self.path}`: {e}") from e
            if not isinstance(loaded, dict):
                raise ConfigError(f"Bad config file `{self.path}`: expected an object")
            for key, val in loaded.items():
                # unknown keys are kept as-is, known ones must fit their default
                self.data[key] = _coerce(key, val) if key in DEFAULTS else val
        elif create:
            self.save()

    def __getitem__(self, key):
        return self.data[key]

    def get(self, key, default=None):
        return self.data.get(key, default)

    def save(self):
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def show(self) -> Table:
        table = Table(title=f"Config ({self.path})")
        table.add_column("Option", style="cyan")
        table.add_column("Value")
        for k, v in self.data.items():
            table.add_row(k, str(v))
        return table

    def set(self, key, val):
        if key not in DEFAULTS:
            raise ConfigError(f"No such option: {key}")
        self.data[key] = _coerce(key, val)
        self.save()
