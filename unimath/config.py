"""Configuration management — JSON-based, stored in ~/.config/unimath/."""
import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "enabled": True,
    "trigger_space": True,   # convert when space is typed after an escape word
    "trigger_tab": False,    # opt-in: Tab often moves focus to another widget
    "italic_prefix": False,  # enable the \i:xyz shorthand
    "debug_logging": False,
    "max_line_length": 256,
    "completion_limit": 50,
}

CONFIG_DIR = Path.home() / ".config" / "unimath"
CONFIG_FILE = CONFIG_DIR / "config.json"


class Config:
    def __init__(self):
        self._data = dict(DEFAULT_CONFIG)
        self.load()

    def load(self):
        if CONFIG_FILE.exists():
            try:
                with open(CONFIG_FILE, "r") as f:
                    stored = json.load(f)
                self._data.update(stored)
            except (json.JSONDecodeError, IOError) as e:
                logger.warning("Ignoring unreadable config %s: %s", CONFIG_FILE, e)

    def save(self):
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        with open(CONFIG_FILE, "w") as f:
            json.dump(self._data, f, indent=2, ensure_ascii=False)

    @property
    def enabled(self):
        return self._data["enabled"]

    @enabled.setter
    def enabled(self, val):
        self._data["enabled"] = bool(val)
        self.save()

    @property
    def trigger_space(self):
        return self._data["trigger_space"]

    @trigger_space.setter
    def trigger_space(self, val):
        self._data["trigger_space"] = bool(val)
        self.save()

    @property
    def trigger_tab(self):
        return self._data["trigger_tab"]

    @trigger_tab.setter
    def trigger_tab(self, val):
        self._data["trigger_tab"] = bool(val)
        self.save()

    @property
    def italic_prefix(self):
        return self._data.get("italic_prefix", False)

    @property
    def debug_logging(self):
        return self._data["debug_logging"]

    @property
    def max_line_length(self):
        return self._data.get("max_line_length", 256)

    @property
    def completion_limit(self):
        return self._data.get("completion_limit", 50)
