"""Settings for the chatbot and its HTTP server.

Values come from an optional YAML file; anything the file leaves out keeps the
default below. The file path is taken from the argument to ``load_settings``,
then from the ``HOPE_CHATBOT_CONFIG`` environment variable.
"""

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

from hope_chatbot.errors import ConfigurationError

CONFIG_ENV_VAR = "HOPE_CHATBOT_CONFIG"


@dataclass(frozen=True)
class Settings:
    # None means the corpus shipped with the package
    corpus_file: Optional[str] = None
    suggestion_limit: int = 3
    suggestion_min_score: float = 0.1
    # None disables the CSV interaction log
    chat_log_file: Optional[str] = None
    chat_history_size: int = 100
    host: str = "0.0.0.0"
    port: int = 5000
    debug: bool = False

    def __post_init__(self):
        for name in ("suggestion_limit", "chat_history_size", "port"):
            value = getattr(self, name)
            if not _is_int(value) or value < 0:
                raise ConfigurationError(f"{name} must be a non-negative integer, got {value!r}")
        if not (_is_int(self.suggestion_min_score) or isinstance(self.suggestion_min_score, float)):
            raise ConfigurationError(
                f"suggestion_min_score must be a number, got {self.suggestion_min_score!r}"
            )
        if not isinstance(self.debug, bool):
            raise ConfigurationError(f"debug must be true or false, got {self.debug!r}")
        if not isinstance(self.host, str):
            raise ConfigurationError(f"host must be a string, got {self.host!r}")
        for name in ("corpus_file", "chat_log_file"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise ConfigurationError(f"{name} must be a path or null, got {value!r}")


def _is_int(value):
    # YAML booleans load as bool, which is an int subclass
    return isinstance(value, int) and not isinstance(value, bool)


def load_settings(path=None):
    """Read Settings from YAML; without a file every default applies"""
    path = path or os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return Settings()

    config_path = Path(path)
    if not config_path.exists():
        raise ConfigurationError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a mapping")

    known = {field.name for field in fields(Settings)}
    try:
        return Settings(**{key: value for key, value in data.items() if key in known})
    except TypeError as e:
        raise ConfigurationError(f"Invalid config file {config_path}: {e}") from e
