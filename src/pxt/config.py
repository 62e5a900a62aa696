"""Config file loading, validation, and persistence.

Schema on disk (~/.config/pxt/config.json):

    {
        "session": "staging-api",
        "listen": "127.0.0.1:8080",
        "upstream": "https://staging-api.example.com",
        "log_level": "INFO",
        "log_file": "~/.local/state/pxt/pxt.log",
        "theme": "nord"
    }

Every field is optional. "theme" is written back by the app whenever the
Textual theme changes. Keys prefixed with "_" are reserved (e.g.
"_comment") and are stripped on load.
"""

import json
from pathlib import Path

from pydantic import BaseModel, ValidationError, field_validator

from pxt.constants import DEFAULT_LISTEN, DEFAULT_LOG_LEVEL, DEFAULT_SESSION, DEFAULT_UPSTREAM

CONFIG_PATH = Path("~/.config/pxt/config.json").expanduser()

DEFAULT_LOG_FILE = Path("~/.local/state/pxt/pxt.log").expanduser()

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    """User settings for a pxt session."""

    session: str = DEFAULT_SESSION
    listen: str = DEFAULT_LISTEN
    upstream: str = DEFAULT_UPSTREAM
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Path = DEFAULT_LOG_FILE
    theme: str | None = None

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @field_validator("log_file")
    @classmethod
    def _expand(cls, value: Path) -> Path:
        return value.expanduser()


class ConfigError(Exception):
    """Raised when config.json exists but cannot be parsed or validated."""


def load_config(path: Path | None = None) -> Settings:
    """Load and validate the config file.

    Creates the config directory and an empty config.json on first run and
    returns the defaults. Raises ConfigError if the file is malformed.
    """
    path = path or CONFIG_PATH
    if not path.exists():
        _bootstrap(path)
        return Settings()

    text = path.read_text().strip()
    if not text:
        return Settings()

    try:
        raw: object = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{path.name} is not valid JSON: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"{path.name} must be a JSON object at the top level")

    # Strip reserved/comment keys.
    data = {k: v for k, v in raw.items() if not k.startswith("_")}
    try:
        return Settings.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config in {path.name}: {exc}") from exc


def save_config(settings: Settings, path: Path | None = None) -> None:
    """Persist settings to disk, creating directories as needed."""
    path = path or CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(settings.model_dump(mode="json"), indent=2))


def _bootstrap(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("{}\n")
