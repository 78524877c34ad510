"""Configuration management for Quicknote."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping

DEFAULT_CONFIG_DIR = Path("~/.config/quicknote").expanduser()
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.toml"

DEFAULT_EDITOR = "vim"
DEFAULT_NOTES_DIR = "./notes"
DEFAULT_GIT_REPO_PATH = "./notes"
DEFAULT_NOTION_TITLE_PROPERTY = "Title"

_TRUE_VALUES = ("true", "1")


class ConfigError(RuntimeError):
    """Base error for configuration related issues."""


class MissingConfigError(ConfigError):
    """Raised when an explicitly requested configuration file cannot be found."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Configuration file not found at {path}")
        self.path = path


class InvalidConfigError(ConfigError):
    """Raised when the configuration file holds malformed values."""


@dataclass(slots=True, frozen=True)
class QuicknoteConfig:
    """Settings for a single Quicknote run."""

    editor: str = DEFAULT_EDITOR
    notes_dir: Path = Path(DEFAULT_NOTES_DIR)
    git_enabled: bool = False
    git_repo_path: Path = Path(DEFAULT_GIT_REPO_PATH)
    notion_enabled: bool = False
    notion_token: str = ""
    notion_database_id: str = ""
    notion_title_property: str = DEFAULT_NOTION_TITLE_PROPERTY
    source_path: Path | None = None


def get_env(key: str, default: str, environ: Mapping[str, str] | None = None) -> str:
    """Return the variable's value, or ``default`` when unset or empty."""

    env = os.environ if environ is None else environ
    value = env.get(key, "")
    if value == "":
        return default
    return value


def get_env_bool(
    key: str, default: bool, environ: Mapping[str, str] | None = None
) -> bool:
    """Interpret ``key`` as a boolean flag.

    ``"true"`` and ``"1"`` (any case) enable the flag. Any other value,
    including unset or empty, falls back to ``default``.
    """

    env = os.environ if environ is None else environ
    value = env.get(key, "").strip().lower()
    if value in _TRUE_VALUES:
        return True
    return default


def config_from_env(
    environ: Mapping[str, str] | None = None,
    base: QuicknoteConfig | None = None,
) -> QuicknoteConfig:
    """Overlay environment variables on ``base`` (built-in defaults if omitted).

    This adapter never fails: every variable is optional.
    """

    defaults = base or QuicknoteConfig()
    return replace(
        defaults,
        editor=get_env("NOTE_EDITOR", defaults.editor, environ),
        notes_dir=Path(get_env("NOTES_DIR", str(defaults.notes_dir), environ)),
        git_enabled=get_env_bool("GIT_ENABLED", defaults.git_enabled, environ),
        git_repo_path=Path(
            get_env("GIT_REPO_PATH", str(defaults.git_repo_path), environ)
        ),
        notion_enabled=get_env_bool(
            "NOTION_ENABLED", defaults.notion_enabled, environ
        ),
        notion_token=get_env("NOTION_TOKEN", defaults.notion_token, environ),
        notion_database_id=get_env(
            "NOTION_DATABASE_ID", defaults.notion_database_id, environ
        ),
        notion_title_property=get_env(
            "NOTION_TITLE_PROPERTY", defaults.notion_title_property, environ
        ),
    )


def load_config(
    path: Path | None = None, environ: Mapping[str, str] | None = None
) -> QuicknoteConfig:
    """Load configuration from the TOML file at ``path`` and the environment.

    Parameters
    ----------
    path:
        Optional location of the configuration file. When ``None`` the default
        path (``~/.config/quicknote/config.toml``) is read if it exists.
    environ:
        Mapping used instead of ``os.environ``.

    Raises
    ------
    MissingConfigError
        If ``path`` was given explicitly and does not exist.
    InvalidConfigError
        If the file holds values of the wrong type.
    """

    if path is None:
        config_path = DEFAULT_CONFIG_PATH.expanduser()
        if not config_path.exists():
            return config_from_env(environ)
    else:
        config_path = path.expanduser()
        if not config_path.exists():
            raise MissingConfigError(config_path)

    base = _load_file(config_path)
    return config_from_env(environ, base)


def _load_file(config_path: Path) -> QuicknoteConfig:
    try:
        with config_path.open("rb") as fh:
            raw = tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise InvalidConfigError(f"Could not parse {config_path}: {exc}") from exc

    section = raw.get("quicknote", {})
    if not isinstance(section, dict):
        raise InvalidConfigError("'quicknote' section must be a table")

    config_dir = config_path.parent

    return QuicknoteConfig(
        editor=_get_str(section, "editor", DEFAULT_EDITOR),
        notes_dir=_get_path(section, "notes_dir", DEFAULT_NOTES_DIR, config_dir),
        git_enabled=_get_bool(section, "git_enabled"),
        git_repo_path=_get_path(
            section, "git_repo_path", DEFAULT_GIT_REPO_PATH, config_dir
        ),
        notion_enabled=_get_bool(section, "notion_enabled"),
        notion_token=_get_str(section, "notion_token", ""),
        notion_database_id=_get_str(section, "notion_database_id", ""),
        notion_title_property=_get_str(
            section, "notion_title_property", DEFAULT_NOTION_TITLE_PROPERTY
        ),
        source_path=config_path,
    )


def _get_str(section: dict[str, Any], key: str, default: str) -> str:
    value = section.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        raise InvalidConfigError(f"'{key}' must be a string when provided")
    return value.strip() or default


def _get_bool(section: dict[str, Any], key: str) -> bool:
    value = section.get(key, False)
    if not isinstance(value, bool):
        raise InvalidConfigError(f"'{key}' must be a boolean when provided")
    return value


def _get_path(
    section: dict[str, Any], key: str, default: str, config_dir: Path
) -> Path:
    raw = _get_str(section, key, "")
    if not raw:
        return Path(default)
    # Relative paths in the file are anchored at the file's directory.
    candidate = Path(raw).expanduser()
    if candidate.is_absolute():
        return candidate
    return config_dir / candidate


def bootstrap_config_file(path: Path) -> bool:
    """Create a default config file if missing.

    Returns True when the file was created, False if it already existed.
    """

    if path.exists():
        return False

    config_dir = path.parent
    config_dir.mkdir(parents=True, exist_ok=True)
    default_content = (
        "[quicknote]\n"
        'editor = "vim"\n'
        "# Relative paths are resolved against this file's directory.\n"
        '# notes_dir = "~/notes"\n'
        "git_enabled = false\n"
        '# git_repo_path = "~/notes"\n'
        "notion_enabled = false\n"
        'notion_database_id = ""\n'
        "# The Notion token is best supplied through NOTION_TOKEN.\n"
    )
    path.write_text(default_content, encoding="utf-8")
    return True
