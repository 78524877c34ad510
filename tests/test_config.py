from __future__ import annotations

import textwrap
from pathlib import Path

import pytest
from quicknote.config import (
    ConfigError,
    InvalidConfigError,
    MissingConfigError,
    QuicknoteConfig,
    bootstrap_config_file,
    config_from_env,
    get_env,
    get_env_bool,
    load_config,
)


def write_config(tmp_path: Path, content: str) -> Path:
    config_file = tmp_path / "config.toml"
    config_file.parent.mkdir(parents=True, exist_ok=True)
    config_file.write_text(textwrap.dedent(content), encoding="utf-8")
    return config_file


@pytest.mark.parametrize("value", ["true", "TRUE", "True", "1"])
def test_get_env_bool_true_spellings(value: str) -> None:
    assert get_env_bool("FLAG", False, {"FLAG": value}) is True


@pytest.mark.parametrize("value", ["", "yes", "on", "2", "enabled"])
def test_get_env_bool_unrecognised_uses_default(value: str) -> None:
    assert get_env_bool("FLAG", False, {"FLAG": value}) is False
    assert get_env_bool("FLAG", True, {"FLAG": value}) is True


def test_get_env_bool_unset_uses_default() -> None:
    assert get_env_bool("FLAG", False, {}) is False
    assert get_env_bool("FLAG", True, {}) is True


def test_get_env_bool_false_spelling_keeps_true_default() -> None:
    assert get_env_bool("FLAG", True, {"FLAG": "false"}) is True
    assert get_env_bool("FLAG", True, {"FLAG": "0"}) is True
    assert get_env_bool("FLAG", False, {"FLAG": "false"}) is False


def test_get_env_returns_value_verbatim() -> None:
    assert get_env("KEY", "fallback", {"KEY": "  spaced value "}) == "  spaced value "


def test_get_env_empty_string_uses_default() -> None:
    assert get_env("KEY", "fallback", {"KEY": ""}) == "fallback"
    assert get_env("KEY", "fallback", {}) == "fallback"


def test_config_from_env_defaults() -> None:
    config = config_from_env({})

    assert config == QuicknoteConfig()
    assert config.editor == "vim"
    assert config.notes_dir == Path("./notes")
    assert config.git_enabled is False
    assert config.git_repo_path == Path("./notes")
    assert config.notion_enabled is False
    assert config.notion_token == ""
    assert config.notion_database_id == ""


def test_config_from_env_reads_every_variable() -> None:
    config = config_from_env(
        {
            "NOTE_EDITOR": "nano",
            "NOTES_DIR": "/tmp/my-notes",
            "GIT_ENABLED": "1",
            "GIT_REPO_PATH": "/tmp/repo",
            "NOTION_ENABLED": "TRUE",
            "NOTION_TOKEN": "secret",
            "NOTION_DATABASE_ID": "db-123",
        }
    )

    assert config.editor == "nano"
    assert config.notes_dir == Path("/tmp/my-notes")
    assert config.git_enabled is True
    assert config.git_repo_path == Path("/tmp/repo")
    assert config.notion_enabled is True
    assert config.notion_token == "secret"
    assert config.notion_database_id == "db-123"


def test_config_is_immutable() -> None:
    config = config_from_env({})
    with pytest.raises(AttributeError):
        config.editor = "emacs"  # type: ignore[misc]


def test_load_config_without_default_file_uses_env(isolated_config: Path) -> None:
    assert not isolated_config.exists()

    config = load_config(environ={"NOTE_EDITOR": "nvim"})

    assert config.editor == "nvim"
    assert config.source_path is None


def test_load_config_reads_file_and_env_wins(tmp_path: Path) -> None:
    config_path = write_config(
        tmp_path,
        """
        [quicknote]
        editor = "emacs"
        notes_dir = "journal"
        git_enabled = true
        notion_database_id = "db-file"
        """,
    )

    config = load_config(config_path, environ={"NOTE_EDITOR": "nano"})

    assert config.editor == "nano"
    assert config.notes_dir == tmp_path / "journal"
    assert config.git_enabled is True
    assert config.git_repo_path == Path("./notes")
    assert config.notion_database_id == "db-file"
    assert config.source_path == config_path


def test_false_env_value_keeps_flag_from_file(tmp_path: Path) -> None:
    config_path = write_config(
        tmp_path,
        """
        [quicknote]
        git_enabled = true
        """,
    )

    config = load_config(config_path, environ={"GIT_ENABLED": "false"})

    assert config.git_enabled is True


def test_load_config_missing_explicit_file(tmp_path: Path) -> None:
    missing = tmp_path / "missing.toml"
    with pytest.raises(MissingConfigError):
        load_config(missing, environ={})


def test_load_config_rejects_wrong_types(tmp_path: Path) -> None:
    config_path = write_config(
        tmp_path,
        """
        [quicknote]
        git_enabled = "yes"
        """,
    )
    with pytest.raises(InvalidConfigError):
        load_config(config_path, environ={})

    config_path = write_config(
        tmp_path,
        """
        [quicknote]
        editor = 3
        """,
    )
    with pytest.raises(ConfigError):
        load_config(config_path, environ={})


def test_load_config_rejects_invalid_toml(tmp_path: Path) -> None:
    config_path = write_config(tmp_path, "[quicknote\n")
    with pytest.raises(InvalidConfigError):
        load_config(config_path, environ={})


def test_bootstrap_config_file_creates_loadable_file(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.toml"

    assert bootstrap_config_file(path) is True
    assert bootstrap_config_file(path) is False

    config = load_config(path, environ={})
    assert config.editor == "vim"
    assert config.notes_dir == Path("./notes")
    assert config.git_repo_path == Path("./notes")
    assert config.git_enabled is False
