from __future__ import annotations

import subprocess
from pathlib import Path

import pytest
from quicknote import config as config_module

ENV_VARS = (
    "NOTE_EDITOR",
    "NOTES_DIR",
    "GIT_ENABLED",
    "GIT_REPO_PATH",
    "NOTION_ENABLED",
    "NOTION_TOKEN",
    "NOTION_DATABASE_ID",
    "NOTION_TITLE_PROPERTY",
)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch) -> Path:
    """Keep the user's environment and config file out of every test."""

    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    config_path = tmp_path / "config-home" / "config.toml"
    monkeypatch.setattr(config_module, "DEFAULT_CONFIG_PATH", config_path)
    monkeypatch.setattr(config_module, "DEFAULT_CONFIG_DIR", config_path.parent)
    return config_path


@pytest.fixture
def git_repo(tmp_path: Path, monkeypatch) -> Path:
    """An initialised repository without any remote configured."""

    monkeypatch.setenv("GIT_AUTHOR_NAME", "Quicknote Tests")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "tests@example.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Quicknote Tests")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "tests@example.com")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(tmp_path / "gitconfig"))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")

    repo = tmp_path / "repo"
    repo.mkdir()
    subprocess.run(["git", "init", "-q"], cwd=repo, check=True)
    return repo



@pytest.fixture
def unreachable_origin(tmp_path: Path, git_repo: Path) -> Path:
    """Point ``origin`` of ``git_repo`` at a path that does not exist.

    The current branch tracks ``origin`` so that a plain ``git push`` tries
    to contact the remote instead of failing for lack of an upstream.
    """

    missing = tmp_path / "nowhere" / "remote.git"
    subprocess.run(
        ["git", "remote", "add", "origin", str(missing)], cwd=git_repo, check=True
    )
    branch = subprocess.run(
        ["git", "symbolic-ref", "--short", "HEAD"],
        cwd=git_repo,
        capture_output=True,
        text=True,
        check=True,
    ).stdout.strip()
    for key, value in (
        (f"branch.{branch}.remote", "origin"),
        (f"branch.{branch}.merge", f"refs/heads/{branch}"),
    ):
        subprocess.run(["git", "config", key, value], cwd=git_repo, check=True)
    return missing
