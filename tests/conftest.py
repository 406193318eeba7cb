"""Shared fixtures for hoconkit tests."""

import os
from collections.abc import Generator
from pathlib import Path

import pytest

from hoconkit.core.config import reset_config


@pytest.fixture
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """Isolate settings loading from the real environment and home directory.

    Yields the project directory, which is also the working directory.
    """
    for key in list(os.environ):
        if key.upper().startswith("HOCONKIT_"):
            monkeypatch.delenv(key)

    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))

    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)

    reset_config()
    yield project
    reset_config()
