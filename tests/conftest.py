"""Shared fixtures for orgconfig tests."""

import os
from collections.abc import Generator
from pathlib import Path

import pytest
from loguru import logger

from orgconfig.config import reset_config


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch) -> Generator[Path, None, None]:
    """Point HOME and cwd at a temp dir and drop ORGCONFIG_* variables."""
    home = tmp_path / "home"
    home.mkdir()
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(workdir)
    for name in list(os.environ):
        if name.upper().startswith("ORGCONFIG_"):
            monkeypatch.delenv(name)
    reset_config()
    yield workdir
    reset_config()


@pytest.fixture
def home_dir(isolated_environment: Path) -> Path:
    return Path(os.environ["HOME"])


@pytest.fixture
def log_messages() -> Generator[list, None, None]:
    """Collect loguru messages at WARNING and above."""
    messages: list = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="WARNING")
    yield messages
    logger.remove(handler_id)
