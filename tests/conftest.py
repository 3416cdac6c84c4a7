"""Shared pytest fixtures for quickrun tests."""

import pytest

from quickrun.launcher.models import Catalog


@pytest.fixture
def small_catalog():
    """The two-entry catalog used throughout the scenario tests."""
    return Catalog.from_mapping({"build": "cargo build", "list": "ls -la"})


@pytest.fixture
def three_catalog():
    return Catalog.from_mapping(
        {
            "build": "cargo build",
            "list": "ls -la",
            "test": "cargo test --all",
        }
    )


@pytest.fixture
def long_catalog():
    """Twenty entries, titles cmd00..cmd19 in order."""
    return Catalog.from_mapping({f"cmd{i:02d}": f"echo {i}" for i in range(20)})


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep tests away from the user's real config directory and env."""
    for name in ("QUICKRUN_COMMANDS_FILE", "QUICKRUN_RENDER_MODE", "QUICKRUN_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(
        "quickrun.config.commands_config.DEFAULT_COMMANDS_FILE",
        tmp_path / "default" / "commands.yaml",
    )
    monkeypatch.setattr(
        "quickrun.config.settings.DEFAULT_COMMANDS_FILE",
        tmp_path / "default" / "commands.yaml",
    )
    monkeypatch.setattr("quickrun.main.setup_logging", lambda *args, **kwargs: None)
