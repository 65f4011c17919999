"""Shared fixtures."""

import logging
import os

import pytest


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point user config lookup at an empty directory and clear overrides."""
    monkeypatch.setattr(
        "crosspaths.config.platformdirs.user_config_dir",
        lambda *args, **kwargs: str(tmp_path / "user"),
    )
    for key in list(os.environ):
        if key.startswith("CROSSPATHS_"):
            monkeypatch.delenv(key)
    return tmp_path


@pytest.fixture
def restore_logging():
    """Undo root logger changes made by setup_logging."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
