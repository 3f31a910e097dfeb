"""Unit tests for package logging configuration."""

from __future__ import annotations

import importlib
import logging
from typing import Iterator

import pytest

from envreader import config


@pytest.fixture(autouse=True)
def _restore_level() -> Iterator[None]:
    logger = logging.getLogger("envreader")
    level = logger.level
    yield
    logger.setLevel(level)


def test_default_log_level_is_warning() -> None:
    assert config.configure_logging("warning").level == logging.WARNING


def test_level_name_is_case_insensitive() -> None:
    assert config.configure_logging("debug").level == logging.DEBUG


def test_unknown_level_falls_back_to_warning() -> None:
    assert config.configure_logging("chatty").level == logging.WARNING


def test_uses_module_setting_when_no_level_given(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, "LOG_LEVEL", "error")
    assert config.configure_logging().level == logging.ERROR


def test_log_level_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVREADER_LOG_LEVEL", "debug")
    importlib.reload(config)
    try:
        assert config.LOG_LEVEL == "debug"
        assert config.configure_logging().level == logging.DEBUG
    finally:
        monkeypatch.delenv("ENVREADER_LOG_LEVEL")
        importlib.reload(config)
