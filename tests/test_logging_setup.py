"""Tests for server-side logging configuration."""

import logging

import pytest

from backend.app import create_app
from backend.logging_setup import APP_LOGGERS, setup_logging


@pytest.fixture(autouse=True)
def restore_levels():
    saved = {name: logging.getLogger(name).level for name in APP_LOGGERS}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


def test_create_app_applies_log_level(monkeypatch, tmp_path):
    monkeypatch.setenv("LOG_LEVEL", "info")
    create_app(data_dir=tmp_path)
    assert logging.getLogger("pomagotchi.session").isEnabledFor(logging.INFO)
    assert not logging.getLogger("pomagotchi.storage").isEnabledFor(logging.DEBUG)


def test_debug_level(monkeypatch, tmp_path):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    create_app(data_dir=tmp_path)
    assert logging.getLogger("pomagotchi.storage").isEnabledFor(logging.DEBUG)
    assert logging.getLogger("backend.app").isEnabledFor(logging.DEBUG)


def test_explicit_level_overrides_env(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    setup_logging("WARNING")
    assert not logging.getLogger("pomagotchi.session").isEnabledFor(logging.INFO)


def test_handler_attached_once():
    setup_logging("INFO")
    setup_logging("INFO")
    assert len(logging.getLogger("pomagotchi").handlers) == 1
