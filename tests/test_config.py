import logging

from training_calc import config
from training_calc.logging_config import setup_logging


def test_defaults():
    assert config.get_locale() == "ru"
    assert config.get_log_level() == "WARNING"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("TRAINING_LOCALE", " EN ")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert config.get_locale() == "en"
    assert config.get_log_level() == "DEBUG"


def test_blank_values_fall_back(monkeypatch):
    monkeypatch.setenv("TRAINING_LOCALE", "")
    monkeypatch.setenv("LOG_LEVEL", "  ")
    assert config.get_locale() == "ru"
    assert config.get_log_level() == "WARNING"


def test_setup_logging_level(monkeypatch):
    root = logging.getLogger()
    old_handlers, old_level = root.handlers[:], root.level
    root.handlers = []
    try:
        setup_logging("debug")
        assert root.level == logging.DEBUG
    finally:
        root.handlers = old_handlers
        root.setLevel(old_level)
