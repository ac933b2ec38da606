import importlib.metadata
import logging

import pytest

from izn.config import DEFAULT_ENCODING, Settings, default_encoding, default_settings, load_env_config
from izn.log_levels import LogLevel, coerce_log_level
from izn.logger import LOG_FORMAT, configure_logger, logger
from izn.version import FALLBACK_VERSION, version


def test_correct_settings_defaults():
    settings = default_settings(env={})

    assert settings.log_level is LogLevel.WARNING
    assert settings.encoding == DEFAULT_ENCODING


@pytest.mark.parametrize(
    "env, expected",
    [
        ({}, {}),
        ({"IZN_LOG_LEVEL": "debug"}, {"log_level": LogLevel.DEBUG}),
        ({"IZN_ENCODING": "latin-1"}, {"encoding": "latin-1"}),
        ({"IZN_ENCODING": ""}, {}),
        ({"IZN_UNKNOWN": "x", "HOME": "/root"}, {}),
        ({"IZN_LOG_LEVEL": "10", "IZN_ENCODING": "ascii"}, {"log_level": LogLevel.DEBUG, "encoding": "ascii"}),
    ],
)
def test_load_env_config(env, expected):
    assert load_env_config(env) == expected


def test_load_env_config_reads_os_environ(monkeypatch):
    monkeypatch.setenv("IZN_LOG_LEVEL", "error")
    assert default_settings().log_level is LogLevel.ERROR


def test_invalid_log_level_env():
    with pytest.raises(ValueError, match="Unsupported log level: loud"):
        load_env_config({"IZN_LOG_LEVEL": "loud"})


def test_invalid_encoding():
    with pytest.raises(LookupError):
        Settings(encoding="not-a-codec")


@pytest.mark.parametrize(
    "level, expected",
    [
        (LogLevel.INFO, LogLevel.INFO),
        ("info", LogLevel.INFO),
        (" Warning ", LogLevel.WARNING),
        (logging.ERROR, LogLevel.ERROR),
        ("50", LogLevel.CRITICAL),
    ],
)
def test_coerce_log_level(level, expected):
    assert coerce_log_level(level) is expected


@pytest.mark.parametrize(
    "level, error",
    [
        ("verbose", ValueError),
        (15, ValueError),
        (True, TypeError),
        (1.5, TypeError),
    ],
)
def test_coerce_log_level_errors(level, error):
    with pytest.raises(error):
        coerce_log_level(level)


def test_configure_logger():
    configure_logger("debug")

    assert logger.level == logging.DEBUG
    assert logger.propagate is False
    assert len(logger.handlers) == 1
    assert logger.handlers[0].level == logging.DEBUG
    assert logger.handlers[0].formatter._fmt == LOG_FORMAT

    configure_logger(LogLevel.ERROR)
    assert len(logger.handlers) == 1
    assert logger.handlers[0].level == logging.ERROR


def test_configure_logger_from_environment(monkeypatch):
    monkeypatch.setenv("IZN_LOG_LEVEL", "info")
    configure_logger()
    assert logger.level == logging.INFO


@pytest.mark.parametrize(
    "env, expected",
    [
        ({}, DEFAULT_ENCODING),
        ({"IZN_ENCODING": ""}, DEFAULT_ENCODING),
        ({"IZN_ENCODING": "latin-1", "IZN_LOG_LEVEL": "verbose"}, "latin-1"),
        ({"IZN_ENCODING": "not-a-codec"}, "not-a-codec"),
    ],
)
def test_default_encoding(env, expected):
    assert default_encoding(env) == expected


def test_version_fallback(monkeypatch):
    def not_installed(name):
        raise importlib.metadata.PackageNotFoundError(name)

    monkeypatch.setattr(importlib.metadata, "version", not_installed)
    assert version() == FALLBACK_VERSION
