"""Tests for configuration and logging setup."""

import logging

import pytest

from jokoui import ApplicationConfig, ClientConfig, Environment, LoggingConfig, configure_logging
from jokoui.demo.__main__ import main


def test_defaults():
    config = ApplicationConfig()

    assert config.environment is Environment.DEVELOPMENT
    assert config.runtime.host_id == "app"
    assert config.runtime.parser == "html.parser"
    assert config.client == ClientConfig()


def test_for_environment():
    assert ApplicationConfig.for_environment(Environment.DEVELOPMENT).logging.level == "DEBUG"

    testing = ApplicationConfig.for_environment(Environment.TESTING)
    assert testing.logging.level == "WARNING"
    assert testing.client.timeout == 5.0


def test_from_dict_round_trip():
    config = ApplicationConfig.from_dict({
        "environment": "production",
        "debug": True,
        "logging": {"level": "ERROR", "unknown": 1},
        "runtime": {"host_id": "root"},
        "client": {"base_url": "https://api.test", "timeout": 2},
    })

    assert config.environment is Environment.PRODUCTION
    assert config.debug is True
    assert config.logging.level == "ERROR"
    assert config.runtime.host_id == "root"
    assert config.client.base_url == "https://api.test"
    assert config.client.timeout == 2.0

    again = ApplicationConfig.from_dict(config.to_dict())
    assert again.to_dict() == config.to_dict()


def test_from_environment(monkeypatch):
    monkeypatch.setenv("JOKOUI_ENV", "testing")
    monkeypatch.setenv("JOKOUI_DEBUG", "true")
    monkeypatch.setenv("JOKOUI_LOG_LEVEL", "info")
    monkeypatch.setenv("JOKOUI_BASE_URL", "https://api.test")
    monkeypatch.setenv("JOKOUI_TIMEOUT", "1.5")

    config = ApplicationConfig.from_environment()

    assert config.environment is Environment.TESTING
    assert config.debug is True
    assert config.logging.level == "INFO"
    assert config.client.base_url == "https://api.test"
    assert config.client.timeout == 1.5


def test_unknown_environment_is_rejected(monkeypatch):
    monkeypatch.setenv("JOKOUI_ENV", "staging")

    with pytest.raises(ValueError):
        ApplicationConfig.from_environment()


def test_configure_logging_writes_file(tmp_path):
    log_file = tmp_path / "joko.log"

    logger = configure_logging(LoggingConfig(level="debug", file_path=str(log_file)))
    logging.getLogger("jokoui.test").debug("hello from the runtime")
    for handler in logger.handlers:
        handler.flush()

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    assert "hello from the runtime" in log_file.read_text()

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_demo_bootstrap_mounts_app(capsys):
    config = ApplicationConfig.for_environment(Environment.TESTING)
    config.client = ClientConfig(base_url="https://api.test")

    document = main(config)

    assert document.select_one("#app .joko-app") is not None
    assert 'class="joko-app"' in capsys.readouterr().out

    logger = logging.getLogger("jokoui")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
