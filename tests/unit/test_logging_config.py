"""Tests for structured logging helpers."""

from __future__ import annotations

import importlib
import json
import logging

import pytest
import structlog

from agent_template.utils import logging_config


@pytest.fixture(autouse=True)
def _restore_logging(monkeypatch):
    monkeypatch.delenv("AGENT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("AGENT_LOG_JSON", raising=False)
    yield
    logging_config.configure_logging("INFO", json_logs=False)


def test_json_events_carry_bound_component(capsys):
    logging_config.configure_logging("DEBUG", json_logs=True)
    logger = logging_config.get_logger("tests.logging", component="unit")

    logger.info("step_recorded", steps=3)

    lines = [line for line in capsys.readouterr().err.splitlines() if line.strip()]
    payload = json.loads(lines[-1])
    assert payload["event"] == "step_recorded"
    assert payload["component"] == "unit"
    assert payload["steps"] == 3
    assert payload["level"] == "info"


def test_level_filters_debug_events(capsys):
    logging_config.configure_logging("WARNING", json_logs=True)
    logger = logging_config.get_logger("tests.logging.filter")

    logger.debug("hidden_event")
    logger.warning("visible_event")

    err = capsys.readouterr().err
    assert "hidden_event" not in err
    assert "visible_event" in err


def test_env_controls_level(monkeypatch):
    monkeypatch.setenv("AGENT_LOG_LEVEL", "warning")
    logging_config.configure_logging()

    assert logging.getLogger().level == logging.WARNING


def test_unknown_level_rejected():
    with pytest.raises(ValueError):
        logging_config.configure_logging("CHATTY")


def test_json_mode_env_flag(monkeypatch):
    monkeypatch.setenv("AGENT_LOG_JSON", "yes")
    assert logging_config._json_logs_requested() is True
    assert logging_config._json_logs_requested(False) is False

    monkeypatch.setenv("AGENT_LOG_JSON", "off")
    assert logging_config._json_logs_requested() is False


def test_import_and_get_logger_keep_host_structlog_config():
    """Library modules must not replace a structlog setup owned by the application."""

    def host_processor(logger, method_name, event_dict):
        return event_dict

    structlog.configure(processors=[host_processor, structlog.processors.KeyValueRenderer()])
    try:
        import agent_template.agent.history as history
        import agent_template.agent.trainable as trainable

        importlib.reload(history)
        importlib.reload(trainable)
        logging_config.get_logger("tests.logging.host", component="unit")

        assert host_processor in structlog.get_config()["processors"]
    finally:
        structlog.reset_defaults()
