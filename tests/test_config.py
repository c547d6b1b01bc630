"""Tests for environment settings and logging configuration."""

import logging

from flowcast.config import DEFAULT_HORIZON_DAYS, get_env_int, horizon_days
from flowcast.logger import get_logging_config, setup_logging


def test_get_env_int_unset(monkeypatch):
    monkeypatch.delenv("FLOWCAST_TEST_INT", raising=False)

    assert get_env_int("FLOWCAST_TEST_INT", 7) == 7


def test_get_env_int_valid(monkeypatch):
    monkeypatch.setenv("FLOWCAST_TEST_INT", "12")

    assert get_env_int("FLOWCAST_TEST_INT", 7) == 12


def test_get_env_int_invalid_falls_back(monkeypatch):
    monkeypatch.setenv("FLOWCAST_TEST_INT", "twelve")

    assert get_env_int("FLOWCAST_TEST_INT", 7) == 7


def test_get_env_int_below_minimum(monkeypatch):
    monkeypatch.setenv("FLOWCAST_TEST_INT", "0")

    assert get_env_int("FLOWCAST_TEST_INT", 7, min_value=1) == 7


def test_horizon_days(monkeypatch):
    monkeypatch.delenv("FLOWCAST_HORIZON_DAYS", raising=False)
    assert horizon_days() == DEFAULT_HORIZON_DAYS

    monkeypatch.setenv("FLOWCAST_HORIZON_DAYS", "45")
    assert horizon_days() == 45


def test_logging_config_level(monkeypatch):
    monkeypatch.delenv("FLOWCAST_LOG_DIR", raising=False)
    monkeypatch.setenv("FLOWCAST_LOG_LEVEL", "info")

    config = get_logging_config()

    assert config["loggers"]["flowcast"]["level"] == "INFO"
    assert config["loggers"]["flowcast"]["handlers"] == ["console"]
    assert get_logging_config("debug")["loggers"]["flowcast"]["level"] == "DEBUG"


def test_logging_file_handler(monkeypatch, tmp_path):
    monkeypatch.setenv("FLOWCAST_LOG_DIR", str(tmp_path / "logs"))

    config = get_logging_config("warning")

    assert config["handlers"]["file"]["filename"] == str(tmp_path / "logs" / "flowcast.log")
    assert (tmp_path / "logs").is_dir()


def test_setup_logging_sets_level(monkeypatch):
    monkeypatch.delenv("FLOWCAST_LOG_DIR", raising=False)

    setup_logging("ERROR")

    assert logging.getLogger("flowcast").level == logging.ERROR
