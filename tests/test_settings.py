"""Command line, environment and logging configuration tests."""

import logging

import pytest

import main
from config.logging_setup import RedactSecrets
from config.settings import ConfigManager, UsageError

AMBIENT_VARS = ["LOG_LEVEL", "LOG_FILE", "VERIFY_SSL", "API_TIMEOUT",
                "SEARCH_POLL_INTERVAL", "SEARCH_TIMEOUT"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    # keep a developer's .env out of the picture
    monkeypatch.chdir(tmp_path)
    for name in AMBIENT_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_from_three_arguments():
    config = ConfigManager(["https://nas.local:5001/", "admin", "secret"])

    api = config.api_config
    assert api.base_url == "https://nas.local:5001"
    assert api.account == "admin"
    assert api.password == "secret"
    assert api.api_version == "7"
    assert api.verify_ssl is False
    assert api.timeout == 30.0
    assert config.search_config.poll_interval == 1.0
    assert config.search_config.timeout == 300.0
    assert config.logging_config.level == "INFO"


def test_fourth_argument_sets_auth_version():
    config = ConfigManager(["https://nas.local:5001", "admin", "secret", "6"])

    assert config.api_config.api_version == "6"


def test_environment_tunes_ambient_settings(monkeypatch):
    monkeypatch.setenv("VERIFY_SSL", "true")
    monkeypatch.setenv("API_TIMEOUT", "10")
    monkeypatch.setenv("SEARCH_TIMEOUT", "60")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = ConfigManager(["https://nas.local:5001", "admin", "secret"])

    assert config.api_config.verify_ssl is True
    assert config.api_config.timeout == 10.0
    assert config.search_config.timeout == 60.0
    assert config.logging_config.level == "DEBUG"
    assert "secret" not in str(config.get_config_summary())


def test_non_numeric_timeout_is_rejected(monkeypatch):
    monkeypatch.setenv("API_TIMEOUT", "soon")

    with pytest.raises(UsageError, match="API_TIMEOUT"):
        ConfigManager(["https://nas.local:5001", "admin", "secret"])


@pytest.mark.parametrize("argv", [[], ["https://nas.local:5001"], ["https://nas.local:5001", "admin"]])
def test_missing_arguments_raise_usage_error(argv):
    with pytest.raises(UsageError, match="Usage:"):
        ConfigManager(argv)


def test_run_without_arguments_exits_with_usage(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main.run([])

    assert exc_info.value.code == 1
    assert "Usage:" in capsys.readouterr().err


@pytest.mark.parametrize("message,expected", [
    ("GET /webapi/auth.cgi?account=admin&passwd=hunter2&format=sid",
     "GET /webapi/auth.cgi?account=admin&passwd=[REDACTED]&format=sid"),
    ("retrying with _sid=abc123", "retrying with _sid=[REDACTED]"),
    ("listed 3 entries", "listed 3 entries"),
])
def test_secrets_are_redacted_from_log_records(message, expected):
    record = logging.LogRecord("test", logging.INFO, __file__, 1, message, (), None)

    assert RedactSecrets().filter(record) is True
    assert record.getMessage() == expected
