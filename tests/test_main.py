"""Tests for the command line entry point and settings."""

from config.settings import load_settings
from main import parse_args


def test_default_port(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    args = parse_args([])
    assert args.port == 3000
    assert args.debug is False


def test_port_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    assert parse_args([]).port == 8080


def test_port_flag_overrides_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    assert parse_args(["--port", "9000", "--debug"]).port == 9000


def test_invalid_port_falls_back(monkeypatch):
    monkeypatch.setenv("PORT", "not-a-port")
    assert load_settings()['PORT'] == 3000


def test_store_backend_from_environment(monkeypatch):
    monkeypatch.setenv("USER_STORE", "SQL")
    assert load_settings()['USER_STORE'] == 'sql'


def test_invalid_log_level_falls_back(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    assert load_settings()['LOG_LEVEL'] == 'INFO'


def test_log_level_from_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert load_settings()['LOG_LEVEL'] == 'DEBUG'
