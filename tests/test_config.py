"""Tests for src.searcher.config ensuring env overrides, CLI parsing and required settings.

Run with coverage to validate configuration handling:
    pytest tests/test_config.py --maxfail=1 -v --cov=src.searcher.config --cov-report=term-missing
"""

from importlib import reload

import pytest

import src.searcher.config as config
from src.searcher.errors import ConfigError


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    monkeypatch.setenv("LOCAL_ENV_FILE", str(tmp_path / "absent.env"))
    # setenv first so monkeypatch restores the original state after .env loads
    for name in ("GHE_URL", "GITHUB_TOKEN"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


def test_config_defaults_are_present():
    assert config.PER_PAGE == 100
    assert config.REQUEST_TIMEOUT > 0
    assert config.USER_AGENT
    assert config.MISSING


def test_env_override_for_throttle(monkeypatch):
    monkeypatch.setenv("THROTTLE_SEC", "2.5")
    reloaded = reload(config)
    try:
        assert reloaded.THROTTLE_SEC == 2.5
    finally:
        monkeypatch.delenv("THROTTLE_SEC", raising=False)
        reload(config)


def test_parse_args_requires_filename():
    with pytest.raises(SystemExit) as excinfo:
        config.parse_args([])
    assert excinfo.value.code == 2


def test_parse_args_delay_option():
    args = config.parse_args(["config.yml", "--delay", "0.5"])
    assert args.filename == "config.yml"
    assert args.delay == 0.5


def test_resolve_settings_from_environment(clean_env):
    clean_env.setenv("GHE_URL", "https://ghe.example.com/")
    clean_env.setenv("GITHUB_TOKEN", "tok")
    settings = config.resolve_settings(config.parse_args(["config.yml"]))
    assert settings.filename == "config.yml"
    assert settings.ghe_url == "https://ghe.example.com"
    assert settings.rest_url == "https://ghe.example.com/api/v3"
    assert settings.graphql_url == "https://ghe.example.com/api/graphql"
    assert settings.repository_html_url("org", "repo1") == "https://ghe.example.com/org/repo1"
    assert settings.token == "tok"


def test_resolve_settings_reads_env_file(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("GHE_URL=https://ghe.local\nGITHUB_TOKEN=file-token\n", encoding="utf-8")
    clean_env.setenv("LOCAL_ENV_FILE", str(env_file))
    settings = config.resolve_settings(config.parse_args(["config.yml"]))
    assert settings.ghe_url == "https://ghe.local"
    assert settings.token == "file-token"


@pytest.mark.parametrize("missing", ["GHE_URL", "GITHUB_TOKEN"])
def test_resolve_settings_missing_env_is_fatal(clean_env, missing):
    clean_env.setenv("GHE_URL", "https://ghe.example.com")
    clean_env.setenv("GITHUB_TOKEN", "tok")
    clean_env.delenv(missing)
    with pytest.raises(ConfigError, match=missing):
        config.resolve_settings(config.parse_args(["config.yml"]))


def test_resolve_settings_rejects_blank_filename(clean_env):
    clean_env.setenv("GHE_URL", "https://ghe.example.com")
    clean_env.setenv("GITHUB_TOKEN", "tok")
    with pytest.raises(ConfigError):
        config.resolve_settings(config.parse_args(["  "]))


def test_negative_delay_is_clamped(clean_env):
    clean_env.setenv("GHE_URL", "https://ghe.example.com")
    clean_env.setenv("GITHUB_TOKEN", "tok")
    settings = config.resolve_settings(config.parse_args(["f", "--delay", "-3"]))
    assert settings.delay == 0.0
