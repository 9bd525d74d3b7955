from __future__ import annotations

from powerbot.config import DEFAULT_STATE_PATH, Settings, load_settings

_ENV_KEYS = (
    "STATE_PATH",
    "TEST_FIXTURE_PATH",
    "NOTIFIER_TOKEN",
    "NOTIFIER_CHAT_ID",
    "DEBUG",
    "LOG_LEVEL",
    "PROVIDER_TIMEOUT_SECONDS",
    "METRICS_TEXTFILE_PATH",
)


def _clear_env(monkeypatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults(monkeypatch) -> None:
    _clear_env(monkeypatch)

    settings = load_settings()

    assert settings.state_path == DEFAULT_STATE_PATH
    assert settings.test_fixture_path is None
    assert settings.notifier_enabled is False
    assert settings.effective_log_level == "INFO"
    assert settings.metrics_textfile_path is None


def test_environment_overrides(monkeypatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("STATE_PATH", "/tmp/powerbot/state.json")
    monkeypatch.setenv("TEST_FIXTURE_PATH", "/tmp/page.html")
    monkeypatch.setenv("NOTIFIER_TOKEN", "123:abc")
    monkeypatch.setenv("NOTIFIER_CHAT_ID", "-1001")
    monkeypatch.setenv("DEBUG", "1")
    monkeypatch.setenv("PROVIDER_TIMEOUT_SECONDS", "7")

    settings = load_settings()

    assert settings.state_path == "/tmp/powerbot/state.json"
    assert settings.test_fixture_path == "/tmp/page.html"
    assert settings.notifier_enabled is True
    assert settings.effective_log_level == "DEBUG"
    assert settings.provider_timeout_seconds == 7


def test_notifier_needs_both_token_and_chat() -> None:
    assert Settings(notifier_token="123:abc").notifier_enabled is False
    assert Settings(notifier_chat_id="-1001").notifier_enabled is False


def test_blank_values_count_as_unset(monkeypatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("STATE_PATH", "")
    monkeypatch.setenv("NOTIFIER_TOKEN", "  ")

    settings = load_settings()

    assert settings.state_path == DEFAULT_STATE_PATH
    assert settings.notifier_token is None
