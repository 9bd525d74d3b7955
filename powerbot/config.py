from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_STATE_PATH = "/var/lib/powerbot/state.json"
DEFAULT_PROVIDER_URL = "https://api.loe.lviv.ua/api/menus?page=1&type=photo-grafic"


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    debug: bool = False
    timezone: str = "Europe/Kyiv"

    state_path: str = DEFAULT_STATE_PATH
    test_fixture_path: str | None = None

    provider_url: str = DEFAULT_PROVIDER_URL
    provider_timeout_seconds: int = 20

    notifier_token: str | None = None
    notifier_chat_id: str | None = None
    notifier_api_base: str = "https://api.telegram.org"
    notifier_parse_mode: str = "Markdown"
    notifier_timeout_seconds: int = 20

    metrics_textfile_path: str | None = None

    @property
    def notifier_enabled(self) -> bool:
        return bool(self.notifier_token and self.notifier_chat_id)

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level


def _as_bool(raw: str | None, default: bool) -> bool:
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _as_int(raw: str | None, default: int) -> int:
    if raw is None:
        return default
    return int(raw)


def _as_optional(raw: str | None) -> str | None:
    if raw is None:
        return None
    value = raw.strip()
    return value or None


def load_settings() -> Settings:
    return Settings(
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        debug=_as_bool(os.getenv("DEBUG"), False),
        timezone=os.getenv("TIMEZONE", "Europe/Kyiv"),
        state_path=os.getenv("STATE_PATH") or DEFAULT_STATE_PATH,
        test_fixture_path=_as_optional(os.getenv("TEST_FIXTURE_PATH")),
        provider_url=os.getenv("PROVIDER_URL", DEFAULT_PROVIDER_URL),
        provider_timeout_seconds=_as_int(os.getenv("PROVIDER_TIMEOUT_SECONDS"), 20),
        notifier_token=_as_optional(os.getenv("NOTIFIER_TOKEN")),
        notifier_chat_id=_as_optional(os.getenv("NOTIFIER_CHAT_ID")),
        notifier_api_base=os.getenv("NOTIFIER_API_BASE", "https://api.telegram.org"),
        notifier_parse_mode=os.getenv("NOTIFIER_PARSE_MODE", "Markdown"),
        notifier_timeout_seconds=_as_int(os.getenv("NOTIFIER_TIMEOUT_SECONDS"), 20),
        metrics_textfile_path=_as_optional(os.getenv("METRICS_TEXTFILE_PATH")),
    )
