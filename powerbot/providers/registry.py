from __future__ import annotations

from powerbot.config import Settings
from powerbot.providers.base import ScheduleContentProvider
from powerbot.providers.fixture import FixtureProvider
from powerbot.providers.loe_api import LoeMenusProvider


def build_provider(settings: Settings) -> ScheduleContentProvider:
    if settings.test_fixture_path:
        return FixtureProvider(path=settings.test_fixture_path)

    return LoeMenusProvider(
        url=settings.provider_url,
        timeout_seconds=settings.provider_timeout_seconds,
    )
