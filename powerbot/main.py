from __future__ import annotations

import asyncio
import logging

from powerbot.config import Settings, load_settings
from powerbot.notifiers.dispatcher import Dispatcher
from powerbot.notifiers.telegram import TelegramNotifier
from powerbot.observability.metrics import Metrics
from powerbot.parsers.loe_schedule_parser import LoeScheduleParser
from powerbot.providers.registry import build_provider
from powerbot.runner.worker import OutageWorker
from powerbot.storage.repository import StateRepository


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def build_dispatcher(settings: Settings) -> Dispatcher:
    if not settings.notifier_enabled:
        logging.getLogger("powerbot.notify").warning(
            "NOTIFIER_TOKEN or NOTIFIER_CHAT_ID not set, skipping Telegram posts"
        )
        return Dispatcher(notifier=None, chat_id=None)

    notifier = TelegramNotifier(
        token=settings.notifier_token,
        api_base=settings.notifier_api_base,
        parse_mode=settings.notifier_parse_mode,
        timeout_seconds=settings.notifier_timeout_seconds,
    )
    return Dispatcher(notifier=notifier, chat_id=settings.notifier_chat_id)


def build_worker(settings: Settings) -> OutageWorker:
    return OutageWorker(
        settings=settings,
        provider=build_provider(settings),
        parser=LoeScheduleParser(),
        repository=StateRepository(settings.state_path),
        dispatcher=build_dispatcher(settings),
        metrics=Metrics(),
    )


def main(settings: Settings | None = None) -> int:
    app_settings = settings or load_settings()
    configure_logging(app_settings.effective_log_level)

    worker = build_worker(app_settings)
    asyncio.run(worker.run_once())
    return 0
