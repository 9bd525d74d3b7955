from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from time import perf_counter
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from powerbot.config import Settings
from powerbot.core.constants import SECTION_DATE_FORMAT
from powerbot.core.models import DayRecord, PersistedState
from powerbot.detection.change_detector import compare
from powerbot.notifiers.dispatcher import DeliveryOutcome, Dispatcher
from powerbot.observability.metrics import Metrics
from powerbot.parsers.base import ScheduleParser
from powerbot.parsers.errors import ParseError
from powerbot.providers.base import ScheduleContentProvider
from powerbot.providers.errors import FetchError
from powerbot.storage.errors import StateLoadError, StateNotFoundError, StateSaveError
from powerbot.storage.repository import StateRepository, prune


def _utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


@dataclass
class RunReport:
    status: str = "success"
    days_parsed: int = 0
    announced: list[date] = field(default_factory=list)
    delivered: int = 0
    delivery_failures: int = 0
    error: str | None = None


class OutageWorker:
    def __init__(
        self,
        *,
        settings: Settings,
        provider: ScheduleContentProvider,
        parser: ScheduleParser,
        repository: StateRepository,
        dispatcher: Dispatcher,
        metrics: Metrics,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self.settings = settings
        self.provider = provider
        self.parser = parser
        self.repository = repository
        self.dispatcher = dispatcher
        self.metrics = metrics
        self.clock = clock

        self._logger = logging.getLogger("powerbot.run")

    def reference_dates(self, now: datetime) -> list[date]:
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        today = now.astimezone(ZoneInfo(self.settings.timezone)).date()
        return [today, today + timedelta(days=1)]

    async def run_once(self) -> RunReport:
        report = RunReport()
        stage = "config"
        timer_start = perf_counter()

        try:
            reference_dates = self.reference_dates(self.clock())

            stage = "fetch"
            fetch_result = await self.provider.fetch_latest()
            self._logger.debug(
                "Fetched %d chars from %s", len(fetch_result.raw_content), fetch_result.source
            )

            stage = "parse"
            parsed = self.parser.parse(fetch_result.raw_content, reference_dates)
            report.days_parsed = len(parsed)
            self._log_parsed(parsed, reference_dates)

            stage = "compare"
            state = self._load_state()
            for day in parsed:
                await self._process_day(state, day, report)

            stage = "save"
            state = prune(state, reference_dates)
            self.repository.save(state)

            report.status = "success" if report.announced else "no_change"
            self.metrics.mark_run_success(self.clock(), len(state.days))

        except ZoneInfoNotFoundError as exc:
            report.status = "config_error"
            report.error = str(exc)
            self._logger.error("Unknown timezone %r: %s", self.settings.timezone, exc)
        except FetchError as exc:
            report.status = "fetch_error"
            report.error = str(exc)
            self._logger.error("Error fetching: %s", exc)
        except ParseError as exc:
            report.status = "parse_error"
            report.error = str(exc)
            self._logger.error("Parse error: %s", exc)
        except StateSaveError as exc:
            report.status = "save_error"
            report.error = str(exc)
            self._logger.error("State save error: %s", exc)
        except Exception as exc:  # pragma: no cover
            report.status = f"{stage}_error"
            report.error = str(exc)
            self._logger.exception("Unhandled run error")
        finally:
            self.metrics.mark_run_status(report.status)
            self.metrics.run_duration_seconds.observe(perf_counter() - timer_start)
            self._export_metrics()

        return report

    async def _process_day(self, state: PersistedState, day: DayRecord, report: RunReport) -> None:
        comparison = compare(state.find(day.date), day)
        if not comparison.should_announce:
            self._logger.info("Schedule for %s unchanged, skipping", day.date)
            return

        if comparison.changed:
            self._logger.info(
                "Schedule changed for %s (worsened=%s), posting update", day.date, comparison.worsened
            )
        else:
            self._logger.info("New schedule for %s, posting", day.date)

        report.announced.append(day.date)
        outcome = await self.dispatcher.announce(day, comparison)
        if outcome is DeliveryOutcome.SENT:
            report.delivered += 1
        elif outcome is DeliveryOutcome.FAILED:
            report.delivery_failures += 1
        self.metrics.mark_notification(outcome.value)

        # Delivery is best-effort; the state follows the parsed schedule either way.
        state.upsert(day)

    def _load_state(self) -> PersistedState:
        try:
            return self.repository.load()
        except StateNotFoundError as exc:
            self._logger.info("%s, starting with empty state", exc)
        except StateLoadError as exc:
            self._logger.warning("%s, starting with empty state", exc)
        return PersistedState()

    def _log_parsed(self, parsed: list[DayRecord], reference_dates: list[date]) -> None:
        titles = " and ".join(day.strftime(SECTION_DATE_FORMAT) for day in reference_dates)
        self._logger.info("Parsed %d days (looking for %s)", len(parsed), titles)
        if not parsed:
            self._logger.warning("No schedules found for today or tomorrow")
            return

        for day in parsed:
            self._logger.info("Found schedule for %s with %d groups", day.date, len(day.groups))
            for group, record in day.groups.items():
                self._logger.info("  %s => %s (mins=%d)", group, record.text, record.minutes)

    def _export_metrics(self) -> None:
        path = self.settings.metrics_textfile_path
        if not path:
            return
        try:
            self.metrics.write_textfile(path)
        except OSError as exc:
            self._logger.warning("Could not write metrics to %s: %s", path, exc)
