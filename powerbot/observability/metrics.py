from __future__ import annotations

from datetime import datetime, timezone

from prometheus_client import (
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram,
    write_to_textfile,
)


class Metrics:
    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self.registry = registry or CollectorRegistry(auto_describe=True)
        self.runs_total = Counter(
            "powerbot_runs_total",
            "Total runs by status",
            labelnames=("status",),
            registry=self.registry,
        )
        self.run_duration_seconds = Histogram(
            "powerbot_run_duration_seconds",
            "Duration of runs in seconds",
            registry=self.registry,
        )
        self.notifications_total = Counter(
            "powerbot_notifications_total",
            "Schedule notifications by outcome",
            labelnames=("outcome",),
            registry=self.registry,
        )
        self.tracked_days = Gauge(
            "powerbot_tracked_days",
            "Days kept in the persisted state after the last run",
            registry=self.registry,
        )
        self.last_success_epoch = Gauge(
            "powerbot_last_success_epoch_seconds",
            "Unix timestamp of the last successful run",
            registry=self.registry,
        )

    def mark_run_status(self, status: str) -> None:
        self.runs_total.labels(status=status).inc()

    def mark_notification(self, outcome: str) -> None:
        self.notifications_total.labels(outcome=outcome).inc()

    def mark_run_success(self, finished_at_utc: datetime, tracked_days: int) -> None:
        self.last_success_epoch.set(finished_at_utc.astimezone(timezone.utc).timestamp())
        self.tracked_days.set(tracked_days)

    def write_textfile(self, path: str) -> None:
        write_to_textfile(path, self.registry)
