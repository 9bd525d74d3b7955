from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from powerbot.core.models import FetchResult
from powerbot.providers.errors import FetchError
from powerbot.providers.loe_api import content_from_body

_logger = logging.getLogger("powerbot.provider")


@dataclass
class FixtureProvider:
    path: str

    async def fetch_latest(self) -> FetchResult:
        _logger.debug("Reading from test file: %s", self.path)
        try:
            body = Path(self.path).read_text(encoding="utf-8")
        except OSError as exc:
            raise FetchError(f"Could not read fixture {self.path}: {exc}") from exc

        return FetchResult(raw_content=content_from_body(body, source=self.path), source=self.path)
