from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

import httpx

from powerbot.core.models import FetchResult
from powerbot.providers.errors import FetchError

_logger = logging.getLogger("powerbot.provider")


def _as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def extract_raw_html(payload: Any) -> str | None:
    """Return the first non-empty ``rawHtml`` across ``hydra:member[].menuItems[]``."""
    if not isinstance(payload, dict):
        return None

    for member in _as_list(payload.get("hydra:member")):
        if not isinstance(member, dict):
            continue
        for item in _as_list(member.get("menuItems")):
            if not isinstance(item, dict):
                continue
            raw_html = item.get("rawHtml")
            if isinstance(raw_html, str) and raw_html:
                _logger.debug(
                    "Extracted rawHtml from menu item %r (%d chars)",
                    item.get("name"),
                    len(raw_html),
                )
                return raw_html

    return None


def content_from_body(body: str, *, source: str) -> str:
    """Unwrap a JSON menus envelope, or pass raw hypertext through unchanged."""
    if not body.lstrip().startswith(("{", "[")):
        if not body.strip():
            raise FetchError(f"Empty content from {source}")
        return body

    try:
        payload = json.loads(body)
    except ValueError as exc:
        _logger.debug("Body from %s is not JSON (%s), treating it as hypertext", source, exc)
        return body

    raw_html = extract_raw_html(payload)
    if raw_html is None:
        raise FetchError(f"No rawHtml found in API response from {source}")
    return raw_html


@dataclass
class LoeMenusProvider:
    url: str
    timeout_seconds: int = 20

    async def fetch_latest(self) -> FetchResult:
        if not self.url:
            raise FetchError("PROVIDER_URL is empty")

        _logger.debug("Fetching from URL: %s", self.url)
        timeout = httpx.Timeout(self.timeout_seconds)
        try:
            async with httpx.AsyncClient(timeout=timeout) as client:
                response = await client.get(self.url)
        except httpx.HTTPError as exc:
            raise FetchError(f"Request to {self.url} failed: {exc}") from exc

        if response.status_code != 200:
            raise FetchError(f"Unexpected status {response.status_code} from {self.url}")

        body = response.text
        _logger.debug("Received %d chars from API", len(body))
        return FetchResult(raw_content=content_from_body(body, source=self.url), source=self.url)
