from __future__ import annotations

from datetime import date

import httpx
import pytest

from powerbot.core.models import ChangeKind, DayComparison
from powerbot.notifiers.base import DeliveryError
from powerbot.notifiers.dispatcher import DeliveryOutcome, Dispatcher
from powerbot.notifiers.telegram import TelegramNotifier
from tests.helpers import day_record


class _DummyResponse:
    def __init__(self, status_code: int, text: str = "") -> None:
        self.status_code = status_code
        self.text = text


class _DummyClient:
    def __init__(self, response: _DummyResponse | Exception, capture: dict) -> None:
        self._response = response
        self._capture = capture

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False

    async def post(self, url: str, data: dict | None = None) -> _DummyResponse:
        self._capture["url"] = url
        self._capture["data"] = data
        if isinstance(self._response, Exception):
            raise self._response
        return self._response


def _patch_client(monkeypatch, response, capture: dict) -> None:
    def _client_factory(*args, **kwargs):
        return _DummyClient(response=response, capture=capture)

    monkeypatch.setattr("powerbot.notifiers.telegram.httpx.AsyncClient", _client_factory)


class _RecordingNotifier:
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.sent: list[tuple[str, str]] = []

    async def send(self, chat_id: str, text: str) -> None:
        self.sent.append((chat_id, text))
        if self.fail:
            raise DeliveryError("telegram status 502")


@pytest.mark.asyncio
async def test_telegram_posts_form(monkeypatch) -> None:
    capture: dict = {}
    _patch_client(monkeypatch, _DummyResponse(200, '{"ok": true}'), capture)

    notifier = TelegramNotifier(token="123:abc", api_base="https://tg.example.test/")
    await notifier.send("-1001", "*графік на 01.03*")

    assert capture["url"] == "https://tg.example.test/bot123:abc/sendMessage"
    assert capture["data"] == {
        "chat_id": "-1001",
        "text": "*графік на 01.03*",
        "parse_mode": "Markdown",
    }


@pytest.mark.asyncio
async def test_telegram_non_200_raises(monkeypatch) -> None:
    _patch_client(monkeypatch, _DummyResponse(400, "x" * 5000), {})

    with pytest.raises(DeliveryError) as excinfo:
        await TelegramNotifier(token="123:abc").send("-1001", "text")

    assert "400" in str(excinfo.value)
    assert len(str(excinfo.value)) < 1100


@pytest.mark.asyncio
async def test_telegram_transport_error_hides_token(monkeypatch) -> None:
    _patch_client(monkeypatch, httpx.ConnectError("boom https://api.telegram.org/bot123:abc"), {})

    with pytest.raises(DeliveryError) as excinfo:
        await TelegramNotifier(token="123:abc").send("-1001", "text")

    assert "123:abc" not in str(excinfo.value)


@pytest.mark.asyncio
async def test_dispatcher_sends_formatted_update() -> None:
    notifier = _RecordingNotifier()
    dispatcher = Dispatcher(notifier=notifier, chat_id="-1001")
    day = day_record(date(2025, 3, 1), power="Електроенергії немає з 08:00 до 10:00")

    outcome = await dispatcher.announce(day, DayComparison(kind=ChangeKind.CHANGED, worsened=True))

    assert outcome is DeliveryOutcome.SENT
    assert notifier.sent[0][0] == "-1001"
    assert notifier.sent[0][1].startswith("*upd. 😩 на 01.03*")


@pytest.mark.asyncio
async def test_dispatcher_swallows_delivery_error() -> None:
    dispatcher = Dispatcher(notifier=_RecordingNotifier(fail=True), chat_id="-1001")
    day = day_record(date(2025, 3, 1), power="буде!!!!")

    assert await dispatcher.announce(day, DayComparison(kind=ChangeKind.UNSEEN)) is DeliveryOutcome.FAILED


@pytest.mark.asyncio
async def test_dispatcher_without_notifier_skips() -> None:
    dispatcher = Dispatcher(notifier=None, chat_id=None)
    day = day_record(date(2025, 3, 1), power="буде!!!!")

    assert dispatcher.enabled is False
    assert await dispatcher.announce(day, DayComparison(kind=ChangeKind.UNSEEN)) is DeliveryOutcome.SKIPPED
