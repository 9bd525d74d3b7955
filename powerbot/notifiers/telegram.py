from __future__ import annotations

from dataclasses import dataclass

import httpx

from powerbot.notifiers.base import DeliveryError

_MAX_ERROR_BODY = 1024


@dataclass
class TelegramNotifier:
    token: str
    api_base: str = "https://api.telegram.org"
    parse_mode: str = "Markdown"
    timeout_seconds: int = 20

    @property
    def send_message_url(self) -> str:
        return f"{self.api_base.rstrip('/')}/bot{self.token}/sendMessage"

    async def send(self, chat_id: str, text: str) -> None:
        form = {"chat_id": chat_id, "text": text, "parse_mode": self.parse_mode}
        timeout = httpx.Timeout(self.timeout_seconds)

        try:
            async with httpx.AsyncClient(timeout=timeout) as client:
                response = await client.post(self.send_message_url, data=form)
        except httpx.HTTPError as exc:
            # The URL embeds the bot token; keep it out of the message.
            raise DeliveryError(f"Telegram request failed: {type(exc).__name__}") from exc

        if response.status_code != 200:
            body = response.text[:_MAX_ERROR_BODY]
            raise DeliveryError(f"Telegram status {response.status_code}: {body}")
