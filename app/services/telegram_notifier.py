# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Best-effort Telegram fan-out of deployment events."""
import asyncio
from datetime import datetime, timezone as dt_timezone, tzinfo
from typing import List, Optional, Sequence
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import httpx

from app.core.logging import get_logger
from app.metrics import TELEGRAM_NOTIFICATIONS

logger = get_logger(__name__)

MESSAGE_TEMPLATE = (
    "TERDETEKSI DEPLOY WEB\n"
    "File : {filename}\n"
    "Link : {url}\n"
    "Jam  : {timestamp}"
)


def format_timestamp(moment: datetime) -> str:
    """Indonesian locale short form, e.g. ``5/1/2026, 14.05.03``."""
    return f"{moment.day}/{moment.month}/{moment.year}, {moment:%H.%M.%S}"


class TelegramNotifier:
    def __init__(self, http_client: httpx.AsyncClient, bot_token: str,
                 chat_ids: Sequence[str], api_url: str = "https://api.telegram.org",
                 timezone: str = "Asia/Jakarta", timeout: float = 5.0):
        self._client = http_client
        self._bot_token = bot_token
        self._chat_ids = tuple(chat_ids)
        self._api_url = api_url.rstrip("/")
        self._timezone = timezone
        self._tz: Optional[tzinfo] = None
        self._timeout = timeout

    @property
    def enabled(self) -> bool:
        return bool(self._bot_token and self._chat_ids)

    def _zone(self) -> tzinfo:
        # resolved on first use so a bad NOTIFY_TIMEZONE never blocks startup
        if self._tz is None:
            try:
                self._tz = ZoneInfo(self._timezone)
            except (ZoneInfoNotFoundError, ValueError):
                logger.warning("Unknown timezone %r, timestamps will use UTC", self._timezone)
                self._tz = dt_timezone.utc
        return self._tz

    def render(self, filename: str, url: str, moment: Optional[datetime] = None) -> str:
        moment = moment or datetime.now(self._zone())
        return MESSAGE_TEMPLATE.format(
            filename=filename, url=url, timestamp=format_timestamp(moment),
        )

    async def _send(self, chat_id: str, text: str) -> str:
        try:
            resp = await self._client.post(
                f"{self._api_url}/bot{self._bot_token}/sendMessage",
                json={"chat_id": chat_id, "text": text},
                timeout=self._timeout,
            )
        except Exception as exc:
            logger.warning("Telegram delivery to %s failed: %s", chat_id, exc)
            TELEGRAM_NOTIFICATIONS.labels(status="failed").inc()
            return "failed"
        if resp.status_code < 300:
            TELEGRAM_NOTIFICATIONS.labels(status="sent").inc()
            logger.info("Telegram delivered to %s (status=%s)", chat_id, resp.status_code)
            return "sent"
        TELEGRAM_NOTIFICATIONS.labels(status="failed").inc()
        logger.warning("Telegram returned %s for chat %s", resp.status_code, chat_id)
        return "failed"

    async def notify(self, filename: str, url: str) -> List[str]:
        """Send to every chat id independently; one bad recipient never stops the rest.

        Returns the per-recipient statuses in configuration order.
        """
        if not self.enabled:
            return []
        text = self.render(filename, url)
        return list(await asyncio.gather(*(self._send(chat_id, text) for chat_id in self._chat_ids)))
