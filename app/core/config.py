# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Centralised settings, read from env vars once and immutable afterwards."""
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple

from dotenv import load_dotenv

load_dotenv()


def _split_ids(raw: str) -> Tuple[str, ...]:
    return tuple(part.strip() for part in raw.split(",") if part.strip())


@dataclass(frozen=True)
class Settings:
    SERVICE_NAME: str = "html-deployer"
    SERVICE_VERSION: str = "1.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    # Hosting provider
    VERCEL_TOKEN: str = ""
    VERCEL_API_URL: str = "https://api.vercel.com"
    HOSTING_DOMAIN: str = "vercel.app"
    PROVIDER_TIMEOUT: float = 30.0
    PROBE_TIMEOUT: float = 5.0

    # Admin gate
    ACCESS_KEY: str = ""

    # Telegram
    TELEGRAM_BOT_TOKEN: str = ""
    TELEGRAM_CHAT_IDS: Tuple[str, ...] = field(default_factory=tuple)
    TELEGRAM_API_URL: str = "https://api.telegram.org"
    NOTIFY_TIMEZONE: str = "Asia/Jakarta"

    # Rate limiting on POST /deploy
    DEPLOY_RATE_LIMIT: int = 15
    DEPLOY_RATE_WINDOW: int = 15 * 60

    @property
    def notifications_enabled(self) -> bool:
        return bool(self.TELEGRAM_BOT_TOKEN and self.TELEGRAM_CHAT_IDS)

    @property
    def rate_limit_enabled(self) -> bool:
        return self.DEPLOY_RATE_LIMIT > 0

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            PORT=int(env.get("PORT", "3000")),
            LOG_LEVEL=env.get("LOG_LEVEL", "INFO").upper(),
            VERCEL_TOKEN=env.get("VERCEL_TOKEN", ""),
            VERCEL_API_URL=env.get("VERCEL_API_URL", "https://api.vercel.com").rstrip("/"),
            HOSTING_DOMAIN=env.get("HOSTING_DOMAIN", "vercel.app"),
            PROVIDER_TIMEOUT=float(env.get("PROVIDER_TIMEOUT", "30")),
            PROBE_TIMEOUT=float(env.get("PROBE_TIMEOUT", "5")),
            ACCESS_KEY=env.get("ACCESS_KEY", ""),
            TELEGRAM_BOT_TOKEN=env.get("TELEGRAM_BOT_TOKEN", ""),
            TELEGRAM_CHAT_IDS=_split_ids(env.get("TELEGRAM_CHAT_IDS", "")),
            TELEGRAM_API_URL=env.get("TELEGRAM_API_URL", "https://api.telegram.org").rstrip("/"),
            NOTIFY_TIMEZONE=env.get("NOTIFY_TIMEZONE", "Asia/Jakarta"),
            DEPLOY_RATE_LIMIT=int(env.get("DEPLOY_RATE_LIMIT", "15")),
            DEPLOY_RATE_WINDOW=int(env.get("DEPLOY_RATE_WINDOW", str(15 * 60))),
        )


settings = Settings.from_env()
