# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Dependency injection: HTTP client and service singletons."""
import random
from typing import Optional

import httpx
from fastapi import Depends, Header, Query

from app.core.config import Settings, settings
from app.services.auth_service import AuthService
from app.services.deploy_service import DeployService
from app.services.liveness import LivenessProber
from app.services.name_resolver import NameResolver
from app.services.project_service import ProjectService
from app.services.telegram_notifier import TelegramNotifier
from app.services.vercel_client import VercelClient

_http_client: httpx.AsyncClient | None = None
_deploy_service: DeployService | None = None
_project_service: ProjectService | None = None
_auth_service = AuthService(settings.ACCESS_KEY)


def build_services(http_client: httpx.AsyncClient, cfg: Settings = settings,
                   rng: Optional[random.Random] = None) -> tuple[DeployService, ProjectService]:
    prober = LivenessProber(http_client, timeout=cfg.PROBE_TIMEOUT)
    resolver = NameResolver(prober, cfg.HOSTING_DOMAIN, rng=rng)
    vercel = VercelClient(http_client, cfg.VERCEL_API_URL, cfg.VERCEL_TOKEN)
    notifier = TelegramNotifier(
        http_client, cfg.TELEGRAM_BOT_TOKEN, cfg.TELEGRAM_CHAT_IDS,
        api_url=cfg.TELEGRAM_API_URL, timezone=cfg.NOTIFY_TIMEZONE,
    )
    return DeployService(resolver, vercel, notifier, cfg.VERCEL_TOKEN), ProjectService(vercel)


def init_http_client():
    global _http_client, _deploy_service, _project_service
    _http_client = httpx.AsyncClient(timeout=settings.PROVIDER_TIMEOUT)
    _deploy_service, _project_service = build_services(_http_client)


async def close_http_client():
    global _http_client
    if _http_client:
        await _http_client.aclose()
        _http_client = None


def get_deploy_service() -> DeployService:
    assert _deploy_service is not None
    return _deploy_service


def get_project_service() -> ProjectService:
    assert _project_service is not None
    return _project_service


def get_auth_service() -> AuthService:
    return _auth_service


def require_access_key(
    x_access_key: Optional[str] = Header(default=None),
    key: Optional[str] = Query(default=None),
    auth: AuthService = Depends(get_auth_service),
) -> None:
    auth.require(x_access_key or key)
