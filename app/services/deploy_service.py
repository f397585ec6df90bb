# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Deployment pipeline: validate, resolve name, create project, deploy, notify.

Stages run strictly in order with no rollback. A failure after the project
was created leaves an empty project on Vercel; that is accepted.
"""
import html
import os
import time

from app.core.errors import (
    ConfigurationError, DeployerError, DeploymentFailed, ValidationError,
)
from app.core.logging import get_logger
from app.metrics import DEPLOYMENTS_TOTAL, DEPLOYMENT_DURATION, DEPLOYMENT_FAILURES
from app.models.domain import DeploymentRequest, DeploymentResult
from app.services.name_resolver import NameResolver, normalize_name
from app.services.telegram_notifier import TelegramNotifier
from app.services.vercel_client import VercelClient

logger = get_logger(__name__)

ACCEPTED_EXTENSION = ".html"
MIN_DISPLAY_NAME = 2
MAX_DISPLAY_NAME = 30
EXTRA_RESOLVE_ROUNDS = 2

STAGE_VALIDATING = "validating"
STAGE_RESOLVING = "resolving_name"
STAGE_CREATING = "creating_project"
STAGE_DEPLOYING = "deploying"
STAGE_NOTIFYING = "notifying"


def escape_user_text(value: str) -> str:
    """HTML-escape like validator.js: & < > " ' / \\ and backtick."""
    return (html.escape(value, quote=True)
            .replace("/", "&#x2F;").replace("\\", "&#x5C;").replace("`", "&#96;"))


def display_name_for(request: DeploymentRequest) -> str:
    raw = request.display_name or request.original_filename.replace(ACCEPTED_EXTENSION, "", 1)
    return escape_user_text(raw.strip())


class DeployService:
    def __init__(self, resolver: NameResolver, vercel: VercelClient,
                 notifier: TelegramNotifier, provider_token: str):
        self._resolver = resolver
        self._vercel = vercel
        self._notifier = notifier
        self._provider_token = provider_token

    def validate(self, request: DeploymentRequest) -> str:
        """Reject bad uploads before any remote call. Returns the display name."""
        # a zero-byte page is still an upload; only a missing file is rejected
        if request.file_bytes is None or not request.original_filename:
            raise ValidationError("File HTML tidak diterima")
        if os.path.splitext(request.original_filename)[1].lower() != ACCEPTED_EXTENSION:
            raise ValidationError("Hanya menerima file .html")
        if not self._provider_token:
            raise ConfigurationError("token belum di-set")

        display_name = display_name_for(request)
        if not MIN_DISPLAY_NAME <= len(display_name) <= MAX_DISPLAY_NAME:
            raise ValidationError("Nama project 2-30 karakter")
        if not normalize_name(display_name):
            raise ValidationError("Nama project harus mengandung huruf atau angka")
        return display_name

    async def resolve_name(self, display_name: str) -> str:
        name = await self._resolver.resolve(display_name)
        # Narrow race mitigation only: the name may have gone live since resolution.
        for _ in range(EXTRA_RESOLVE_ROUNDS):
            if not await self._resolver.is_taken(name):
                break
            logger.info("Name %r went live before creation, re-resolving", name)
            name = await self._resolver.resolve(display_name)
        return name

    async def _notify(self, filename: str, url: str) -> None:
        try:
            await self._notifier.notify(filename, url)
        except Exception:
            logger.exception("Stage %s failed for %s, deployment kept", STAGE_NOTIFYING, url)

    async def deploy(self, request: DeploymentRequest) -> DeploymentResult:
        start = time.monotonic()
        stage = STAGE_VALIDATING
        try:
            display_name = self.validate(request)

            stage = STAGE_RESOLVING
            name = await self.resolve_name(display_name)

            stage = STAGE_CREATING
            await self._vercel.create_project(name)
            logger.info("Project %r created", name)

            stage = STAGE_DEPLOYING
            await self._vercel.create_deployment(name, request.file_bytes)
            url = self._resolver.url_for(name)
            logger.info("Deployment for %r live at %s", name, url)
        except (ValidationError, ConfigurationError):
            DEPLOYMENTS_TOTAL.labels(status="rejected").inc()
            raise
        except DeployerError as exc:
            DEPLOYMENTS_TOTAL.labels(status="failed").inc()
            DEPLOYMENT_FAILURES.labels(stage=stage).inc()
            logger.error("Deployment failed at stage=%s: %s", stage, exc.message)
            raise DeploymentFailed(stage, exc.message, cause=exc) from exc

        await self._notify(request.original_filename, url)

        DEPLOYMENTS_TOTAL.labels(status="succeeded").inc()
        DEPLOYMENT_DURATION.observe(time.monotonic() - start)
        return DeploymentResult(name=name, url=url)
