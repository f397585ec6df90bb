# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Admin pass-through: list and delete projects on the provider."""
from typing import Any, Dict, List

from app.core.errors import ProviderError
from app.core.logging import get_logger
from app.metrics import ADMIN_OPERATIONS
from app.services.vercel_client import VercelClient

logger = get_logger(__name__)


class ProjectService:
    def __init__(self, vercel: VercelClient):
        self._vercel = vercel

    async def list_projects(self) -> List[Dict[str, Any]]:
        try:
            projects = await self._vercel.list_projects()
        except ProviderError as exc:
            ADMIN_OPERATIONS.labels(operation="list", status="failed").inc()
            logger.error("Listing projects failed: %s", exc.message)
            raise
        ADMIN_OPERATIONS.labels(operation="list", status="ok").inc()
        return projects

    async def delete_project(self, name: str) -> str:
        try:
            await self._vercel.delete_project(name)
        except ProviderError as exc:
            ADMIN_OPERATIONS.labels(operation="delete", status="failed").inc()
            logger.error("Deleting project %r failed: %s", name, exc.message)
            raise
        ADMIN_OPERATIONS.labels(operation="delete", status="ok").inc()
        logger.info("Project %r deleted", name)
        return f"Project '{name}' terhapus"
