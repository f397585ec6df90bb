# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""HTTP client for the Vercel REST API (projects and deployments)."""
import base64
import json
from urllib.parse import quote
from typing import Any, Dict, List, Optional

import httpx

from app.core.errors import ProviderError
from app.core.logging import get_logger

logger = get_logger(__name__)

PROJECTS_PATH = "/v9/projects"
DEPLOYMENTS_PATH = "/v13/deployments"


def _json_or_none(resp: httpx.Response) -> Optional[Any]:
    try:
        return resp.json()
    except ValueError:
        return None


def _error_message(body: Optional[Any]) -> Optional[str]:
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict):
            return error.get("message")
    return None


class VercelClient:
    def __init__(self, http_client: httpx.AsyncClient, api_url: str, token: str):
        self._client = http_client
        self._api_url = api_url.rstrip("/")
        self._token = token

    def _headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self._token}"}

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            return await self._client.request(
                method, f"{self._api_url}{path}", headers=self._headers(), **kwargs,
            )
        except httpx.HTTPError as exc:
            logger.error("Vercel %s %s unreachable: %s", method, path, exc)
            raise ProviderError(f"Vercel tidak dapat dihubungi: {exc}") from exc

    async def create_project(self, name: str) -> Dict[str, Any]:
        resp = await self._request("POST", PROJECTS_PATH, json={"name": name})
        if not resp.is_success:
            logger.error("Project creation for %r failed (status=%s)", name, resp.status_code)
            raise ProviderError(f"Gagal bikin project: {resp.text}", resp.status_code)
        return _json_or_none(resp) or {}

    async def create_deployment(self, name: str, content: bytes,
                                filename: str = "index.html") -> Dict[str, Any]:
        payload = {
            "name": name,
            "target": "production",
            "files": [{
                "file": filename,
                "data": base64.b64encode(content).decode("ascii"),
                "encoding": "base64",
            }],
            "projectSettings": {"framework": None},
        }
        resp = await self._request("POST", DEPLOYMENTS_PATH, json=payload)
        body = _json_or_none(resp)
        if body is None:
            logger.error("Deployment for %r returned non-JSON body (status=%s)", name, resp.status_code)
            raise ProviderError(resp.text or f"Deploy gagal ({resp.status_code})", resp.status_code)
        # Vercel can answer 2xx with an error object in the body
        if not resp.is_success or (isinstance(body, dict) and body.get("error")):
            logger.error("Deployment for %r failed (status=%s)", name, resp.status_code)
            raise ProviderError(json.dumps(body), resp.status_code)
        return body

    async def list_projects(self) -> List[Dict[str, Any]]:
        resp = await self._request("GET", PROJECTS_PATH)
        body = _json_or_none(resp)
        if not resp.is_success:
            raise ProviderError(_error_message(body) or "Gagal ambil daftar", resp.status_code)
        if not isinstance(body, dict):
            return []
        return body.get("projects") or []

    async def delete_project(self, name: str) -> None:
        resp = await self._request("DELETE", f"{PROJECTS_PATH}/{quote(name, safe='')}")
        if resp.status_code == 204:
            return
        body = _json_or_none(resp)
        raise ProviderError(
            _error_message(body) or f"Hapus gagal ({resp.status_code})", resp.status_code,
        )
