# type: ignore
"""Shared fixtures: a fake Vercel / Telegram / *.vercel.app backend for httpx."""
import json

import httpx
import pytest

from app.core.config import Settings
from app.services.name_resolver import SUFFIX_LENGTHS

TEST_SETTINGS = Settings(
    VERCEL_TOKEN="test-token",
    TELEGRAM_BOT_TOKEN="bot-token",
    TELEGRAM_CHAT_IDS=("111", "222"),
)


class FakeHosting:
    """Answers every outbound call the service makes, and records them.

    ``live`` holds subdomain labels that answer 200 to a HEAD probe.
    """

    def __init__(self):
        self.live = set()
        self.create_status = 200
        self.deploy_status = 200
        self.deploy_body = {"id": "dpl_123", "url": "site-abc.vercel.app", "readyState": "QUEUED"}
        self.list_status = 200
        self.list_body = {"projects": [{"id": "prj_1", "name": "hello"}]}
        self.delete_status = 204
        self.delete_body = None
        self.telegram_down = set()
        self.calls = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        host = request.url.host
        path = request.url.path
        body = json.loads(request.content) if request.content else None
        self.calls.append({"method": request.method, "host": host, "path": path,
                           "json": body, "headers": request.headers})

        if host.endswith(".vercel.app"):
            label = host[: -len(".vercel.app")]
            return httpx.Response(200 if label in self.live else 404)

        if host == "api.telegram.org":
            if body["chat_id"] in self.telegram_down:
                raise httpx.ConnectError("telegram unreachable", request=request)
            return httpx.Response(200, json={"ok": True})

        if request.method == "POST" and path == "/v9/projects":
            if self.create_status >= 300:
                return httpx.Response(self.create_status, json={
                    "error": {"code": "conflict", "message": "Project already exists"},
                })
            return httpx.Response(self.create_status, json={"id": "prj_new", "name": body["name"]})
        if request.method == "POST" and path == "/v13/deployments":
            return httpx.Response(self.deploy_status, json=self.deploy_body)
        if request.method == "GET" and path == "/v9/projects":
            return httpx.Response(self.list_status, json=self.list_body)
        if request.method == "DELETE" and path.startswith("/v9/projects/"):
            if self.delete_body is None:
                return httpx.Response(self.delete_status)
            return httpx.Response(self.delete_status, json=self.delete_body)
        return httpx.Response(404, json={"error": {"message": "unexpected route"}})

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    def calls_to(self, host: str):
        return [c for c in self.calls if c["host"] == host]

    @property
    def probes(self):
        return [c["host"] for c in self.calls if c["method"] == "HEAD"]


class ScriptedRandom:
    """Stands in for random.Random: fixed suffix length, letters from a script."""

    def __init__(self, letters: str = "abcdefghijkl", length: int = 3):
        self._letters = iter(letters)
        self._length = length

    def choice(self, seq):
        if tuple(seq) == SUFFIX_LENGTHS:
            return self._length
        return next(self._letters)


@pytest.fixture
def hosting():
    return FakeHosting()


@pytest.fixture
def settings_for_tests():
    return TEST_SETTINGS


@pytest.fixture
def scripted_rng():
    return ScriptedRandom
