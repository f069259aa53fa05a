import json

import httpx
import pytest
from fastapi.testclient import TestClient

from govdash.client import BackendClient
from govdash.main import app

BASE_URL = "http://persistence.test/api/v1"
PREFIX = "/api/v1"
SERVICE_TOKEN = "Bearer service-token"


def envelope(data=None, meta=None) -> dict:
    body = {"success": True, "data": data}
    if meta is not None:
        body["meta"] = meta
    return body


class FakePersistence:
    """In-memory stand-in for the persistence REST API.

    Routes are keyed by (method, path) with the ``/api/v1`` prefix removed;
    every request is recorded in ``calls`` as (method, path, params, body,
    headers).
    """

    def __init__(self):
        self.routes: dict[tuple[str, str], tuple[int, dict]] = {}
        self.calls: list[tuple] = []

    def on(self, method: str, path: str, data=None, *, status: int = 200, meta=None, body=None):
        self.routes[(method, path)] = (status, body if body is not None else envelope(data, meta))

    def fail(self, method: str, path: str, status: int, code: str, message: str):
        self.on(method, path, status=status, body={"success": False, "error": {"code": code, "message": message}})

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path.removeprefix(PREFIX)
        body = json.loads(request.content) if request.content else None
        self.calls.append((request.method, path, dict(request.url.params), body, request.headers))
        route = self.routes.get((request.method, path))
        if route is None:
            return httpx.Response(404, json={"success": False, "error": {"code": "NOT_FOUND", "message": "Not found"}})
        status, payload = route
        return httpx.Response(status, json=payload)

    def requests(self, method: str, path: str) -> list[tuple]:
        return [c for c in self.calls if c[0] == method and c[1] == path]

    def backend(self, authorization: str | None = SERVICE_TOKEN) -> BackendClient:
        http = httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(self.handler))
        return BackendClient(http, authorization)


@pytest.fixture()
def persistence() -> FakePersistence:
    return FakePersistence()


@pytest.fixture()
def client(persistence: FakePersistence):
    """TestClient whose gateway talks to the fake persistence service."""
    app.state.backend = persistence.backend()
    with TestClient(app) as test_client:
        yield test_client
