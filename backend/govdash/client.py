"""HTTP client for the persistence service's REST API.

Responses come wrapped in an envelope::

    {"success": true, "data": ..., "meta": {...}}
    {"success": false, "error": {"code": "...", "message": "..."}}

The client unwraps ``data`` and turns failures into ``BackendError``.
"""
from typing import Any

import httpx
import structlog
from fastapi import Request

from govdash.config import Settings, settings

logger = structlog.get_logger()


class BackendError(Exception):
    def __init__(self, message: str, status_code: int = 502, error_code: str | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code


def build_params(params: dict | None) -> dict:
    """Drop unset filters (None or empty string) from query parameters."""
    if not params:
        return {}
    return {k: v for k, v in params.items() if v is not None and v != ""}


def extract_data(payload: Any) -> Any:
    if not isinstance(payload, dict):
        return payload
    if payload.get("success"):
        return payload.get("data")
    # Older endpoints return data without the success flag
    if "data" in payload:
        return payload["data"]
    error = payload.get("error") or {}
    raise BackendError(
        error.get("message") or "Unknown API error",
        error_code=error.get("code"),
    )


def _error_from_response(response: httpx.Response) -> BackendError:
    message, code = "Request failed", None
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict):
            message = error.get("message") or message
            code = error.get("code")
        elif body.get("message"):
            message = body["message"]
    return BackendError(message, status_code=response.status_code, error_code=code)


def create_http_client(config: Settings = settings, transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=config.api_base_url,
        timeout=httpx.Timeout(config.api_timeout, connect=10.0),
        headers={"Content-Type": "application/json", "Accept": "application/json"},
        transport=transport,
    )


class BackendClient:
    def __init__(self, http: httpx.AsyncClient, authorization: str | None = None):
        self.http = http
        self.authorization = authorization

    @classmethod
    def from_settings(cls, config: Settings = settings, transport: httpx.AsyncBaseTransport | None = None) -> "BackendClient":
        token = config.api_token
        return cls(create_http_client(config, transport), f"Bearer {token}" if token else None)

    def with_authorization(self, authorization: str | None) -> "BackendClient":
        """Same connection pool with the caller's credentials only.

        ``None`` sends no Authorization header; the service token is kept
        for server-initiated calls such as the startup category fetcher.
        """
        return BackendClient(self.http, authorization)

    async def request(self, method: str, path: str, *, params: dict | None = None, json: Any = None) -> httpx.Response:
        headers = {"Authorization": self.authorization} if self.authorization else None
        try:
            response = await self.http.request(method, path, params=build_params(params), json=json, headers=headers)
        except httpx.HTTPError as e:
            logger.error("backend_request_failed", method=method, path=path, error=str(e))
            raise BackendError("Persistence service unavailable") from e
        if response.is_error:
            err = _error_from_response(response)
            logger.warning(
                "backend_error_response", method=method, path=path,
                status=response.status_code, error=err.message,
            )
            raise err
        return response

    async def get(self, path: str, params: dict | None = None) -> Any:
        return extract_data((await self.request("GET", path, params=params)).json())

    async def get_page(self, path: str, params: dict | None = None) -> tuple[list, dict]:
        """GET a paginated collection, returning (items, meta)."""
        payload = (await self.request("GET", path, params=params)).json()
        items = extract_data(payload)
        meta = (payload.get("meta") or {}) if isinstance(payload, dict) else {}
        return (items if isinstance(items, list) else []), meta

    async def post(self, path: str, json: Any = None) -> Any:
        return extract_data((await self.request("POST", path, json=json)).json())

    async def put(self, path: str, json: Any = None) -> Any:
        return extract_data((await self.request("PUT", path, json=json)).json())

    async def patch(self, path: str, json: Any = None) -> Any:
        return extract_data((await self.request("PATCH", path, json=json)).json())

    async def delete(self, path: str) -> None:
        await self.request("DELETE", path)

    async def aclose(self) -> None:
        await self.http.aclose()


def get_backend(request: Request) -> BackendClient:
    backend: BackendClient = request.app.state.backend
    return backend.with_authorization(request.headers.get("authorization"))
