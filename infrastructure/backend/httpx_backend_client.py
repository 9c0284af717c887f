# infrastructure/backend/httpx_backend_client.py
from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from application.exceptions import NetworkFailure
from application.ports.backend_client import BackendReply, ExecutionBackendPort

CREATE_PATH = "/api/requests"
EXECUTE_PATH = "/api/requests/{id}/execute"


def _reply(resp: httpx.Response) -> BackendReply:
    payload: Optional[Any] = None
    if resp.content:
        try:
            payload = resp.json()
        except ValueError:
            payload = None
    return BackendReply(status=resp.status_code, payload=payload)


class HttpxBackendClient(ExecutionBackendPort):
    """
    Execution backend reached over JSON/HTTP.

    Pass client= to share a configured httpx.AsyncClient (tests use a
    MockTransport or an ASGI transport); otherwise one is created lazily.
    """

    def __init__(
        self,
        base_url: str,
        timeout_sec: Optional[float] = 30,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout_sec
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self) -> "HttpxBackendClient":
        self._get_client()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout)
        return self._client

    async def create_request(self, payload: Dict[str, Any]) -> BackendReply:
        return await self._post(CREATE_PATH, json=payload)

    async def execute_request(self, request_id: str) -> BackendReply:
        return await self._post(EXECUTE_PATH.format(id=request_id))

    async def _post(self, path: str, json: Optional[Dict[str, Any]] = None) -> BackendReply:
        client = self._get_client()
        try:
            resp = await client.post(path, json=json)
        except httpx.TimeoutException as exc:
            raise NetworkFailure(f"Request to {path} timed out") from exc
        except httpx.HTTPError as exc:
            raise NetworkFailure(f"Request to {path} failed: {exc}") from exc
        return _reply(resp)

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
