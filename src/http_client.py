# http_client.py
from __future__ import annotations
import sys, uuid
from typing import Optional
import httpx

class RequestFailed(Exception):
    """
    Opaque transport failure: any non-2xx status or network error.
    Callers are not expected to tell a 404 from a 500 or a dropped connection.
    """

    def __init__(self, method: str, url: str, *, status: Optional[int] = None, req_id: str = "", cause: Exception | None = None):
        self.method = method
        self.url = url
        self.status = status
        self.req_id = req_id
        self.cause = cause
        kind = f"HTTP {status}" if status is not None else "network"
        super().__init__(f"{method} {url} failed: {kind}")

class HttpClient:
    """
    - Reusable async HTTP client with:
      - base_url
      - httpx timeouts
      - single attempt per request (no retry)
      - every failure raised as RequestFailed
    """

    def __init__(
        self,
        base_url: str,
        connect_timeout: float,
        read_timeout: float,
        *,
        default_headers: Optional[dict[str, str]] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = httpx.Timeout(
            connect=connect_timeout,
            read=read_timeout,
            write=read_timeout,
            pool=read_timeout,
        )
        self.default_headers = {"Accept": "application/json", **(default_headers or {})}
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self):
        self._client = httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout, headers=self.default_headers)
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if self._client is not None:
            await self._client.aclose()

    async def request(self, method: str, path: str, **kwargs) -> httpx.Response:
        """
        Issue exactly one request.
        Each request tagged with X-Request-Id for traceability.
        Non-2xx and network errors are logged and raised as RequestFailed.
        """
        assert self._client is not None

        req_id = kwargs.pop("req_id", str(uuid.uuid4()))
        headers = kwargs.pop("headers", {})
        headers.setdefault("X-Request-Id", req_id)
        kwargs["headers"] = headers

        url = self.base_url + path # for logs

        try:
            resp = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            print(f"[req#{req_id}] [error] {method} {url}: network: {e}", file=sys.stderr)
            raise RequestFailed(method, url, req_id=req_id, cause=e) from e

        status = resp.status_code
        if not (200 <= status < 300):
            print(f"[req#{req_id}] [error] {method} {url} returned {status}", file=sys.stderr)
            raise RequestFailed(method, url, status=status, req_id=req_id)

        return resp
