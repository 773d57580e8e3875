"""
JokoUI HTTP Client

Async JSON API client for components that load data from a backend.

Features:
- Base URL and default headers (JSON content negotiation by default)
- Bearer token helper
- Request and response interceptors (sync or async)
- Whole-request timeout surfaced as ``RequestTimeoutError``
- Non-2xx responses surfaced as ``HttpError`` carrying the response

Clients are plain instances passed to the components that use them; there is
no shared module-level client.
"""

import asyncio
import inspect
import json
import logging
from typing import Any, Callable, Dict, List, Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import HttpError, RequestTimeoutError

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}

Interceptor = Callable[[Any], Any]


class ClientConfig(BaseModel):
    """Connection settings for ``HttpClient``."""
    base_url: str = ""
    default_headers: Dict[str, str] = Field(default_factory=dict)
    timeout: float = 30.0  # seconds

    @field_validator("timeout")
    @classmethod
    def _positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("timeout must be positive")
        return value


class HttpResponse(BaseModel):
    """Result of a completed request."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    ok: bool
    status: int
    status_text: str = ""
    headers: Dict[str, str] = Field(default_factory=dict)
    data: Any = None


class HttpClient:
    """
    HTTP client with interceptors and timeout.

    Args:
        config: Connection settings (defaults to ``ClientConfig()``)
        transport: Optional httpx transport, e.g. ``httpx.MockTransport`` in tests
    """

    def __init__(self, config: Optional[ClientConfig] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        config = config or ClientConfig()
        self.base_url = config.base_url
        self.default_headers: Dict[str, str] = {**DEFAULT_HEADERS, **config.default_headers}
        self.timeout = config.timeout
        self.interceptors: Dict[str, List[Interceptor]] = {"request": [], "response": []}
        self._transport = transport

    def set_base_url(self, url: str) -> None:
        self.base_url = url

    def set_header(self, key: str, value: str) -> None:
        self.default_headers[key] = value

    def set_auth_token(self, token: str) -> None:
        self.default_headers["Authorization"] = f"Bearer {token}"

    def add_request_interceptor(self, interceptor: Interceptor) -> None:
        """Register a callable that receives and may replace the request config dict."""
        self.interceptors["request"].append(interceptor)

    def add_response_interceptor(self, interceptor: Interceptor) -> None:
        """Register a callable that receives and may replace the ``HttpResponse``."""
        self.interceptors["response"].append(interceptor)

    async def request(self, endpoint: str, method: str = "GET", body: Any = None,
                      headers: Optional[Dict[str, str]] = None) -> HttpResponse:
        """
        Send a request and return the parsed response.

        Args:
            endpoint: Path appended to ``base_url``, or an absolute http(s) URL
            method: HTTP method
            body: JSON-serialisable body, ignored for GET
            headers: Extra headers for this request only

        Raises:
            HttpError: for non-2xx responses
            RequestTimeoutError: when ``timeout`` elapses first
        """
        method = method.upper()
        config: Dict[str, Any] = {
            "url": self._build_url(endpoint),
            "method": method,
            "headers": {**self.default_headers, **(headers or {})},
        }
        if body is not None and method != "GET":
            config["body"] = json.dumps(body)

        for interceptor in self.interceptors["request"]:
            config = await _apply(interceptor, config) or config

        logger.info(f"{config['method']} {config['url']}")
        try:
            response = await asyncio.wait_for(self._send(config), timeout=self.timeout)
        except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
            logger.warning(f"{config['method']} {config['url']} timed out after {self.timeout}s")
            raise RequestTimeoutError(self.timeout) from exc

        content_type = response.headers.get("content-type", "")
        data = response.json() if "application/json" in content_type else response.text

        result = HttpResponse(
            ok=response.is_success,
            status=response.status_code,
            status_text=response.reason_phrase,
            headers=dict(response.headers),
            data=data,
        )

        for interceptor in self.interceptors["response"]:
            result = await _apply(interceptor, result) or result

        if not response.is_success:
            raise HttpError(f"HTTP {response.status_code}: {response.reason_phrase}", response=result)

        return result

    async def get(self, endpoint: str, headers: Optional[Dict[str, str]] = None) -> HttpResponse:
        return await self.request(endpoint, "GET", None, headers)

    async def post(self, endpoint: str, body: Any = None, headers: Optional[Dict[str, str]] = None) -> HttpResponse:
        return await self.request(endpoint, "POST", {} if body is None else body, headers)

    async def put(self, endpoint: str, body: Any = None, headers: Optional[Dict[str, str]] = None) -> HttpResponse:
        return await self.request(endpoint, "PUT", {} if body is None else body, headers)

    async def delete(self, endpoint: str, headers: Optional[Dict[str, str]] = None) -> HttpResponse:
        return await self.request(endpoint, "DELETE", None, headers)

    async def patch(self, endpoint: str, body: Any = None, headers: Optional[Dict[str, str]] = None) -> HttpResponse:
        return await self.request(endpoint, "PATCH", {} if body is None else body, headers)

    async def _send(self, config: Dict[str, Any]) -> httpx.Response:
        async with httpx.AsyncClient(transport=self._transport, timeout=self.timeout) as client:
            return await client.request(
                config["method"],
                config["url"],
                headers=config["headers"],
                content=config.get("body"),
            )

    def _build_url(self, endpoint: str) -> str:
        if endpoint.startswith(("http://", "https://")):
            return endpoint

        base = self.base_url.rstrip("/")
        path = endpoint.lstrip("/")
        return f"{base}/{path}" if base else path


async def _apply(interceptor: Interceptor, value: Any) -> Any:
    result = interceptor(value)
    if inspect.isawaitable(result):
        result = await result
    return result


__all__ = ["ClientConfig", "HttpClient", "HttpResponse"]
