"""httpx-backed transports that dispatch resolved requests.

A transport receives a `ResolvedRequest` and returns the parsed JSON body.
Failures are returned, not raised, as a `TransportFailure` carrying the error
and the raw response so callers can still inspect what came back.

| Transport | Client | ``send`` returns |
|-----------|--------|------------------|
| `HttpxTransport` | ``httpx.Client`` | parsed JSON or `TransportFailure` |
| `AsyncHttpxTransport` | ``httpx.AsyncClient`` | awaitable of the same |

Example:
    ```python
    import httpx
    from rest_api_builder.transport import AsyncHttpxTransport

    transport = AsyncHttpxTransport(client=httpx.AsyncClient(timeout=10))
    api = ApiBuilder(url, auth_options, transport=transport).add_method("me", path="/me").build()
    me = await api.me()
    ```
"""

import logging
from typing import Any, Protocol

import httpx

from rest_api_builder.errors.exceptions import APIError
from rest_api_builder.errors.handler import raise_for_status
from rest_api_builder.errors.models import TransportFailure
from rest_api_builder.request import BODYLESS_METHODS, ResolvedRequest

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class Transport(Protocol):
    """Anything able to dispatch a resolved request."""

    def send(self, request: ResolvedRequest) -> Any: ...


def build_request_kwargs(request: ResolvedRequest) -> dict[str, Any]:
    """Translate a resolved request into ``httpx`` request arguments."""
    headers = dict(request.headers)
    if not any(key.lower() == "content-type" for key in headers):
        headers["Content-Type"] = request.content_type

    kwargs: dict[str, Any] = {"method": request.method, "url": request.url, "headers": headers}
    if request.payload is not None and request.method.upper() not in BODYLESS_METHODS:
        kwargs["content"] = request.payload
    return kwargs


def parse_response(request: ResolvedRequest, response: httpx.Response) -> Any:
    """Return the decoded JSON body, or a `TransportFailure`."""
    try:
        raise_for_status(response)
        if not response.content:
            return None
        return response.json()
    except (APIError, ValueError) as e:
        logger.warning(f"Request {request.method} {request.path} ({request.name}) failed: {e}")
        return TransportFailure(error=e, raw_response=response)


def _network_failure(request: ResolvedRequest, error: httpx.HTTPError) -> TransportFailure:
    logger.warning(f"Request {request.method} {request.path} ({request.name}) failed: {error}")
    return TransportFailure(error=error, raw_response=None)


class HttpxTransport:
    """Synchronous transport over ``httpx.Client``.

    Args:
        client: Client to send with. Created on first use when omitted, and
            then owned (closed) by this transport.
        timeout: Timeout for the client created on demand.
    """

    def __init__(self, client: httpx.Client | None = None, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._client = client
        self._owns_client = client is None
        self.timeout = timeout

    @property
    def client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(timeout=self.timeout)
        return self._client

    def send(self, request: ResolvedRequest) -> Any:
        try:
            response = self.client.request(**build_request_kwargs(request))
        except httpx.HTTPError as e:
            return _network_failure(request, e)
        return parse_response(request, response)

    def close(self) -> None:
        if self._owns_client and self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


class AsyncHttpxTransport:
    """Asynchronous transport over ``httpx.AsyncClient``.

    ``send`` is a coroutine, so wrapper methods dispatched through this
    transport must be awaited.
    """

    def __init__(self, client: httpx.AsyncClient | None = None, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._client = client
        self._owns_client = client is None
        self.timeout = timeout

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def send(self, request: ResolvedRequest) -> Any:
        try:
            response = await self.client.request(**build_request_kwargs(request))
        except httpx.HTTPError as e:
            return _network_failure(request, e)
        return parse_response(request, response)

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
