"""Data returned by transports when a request fails."""

from dataclasses import dataclass

import httpx


@dataclass(frozen=True)
class TransportFailure:
    """A failed request, returned to the caller instead of raised.

    Attributes:
        error: The exception describing the failure (an `APIError` for HTTP
            error statuses, an `httpx.HTTPError` for network problems, a
            `ValueError` for undecodable bodies).
        raw_response: The HTTP response, or None if none was received.
    """

    error: Exception
    raw_response: httpx.Response | None = None

    @property
    def status_code(self) -> int | None:
        return self.raw_response.status_code if self.raw_response is not None else None

    def __bool__(self) -> bool:
        return False
