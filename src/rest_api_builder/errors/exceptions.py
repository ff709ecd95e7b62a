"""Structured exceptions for API and wrapper errors.

The `APIError` family is not raised out of wrapper calls: transports catch
it and return it as `TransportFailure.error`, so callers check the result
instead of using ``try``/``except``. `raise_for_status` raises these directly
when used on its own. `UnknownMethodError` is raised by the wrapper itself.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class APIError(Exception):
    """Base exception for HTTP error responses."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: "httpx.Response | None" = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class ClientError(APIError):
    """4xx client errors."""

    pass


class BadRequestError(ClientError):
    """400 Bad Request."""

    pass


class UnauthorizedError(ClientError):
    """401 Unauthorized."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class RateLimitError(ClientError):
    """429 Too Many Requests."""

    def __init__(self, message: str, retry_after: int | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(APIError):
    """5xx server errors."""

    pass


class UnknownMethodError(AttributeError):
    """Raised when a wrapper is asked for a method that was never registered."""

    def __init__(self, method_name: str):
        super().__init__(f'No method named "{method_name}" is registered')
        self.method_name = method_name
