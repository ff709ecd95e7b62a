"""Error handling for API wrappers."""

from rest_api_builder.errors.exceptions import (
    APIError,
    BadRequestError,
    ClientError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
    UnknownMethodError,
)
from rest_api_builder.errors.handler import raise_for_status
from rest_api_builder.errors.models import TransportFailure

__all__ = [
    "APIError",
    "BadRequestError",
    "ClientError",
    "ForbiddenError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "TransportFailure",
    "UnauthorizedError",
    "UnknownMethodError",
    "raise_for_status",
]
