"""In-memory transports for tests."""

from collections.abc import Mapping
from typing import Any

from rest_api_builder.request import ResolvedRequest


class RecordingTransport:
    """Transport that records every request and answers with canned data.

    Args:
        responses: Mapping of method name to the value ``send`` returns for it.
        default: Value returned for methods without a canned response.
    """

    def __init__(self, responses: Mapping[str, Any] | None = None, default: Any = None) -> None:
        self.responses = dict(responses or {})
        self.default = default
        self.requests: list[ResolvedRequest] = []

    def send(self, request: ResolvedRequest) -> Any:
        self.requests.append(request)
        return self.responses.get(request.name, self.default)

    @property
    def last_request(self) -> ResolvedRequest | None:
        return self.requests[-1] if self.requests else None
