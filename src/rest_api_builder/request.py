"""Resolution of a method descriptor into a concrete request."""

import dataclasses
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from rest_api_builder.auth.strategies import AuthStrategy
from rest_api_builder.descriptor import DEFAULT_CONTENT_TYPE, MethodDescriptor
from rest_api_builder.templating import interpolate_object, interpolate_string, object_to_query_string

logger = logging.getLogger(__name__)

# Methods that never carry a request body
BODYLESS_METHODS: frozenset[str] = frozenset(["GET", "DELETE"])


@dataclass(frozen=True)
class ResolvedRequest:
    """A fully substituted request, ready to send or inspect.

    ``payload`` is the serialized JSON body, or None when there is none.
    """

    name: str
    path: str
    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    query_params: dict[str, Any] = field(default_factory=dict)
    query_string: str = ""
    payload: str | None = None
    content_type: str = DEFAULT_CONTENT_TYPE


def resolve_request(
    base_url: str,
    auth: AuthStrategy,
    descriptor: MethodDescriptor,
    params: Mapping[str, Any] | None = None,
) -> ResolvedRequest:
    """Interpolate ``params`` into ``descriptor`` and attach authentication.

    Args:
        base_url: Base URL of the API, without a trailing slash.
        auth: Strategy that adds credentials to the URL and headers.
        descriptor: The registered method template.
        params: Runtime parameters. Placeholders without a param are dropped
            from the query string and payload.

    Returns:
        The resolved request. GET and DELETE requests never carry a payload.
    """
    path = interpolate_string(descriptor.path, params)
    url = auth.auth_url(base_url, dataclasses.replace(descriptor, path=path))

    query_string = object_to_query_string(descriptor.query_params, params)
    if query_string:
        url += ("&" if "?" in url else "?") + query_string

    payload = None
    if descriptor.method.upper() not in BODYLESS_METHODS:
        payload = interpolate_object(descriptor.payload, params)

    headers = auth.auth_headers(descriptor.headers)

    logger.debug(f"Resolved {descriptor.name}: {descriptor.method} {path}")
    return ResolvedRequest(
        name=descriptor.name,
        path=path,
        method=descriptor.method,
        url=url,
        headers=headers,
        query_params=dict(descriptor.query_params),
        query_string=query_string,
        payload=payload,
        content_type=descriptor.content_type,
    )
