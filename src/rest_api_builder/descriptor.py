"""Method descriptors: the immutable template for one API operation."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from rest_api_builder.templating import normalize_path

DEFAULT_CONTENT_TYPE = "application/json"

# JSON-style option names accepted alongside the Python ones
_OPTION_ALIASES = {"queryParams": "query_params", "contentType": "content_type"}


@dataclass(frozen=True)
class MethodDescriptor:
    """Template describing one API operation.

    ``payload`` is None when the operation has no payload template at all,
    which is different from an empty template such as ``{}``.
    """

    name: str
    path: str = "/"
    method: str = "GET"
    headers: dict[str, str] = field(default_factory=dict)
    payload: Any = None
    query_params: dict[str, Any] = field(default_factory=dict)
    content_type: str = DEFAULT_CONTENT_TYPE

    @classmethod
    def from_options(cls, name: str, options: Mapping[str, Any] | None = None) -> "MethodDescriptor":
        """Build a descriptor from a method options mapping.

        Recognised keys are ``path``, ``method``, ``headers``, ``payload``,
        ``query_params`` and ``content_type``. Other keys are ignored.
        """
        opts = {_OPTION_ALIASES.get(key, key): value for key, value in (options or {}).items()}
        return cls(
            name=name,
            path=normalize_path(opts.get("path")),
            method=(opts.get("method") or "GET").upper(),
            headers=dict(opts.get("headers") or {}),
            payload=opts.get("payload"),
            query_params=dict(opts.get("query_params") or {}),
            content_type=opts.get("content_type") or DEFAULT_CONTENT_TYPE,
        )
