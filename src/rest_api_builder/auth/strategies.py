"""Authentication strategies that attach credentials to a request.

Every strategy answers two questions for the wrapper:

- ``auth_url``: which URL should be called for a method descriptor
- ``auth_headers``: which headers should be sent with it

Three variants are provided:

| Strategy | Name | URL | Headers |
|----------|------|-----|---------|
| `KeyTokenAuth` | ``KeyToken`` | credentials in query string (``add_to="query"``) | credentials as headers (``add_to="headers"``) |
| `BasicAuth` | ``Basic`` | unchanged | ``Authorization: Basic <base64>`` |
| `BearerAuth` | ``Bearer`` | unchanged | ``Authorization: Bearer <token>`` |

Example:
    ```python
    from rest_api_builder.auth import Credential, KeyTokenAuth

    auth = KeyTokenAuth(add_to="query", token=Credential("key", "abc123"))
    auth.auth_url("https://api.example.com", descriptor)
    # 'https://api.example.com/users?key=abc123'
    ```
"""

import base64
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from rest_api_builder.auth.exceptions import UnsupportedRuntimeError

if TYPE_CHECKING:
    from rest_api_builder.descriptor import MethodDescriptor

logger = logging.getLogger(__name__)

# Characters left untouched by JavaScript's encodeURI, on top of quote()'s own safe set
_URI_SAFE = ";,/?:@&=+$!*'()#"

Base64Encoder = Callable[[str], str]


def b64_encode(value: str) -> str:
    """Encode UTF-8 text as a base64 string."""
    return base64.b64encode(value.encode("utf-8")).decode("ascii")


@dataclass(frozen=True)
class Credential:
    """A named credential value, e.g. ``api_key=abc123``."""

    name: str
    value: str

    @classmethod
    def coerce(cls, value: "Credential | Mapping[str, Any] | tuple[str, str] | None") -> "Credential | None":
        """Build a Credential from a mapping with ``name``/``value`` keys or a pair.

        Returns:
            Credential instance, or None when no credential was given.
        """
        if value is None or isinstance(value, Credential):
            return value
        if isinstance(value, Mapping):
            return cls(name=str(value["name"]), value=str(value["value"]))
        name, secret = value
        return cls(name=str(name), value=str(secret))


class AuthPlacement(str, Enum):
    """Where key/token credentials are attached."""

    QUERY = "query"
    HEADERS = "headers"


class AuthStrategy:
    """Base strategy: bare URL and untouched headers."""

    name: str = "None"

    def auth_url(self, base_url: str, descriptor: "MethodDescriptor") -> str:
        return base_url + descriptor.path

    def auth_headers(self, headers: Mapping[str, str] | None = None) -> dict[str, str]:
        return dict(headers or {})


class KeyTokenAuth(AuthStrategy):
    """Key/token authentication carried in the query string or in headers.

    Args:
        add_to: ``"query"`` or ``"headers"``. Anything else falls back to
            ``"query"``.
        token: Optional token credential.
        secret: Optional secret credential.
    """

    name = "KeyToken"

    def __init__(
        self,
        add_to: "AuthPlacement | str | None" = AuthPlacement.QUERY,
        token: Credential | Mapping[str, Any] | None = None,
        secret: Credential | Mapping[str, Any] | None = None,
    ) -> None:
        try:
            self._add_to = AuthPlacement(add_to)
        except ValueError:
            logger.debug(f"Unknown key/token placement {add_to!r}, using 'query'")
            self._add_to = AuthPlacement.QUERY
        self._token = Credential.coerce(token)
        self._secret = Credential.coerce(secret)

    @property
    def add_to(self) -> AuthPlacement:
        return self._add_to

    @property
    def token(self) -> Credential | None:
        return self._token

    @property
    def secret(self) -> Credential | None:
        return self._secret

    def _credentials(self) -> list[Credential]:
        return [c for c in (self._token, self._secret) if c is not None]

    def auth_url(self, base_url: str, descriptor: "MethodDescriptor") -> str:
        url = super().auth_url(base_url, descriptor)
        if self._add_to is not AuthPlacement.QUERY:
            return url

        fragments = [f"{c.name}={quote(c.value, safe=_URI_SAFE)}" for c in self._credentials()]
        if not fragments:
            return url
        return url + "?" + "&".join(fragments)

    def auth_headers(self, headers: Mapping[str, str] | None = None) -> dict[str, str]:
        merged = super().auth_headers(headers)
        if self._add_to is AuthPlacement.HEADERS:
            for credential in self._credentials():
                merged[credential.name] = credential.value
        return merged


class BasicAuth(AuthStrategy):
    """HTTP Basic authentication.

    The base64 capability is injected so hosts without one fail explicitly
    with `UnsupportedRuntimeError` instead of sending unauthenticated requests.
    """

    name = "Basic"

    def __init__(self, username: str, password: str, encoder: Base64Encoder | None = b64_encode) -> None:
        self._username = username
        self._password = password
        self._encoder = encoder

    @property
    def username(self) -> str:
        return self._username

    @property
    def password(self) -> str:
        return self._password

    def auth_headers(self, headers: Mapping[str, str] | None = None) -> dict[str, str]:
        if self._encoder is None:
            raise UnsupportedRuntimeError("Basic auth requires a base64 encoder, none is available")
        merged = super().auth_headers(headers)
        merged["Authorization"] = f"Basic {self._encoder(f'{self._username}:{self._password}')}"
        return merged


class BearerAuth(AuthStrategy):
    """Bearer token authentication."""

    name = "Bearer"

    def __init__(self, token: str) -> None:
        self._token = token

    @property
    def token(self) -> str:
        return self._token

    def auth_headers(self, headers: Mapping[str, str] | None = None) -> dict[str, str]:
        merged = super().auth_headers(headers)
        merged["Authorization"] = f"Bearer {self._token}"
        return merged
