"""Fluent builder for API wrappers.

Example:
    ```python
    from rest_api_builder import ApiBuilder

    api = (
        ApiBuilder(
            "https://www.example.com",
            {
                "type": "KeyToken",
                "add_to": "query",
                "token": {"name": "token", "value": "tokenValue"},
            },
        )
        .add_method("get_users", path="/users", headers={"Accept": "application/json"})
        .add_method("get_user_by_id", path="/users/{{userId}}")
        .add_method("find_users", path="/users", query_params={"name": "{{userName}}"})
        .add_method("add_user", path="users", method="POST", payload={"firstName": "{{firstName}}"})
        .build()
    )

    api.get_user_by_id(userId="42")
    ```
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from rest_api_builder.auth.credentials import CredentialResolver
from rest_api_builder.auth.exceptions import UnknownAuthTypeError
from rest_api_builder.auth.strategies import (
    AuthStrategy,
    Base64Encoder,
    BasicAuth,
    BearerAuth,
    KeyTokenAuth,
    b64_encode,
)
from rest_api_builder.descriptor import MethodDescriptor
from rest_api_builder.transport.http import Transport
from rest_api_builder.wrapper import ApiWrapper

logger = logging.getLogger(__name__)


def _key_token(options: Mapping[str, Any], encoder: Base64Encoder | None) -> AuthStrategy:
    return KeyTokenAuth(
        add_to=options.get("add_to", options.get("addTo")),
        token=options.get("token"),
        secret=options.get("secret"),
    )


def _basic(options: Mapping[str, Any], encoder: Base64Encoder | None) -> AuthStrategy:
    return BasicAuth(options.get("username", ""), options.get("password", ""), encoder=encoder)


def _bearer(options: Mapping[str, Any], encoder: Base64Encoder | None) -> AuthStrategy:
    return BearerAuth(options.get("token", ""))


AUTH_TYPES: dict[str, Callable[[Mapping[str, Any], Base64Encoder | None], AuthStrategy]] = {
    "KeyToken": _key_token,
    "Basic": _basic,
    "Bearer": _bearer,
}


class ApiBuilder:
    """Assemble an `ApiWrapper` from auth options and method templates.

    Args:
        base_url: Base URL every method path is appended to.
        auth_options: Mapping with a ``type`` of ``KeyToken``, ``Basic`` or
            ``Bearer`` plus the fields that type uses (``add_to``, ``token``,
            ``secret``, ``username``, ``password``). Extra keys are ignored.
        transport: Transport used outside debug mode. Defaults to a
            synchronous `HttpxTransport`.
        base64_encoder: Encoder used by Basic auth. Pass None on hosts that
            have none; Basic requests then raise `UnsupportedRuntimeError`.

    Raises:
        UnknownAuthTypeError: If ``auth_options["type"]`` is not supported.
    """

    def __init__(
        self,
        base_url: str,
        auth_options: Mapping[str, Any],
        *,
        transport: Transport | None = None,
        base64_encoder: Base64Encoder | None = b64_encode,
    ) -> None:
        auth_type = auth_options.get("type")
        factory = AUTH_TYPES.get(auth_type) if isinstance(auth_type, str) else None
        if factory is None:
            raise UnknownAuthTypeError(auth_type)

        self._wrapper = ApiWrapper(base_url, factory(auth_options, base64_encoder), transport=transport)
        logger.debug(f"Building API wrapper for {base_url} with {auth_type} auth")

    @classmethod
    def from_env(
        cls,
        prefix: str = "API_",
        *,
        base_url: str | None = None,
        resolver: CredentialResolver | None = None,
        **kwargs: Any,
    ) -> "ApiBuilder":
        """Create a builder from ``<prefix>BASE_URL`` and the auth variables.

        See `CredentialResolver.resolve_auth_options` for the variable names.

        Raises:
            CredentialNotFoundError: If the base URL or a required auth
                variable is missing.
        """
        resolver = resolver or CredentialResolver()
        url = resolver.resolve(value=base_url, env_var_name=f"{prefix}BASE_URL", required=True)
        return cls(url, resolver.resolve_auth_options(prefix), **kwargs)

    def add_method(self, name: str, options: Mapping[str, Any] | None = None, **kwargs: Any) -> "ApiBuilder":
        """Register a method on the wrapper.

        Options may be passed as a mapping, as keyword arguments, or both
        (keywords win). Registering an existing name replaces it.
        """
        descriptor = MethodDescriptor.from_options(name, {**(options or {}), **kwargs})
        self._wrapper.register(descriptor)
        logger.debug(f"Registered method {name}: {descriptor.method} {descriptor.path}")
        return self

    def build(self) -> ApiWrapper:
        return self._wrapper
