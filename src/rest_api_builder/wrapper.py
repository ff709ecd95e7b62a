"""The API wrapper object returned by `ApiBuilder.build()`."""

import functools
import logging
from collections.abc import Mapping
from typing import Any

from rest_api_builder.auth.strategies import AuthStrategy
from rest_api_builder.descriptor import MethodDescriptor
from rest_api_builder.errors.exceptions import UnknownMethodError
from rest_api_builder.request import resolve_request
from rest_api_builder.transport.http import HttpxTransport, Transport

logger = logging.getLogger(__name__)


class ApiWrapper:
    """Runtime client exposing each registered method as a callable attribute.

    Registered methods take an optional params mapping and/or keyword
    arguments, which fill the ``{{placeholders}}`` of the method template:

        ```python
        api.get_user_by_id({"userId": "42"})
        api.get_user_by_id(userId="42")
        ```

    In debug mode calls return the `ResolvedRequest` instead of sending it.

    Attributes:
        transport: Collaborator used to send requests outside debug mode.
    """

    def __init__(self, base_url: str, auth: AuthStrategy, transport: Transport | None = None) -> None:
        self._base_url = base_url
        self._auth = auth
        self._debug_mode = False
        self._methods: dict[str, MethodDescriptor] = {}
        self.transport = transport if transport is not None else HttpxTransport()

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def auth(self) -> AuthStrategy:
        return self._auth

    @property
    def debug_mode(self) -> bool:
        return self._debug_mode

    @property
    def methods(self) -> tuple[str, ...]:
        return tuple(self._methods)

    def debug_mode_on(self) -> "ApiWrapper":
        self._debug_mode = True
        return self

    def debug_mode_off(self) -> "ApiWrapper":
        self._debug_mode = False
        return self

    def get_method_data(self, method_name: str) -> MethodDescriptor | None:
        return self._methods.get(method_name)

    def register(self, descriptor: MethodDescriptor) -> None:
        """Register ``descriptor`` under its name, replacing any previous one."""
        if descriptor.name in self._methods:
            logger.debug(f"Replacing method {descriptor.name}")
        elif hasattr(type(self), descriptor.name):
            logger.warning(f"Method {descriptor.name} is shadowed by an attribute, use call() to invoke it")
        self._methods[descriptor.name] = descriptor

    def call(self, method_name: str, params: Mapping[str, Any] | None = None, /, **kwargs: Any) -> Any:
        """Invoke a registered method by name.

        ``method_name`` and ``params`` are positional-only, so any keyword,
        including ``params=`` or ``method_name=``, is a template parameter.

        Returns:
            The `ResolvedRequest` in debug mode, otherwise the transport result.

        Raises:
            UnknownMethodError: If no method is registered under that name.
        """
        descriptor = self._methods.get(method_name)
        if descriptor is None:
            raise UnknownMethodError(method_name)

        merged = {**(params or {}), **kwargs}
        request = resolve_request(self._base_url, self._auth, descriptor, merged)
        if self._debug_mode:
            return request
        return self.transport.send(request)

    def close(self) -> None:
        """Close the transport, if it supports closing."""
        close = getattr(self.transport, "close", None)
        if close is not None:
            close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __getattr__(self, name: str) -> Any:
        methods = self.__dict__.get("_methods", {})
        if name in methods:
            return functools.partial(self.call, name)
        raise UnknownMethodError(name)

    def __repr__(self) -> str:
        return f"ApiWrapper(base_url={self._base_url!r}, auth={self._auth.name}, methods={list(self._methods)})"
