"""Authentication components for API wrappers.

This module provides:
- Auth strategies that put credentials into the URL or headers
  (key/token, HTTP Basic, Bearer)
- Credential resolution from the environment and .env files

Example:
    ```python
    from rest_api_builder.auth import BearerAuth, CredentialResolver

    resolver = CredentialResolver()
    auth = BearerAuth(resolver.resolve(env_var_name="API_TOKEN", required=True))
    ```
"""

from rest_api_builder.auth.credentials import CredentialResolver
from rest_api_builder.auth.exceptions import (
    AuthError,
    CredentialNotFoundError,
    UnknownAuthTypeError,
    UnsupportedRuntimeError,
)
from rest_api_builder.auth.strategies import (
    AuthPlacement,
    AuthStrategy,
    BasicAuth,
    BearerAuth,
    Credential,
    KeyTokenAuth,
    b64_encode,
)

__all__ = [
    "AuthError",
    "AuthPlacement",
    "AuthStrategy",
    "BasicAuth",
    "BearerAuth",
    "Credential",
    "CredentialNotFoundError",
    "CredentialResolver",
    "KeyTokenAuth",
    "UnknownAuthTypeError",
    "UnsupportedRuntimeError",
    "b64_encode",
]
