"""Custom exceptions for authentication setup and credential resolution.

These exceptions are raised while a wrapper is being assembled or while
credentials are attached to a request. Failures of the request itself are
returned as data by the transport layer (see `rest_api_builder.errors`).

Example:
    ```python
    from rest_api_builder.auth.exceptions import UnknownAuthTypeError

    try:
        ApiBuilder("https://api.example.com", {"type": "Digest"})
    except UnknownAuthTypeError as e:
        print(f"Unsupported auth type: {e.auth_type}")
    ```
"""


class AuthError(Exception):
    """Base exception for authentication-related errors.

    All auth-specific exceptions inherit from this class,
    making it easy to catch any auth configuration error.
    """

    pass


class UnknownAuthTypeError(AuthError):
    """Raised when the builder receives an auth type it does not know.

    Attributes:
        auth_type: The rejected value of the ``type`` auth option.
    """

    def __init__(self, auth_type: object):
        super().__init__(f'No auth of type "{auth_type}" found')
        self.auth_type = auth_type


class UnsupportedRuntimeError(AuthError):
    """Raised when Basic auth headers are built without a base64 encoder."""

    pass


class CredentialNotFoundError(AuthError):
    """Raised when a required credential cannot be resolved.

    Attributes:
        env_var_name: The environment variable name that was checked (if any).
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name
