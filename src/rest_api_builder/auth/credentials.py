"""Credential and auth option resolution from the environment.

Wrappers are usually configured in code, but deployed scripts tend to keep
their base URL and secrets in environment variables or a ``.env`` file. This
module turns those into the auth options mapping accepted by `ApiBuilder`.

Resolution order (highest to lowest priority):
1. Explicitly provided value
2. Environment variable (including values loaded from .env by python-dotenv)
3. Default value

Recognised variables for a prefix ``P`` (``API_`` by default):

| Variable | Auth option |
|----------|-------------|
| ``P``AUTH_TYPE | ``type`` |
| ``P``AUTH_ADD_TO | ``add_to`` |
| ``P``TOKEN_NAME / ``P``TOKEN_VALUE | ``token`` (KeyToken) |
| ``P``SECRET_NAME / ``P``SECRET_VALUE | ``secret`` (KeyToken) |
| ``P``USERNAME / ``P``PASSWORD | ``username`` / ``password`` (Basic) |
| ``P``TOKEN | ``token`` (Bearer) |

Security Considerations:
    - Credential values are never logged in full (masked with ***)
    - Only the source of a value is logged
"""

import logging
import os
from threading import Lock
from typing import Any

from dotenv import load_dotenv

from rest_api_builder.auth.exceptions import CredentialNotFoundError

logger = logging.getLogger(__name__)


class CredentialResolver:
    """Resolve credentials from explicit values, the environment and .env files.

    Example:
        ```python
        resolver = CredentialResolver()
        api_key = resolver.resolve(env_var_name="API_TOKEN", required=True)
        options = resolver.resolve_auth_options(prefix="GITHUB_")
        ```
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        """Initialize credential resolver.

        Args:
            dotenv_path: Path to .env file. If None, python-dotenv searches
                parent directories for one.
            load_dotenv: Whether to load the .env file at all.
        """
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path

        if load_dotenv:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return
            # override=False: real environment variables win over .env entries
            load_dotenv(dotenv_path=self._dotenv_path, override=False)
            self._dotenv_loaded = True
            logger.debug("Loaded .env file for credential resolution")

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Resolve a single credential.

        Args:
            value: Explicitly provided value (highest priority).
            env_var_name: Environment variable name to check.
            default: Fallback when nothing else is set.
            required: Raise instead of returning None when unresolved.

        Returns:
            Resolved value, or None if not found and not required.

        Raises:
            CredentialNotFoundError: If required=True and nothing was found.
        """
        result = None
        source = None

        if value is not None:
            result = value
            source = "explicit parameter"
        elif env_var_name and env_var_name in os.environ:
            result = os.environ[env_var_name]
            source = f"environment variable '{env_var_name}'"
        elif default is not None:
            result = default
            source = "default value"

        if result is not None:
            logger.debug(f"Resolved credential from {source}: ***")

        if required and result is None:
            error_msg = "Required credential not found"
            if env_var_name:
                error_msg += f" (checked env var: {env_var_name})"
            raise CredentialNotFoundError(error_msg, env_var_name=env_var_name)

        return result

    def _resolve_pair(self, prefix: str, kind: str) -> dict[str, str] | None:
        name = self.resolve(env_var_name=f"{prefix}{kind}_NAME")
        value = self.resolve(env_var_name=f"{prefix}{kind}_VALUE")
        if name is None or value is None:
            return None
        return {"name": name, "value": value}

    def resolve_auth_options(self, prefix: str = "API_") -> dict[str, Any]:
        """Assemble builder auth options from prefixed environment variables.

        Only the variables relevant to the configured ``AUTH_TYPE`` are read.

        Raises:
            CredentialNotFoundError: If ``<prefix>AUTH_TYPE`` is not set, or a
                variable required by that type is missing.
        """
        auth_type = self.resolve(env_var_name=f"{prefix}AUTH_TYPE", required=True)
        options: dict[str, Any] = {"type": auth_type}

        if auth_type == "KeyToken":
            options["add_to"] = self.resolve(env_var_name=f"{prefix}AUTH_ADD_TO", default="query")
            options["token"] = self._resolve_pair(prefix, "TOKEN")
            options["secret"] = self._resolve_pair(prefix, "SECRET")
        elif auth_type == "Basic":
            options["username"] = self.resolve(env_var_name=f"{prefix}USERNAME", required=True)
            options["password"] = self.resolve(env_var_name=f"{prefix}PASSWORD", required=True)
        elif auth_type == "Bearer":
            options["token"] = self.resolve(env_var_name=f"{prefix}TOKEN", required=True)

        return options
