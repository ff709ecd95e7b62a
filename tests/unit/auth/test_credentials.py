"""Tests for credential and auth option resolution from the environment."""

import os

import pytest

from rest_api_builder.auth import CredentialResolver
from rest_api_builder.auth.exceptions import CredentialNotFoundError


class TestCredentialResolverResolve:
    """Test basic credential resolution."""

    def test_init_skip_dotenv(self):
        resolver = CredentialResolver(load_dotenv=False)
        assert not resolver._dotenv_loaded

    def test_explicit_value_wins(self, monkeypatch):
        monkeypatch.setenv("TEST_KEY", "env-value")
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve(value="explicit", env_var_name="TEST_KEY", default="d") == "explicit"

    def test_environment_variable(self, monkeypatch):
        monkeypatch.setenv("TEST_KEY", "env-value")
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve(env_var_name="TEST_KEY", default="d") == "env-value"

    def test_default(self):
        resolver = CredentialResolver(load_dotenv=False)

        assert resolver.resolve(env_var_name="TEST_MISSING", default="d") == "d"

    def test_missing_returns_none(self):
        assert CredentialResolver(load_dotenv=False).resolve(env_var_name="TEST_MISSING") is None

    def test_required_missing_raises(self):
        resolver = CredentialResolver(load_dotenv=False)

        with pytest.raises(CredentialNotFoundError) as exc_info:
            resolver.resolve(env_var_name="TEST_MISSING", required=True)

        assert exc_info.value.env_var_name == "TEST_MISSING"

    def test_values_are_masked_in_logs(self, monkeypatch, caplog):
        monkeypatch.setenv("TEST_SECRET", "super-secret-value")
        resolver = CredentialResolver(load_dotenv=False)

        with caplog.at_level("DEBUG"):
            resolver.resolve(env_var_name="TEST_SECRET")

        assert "super-secret-value" not in caplog.text

    def test_dotenv_file_is_loaded(self, tmp_path, monkeypatch):
        dotenv_file = tmp_path / ".env"
        dotenv_file.write_text("TEST_DOTENV_KEY=dotenv-value\n")
        monkeypatch.delenv("TEST_DOTENV_KEY", raising=False)

        resolver = CredentialResolver(dotenv_path=str(dotenv_file))
        try:
            assert resolver.resolve(env_var_name="TEST_DOTENV_KEY") == "dotenv-value"
        finally:
            os.environ.pop("TEST_DOTENV_KEY", None)


class TestResolveAuthOptions:
    """Test assembling builder auth options from prefixed variables."""

    def test_key_token(self, monkeypatch):
        monkeypatch.setenv("API_AUTH_TYPE", "KeyToken")
        monkeypatch.setenv("API_AUTH_ADD_TO", "headers")
        monkeypatch.setenv("API_TOKEN_NAME", "X-Api-Key")
        monkeypatch.setenv("API_TOKEN_VALUE", "abc")

        options = CredentialResolver(load_dotenv=False).resolve_auth_options()

        assert options == {
            "type": "KeyToken",
            "add_to": "headers",
            "token": {"name": "X-Api-Key", "value": "abc"},
            "secret": None,
        }

    def test_key_token_defaults_to_query(self, monkeypatch):
        monkeypatch.setenv("API_AUTH_TYPE", "KeyToken")

        options = CredentialResolver(load_dotenv=False).resolve_auth_options()

        assert options["add_to"] == "query"
        assert options["token"] is None

    def test_basic(self, monkeypatch):
        monkeypatch.setenv("TEST_AUTH_TYPE", "Basic")
        monkeypatch.setenv("TEST_USERNAME", "user")
        monkeypatch.setenv("TEST_PASSWORD", "pass")

        options = CredentialResolver(load_dotenv=False).resolve_auth_options(prefix="TEST_")

        assert options == {"type": "Basic", "username": "user", "password": "pass"}

    def test_basic_missing_password_raises(self, monkeypatch):
        monkeypatch.setenv("API_AUTH_TYPE", "Basic")
        monkeypatch.setenv("API_USERNAME", "user")

        with pytest.raises(CredentialNotFoundError) as exc_info:
            CredentialResolver(load_dotenv=False).resolve_auth_options()

        assert exc_info.value.env_var_name == "API_PASSWORD"

    def test_bearer(self, monkeypatch):
        monkeypatch.setenv("API_AUTH_TYPE", "Bearer")
        monkeypatch.setenv("API_TOKEN", "t0k3n")

        options = CredentialResolver(load_dotenv=False).resolve_auth_options()

        assert options == {"type": "Bearer", "token": "t0k3n"}

    def test_missing_type_raises(self):
        with pytest.raises(CredentialNotFoundError):
            CredentialResolver(load_dotenv=False).resolve_auth_options()

    def test_unknown_type_passes_through(self, monkeypatch):
        monkeypatch.setenv("API_AUTH_TYPE", "Digest")

        assert CredentialResolver(load_dotenv=False).resolve_auth_options() == {"type": "Digest"}
