"""
Annuminas main client.

Provides the primary interface for managing Docker Hub repositories and
personal access tokens.
"""

import os
from typing import Any

import httpx

from annuminas.clients import AccessTokensClient, ReposClient
from annuminas.exceptions import ConfigurationError
from annuminas.transport import AuthMode, HTTPTransport


class HubClient:
    """
    Main client for interacting with the Docker Hub API.

    Aggregates the resource clients over one transport. Authentication is
    lazy: nothing is sent until the first call, and the bearer token is
    reused for the lifetime of the client.

    Example:
        ```python
        from annuminas import HubClient

        with HubClient(username="acme", secret="dckr_pat_...") as client:
            client.ping()
            client.repos.ensure("acme", "web")
            for repo in client.repos.list("acme"):
                print(repo.name, repo.pull_count)
        ```
    """

    DEFAULT_BASE_URL = "https://hub.docker.com"
    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        username: str,
        secret: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        auth_mode: AuthMode = AuthMode.LOGIN,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the Docker Hub client.

        Args:
            username: Docker Hub account name
            secret: Password or personal access token
            base_url: Base URL for API requests (default: https://hub.docker.com)
            timeout: Request timeout in seconds (default: 30.0)
            auth_mode: Credential exchange to use (default: AuthMode.LOGIN)
            transport: Optional httpx transport, mainly for tests
        """
        self.username = username
        self.base_url = base_url
        self.timeout = timeout

        self._transport = HTTPTransport(
            base_url=base_url,
            username=username,
            secret=secret,
            timeout=timeout,
            auth_mode=auth_mode,
            transport=transport,
        )

        self.repos = ReposClient(self._transport)
        self.tokens = AccessTokensClient(self._transport)

    @classmethod
    def from_env(cls, timeout: float = DEFAULT_TIMEOUT) -> "HubClient":
        """
        Create a client from environment variables.

        Environment variables:
            DOCKERHUB_USERNAME: Account name (required)
            DOCKERHUB_TOKEN: Password or personal access token (required)
            DOCKERHUB_BASE_URL: Base URL for API (optional, default: https://hub.docker.com)
            DOCKERHUB_AUTH_MODE: "login" or "token" (optional, default: login)

        Raises:
            ConfigurationError: If required environment variables are missing
        """
        username = os.environ.get("DOCKERHUB_USERNAME")
        secret = os.environ.get("DOCKERHUB_TOKEN")
        base_url = os.environ.get("DOCKERHUB_BASE_URL", cls.DEFAULT_BASE_URL)
        mode = os.environ.get("DOCKERHUB_AUTH_MODE", AuthMode.LOGIN.value).lower()

        if not username:
            raise ConfigurationError("DOCKERHUB_USERNAME environment variable not set")

        if not secret:
            raise ConfigurationError("DOCKERHUB_TOKEN environment variable not set")

        try:
            auth_mode = AuthMode(mode)
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid DOCKERHUB_AUTH_MODE: {mode}. Must be 'login' or 'token'"
            ) from e

        return cls(
            username=username,
            secret=secret,
            base_url=base_url,
            timeout=timeout,
            auth_mode=auth_mode,
        )

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def ping(self) -> None:
        """
        Verify the credentials by authenticating.

        Raises:
            AuthError: If the credentials are rejected
        """
        self._transport.authenticate()

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "HubClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit - closes the client."""
        self.close()
