"""
Pytest fixtures for Annuminas testing.

Provides common fixtures for testing code that uses the Docker Hub client.
"""

from collections.abc import Generator
from datetime import datetime, timezone
from typing import Any

import pytest

from annuminas.client import HubClient
from annuminas.testing.mock import MockHubClient
from annuminas.testing.server import FakeHubServer
from annuminas.types.repos import Repository
from annuminas.types.tokens import AccessToken

MOCK_USERNAME = "mock-user"
MOCK_PASSWORD = "mock-password"


# ============================================================================
# Client Fixtures
# ============================================================================


@pytest.fixture
def mock_client() -> Generator[MockHubClient, None, None]:
    """
    Provide a MockHubClient for testing.

    Example:
        ```python
        def test_my_feature(mock_client):
            mock_client.repos.configure("list", response=[my_repo])
            result = my_function(mock_client)
            assert mock_client.was_called("repos.list")
        ```
    """
    client = MockHubClient(username=MOCK_USERNAME)
    yield client
    client.reset()


@pytest.fixture
def fake_hub() -> FakeHubServer:
    """Provide an empty stateful fake Docker Hub."""
    return FakeHubServer(username=MOCK_USERNAME, password=MOCK_PASSWORD)


@pytest.fixture
def hub_client(fake_hub: FakeHubServer) -> Generator[HubClient, None, None]:
    """Provide a real HubClient wired to the fake Docker Hub."""
    with HubClient(
        username=MOCK_USERNAME,
        secret=MOCK_PASSWORD,
        transport=fake_hub.transport(),
    ) as client:
        yield client


# ============================================================================
# Sample Data Fixtures
# ============================================================================


def create_mock_repository(
    name: str = "mock-repo",
    namespace: str = MOCK_USERNAME,
    **overrides: Any,
) -> Repository:
    """
    Create a Repository with sensible defaults.

    Args:
        name: Repository name
        namespace: Owning namespace
        **overrides: Any other Repository field
    """
    now = datetime.now(timezone.utc)
    fields: dict[str, Any] = {
        "description": "",
        "is_private": False,
        "star_count": 0,
        "pull_count": 0,
        "last_updated": now,
        "date_registered": now,
    }
    fields.update(overrides)
    return Repository(name=name, namespace=namespace, **fields)


def create_mock_access_token(
    token_label: str = "mock-token",
    scopes: list[str] | None = None,
    **overrides: Any,
) -> AccessToken:
    """
    Create an AccessToken with sensible defaults and no secret.

    Args:
        token_label: Token label
        scopes: Granted scopes (default: ["repo:read"])
        **overrides: Any other AccessToken field
    """
    fields: dict[str, Any] = {
        "uuid": "00000000-0000-4000-8000-000000000001",
        "is_active": True,
        "created_at": datetime.now(timezone.utc),
        "last_used": None,
    }
    fields.update(overrides)
    return AccessToken(
        token_label=token_label,
        scopes=scopes if scopes is not None else ["repo:read"],
        **fields,
    )


@pytest.fixture
def sample_repository() -> Repository:
    """Provide a sample public repository."""
    return create_mock_repository(name="web", description="Web frontend", pull_count=42)


@pytest.fixture
def sample_access_token() -> AccessToken:
    """Provide a sample access token without its secret."""
    return create_mock_access_token(token_label="ci", scopes=["repo:write"])
