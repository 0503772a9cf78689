"""Annuminas testing utilities.

Provides a stateful fake Docker Hub, a mock client and fixtures for testing
applications that use Annuminas.
"""

from annuminas.testing.fixtures import (
    create_mock_access_token,
    create_mock_repository,
)
from annuminas.testing.mock import MockCall, MockHubClient, MockResponse
from annuminas.testing.server import FakeHubServer, RecordedRequest

__all__ = [
    # Fake server
    "FakeHubServer",
    "RecordedRequest",
    # Mock client
    "MockHubClient",
    "MockCall",
    "MockResponse",
    # Helper functions
    "create_mock_repository",
    "create_mock_access_token",
]
