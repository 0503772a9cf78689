"""
Pytest plugin for Annuminas testing fixtures.

This module re-exports all fixtures from fixtures.py so they can be
discovered by pytest.

To use these fixtures in your tests, add this to your top-level conftest.py:

    pytest_plugins = ["annuminas.testing.conftest"]

Or import the fixtures directly:

    from annuminas.testing.fixtures import hub_client, fake_hub
"""

# Re-export all fixtures for pytest auto-discovery
from annuminas.testing.fixtures import (
    fake_hub,
    hub_client,
    mock_client,
    sample_access_token,
    sample_repository,
)

__all__ = [
    "fake_hub",
    "hub_client",
    "mock_client",
    "sample_access_token",
    "sample_repository",
]
