"""Test fixtures for Annuminas."""

from annuminas.testing.fixtures import (  # noqa: F401
    fake_hub,
    hub_client,
    mock_client,
    sample_access_token,
    sample_repository,
)
