"""Annuminas type definitions.

This module exports all data model types used by the client.
"""

from annuminas.types.pagination import Page
from annuminas.types.repos import Repository
from annuminas.types.tokens import AccessToken

__all__ = [
    "Page",
    "Repository",
    "AccessToken",
]
