"""Annuminas resource clients."""

from annuminas.clients.repos import ReposClient
from annuminas.clients.tokens import AccessTokensClient

__all__ = [
    "ReposClient",
    "AccessTokensClient",
]
