"""Personal access tokens resource client."""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from annuminas.clients.repos import parse_timestamp
from annuminas.exceptions import DecodeError
from annuminas.logging import get_logger
from annuminas.types.tokens import AccessToken

if TYPE_CHECKING:
    from annuminas.transport import HTTPTransport

_TOKENS_PATH = "/v2/access-tokens"

_logger = get_logger()


def _parse_access_token(data: dict[str, Any], include_secret: bool = False) -> AccessToken:
    """Parse an access token; the secret is kept only when asked for."""
    return AccessToken(
        uuid=data["uuid"],
        token_label=data.get("token_label") or "",
        scopes=list(data.get("scopes") or []),
        is_active=bool(data.get("is_active", False)),
        created_at=parse_timestamp(data.get("created_at")),
        last_used=parse_timestamp(data.get("last_used")),
        client_id=data.get("client_id") or "",
        creator_ip=data.get("creator_ip") or "",
        creator_ua=data.get("creator_ua") or "",
        generated_by=data.get("generated_by") or "",
        token=(data.get("token") or "") if include_secret else "",
    )


def _parse_created_token(data: dict[str, Any]) -> AccessToken:
    return _parse_access_token(data, include_secret=True)


class AccessTokensClient:
    """Client for personal access token operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the access tokens client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def create(self, label: str, scopes: Sequence[str]) -> AccessToken:
        """
        Create a personal access token.

        Scopes are passed through unchecked (e.g. "repo:admin", "repo:write",
        "repo:read", "repo:public_read").

        Args:
            label: Friendly name for the token
            scopes: Scopes to grant, in order

        Returns:
            AccessToken whose ``token`` field holds the secret. This is the
            only time the registry returns it.
        """
        token = self.transport.post(
            _TOKENS_PATH,
            {"token_label": label, "scopes": list(scopes)},
            decode=_parse_created_token,
        )
        if token is None:
            raise DecodeError("decode response: empty body")
        _logger.info(f"Created access token '{label}' ({token.uuid})")
        return token

    def get(self, uuid: str) -> AccessToken:
        """Get one access token by UUID (without its secret)."""
        token = self.transport.get(f"{_TOKENS_PATH}/{uuid}", decode=_parse_access_token)
        if token is None:
            raise DecodeError("decode response: empty body")
        return token

    def delete(self, uuid: str) -> None:
        """Delete an access token by UUID."""
        self.transport.delete(f"{_TOKENS_PATH}/{uuid}")
        _logger.info(f"Deleted access token {uuid}")

    def list(self) -> list[AccessToken]:
        """
        List every personal access token of the account.

        Secrets are never part of the listing.
        """
        return self.transport.collect_all(_TOKENS_PATH, _parse_access_token)
