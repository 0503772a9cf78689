"""Personal access token data models."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class AccessToken:
    """
    Personal access token information.

    ``token`` holds the secret value. The registry returns it only in the
    response to token creation; every other operation yields an empty string.
    """

    uuid: str
    token_label: str
    scopes: list[str]
    is_active: bool
    created_at: datetime | None
    last_used: datetime | None
    client_id: str = ""
    creator_ip: str = ""
    creator_ua: str = ""
    generated_by: str = ""
    token: str = field(default="", repr=False)
