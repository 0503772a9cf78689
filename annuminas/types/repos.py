"""Repository-related data models."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Repository:
    """Docker Hub repository information."""

    name: str
    namespace: str
    description: str
    is_private: bool
    star_count: int
    pull_count: int
    last_updated: datetime | None
    date_registered: datetime | None
