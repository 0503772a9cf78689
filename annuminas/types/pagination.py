"""Paginated response envelope."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    """One page of a Docker Hub listing (count/next/previous/results)."""

    count: int
    next: str | None
    previous: str | None
    results: list[T]
