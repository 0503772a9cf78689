"""Repositories resource client."""

from datetime import datetime
from typing import TYPE_CHECKING, Any

from annuminas.exceptions import DecodeError, HubError
from annuminas.logging import get_logger
from annuminas.types.repos import Repository

if TYPE_CHECKING:
    from annuminas.transport import HTTPTransport

_logger = get_logger()


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse a Docker Hub ISO 8601 timestamp; empty or missing gives None."""
    if not value:
        return None
    return datetime.fromisoformat(value)


def _parse_repository(data: dict[str, Any]) -> Repository:
    return Repository(
        name=data["name"],
        namespace=data.get("namespace") or "",
        description=data.get("description") or "",
        is_private=bool(data.get("is_private", False)),
        star_count=int(data.get("star_count") or 0),
        pull_count=int(data.get("pull_count") or 0),
        last_updated=parse_timestamp(data.get("last_updated")),
        date_registered=parse_timestamp(data.get("date_registered")),
    )


def _repos_path(namespace: str) -> str:
    return f"/v2/namespaces/{namespace}/repositories"


class ReposClient:
    """Client for repository-related operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the repos client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def get(self, namespace: str, name: str) -> Repository:
        """
        Get repository details.

        Args:
            namespace: User or organization owning the repository
            name: Repository name

        Returns:
            Repository object

        Raises:
            APIError: If the repository is not found or access is denied
        """
        repo = self.transport.get(
            f"{_repos_path(namespace)}/{name}", decode=_parse_repository
        )
        if repo is None:
            raise DecodeError("decode response: empty body")
        return repo

    def exists(self, namespace: str, name: str) -> bool:
        """
        Check whether a repository exists.

        Only a 200 answer means "exists". A 404 means "absent"; any other
        error status (401, 403, 5xx) is raised rather than read as absent.

        Raises:
            APIError: On any error status other than 404
        """
        status = self.transport.head_check(f"{_repos_path(namespace)}/{name}")
        return status == 200

    def create(
        self,
        namespace: str,
        name: str,
        description: str = "",
        is_private: bool = False,
    ) -> Repository:
        """
        Create a new repository.

        Args:
            namespace: User or organization that will own the repository
            name: Repository name
            description: Short description
            is_private: Whether the repository is private

        Returns:
            The created Repository

        Raises:
            APIError: If the repository already exists or access is denied
        """
        body = {
            "name": name,
            "namespace": namespace,
            "description": description,
            "is_private": is_private,
        }

        repo = self.transport.post(
            _repos_path(namespace), body, decode=_parse_repository
        )
        if repo is None:
            raise DecodeError("decode response: empty body")
        _logger.info(f"Created repository {namespace}/{name}")
        return repo

    def ensure(self, namespace: str, name: str) -> bool:
        """
        Create a public repository with no description unless it exists.

        Repeated calls create the repository at most once.

        Returns:
            True if the repository was created, False if it already existed

        Raises:
            HubError: Tagged "check repo existence" or "create repo"
                depending on which step failed
        """
        try:
            if self.exists(namespace, name):
                _logger.debug(f"Repository {namespace}/{name} already exists")
                return False
        except HubError as e:
            raise e.with_context("check repo existence") from e

        try:
            self.create(namespace, name, "", False)
        except HubError as e:
            raise e.with_context("create repo") from e
        return True

    def delete(self, namespace: str, name: str) -> None:
        """Delete a repository."""
        self.transport.delete(f"{_repos_path(namespace)}/{name}")
        _logger.info(f"Deleted repository {namespace}/{name}")

    def list(self, namespace: str) -> list[Repository]:
        """
        List every repository in a namespace.

        Follows pagination to the last page.

        Returns:
            List of Repository objects in server order
        """
        return self.transport.collect_all(_repos_path(namespace), _parse_repository)
