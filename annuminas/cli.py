"""CLI for Annuminas."""

import argparse
import logging
import sys
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from tabulate import tabulate

from annuminas import __version__
from annuminas.client import HubClient
from annuminas.exceptions import HubError
from annuminas.logging import configure_logging
from annuminas.types.repos import Repository
from annuminas.types.tokens import AccessToken

DEFAULT_SCOPES = "repo:read"


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="annuminas",
        description="Manage Docker Hub repositories and access tokens.",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Enable debug logging",
        default=False,
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("ping", help="Verify the configured credentials")

    # Inherited by every repo subcommand
    ns_parser = argparse.ArgumentParser(add_help=False)
    ns_parser.add_argument(
        "--namespace",
        default="",
        help="Namespace (user or org); defaults to DOCKERHUB_USERNAME",
    )

    repo = commands.add_parser("repo", help="Manage Docker Hub repositories")
    repo_commands = repo.add_subparsers(dest="action", required=True)

    repo_commands.add_parser(
        "list", parents=[ns_parser], help="List all repositories in the namespace"
    )

    repo_get = repo_commands.add_parser(
        "get", parents=[ns_parser], help="Get details for a specific repository"
    )
    repo_get.add_argument("name", help="Repository name")

    repo_create = repo_commands.add_parser(
        "create", parents=[ns_parser], help="Create a new repository"
    )
    repo_create.add_argument("--name", required=True, help="Repository name")
    repo_create.add_argument(
        "--private",
        action="store_true",
        default=False,
        help="Whether the repository is private",
    )
    repo_create.add_argument(
        "--description", default="", help="Short description for the repository"
    )

    repo_delete = repo_commands.add_parser(
        "delete", parents=[ns_parser], help="Delete a repository by name"
    )
    repo_delete.add_argument("--name", required=True, help="Repository name")

    repo_ensure = repo_commands.add_parser(
        "ensure",
        parents=[ns_parser],
        help="Create a repository if it doesn't exist (idempotent)",
    )
    repo_ensure.add_argument("--name", required=True, help="Repository name")

    token = commands.add_parser("token", help="Manage Docker Hub personal access tokens")
    token_commands = token.add_subparsers(dest="action", required=True)

    token_create = token_commands.add_parser(
        "create",
        help="Create a new personal access token",
        description=(
            "Create a new Docker Hub personal access token. Valid scopes: "
            "repo:admin, repo:write, repo:read, repo:public_read. Higher "
            "scopes include lower ones (e.g. repo:write implies repo:read)."
        ),
    )
    token_create.add_argument("--label", required=True, help="Friendly name for the token")
    token_create.add_argument(
        "--scopes",
        default=DEFAULT_SCOPES,
        help="Comma-separated scopes (repo:admin, repo:write, repo:read, repo:public_read)",
    )

    token_commands.add_parser("list", help="List all personal access tokens")

    token_get = token_commands.add_parser("get", help="Show one personal access token")
    token_get.add_argument("--uuid", required=True, help="UUID of the token")

    token_delete = token_commands.add_parser(
        "delete", help="Delete a personal access token by UUID"
    )
    token_delete.add_argument("--uuid", required=True, help="UUID of the token to delete")

    return parser.parse_args(argv)


def _load_env() -> None:
    # ~/.dotfiles/.env wins over ./.env; neither overrides the real environment
    dotfile = Path.home() / ".dotfiles" / ".env"
    if dotfile.exists():
        load_dotenv(dotfile)
    else:
        load_dotenv(Path(".env"))


def _error_text(error: HubError) -> str:
    """The normalized message, prefixed by any context tags."""
    return ": ".join([*error.context, error.message])


def _fmt_time(value: datetime | None, default: str = "") -> str:
    return value.isoformat() if value else default


def _render_table(headers: list[str], rows: list[list[Any]]) -> str:
    """Render rows as a plain aligned table under a dashed header rule."""
    return tabulate(rows, headers=headers, tablefmt="simple", disable_numparse=True)


def _print_repository(repo: Repository) -> None:
    print(f"Name:            {repo.name}")
    print(f"Namespace:       {repo.namespace}")
    print(f"Description:     {repo.description}")
    print(f"Private:         {str(repo.is_private).lower()}")
    print(f"Stars:           {repo.star_count}")
    print(f"Pulls:           {repo.pull_count}")
    print(f"Last Updated:    {_fmt_time(repo.last_updated)}")
    print(f"Date Registered: {_fmt_time(repo.date_registered)}")


def _print_access_token(token: AccessToken) -> None:
    print(f"UUID:          {token.uuid}")
    print(f"Label:         {token.token_label}")
    print(f"Scopes:        {', '.join(token.scopes)}")
    print(f"Active:        {str(token.is_active).lower()}")
    print(f"Created:       {_fmt_time(token.created_at)}")
    print(f"Last Used:     {_fmt_time(token.last_used, 'never')}")


def _repo_command(client: HubClient, args: argparse.Namespace) -> None:
    namespace = args.namespace or client.username

    if args.action == "list":
        repos = client.repos.list(namespace)
        if not repos:
            print("No repositories found.")
            return
        print(
            _render_table(
                ["NAME", "PRIVATE", "STARS", "PULLS", "LAST UPDATED"],
                [
                    [
                        r.name,
                        str(r.is_private).lower(),
                        r.star_count,
                        r.pull_count,
                        _fmt_time(r.last_updated),
                    ]
                    for r in repos
                ],
            )
        )
    elif args.action == "get":
        _print_repository(client.repos.get(namespace, args.name))
    elif args.action == "create":
        repo = client.repos.create(namespace, args.name, args.description, args.private)
        print(f"Repository created: {repo.namespace}/{repo.name}")
    elif args.action == "delete":
        client.repos.delete(namespace, args.name)
        print(f"Repository deleted: {namespace}/{args.name}")
    elif args.action == "ensure":
        client.repos.ensure(namespace, args.name)
        print(f"Repository ensured: {namespace}/{args.name}")


def _token_command(client: HubClient, args: argparse.Namespace) -> None:
    if args.action == "create":
        scopes = [s.strip() for s in args.scopes.split(",") if s.strip()]
        token = client.tokens.create(args.label, scopes)
        print(f"Token created: {token.token_label}")
        print(f"UUID:          {token.uuid}")
        print(f"Scopes:        {', '.join(token.scopes)}")
        print(f"Token:         {token.token}")
        print("\nSave this token now, it cannot be retrieved later.")
    elif args.action == "list":
        tokens = client.tokens.list()
        if not tokens:
            print("No personal access tokens found.")
            return
        print(
            _render_table(
                ["UUID", "LABEL", "SCOPES", "ACTIVE", "CREATED", "LAST USED"],
                [
                    [
                        t.uuid,
                        t.token_label,
                        ",".join(t.scopes),
                        str(t.is_active).lower(),
                        _fmt_time(t.created_at),
                        _fmt_time(t.last_used, "never"),
                    ]
                    for t in tokens
                ],
            )
        )
    elif args.action == "get":
        _print_access_token(client.tokens.get(args.uuid))
    elif args.action == "delete":
        client.tokens.delete(args.uuid)
        print(f"Token deleted: {args.uuid}")


def main(argv: Sequence[str] | None = None, client: HubClient | None = None) -> int:
    """
    Run the command line.

    Args:
        argv: Arguments (default: sys.argv[1:])
        client: Client to use instead of one built from the environment.
            It is left open for the caller to close.

    Returns:
        Process exit status
    """
    args = _parse_args(argv)
    if args.debug:
        configure_logging(level=logging.DEBUG)

    owns_client = client is None
    try:
        if client is None:
            _load_env()
            client = HubClient.from_env()

        try:
            if args.command == "ping":
                client.ping()
                print(f"Credentials valid for {client.username}")
            elif args.command == "repo":
                _repo_command(client, args)
            elif args.command == "token":
                _token_command(client, args)
        finally:
            if owns_client:
                client.close()
    except HubError as e:
        print(f"Error: {_error_text(e)}", file=sys.stderr)
        return 1
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
