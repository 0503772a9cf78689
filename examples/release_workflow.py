#!/usr/bin/env python3
"""
Annuminas - CI release preparation example

Prepares a Docker Hub account for a CI pipeline:
1. Load credentials from the environment
2. Ensure the target repository exists
3. Mint a push token for the pipeline
4. Show which tokens the account holds

Set DOCKERHUB_USERNAME and DOCKERHUB_TOKEN before running.
"""

import logging
import sys

from annuminas import HubClient, HubError, configure_logging


def main() -> None:
    """Run the release preparation workflow."""
    if len(sys.argv) != 2:
        print("usage: release_workflow.py REPOSITORY", file=sys.stderr)
        sys.exit(2)
    repo_name = sys.argv[1]

    configure_logging(level=logging.INFO)

    try:
        with HubClient.from_env() as client:
            namespace = client.username

            print(f"1. Ensuring {namespace}/{repo_name}...")
            if client.repos.ensure(namespace, repo_name):
                print("   Created")
            else:
                print("   Already present")

            print("\n2. Creating a push token...")
            token = client.tokens.create(f"ci-{repo_name}", ["repo:write"])
            print(f"   UUID:  {token.uuid}")
            print(f"   Token: {token.token}")
            print("   Store it in your CI secrets now; Docker Hub will not show it again.")

            print("\n3. Tokens on this account:")
            for t in client.tokens.list():
                state = "active" if t.is_active else "inactive"
                print(f"   {t.token_label:<30} {','.join(t.scopes):<20} {state}")
    except HubError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
