#!/usr/bin/env python3
"""
Basic Annuminas usage example.

Runs entirely offline against the in-memory fake Docker Hub shipped in
annuminas.testing, which needs the test extra (pip install -e ".[test]").
Run with: python examples/basic_usage.py
"""

from annuminas import APIError, HubClient, HubError
from annuminas.testing import FakeHubServer

print("=== Annuminas Basic Usage Example ===\n")

server = FakeHubServer(username="acme", password="s3cret")
server.add_repository("acme", "web", description="Web frontend", pull_count=1200)
for i in range(60):
    server.add_repository("acme", f"svc-{i:02d}")

with HubClient("acme", "s3cret", transport=server.transport()) as client:
    # 1. Authentication is lazy and happens once
    print("1. Verifying credentials...")
    client.ping()
    client.ping()
    print(f"   Login requests sent: {server.count('POST', '/v2/users/login')}")

    # 2. Listing follows every page
    print("\n2. Listing repositories...")
    repos = client.repos.list("acme")
    print(f"   Found {len(repos)} repositories")
    print(f"   Page requests: {server.count('GET', '/v2/namespaces/acme/repositories')}")

    # 3. Ensure is idempotent
    print("\n3. Ensuring repositories...")
    print(f"   ensure(api) created: {client.repos.ensure('acme', 'api')}")
    print(f"   ensure(api) created: {client.repos.ensure('acme', 'api')}")

    # 4. Errors carry the server's message
    print("\n4. Fetching a missing repository...")
    try:
        client.repos.get("acme", "missing")
    except APIError as e:
        print(f"   {e} (status {e.status})")

    # 5. Token secrets are returned only on creation
    print("\n5. Managing access tokens...")
    created = client.tokens.create("ci", ["repo:write"])
    print(f"   Created {created.token_label}: {created.token[:12]}...")
    for token in client.tokens.list():
        print(f"   Listed {token.token_label}: secret present={bool(token.token)}")
    client.tokens.delete(created.uuid)

# 6. Bad credentials fail on the first call
print("\n6. Using wrong credentials...")
try:
    with HubClient("acme", "wrong", transport=server.transport()) as client:
        client.ping()
except HubError as e:
    print(f"   {e}")

print("\n=== Done ===")
