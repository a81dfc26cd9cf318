"""Test suite for the Storefront auth API.

- unit/: Handlers, services and adapters with mocked collaborators
- integration/: Repositories against in-memory SQLite
- api/: HTTP endpoints through the FastAPI TestClient
"""
