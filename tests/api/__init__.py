"""HTTP tests for the /auth and /admin routers.

Handlers and repositories are replaced through ``app.dependency_overrides``;
the JWT service, Casbin resolver, envelopes and exception handlers are real.
"""
