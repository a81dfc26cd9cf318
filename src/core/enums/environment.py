"""Application environment types.

Used by Settings to pick environment-specific behavior (log renderer,
debug endpoints).

Environments:
- DEVELOPMENT: Local development with human-readable logs
- TESTING: Automated test execution with isolated database
- CI: Continuous integration environment
- PRODUCTION: Production deployment
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
