"""Infrastructure layer - Adapters implementing the domain protocols.

Structure:
- persistence/: SQLAlchemy models and repositories
- security/: bcrypt, JWT and TOTP services
- authorization/: Casbin permission resolver
- enrichers/: User-Agent parsing
- oauth/: Google OAuth client
- email/, logging/: Outbound notifications and structured logs

The domain layer does NOT depend on infrastructure.
"""
