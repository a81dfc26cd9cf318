"""Application layer - Use cases and orchestration.

Commands and queries are frozen dataclasses, each with one handler class
that returns ``Result[T, ApplicationError]``.

Structure:
- commands/: Write flows (registration, login, sessions, two-factor, admin)
- queries/: Read flows (profile, sessions, devices, statistics)
- services/: Collaborators shared by several handlers (device registry,
  session issuance)
"""
