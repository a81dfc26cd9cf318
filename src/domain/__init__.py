"""Domain layer - Pure business logic.

Entities, value objects, enums, validation types and protocols (ports) for
accounts, verification codes, devices, sessions and roles. The domain layer
has NO dependencies on any framework or infrastructure.

Structure:
- entities/: Domain entities (mutable, have identity)
- value_objects/: Value objects (immutable, no identity)
- protocols/: Ports implemented by infrastructure adapters
- validators/: Shared validation functions
"""
