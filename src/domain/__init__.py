"""Domain layer - Pure business logic.

This layer contains the core business entities, value objects, protocols
(ports) and domain services. The domain layer has NO dependencies on any
framework or infrastructure - it is pure Python.

Structure:
- entities/: User, Session, Role, Permission (mutable, have identity)
- value_objects/: Conditions, login identifiers, device info (immutable)
- protocols/: Repository, cache, signing and notification ports
- services/: Predicate evaluation over compiled conditions
- errors/: Message constants for the core error kinds

The domain layer defines WHAT the business does, not HOW it's implemented.
"""
