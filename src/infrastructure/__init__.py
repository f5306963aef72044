"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- cache/: In-process TTL cache plus typed role/permission snapshot caches
- security/: bcrypt hashing, JWT signing, token revocation registries
- enrichers/: User agent parsing for sessions
- logging/: structlog console adapter
- notifications/: Role notification adapters
- persistence/: In-memory repositories

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
