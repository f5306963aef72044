"""Application layer - Use cases and orchestration.

This layer contains the identity core's use cases following the CQRS pattern:
- Commands: Write operations (authenticate, reset attempts, role changes)
- Queries: Read operations (login attempts, roles, permission checks)
- Services: Orchestration shared by several handlers (tokens and sessions,
  role notifications)

Structure:
- commands/: Command dataclasses and handlers (write operations)
- queries/: Query dataclasses and handlers (read operations)
- services/: Token/Session Service, notification dispatch
- dtos/: Result dataclasses returned to callers

The application layer orchestrates domain logic but contains no business rules.
"""
