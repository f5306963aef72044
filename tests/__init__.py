"""Test suite for the Gatekeeper identity core.

Test structure follows the test pyramid:
- unit/: Unit tests - domain logic, handlers and adapters in isolation
- integration/: Integration tests - the identity core wired end-to-end with
  in-memory repositories
"""
