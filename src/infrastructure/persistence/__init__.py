"""Persistence infrastructure.

Repository adapters for the domain's repository ports. Only in-memory
adapters ship here; a database-backed adapter implements the same protocols.
"""
