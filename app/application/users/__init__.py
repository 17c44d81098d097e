"""
Users bounded context: application layer.

Use cases and DTOs for reading users.
"""
