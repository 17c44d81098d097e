"""
Domain entities for the users bounded context.

Entities contain no framework imports and no IO operations.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """A user record exposed by the API."""

    name: str
