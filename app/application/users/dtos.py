"""
Data Transfer Objects for the users application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserResult:
    """Output DTO for a single user.

    Attributes:
        name: Display name of the user.
    """

    name: str
