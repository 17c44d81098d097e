"""
Port interfaces (ABCs) for the users bounded context.

Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod

from app.domain.users.entities import User


class UserRepository(ABC):
    """Port for retrieving users."""

    @abstractmethod
    def list_users(self) -> list[User]:
        """Return every known user, in stored order."""
        raise NotImplementedError
