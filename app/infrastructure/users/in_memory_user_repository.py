"""
In-memory implementation of the UserRepository port.

Serves a fixed list of sample users. Nothing is ever written,
so every call returns the same records in the same order.
"""

from app.domain.users.entities import User
from app.domain.users.ports import UserRepository

SAMPLE_USERS: tuple[User, ...] = (
    User(name="Hello World"),
    User(name="Sample of "),
    User(name="standardized"),
    User(name="responses"),
)


class InMemoryUserRepositoryAdapter(UserRepository):
    """Repository backed by an immutable tuple of users."""

    def __init__(self, users: tuple[User, ...] = SAMPLE_USERS) -> None:
        self._users = tuple(users)

    def list_users(self) -> list[User]:
        return list(self._users)
