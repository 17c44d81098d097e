"""
Dependency injection for the users bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
"""

from app.application.users.get_users import GetUsersUseCase
from app.domain.users.ports import UserRepository
from app.infrastructure.users.in_memory_user_repository import (
    InMemoryUserRepositoryAdapter,
)


def get_user_repository() -> UserRepository:
    """Build the repository serving user records."""
    return InMemoryUserRepositoryAdapter()


def get_users_use_case() -> GetUsersUseCase:
    """Build GetUsersUseCase with its infrastructure dependencies."""
    return GetUsersUseCase(user_repo=get_user_repository())
