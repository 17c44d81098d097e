"""
Use case: List all users.

Input: none
Output: list[UserResult]
Side effects: None (read-only query).
Failure cases: ApplicationError (404) when no user exists.
"""

import logging
from http import HTTPStatus

from app.application.users.dtos import UserResult
from app.domain.users.errors import ApplicationError
from app.domain.users.ports import UserRepository

logger = logging.getLogger(__name__)

NO_USER_FOUND = "No user found"


class GetUsersUseCase:
    """Orchestrates retrieving the user list."""

    def __init__(self, user_repo: UserRepository) -> None:
        """Initialize the use case.

        Args:
            user_repo: Repository for retrieving users.
        """
        self._user_repo = user_repo

    def execute(self) -> list[UserResult]:
        """Run the get users use case.

        Returns:
            Users in the order the repository stores them.

        Raises:
            ApplicationError: If the repository holds no user.
        """
        users = self._user_repo.list_users()
        logger.info("Retrieved %d users", len(users))

        if not users:
            raise ApplicationError(NO_USER_FOUND, HTTPStatus.NOT_FOUND)

        return [UserResult(name=user.name) for user in users]
