"""
Service Interfaces

Abstract base classes for the service layer following Dependency Inversion Principle.
Endpoints depend on these, so tests can substitute a fake tracker.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Mapping

from schemas import ExerciseAdded, ExerciseLog, NewUserResponse, UserRead
from services.result import Result


class IExerciseTracker(ABC):
    """
    Interface for the exercise tracker operations.

    Every operation takes raw, unvalidated request input and returns a
    ``Result``. Business failures (validation, unknown user, storage
    constraint) come back as failed results, never as raised exceptions.
    """

    @abstractmethod
    async def register_user(self, payload: Mapping[str, Any]) -> Result[NewUserResponse]:
        """
        Create a user from a registration request.

        Args:
            payload: Request body fields (``username``)

        Returns:
            Result holding the created user
        """
        pass

    @abstractmethod
    async def add_exercise(self, payload: Mapping[str, Any]) -> Result[ExerciseAdded]:
        """
        Append an exercise entry to an existing user's log.

        Args:
            payload: Request body fields (``userId``, ``description``,
                ``duration``, optional ``date``)

        Returns:
            Result holding the stored entry with its owner
        """
        pass

    @abstractmethod
    async def get_log(self, params: Mapping[str, Any]) -> Result[ExerciseLog]:
        """
        Read a user's log with optional date bounds and cap.

        Args:
            params: Query parameters (``userId``, optional ``from``, ``to``,
                ``limit``)

        Returns:
            Result holding the user and matching log lines
        """
        pass

    @abstractmethod
    async def list_users(self) -> List[UserRead]:
        """
        List every registered user.

        Returns:
            All users in insertion order
        """
        pass
