"""
User repository for exercise-user data access operations.
"""

from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from models import ExerciseUser
from utils.uuid_helper import is_valid_uuid
from .base_repository import BaseRepository


class UserRepository(BaseRepository[ExerciseUser]):
    """Repository for ExerciseUser model operations."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, ExerciseUser)

    async def create_user(self, username: str) -> ExerciseUser:
        """
        Insert a new user with a freshly generated id.

        Args:
            username: Display name (duplicates allowed)

        Returns:
            Created user

        Raises:
            StorageConstraintError: If the username violates the schema
        """
        return await self.create(ExerciseUser(username=username))

    async def find_user(self, user_id: str) -> Optional[ExerciseUser]:
        """
        Resolve a caller-supplied user id.

        Ids that are not UUIDs cannot match any record and are answered
        without a database round trip.

        Args:
            user_id: Identifier from the request

        Returns:
            The user, or None if the id does not resolve
        """
        if not is_valid_uuid(user_id):
            return None
        return await self.get_by_id(str(user_id))

    async def list_users(self) -> List[ExerciseUser]:
        """Every user, in insertion order."""
        return await self.get_all()
