"""
Exercise repository for exercise-log data access operations.

Supports the Specification Pattern for log queries.
"""

from datetime import datetime
from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from models import Exercise
from .base_repository import BaseRepository
from .specifications import Specification


class ExerciseRepository(BaseRepository[Exercise]):
    """Repository for Exercise model operations."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Exercise)

    async def add_exercise(
        self,
        user_id: str,
        description: str,
        duration: float,
        date: Optional[datetime] = None
    ) -> Exercise:
        """
        Insert an exercise entry.

        Args:
            user_id: Owning user ID; the caller has already resolved it
            description: What was done
            duration: Minutes
            date: Occurrence date (naive UTC); None lets the column
                default assign the write time

        Returns:
            Created exercise with ``date`` populated

        Raises:
            StorageConstraintError: If the entry violates the schema
        """
        exercise = Exercise(user_id=user_id, description=description, duration=duration)
        if date is not None:
            exercise.date = date
        return await self.create(exercise)

    async def find(self, spec: Specification[Exercise], limit: Optional[int] = None) -> List[Exercise]:
        """
        Find exercises using a Specification.

        Args:
            spec: Specification to match exercises against
            limit: Maximum number of entries; None or 0 for no cap

        Returns:
            Matching exercises in insertion order

        Example:
            spec = ExercisesByUserSpec(user.id) & ExercisesAfterSpec(datetime(2024, 1, 1))
            entries = await exercise_repo.find(spec, limit=10)
        """
        query = select(self.model).where(spec.to_sql_filter()).order_by(self.model.created_at)
        if limit:
            query = query.limit(limit)
        result = await self.db.execute(query)
        return list(result.scalars().all())
