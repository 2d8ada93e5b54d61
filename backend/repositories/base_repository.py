"""
Base repository providing common async CRUD operations.
"""

from typing import Generic, TypeVar, List, Optional, Type
import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from exceptions import StorageConstraintError

T = TypeVar('T')

logger = logging.getLogger(__name__)


class BaseRepository(Generic[T]):
    """
    Generic base repository providing common CRUD operations.
    All specific repositories should inherit from this class.
    """

    def __init__(self, db: AsyncSession, model: Type[T]):
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy async session
            model: SQLAlchemy model class
        """
        self.db = db
        self.model = model

    async def create(self, obj: T) -> T:
        """
        Insert a new record and flush it so defaults are populated.

        Runs the model's ``check_constraints`` first, then lets the database
        enforce its own constraints.

        Args:
            obj: Model instance to create

        Returns:
            Created model instance

        Raises:
            StorageConstraintError: If the model or the database rejects the record
        """
        check = getattr(obj, "check_constraints", None)
        errors = check() if check else {}
        if errors:
            raise StorageConstraintError(self.model.__name__, errors)

        self.db.add(obj)
        try:
            await self.db.flush()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(f"{self.model.__name__} insert rejected by database: {e.orig}")
            raise StorageConstraintError(
                self.model.__name__,
                {"_constraint": f"{self.model.__name__} validation failed: {e.orig}"}
            ) from e
        return obj

    async def get_by_id(self, id: str) -> Optional[T]:
        """
        Retrieve a record by its ID.

        Args:
            id: Primary key value

        Returns:
            Model instance or None if not found
        """
        return await self.db.get(self.model, id)

    async def get_all(self) -> List[T]:
        """
        Retrieve all records in insertion order.

        Returns:
            List of model instances
        """
        query = select(self.model)
        if hasattr(self.model, "created_at"):
            query = query.order_by(self.model.created_at)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def commit(self) -> None:
        """Commit the unit of work."""
        await self.db.commit()
