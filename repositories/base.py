"""
Base Repository Pattern with SQLAlchemy

Provides the lookup shared by all repositories.
"""
from typing import TypeVar, Generic, Optional, Type

from sqlalchemy.ext.asyncio import AsyncSession

from database.models.base import Base


# Generic type for model classes
ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """
    Base repository with common async database operations.

    Subclasses should set the `model` class attribute to their specific
    SQLAlchemy model class.

    Example:
        class RankedListRepository(BaseRepository[RankedList]):
            model = RankedList
    """

    model: Type[ModelT]

    def __init__(self, session: AsyncSession):
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def get(self, entity_id: int) -> Optional[ModelT]:
        """
        Get entity by ID.

        Args:
            entity_id: Primary key value

        Returns:
            Entity or None if not found
        """
        return await self.session.get(self.model, entity_id)
