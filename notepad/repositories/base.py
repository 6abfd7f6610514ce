"""
Base Repository.

Base classes for all repositories. `OwnedRepository` adds queries that
always filter on the owning user; repositories for user-owned rows must
only expose those.
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from notepad.core.logging import get_logger
from notepad.models.base import Base

logger = get_logger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Base repository with common operations.

    Subclasses should set the model class:

        class UserRepository(BaseRepository[User]):
            model = User
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_id_or_none(self, id: str) -> ModelType | None:
        """Get a single record by ID, returning None if not found."""
        result = await self.session.execute(
            select(self.model).where(self.model.id == str(id))
        )
        return result.scalar_one_or_none()

    async def create(self, **kwargs: Any) -> ModelType:
        """Create a new record."""
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance


class OwnedRepository(BaseRepository[ModelType]):
    """
    Repository for rows that belong to a user.

    Every query includes `owner_id == <caller>`, so a row that exists but
    belongs to someone else behaves exactly like a row that does not exist.
    The model must have an `owner_id` column.
    """

    async def get_owned(
        self,
        owner_id: str,
        id: str,
        for_update: bool = False,
    ) -> ModelType | None:
        """
        Get a record by ID if it belongs to `owner_id`.

        Args:
            owner_id: Authenticated user id
            id: Record id
            for_update: Lock the row until the transaction ends

        Returns:
            The record, or None when missing or owned by someone else
        """
        stmt = select(self.model).where(
            self.model.id == str(id),
            self.model.owner_id == owner_id,
        )
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def delete_owned(self, owner_id: str, id: str) -> bool:
        """
        Delete a record by ID if it belongs to `owner_id`.

        Returns:
            True if exactly one row was deleted
        """
        result = await self.session.execute(
            delete(self.model)
            .where(
                self.model.id == str(id),
                self.model.owner_id == owner_id,
            )
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1
