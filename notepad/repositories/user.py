"""
User Repository.

Data access for user accounts (the credential store).
"""

from sqlalchemy import select, update

from notepad.models.user import User
from notepad.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User model."""

    model = User

    async def get_by_username(self, username: str) -> User | None:
        """Get a user by exact username."""
        result = await self.session.execute(
            select(User).where(User.username == username)
        )
        return result.scalar_one_or_none()

    async def exists_by_username(self, username: str) -> bool:
        """Check whether a username is taken."""
        result = await self.session.execute(
            select(User.id).where(User.username == username)
        )
        return result.scalar_one_or_none() is not None

    async def set_password_hash(self, user_id: str, password_hash: str) -> bool:
        """
        Replace a user's password hash.

        Returns:
            True if the user existed and was updated
        """
        result = await self.session.execute(
            update(User)
            .where(User.id == user_id)
            .values(password_hash=password_hash)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1
