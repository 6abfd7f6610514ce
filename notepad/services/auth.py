"""
Auth Service.

The credential store: registration, credential verification, login and
password change. Hashing runs on the shared thread pool.
"""

from functools import lru_cache

from sqlalchemy.ext.asyncio import AsyncSession

from notepad.core.concurrency import run_blocking
from notepad.core.exceptions import (
    ConflictError,
    DuplicateUserError,
    InvalidCredentialsError,
    UserNotFoundError,
)
from notepad.core.security import hash_password, issue_token, verify_password
from notepad.models.user import User
from notepad.repositories.user import UserRepository
from notepad.services.base import BaseService


@lru_cache
def _dummy_password_hash() -> str:
    """Hash checked against when the username is unknown, so both failures cost the same."""
    return hash_password("notepad-dummy-password")


def _verify_against_dummy(password: str) -> bool:
    return verify_password(password, _dummy_password_hash())


class AuthService(BaseService):
    """
    Service for user accounts.

    Unknown usernames and wrong passwords fail with the same
    InvalidCredentialsError so callers cannot tell which usernames exist.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.repo = UserRepository(session)

    async def register(self, username: str, password: str) -> User:
        """
        Create a user account.

        Raises:
            DuplicateUserError: If the username is taken
        """
        self._log_operation("Registering user", username=username)

        if await self.repo.exists_by_username(username):
            raise DuplicateUserError()

        password_hash = await run_blocking(hash_password, password)

        try:
            user = await self._execute_db_operation(
                "register_user",
                self.repo.create(username=username, password_hash=password_hash),
            )
        except ConflictError as e:
            # Lost a race with a concurrent registration of the same name
            raise DuplicateUserError() from e

        self._log_debug("User registered", user_id=user.id)
        return user

    async def verify_credentials(self, username: str, password: str) -> User:
        """
        Check a username/password pair.

        Returns:
            The matching user

        Raises:
            InvalidCredentialsError: If the username is unknown or the password is wrong
        """
        user = await self.repo.get_by_username(username)

        if user is None:
            await run_blocking(_verify_against_dummy, password)
            self._log_debug("Login rejected", reason="unknown_user")
            raise InvalidCredentialsError()

        if not await run_blocking(verify_password, password, user.password_hash):
            self._log_debug("Login rejected", reason="password_mismatch", user_id=user.id)
            raise InvalidCredentialsError()

        return user

    async def login(self, username: str, password: str) -> tuple[User, str]:
        """
        Verify credentials and issue a bearer token.

        Returns:
            Tuple of (user, token)
        """
        user = await self.verify_credentials(username, password)
        token = issue_token(user.id)
        self._log_operation("User logged in", user_id=user.id)
        return user, token

    async def change_password(
        self,
        user_id: str,
        current_password: str,
        new_password: str,
    ) -> None:
        """
        Replace a user's password after checking the current one.

        Raises:
            UserNotFoundError: If the user no longer exists
            InvalidCredentialsError: If the current password is wrong
        """
        user = await self.repo.get_by_id_or_none(user_id)
        if user is None:
            raise UserNotFoundError()

        if not await run_blocking(verify_password, current_password, user.password_hash):
            raise InvalidCredentialsError("Current password is incorrect")

        password_hash = await run_blocking(hash_password, new_password)
        updated = await self._execute_db_operation(
            "change_password",
            self.repo.set_password_hash(user_id, password_hash),
        )
        if not updated:
            raise UserNotFoundError()

        self._log_operation("Password changed", user_id=user_id)
