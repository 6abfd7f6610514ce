"""
Service base class.

A service wraps the repositories of one request's session. Services never
commit; the request's session is committed or rolled back as a whole when
the endpoint finishes.
"""

from collections.abc import Awaitable
from typing import Any, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from notepad.core.exceptions import ConflictError, DatabaseError
from notepad.core.logging import get_logger

T = TypeVar("T")

_UNIQUE_MARKERS = ("unique", "duplicate")


class BaseService:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._logger = get_logger(type(self).__module__)

    @property
    def session(self) -> AsyncSession:
        return self._session

    async def _execute_db_operation(self, operation: str, pending: Awaitable[T]) -> T:
        """
        Await a repository call, turning driver errors into application errors.

        A unique-constraint violation becomes ConflictError so callers can
        translate it (registration turns it into DuplicateUserError). Every
        other SQLAlchemy failure becomes DatabaseError, whose message names
        the operation only; the driver text goes to the log.
        """
        try:
            return await pending
        except IntegrityError as e:
            self._logger.warning(
                "Constraint violated",
                extra={"operation": operation, "error": str(e.orig)},
            )
            if any(marker in str(e.orig).lower() for marker in _UNIQUE_MARKERS):
                raise ConflictError("Resource already exists") from e
            raise DatabaseError(f"Constraint violated during {operation}") from e
        except SQLAlchemyError as e:
            self._logger.error(
                "Storage failure",
                extra={"operation": operation, "error": str(e)},
            )
            raise DatabaseError(f"Storage failure during {operation}") from e

    def _log_operation(self, operation: str, **context: Any) -> None:
        self._logger.info(operation, extra={"service": type(self).__name__, **context})

    def _log_debug(self, message: str, **context: Any) -> None:
        self._logger.debug(message, extra={"service": type(self).__name__, **context})
