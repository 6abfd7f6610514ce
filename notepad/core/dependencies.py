"""
FastAPI Dependencies.

Shared dependencies for request handling, including the authorization
guard that every note operation passes through.
"""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from notepad.core.database import get_db_session
from notepad.core.exceptions import AuthenticationError
from notepad.core.logging import bind_user_context, get_logger
from notepad.core.security import verify_token

logger = get_logger(__name__)

# Function scope: commit or rollback finishes before the response is sent
DbSession = Annotated[AsyncSession, Depends(get_db_session, scope="function")]

# auto_error=False so a missing header goes through our own error format
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user_id(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> str:
    """
    Resolve the caller's identity from the `Authorization: Bearer` header.

    Runs before any data access. The returned id is the only owner id
    downstream queries are allowed to filter on.

    Raises:
        AuthenticationError: If the header is missing or the token is
            malformed, wrongly signed or expired
    """
    if credentials is None or not credentials.credentials:
        logger.warning("Request without bearer token")
        raise AuthenticationError("Not authorized, no token")

    user_id = verify_token(credentials.credentials)
    bind_user_context(user_id)
    return user_id


CurrentUserId = Annotated[str, Depends(get_current_user_id)]
