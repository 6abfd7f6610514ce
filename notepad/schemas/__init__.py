# Pydantic schemas package
from notepad.schemas.base import ErrorResponse, MessageResponse

__all__ = [
    "ErrorResponse",
    "MessageResponse",
]
