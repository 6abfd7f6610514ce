"""
Base Schemas.

Response bodies shared by every endpoint.
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body of every error response."""

    message: str


class MessageResponse(BaseModel):
    """Body of operations that only report an outcome."""

    message: str = Field(examples=["Note archived"])
