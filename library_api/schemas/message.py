"""
Message Schema

Every error response body has the same shape: {"message": "<text>"}.
"""

from pydantic import BaseModel, Field


class Message(BaseModel):
    """Human-readable error message."""

    message: str = Field(..., examples=["There is no book with this ISBN"])
