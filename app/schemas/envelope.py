"""Response envelopes shared by the REST endpoints."""
from __future__ import annotations

from typing import Generic, Literal, TypeVar

from pydantic import BaseModel

ResultT = TypeVar("ResultT")


class ApiResponse(BaseModel, Generic[ResultT]):
    """Successful response carrying a result payload."""

    success: Literal[True] = True
    result: ResultT


class ApiMessage(BaseModel):
    """Successful response carrying only a message."""

    success: Literal[True] = True
    message: str


class ApiError(BaseModel):
    """Failure response."""

    success: Literal[False] = False
    error: str
