"""Common Pydantic schemas."""
from typing import Optional

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error response schema."""

    detail: str
    error_code: Optional[str] = None


class StatusResponse(BaseModel):
    """Status response schema."""

    status: str
    app: Optional[str] = None
