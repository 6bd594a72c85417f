"""Pydantic schemas for request/response validation."""
from bookstore.schemas.book import Book, BookBase, NewBookRequest
from bookstore.schemas.common import ErrorResponse, StatusResponse

__all__ = [
    # Book
    "Book",
    "BookBase",
    "NewBookRequest",
    # Common
    "ErrorResponse",
    "StatusResponse",
]
