"""Book Pydantic schemas."""
from pydantic import BaseModel


class BookBase(BaseModel):
    """Fields shared by stored books and incoming requests."""

    title: str
    author: str


class NewBookRequest(BookBase):
    """Schema for creating or replacing a book. Ids are assigned by the store."""

    pass


class Book(BookBase):
    """A stored book."""

    id: int
