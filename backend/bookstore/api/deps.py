"""FastAPI dependencies."""
from fastapi import Request

from bookstore.store import BookStore


def get_book_store(request: Request) -> BookStore:
    """
    Dependency provider for the BookStore the app was built with.
    """
    return request.app.state.book_store
