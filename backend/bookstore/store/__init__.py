"""In-memory storage."""
from bookstore.store.book_store import BookStore

__all__ = ["BookStore"]
