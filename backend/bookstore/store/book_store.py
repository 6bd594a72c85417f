"""
Thread-safe in-memory book store.
"""
from typing import List

from bookstore.core.exceptions import NotFoundError
from bookstore.core.logging import get_logger
from bookstore.core.rwlock import ReadWriteLock
from bookstore.schemas.book import Book

logger = get_logger("store")


class BookStore:
    """
    List-based in-memory collection of books.

    Reads take shared access and writes take exclusive access, only for the
    body of each operation. Values handed to callers are copies; the store
    never exposes the records it holds.

    Ids are assigned as ``len(books) + 1`` at creation time. After a delete
    this can hand out an id that is still in use; lookups then act on the
    first match in insertion order.
    """

    def __init__(self) -> None:
        self._books: List[Book] = []
        self._lock = ReadWriteLock()

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._books)

    def list(self) -> List[Book]:
        """Snapshot of all books in insertion order."""
        with self._lock.read_locked():
            return [book.model_copy() for book in self._books]

    def get(self, book_id: int) -> Book:
        """Return the book with ``book_id`` or raise NotFoundError."""
        with self._lock.read_locked():
            return self._find(book_id).model_copy()

    def create(self, title: str, author: str) -> Book:
        with self._lock.write_locked():
            book = Book(id=len(self._books) + 1, title=title, author=author)
            self._books.append(book)
            logger.debug(f"Stored book {book.id} ({len(self._books)} total)")
            return book.model_copy()

    def update(self, book_id: int, title: str, author: str) -> Book:
        """Overwrite title and author of an existing book; the id is kept."""
        with self._lock.write_locked():
            book = self._find(book_id)
            book.title = title
            book.author = author
            return book.model_copy()

    def delete(self, book_id: int) -> None:
        with self._lock.write_locked():
            for idx, book in enumerate(self._books):
                if book.id == book_id:
                    del self._books[idx]
                    logger.debug(f"Removed book {book_id} ({len(self._books)} left)")
                    return
            raise NotFoundError("Book", book_id)

    def _find(self, book_id: int) -> Book:
        # Caller must hold the lock
        for book in self._books:
            if book.id == book_id:
                return book
        raise NotFoundError("Book", book_id)
