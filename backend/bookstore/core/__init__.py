"""Core utilities."""
from bookstore.core.exceptions import AppException, NotFoundError
from bookstore.core.logging import get_logger, setup_logging
from bookstore.core.rwlock import ReadWriteLock

__all__ = [
    # Exceptions
    "AppException",
    "NotFoundError",
    # Logging
    "get_logger",
    "setup_logging",
    # Concurrency
    "ReadWriteLock",
]
