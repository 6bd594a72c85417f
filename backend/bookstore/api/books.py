"""Book API routes."""
from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from bookstore.api.deps import get_book_store
from bookstore.core.logging import get_logger
from bookstore.schemas import Book, NewBookRequest
from bookstore.store import BookStore

logger = get_logger("api.books")

router = APIRouter(prefix="/books", tags=["Books"])

NOT_FOUND = {404: {"description": "Book not found.", "content": {"text/plain": {}}}}


@router.get("", response_model=list[Book])
async def list_books(store: BookStore = Depends(get_book_store)) -> list[Book]:
    """List all books in insertion order."""
    logger.info("get all books")
    return store.list()


@router.get("/{book_id}", response_model=Book, responses=NOT_FOUND)
async def get_book(
    book_id: int,
    store: BookStore = Depends(get_book_store),
) -> Book:
    """Get a book by ID."""
    logger.info(f"get book {book_id}")
    return store.get(book_id)


@router.post("", response_model=Book, status_code=status.HTTP_201_CREATED)
async def create_book(
    book_in: NewBookRequest,
    store: BookStore = Depends(get_book_store),
) -> Book:
    """Create a new book."""
    logger.info("create book")
    return store.create(book_in.title, book_in.author)


@router.put("/{book_id}", response_model=Book, responses=NOT_FOUND)
async def update_book(
    book_id: int,
    book_in: NewBookRequest,
    store: BookStore = Depends(get_book_store),
) -> Book:
    """Replace the title and author of a book."""
    logger.info(f"update book {book_id}")
    return store.update(book_id, book_in.title, book_in.author)


@router.delete(
    "/{book_id}",
    response_class=PlainTextResponse,
    responses=NOT_FOUND,
)
async def delete_book(
    book_id: int,
    store: BookStore = Depends(get_book_store),
) -> str:
    """Delete a book."""
    logger.info(f"delete book {book_id}")
    store.delete(book_id)
    return "Book deleted"
