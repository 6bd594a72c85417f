"""API routes."""
from fastapi import APIRouter

from bookstore.api.books import router as books_router

api_router = APIRouter()

api_router.include_router(books_router)

__all__ = ["api_router"]
