"""FastAPI application entry point."""
import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from bookstore import __version__
from bookstore.api import api_router
from bookstore.config import Settings, get_settings
from bookstore.core.exceptions import AppException, NotFoundError
from bookstore.core.logging import get_logger, setup_logging
from bookstore.schemas import ErrorResponse, StatusResponse
from bookstore.store import BookStore

logger = get_logger("main")
access_logger = get_logger("access")


def create_app(
    store: Optional[BookStore] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Build the application around one explicitly owned BookStore."""
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="In-memory Book Store API",
        version=__version__,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    app.state.settings = settings
    app.state.book_store = store if store is not None else BookStore()

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log method, path, status and elapsed time of every request."""
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        access_logger.info(
            f'"{request.method} {request.url.path}" {response.status_code} {elapsed_ms:.2f}ms'
        )
        return response

    # Exception handlers
    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        """Handle missing resources as plain-text 404s."""
        return PlainTextResponse(exc.message, status_code=404)

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException):
        """Handle application exceptions."""
        body = ErrorResponse(detail=exc.message, error_code=exc.error_code)
        return JSONResponse(
            status_code=400,
            content={**body.model_dump(), "details": exc.details},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.exception(f"Unhandled exception on {request.method} {request.url.path}")

        if settings.debug:
            return JSONResponse(
                status_code=500,
                content={
                    "detail": str(exc),
                    "type": type(exc).__name__,
                },
            )

        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )

    app.include_router(api_router)

    @app.get("/health", response_model=StatusResponse)
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "app": settings.app_name}

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "name": settings.app_name,
            "version": __version__,
            "docs": "/docs" if settings.debug else None,
        }

    return app


app = create_app()


def run() -> None:
    """Start the server with the configured host and port."""
    import uvicorn

    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info(f"Server started on {settings.host}:{settings.port}")

    uvicorn.run(
        "bookstore.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
