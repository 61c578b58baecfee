from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from typing import Optional
import logging

from string_analyzer import schemas
from string_analyzer.api.routes import router
from string_analyzer.config import settings
from string_analyzer.store import StringStore, get_store

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_app(store: Optional[StringStore] = None) -> FastAPI:
    """Build the application around a store (a fresh, empty one by default)."""
    app = FastAPI(
        title=settings.app_title,
        description=settings.app_description,
        version=settings.version
    )
    app.state.store = store if store is not None else StringStore()

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router, tags=["strings"])

    @app.get("/")
    def root():
        """Root endpoint"""
        return {
            "message": settings.app_title,
            "version": settings.version,
            "endpoints": {
                "POST /strings": "Analyze and store a string",
                "GET /strings/{string_value}": "Get specific string analysis",
                "GET /strings": "Get all strings with optional filters",
                "GET /strings/filter-by-natural-language": "Filter using natural language",
                "DELETE /strings/{string_value}": "Delete a string"
            }
        }

    @app.get("/health", response_model=schemas.HealthResponse)
    def health_check(request: Request):
        """Health check endpoint"""
        return schemas.HealthResponse(status="healthy", total_strings=len(get_store(request)))

    # Validation error handler
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = {}
        status_code = status.HTTP_400_BAD_REQUEST
        for error in exc.errors():
            loc = tuple(error["loc"])
            field = loc[-1] if loc else "request"
            errors[str(field)] = error["msg"]
            # value was supplied but is not a string
            if loc == ("body", "value") and error["type"] == "string_type":
                status_code = status.HTTP_422_UNPROCESSABLE_ENTITY

        return JSONResponse(
            status_code=status_code,
            content={
                "error": "Invalid data type for 'value' (must be string)"
                if status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
                else "Invalid request body or query parameters",
                "details": errors
            }
        )

    # HTTPException handler
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # If detail is already a dict with 'error' key, return as is
        if isinstance(exc.detail, dict) and "error" in exc.detail:
            return JSONResponse(status_code=exc.status_code, content=exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)}
        )

    # Generic error handler
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception on {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"}
        )

    logger.info(f"{settings.app_title} {settings.version} ready")
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("string_analyzer.main:app", host=settings.host, port=settings.port)
