"""Entry point for the Files Manager service."""

import asyncio
import time
import uuid
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from common.logging_config import bind_request_id, reset_request_id, setup_logging
from files_manager.cleanup_task import build_cleaner
from files_manager.config import FM_HOST, FM_PORT
from files_manager.container import ServiceContainer, build_container
from files_manager.database import init_database
from files_manager.exceptions import (
    FilesManagerError,
    MissingFieldError,
    NotAFileError,
    NotFoundError,
    ParentNotFolderError,
    ParentNotFoundError,
    ServerError,
    StorageError,
    UnauthorizedError,
    UserAlreadyExistsError,
)
from files_manager.routes import app_router, auth_router, file_router, user_router
from files_manager.schemas.app import HealthResponse
from files_manager.schemas.common import ErrorResponse

logger = setup_logging('files_manager')

STATUS_CODES = {
    UnauthorizedError: status.HTTP_401_UNAUTHORIZED,
    MissingFieldError: status.HTTP_400_BAD_REQUEST,
    ParentNotFoundError: status.HTTP_400_BAD_REQUEST,
    ParentNotFolderError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    NotAFileError: status.HTTP_400_BAD_REQUEST,
    UserAlreadyExistsError: status.HTTP_400_BAD_REQUEST,
    StorageError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ServerError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_code_for(exc: FilesManagerError) -> int:
    return STATUS_CODES.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)


def create_app(container: Optional[ServiceContainer] = None) -> FastAPI:
    """
    Build the application around ``container``; a container backed by
    Redis, MongoDB and the local filesystem is created when none is given.
    """
    if container is None:
        container = build_container()

    app = FastAPI(
        title="Files Manager",
        description="File and folder storage with session tokens and public sharing",
        version="1.0.0"
    )
    app.state.container = container
    app.state.cleaner = build_cleaner(container)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """
        Middleware to log all HTTP requests and responses.
        """
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id
        context = bind_request_id(request_id)

        start_time = time.time()

        try:
            logger.info(f"Request started: {request.method} {request.url.path}")

            response = await call_next(request)

            duration = time.time() - start_time

            logger.info(
                f"Request completed: {request.method} {request.url.path} "
                f"status={response.status_code} duration={duration:.3f}s"
            )
        finally:
            reset_request_id(context)

        response.headers["X-Request-ID"] = request_id

        return response

    @app.on_event("startup")
    async def startup_event():
        """
        Ensure indexes and the storage directory, then start the sweeper.
        """
        logger.info("Files Manager service starting up...")

        try:
            init_database(container.users, container.files)
        except Exception as e:
            logger.error(f"Failed to ensure database indexes: {e}", exc_info=True)

        container.blob_store.ensure_directory(container.storage_dir)
        logger.info(f"Storage directory ready: {container.storage_dir}")

        if app.state.cleaner.interval_seconds > 0:
            await app.state.cleaner.start()
            logger.info("Background cleanup task started")

    @app.on_event("shutdown")
    async def shutdown_event():
        """
        Cleanup resources on application shutdown.
        """
        logger.info("Files Manager service shutting down...")

        await app.state.cleaner.stop()
        logger.info("Cleanup task stopped")

        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, container.job_queue.close)
        logger.info("Job queue closed")

    @app.exception_handler(FilesManagerError)
    async def files_manager_error_handler(request: Request, exc: FilesManagerError):
        status_code = status_code_for(exc)
        if status_code >= 500:
            logger.error(f"{type(exc).__name__}: {exc} path={request.url.path}", exc_info=exc)
        else:
            logger.warning(f"{type(exc).__name__}: {exc} path={request.url.path}")
        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(detail=exc.message, code=exc.code).model_dump()
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        request_id = getattr(request.state, 'request_id', 'unknown')
        logger.error(
            f"Unhandled exception: {exc} [request_id={request_id}] path={request.url.path}",
            exc_info=exc
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(detail=ServerError.message, code=ServerError.code).model_dump()
        )

    app.include_router(auth_router)
    app.include_router(user_router)
    app.include_router(file_router)
    app.include_router(app_router)

    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        """
        Health check endpoint for Docker healthcheck.
        Returns 200 if service is alive.
        """
        return HealthResponse(status="healthy", service="files_manager")

    return app


def main() -> None:
    """
    Start the FastAPI server with uvicorn.
    """
    uvicorn.run(
        "files_manager.main:create_app",
        factory=True,
        host=FM_HOST,
        port=FM_PORT,
    )


if __name__ == "__main__":
    main()
