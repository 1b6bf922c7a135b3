import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from shortlink_app.config import Settings, settings
from shortlink_app.api.v1 import urls, redirect
from shortlink_app.logging_config import setup_logging
from shortlink_app.middleware import LoggingMiddleware
from shortlink_app.storage import SQLURLStorage, StorageInitError, StorageIOError

logger = logging.getLogger("shortlink_app.main")


def create_app(app_settings: Settings = settings) -> FastAPI:
    """Build the FastAPI app; the store is opened when the app starts"""
    setup_logging(app_settings.env)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {app_settings.app_name} (env={app_settings.env})")
        try:
            app.state.store = SQLURLStorage(app_settings.storage_path)
        except StorageInitError as e:
            logger.error(f"Failed to init storage: {e}")
            raise
        yield
        logger.info("Server stopped")

    app = FastAPI(
        title=app_settings.app_name,
        version=app_settings.app_version,
        description="A URL shortener service built with FastAPI",
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.add_middleware(LoggingMiddleware)

    @app.exception_handler(StorageIOError)
    async def storage_error_handler(request: Request, exc: StorageIOError):
        """Log the storage failure; the client only sees a generic 500"""
        logger.error(f"Storage failure on {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "internal error"},
        )

    @app.get("/")
    def read_root():
        """Root endpoint with API information"""
        return {
            "message": f"Welcome to {app_settings.app_name}",
            "version": app_settings.app_version,
            "docs": "/docs",
        }

    @app.get("/health")
    def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "environment": app_settings.env}

    ######## Include routers
    app.include_router(urls.router, prefix="/api/v1")
    app.include_router(redirect.router)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        timeout_keep_alive=settings.idle_timeout,
    )
