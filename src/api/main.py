"""
Main entrypoint for the Conference Registration API.

This module assembles the FastAPI application: logging, CORS and the
registration/admin routes.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time as
``app`` so it can be served directly::

    uvicorn src.api.main:app --reload
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from src.api.routes import failure_response, router
from src.core.config import Settings, settings
from src.core.logging_config import setup_logging
from src.services.registration_service import REQUIRED_FIELDS_MESSAGE

logger = logging.getLogger(__name__)

ALLOWED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
ALLOWED_HEADERS = ["Content-Type", "Authorization"]


def create_app(config: Settings = settings) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    config : Settings
        Settings to build the app from; defaults to the environment-derived
        module settings.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(config.log_level, config.log_file or None)

    app = FastAPI(title=config.project_name, version=config.api_version)

    # Requests without an Origin header (curl, server-to-server) are not
    # subject to CORS and always pass.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.allowed_origins,
        allow_methods=ALLOWED_METHODS,
        allow_headers=ALLOWED_HEADERS,
    )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # Malformed bodies (not an object, non-string fields) are a client error
        logger.info("Rejected malformed request to %s: %s", request.url.path, exc.errors())
        return failure_response(status.HTTP_400_BAD_REQUEST, REQUIRED_FIELDS_MESSAGE)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error while serving %s", request.url.path)
        return failure_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    app.include_router(router)

    logger.info("Allowed CORS origins: %s", config.allowed_origins or "none")
    return app


app = create_app()
