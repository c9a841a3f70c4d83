# lms/shared/middleware/logging_middleware.py

"""
Middleware for HTTP request logging.

Every request is logged with the kind of credential it carries, and
every response at a level that follows its status: rejected tokens and
invalid slots show up as warnings, storage failures as errors.
"""

import time
import logging
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from lms.adapters.configuration.config import settings

# Configure logger
logger = logging.getLogger(__name__)


def credential_kind(request: Request) -> str:
    """Name the credential a request carries, never the credential itself."""
    authorization = request.headers.get("authorization", "")
    if authorization.lower().startswith("bearer "):
        return "bearer"
    return "anonymous"


def response_log_level(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class AsyncRequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware for request logging.
    Logs information about each received request.
    """

    async def dispatch(self, request: Request, call_next):
        auth = credential_kind(request)

        # Limited information in production
        if settings.ENVIRONMENT == "production":
            logger.info(f"Request: {request.method} {request.url.path} | Auth: {auth}")
        else:
            query_params = dict(request.query_params)
            logger.info(
                f"Request: {request.method} {request.url.path} | "
                f"Auth: {auth} | "
                f"Query: {query_params if query_params else 'N/A'} | "
                f"Client: {request.client.host if request.client else 'N/A'}"
            )

        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time

        level = response_log_level(response.status_code)
        if settings.ENVIRONMENT == "production":
            logger.log(level, f"Response: {response.status_code} for {request.method} {request.url.path}")
        else:
            logger.log(
                level,
                f"Response: {response.status_code} for {request.method} {request.url.path} | "
                f"Auth: {auth} | Time: {process_time:.4f}s"
            )

        return response
