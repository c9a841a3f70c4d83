# lms/shared/middleware/__init__.py

from lms.shared.middleware.exception_middleware import AsyncExceptionMiddleware
from lms.shared.middleware.logging_middleware import AsyncRequestLoggingMiddleware

# Export all for easy imports
__all__ = [
    "AsyncExceptionMiddleware",
    "AsyncRequestLoggingMiddleware",
]
