# =============================================================================
# MIDDLEWARE MODULE INITIALIZATION
# =============================================================================
# File: api/middleware/__init__.py
# Description: Middleware module exports
# =============================================================================

from api.middleware.request_middleware import (
    RequestIDMiddleware,
    LoggingMiddleware,
    REQUEST_ID_HEADER,
)

__all__ = [
    "RequestIDMiddleware",
    "LoggingMiddleware",
    "REQUEST_ID_HEADER",
]
