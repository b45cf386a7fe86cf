# =============================================================================
# API MODULE INITIALIZATION
# =============================================================================
# File: api/__init__.py
# Description: API module exports
# =============================================================================

from api.routes import api_router
from api.middleware import (
    RequestIDMiddleware,
    LoggingMiddleware,
)

__all__ = [
    "api_router",
    "RequestIDMiddleware",
    "LoggingMiddleware",
]
