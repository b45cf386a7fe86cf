# =============================================================================
# API ROUTES MODULE INITIALIZATION
# =============================================================================
# File: api/routes/__init__.py
# Description: Router aggregation
# =============================================================================

from fastapi import APIRouter

from api.routes.auth_routes import router as auth_router
from api.routes.supplier_routes import router as supplier_router
from api.routes.health_routes import router as health_router


api_router = APIRouter()

api_router.include_router(auth_router)
api_router.include_router(supplier_router)
api_router.include_router(health_router)


__all__ = [
    "api_router",
    "auth_router",
    "supplier_router",
    "health_router",
]
