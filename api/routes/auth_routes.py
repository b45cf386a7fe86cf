# =============================================================================
# SUPPLIER MINIMAL API - AUTH ROUTES
# =============================================================================
# File: api/routes/auth_routes.py
# Description: Anonymous identity endpoints (register, login)
# =============================================================================

from fastapi import APIRouter, status

from auth.schemas import (
    RegisterUser,
    LoginUser,
    LoginResponse,
    ErrorResponse,
)
from auth.dependencies import AuthServiceDep, ClientIP


router = APIRouter(tags=["Authentication"])


@router.post(
    "/register",
    response_model=LoginResponse,
    status_code=status.HTTP_200_OK,
    summary="Register a new user",
    description="Create a user account and return an access token for it.",
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
async def register(
    user_data: RegisterUser,
    auth_service: AuthServiceDep,
    ip_address: ClientIP,
) -> LoginResponse:
    """
    Register a new user account.

    - **email**: Valid email address (unique)
    - **password**: 6-100 characters with complexity requirements
    - **confirmPassword**: Must match password
    """
    return await auth_service.register(user_data=user_data, ip_address=ip_address)


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Authenticate user",
    description="Login with email and password to receive a bearer token.",
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
async def login(
    login_data: LoginUser,
    auth_service: AuthServiceDep,
    ip_address: ClientIP,
) -> LoginResponse:
    """
    Authenticate user and return a JWT access token.

    Five consecutive failures lock the account for a few minutes.
    """
    return await auth_service.login(credentials=login_data, ip_address=ip_address)
