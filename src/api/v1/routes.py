"""
API v1 routes.

Defines REST endpoints for account sign-up, login, and authenticated
account lookups.
"""

from fastapi import APIRouter, Depends, status

from src.api.adapters import adapt_middleware, adapt_route
from src.api.dependencies import (
    get_admin_middleware,
    get_auth_middleware,
    get_login_controller,
    get_signup_controller,
)
from src.api.models import (
    AccessTokenResponse,
    AccountIdResponse,
    ErrorResponse,
    LoginRequest,
    SignUpRequest,
)

router = APIRouter(tags=["v1"])

auth = adapt_middleware(get_auth_middleware)
admin_auth = adapt_middleware(get_admin_middleware)


router.add_api_route(
    "/signup",
    adapt_route(get_signup_controller),
    methods=["POST"],
    status_code=status.HTTP_200_OK,
    response_model=AccessTokenResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Validation error"},
        403: {"model": ErrorResponse, "description": "Email already in use"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Create an account",
    description="Create an account from name, email and password and return an access token. "
    f"Body schema: {SignUpRequest.__name__}.",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": SignUpRequest.model_json_schema(by_alias=True)}
            },
        }
    },
)

router.add_api_route(
    "/login",
    adapt_route(get_login_controller),
    methods=["POST"],
    status_code=status.HTTP_200_OK,
    response_model=AccessTokenResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Validation error"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Log in",
    description="Exchange email and password for an access token.",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": LoginRequest.model_json_schema(by_alias=True)}
            },
        }
    },
)


@router.get(
    "/me",
    response_model=AccountIdResponse,
    responses={403: {"description": "Access denied"}},
    summary="Current account",
    description="Return the id of the account owning the x-access-token header.",
)
async def me(account_id: str = Depends(auth)) -> AccountIdResponse:
    return AccountIdResponse(account_id=account_id)


@router.get(
    "/admin/ping",
    response_model=AccountIdResponse,
    responses={403: {"description": "Access denied"}},
    summary="Admin-only check",
    description="Succeeds only for access tokens of admin accounts.",
)
async def admin_ping(account_id: str = Depends(admin_auth)) -> AccountIdResponse:
    return AccountIdResponse(account_id=account_id)
