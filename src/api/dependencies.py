"""
FastAPI dependencies - Dependency injection factories.

This module is the composition root: it wires adapters into use cases
and use cases into controllers and middleware.
"""

from fastapi import Depends, Request
from psycopg_pool import AsyncConnectionPool

from src.adapters.crypto import BcryptAdapter, JwtAdapter
from src.adapters.repository.postgres import PostgresAccountRepository
from src.adapters.validation import PydanticValidation
from src.api.models import LoginRequest, SignUpRequest
from src.config.settings import Settings, get_settings
from src.domain.accounts import DbAddAccount, DbLoadAccountByToken
from src.domain.authentication import DbAuthentication
from src.domain.ports import ADMIN_ROLE, DEFAULT_ROLE
from src.presentation.controllers import LoginController, SignUpController
from src.presentation.middlewares import AuthenticationMiddleware

# Module-level singletons - validators are stateless
_signup_validation = PydanticValidation(SignUpRequest)
_login_validation = PydanticValidation(LoginRequest)


def get_pool(request: Request) -> AsyncConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


def get_repository(request: Request) -> PostgresAccountRepository:
    """Create repository with connection pool from app state."""
    return PostgresAccountRepository(get_pool(request))


def get_bcrypt_adapter(settings: Settings = Depends(get_settings)) -> BcryptAdapter:
    return BcryptAdapter(rounds=settings.bcrypt_cost)


def get_jwt_adapter(settings: Settings = Depends(get_settings)) -> JwtAdapter:
    return JwtAdapter(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expires_minutes=settings.access_token_expire_minutes,
    )


def get_authentication(
    repository: PostgresAccountRepository = Depends(get_repository),
    bcrypt_adapter: BcryptAdapter = Depends(get_bcrypt_adapter),
    jwt_adapter: JwtAdapter = Depends(get_jwt_adapter),
) -> DbAuthentication:
    return DbAuthentication(
        load_account_by_email_repository=repository,
        hash_comparer=bcrypt_adapter,
        token_generator=jwt_adapter,
    )


def get_add_account(
    repository: PostgresAccountRepository = Depends(get_repository),
    bcrypt_adapter: BcryptAdapter = Depends(get_bcrypt_adapter),
) -> DbAddAccount:
    return DbAddAccount(
        hasher=bcrypt_adapter,
        add_account_repository=repository,
        load_account_by_email_repository=repository,
    )


def get_load_account_by_token(
    repository: PostgresAccountRepository = Depends(get_repository),
    jwt_adapter: JwtAdapter = Depends(get_jwt_adapter),
) -> DbLoadAccountByToken:
    return DbLoadAccountByToken(decrypter=jwt_adapter, load_account_by_id_repository=repository)


def get_signup_controller(
    add_account: DbAddAccount = Depends(get_add_account),
    authentication: DbAuthentication = Depends(get_authentication),
) -> SignUpController:
    """
    Create sign-up controller with injected dependencies.

    Wires together the add-account and authentication use cases.
    """
    return SignUpController(
        add_account=add_account,
        authentication=authentication,
        validation=_signup_validation,
    )


def get_login_controller(
    authentication: DbAuthentication = Depends(get_authentication),
) -> LoginController:
    return LoginController(authentication=authentication, validation=_login_validation)


def get_auth_middleware(
    load_account_by_token: DbLoadAccountByToken = Depends(get_load_account_by_token),
) -> AuthenticationMiddleware:
    """Middleware admitting any authenticated account."""
    return AuthenticationMiddleware(load_account_by_token, role=DEFAULT_ROLE)


def get_admin_middleware(
    load_account_by_token: DbLoadAccountByToken = Depends(get_load_account_by_token),
) -> AuthenticationMiddleware:
    """Middleware admitting admin accounts only."""
    return AuthenticationMiddleware(load_account_by_token, role=ADMIN_ROLE)
