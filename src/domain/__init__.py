"""
Domain layer - Pure business logic with zero framework imports.

This package contains the account sign-up and authentication use cases.
It defines its own port interfaces for infrastructure abstraction,
ensuring true hexagonal architecture decoupling.
"""

from .accounts import DbAddAccount, DbLoadAccountByToken
from .authentication import DbAuthentication
from .models import (
    Account,
    AddAccountParams,
    AddAccountResult,
    AddAccountStatus,
    AuthenticationParams,
)
from .ports import (
    ADMIN_ROLE,
    DEFAULT_ROLE,
    AddAccount,
    AddAccountRepository,
    Authentication,
    Decrypter,
    HashComparer,
    Hasher,
    LoadAccountByEmailRepository,
    LoadAccountByIdRepository,
    LoadAccountByToken,
    TokenGenerator,
    Validation,
)

__all__ = [
    "ADMIN_ROLE",
    "DEFAULT_ROLE",
    "Account",
    "AddAccount",
    "AddAccountParams",
    "AddAccountRepository",
    "AddAccountResult",
    "AddAccountStatus",
    "Authentication",
    "AuthenticationParams",
    "DbAddAccount",
    "DbAuthentication",
    "DbLoadAccountByToken",
    "Decrypter",
    "HashComparer",
    "Hasher",
    "LoadAccountByEmailRepository",
    "LoadAccountByIdRepository",
    "LoadAccountByToken",
    "TokenGenerator",
    "Validation",
]
