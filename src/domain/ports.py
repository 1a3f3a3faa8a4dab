"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure, plus the use case contracts the presentation
layer depends on. Adapters implement these protocols.
"""

from typing import Any, Protocol

from .models import Account, AddAccountParams, AddAccountResult, AuthenticationParams

DEFAULT_ROLE = "default"
ADMIN_ROLE = "admin"


# Use case contracts


class AddAccount(Protocol):
    """Create an account from sign-up data."""

    async def add(self, params: AddAccountParams) -> AddAccountResult: ...


class Authentication(Protocol):
    """Exchange credentials for an access token."""

    async def auth(self, params: AuthenticationParams) -> str | None:
        """
        Authenticate credentials.

        Returns:
            Access token, or None when the email is unknown or the
            password does not match (the two are indistinguishable)
        """
        ...


class LoadAccountByToken(Protocol):
    """Resolve an access token back to an account, gated by role."""

    async def load(self, access_token: str, role: str | None = None) -> Account | None: ...


class Validation(Protocol):
    """Validate a request body."""

    def validate(self, body: Any) -> Exception | None:
        """
        Returns:
            The first validation error found, or None if the body is valid
        """
        ...


# Persistence capabilities


class AddAccountRepository(Protocol):
    """Port interface for account persistence."""

    async def add(self, account_data: AddAccountParams) -> Account | None:
        """
        Insert one account.

        Returns:
            The stored account with a normalized `id`, or None when
            the store rejected the insert as a duplicate email
        """
        ...


class LoadAccountByEmailRepository(Protocol):
    async def load_by_email(self, email: str) -> Account | None: ...


class LoadAccountByIdRepository(Protocol):
    async def load_by_id(self, account_id: str) -> Account | None: ...


# Cryptography capabilities


class Hasher(Protocol):
    async def hash(self, value: str) -> str: ...


class HashComparer(Protocol):
    async def compare(self, value: str, hashed: str) -> bool:
        """Compare a plaintext value against a stored hash."""
        ...


class TokenGenerator(Protocol):
    async def generate(self, account_id: str) -> str: ...


class Decrypter(Protocol):
    async def decrypt(self, token: str) -> str | None:
        """
        Returns:
            The account id bound to the token, or None if the token is
            invalid or expired
        """
        ...
