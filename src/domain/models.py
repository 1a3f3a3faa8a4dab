"""
Domain models - Plain data carried between use cases and adapters.

Accounts are created by the repository on sign-up and never mutated
by this core.
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Account:
    """
    Persisted account.

    `password` always holds a hash once the account is stored.
    `id` is the storage-assigned identifier normalized to a string.
    """

    id: str
    name: str
    email: str
    password: str
    role: str | None = None


@dataclass(frozen=True)
class AddAccountParams:
    """Data required to create an account."""

    name: str
    email: str
    password: str


@dataclass(frozen=True)
class AuthenticationParams:
    """Credentials submitted for authentication (password in plaintext)."""

    email: str
    password: str


class AddAccountStatus(Enum):
    """Outcome of an account creation attempt."""

    CREATED = "created"
    EMAIL_IN_USE = "email_in_use"


@dataclass(frozen=True)
class AddAccountResult:
    """
    Tagged result of AddAccount.add().

    `account` is set only when status is CREATED.
    """

    status: AddAccountStatus
    account: Account | None = None

    @classmethod
    def created(cls, account: Account) -> "AddAccountResult":
        return cls(status=AddAccountStatus.CREATED, account=account)

    @classmethod
    def email_in_use(cls) -> "AddAccountResult":
        return cls(status=AddAccountStatus.EMAIL_IN_USE)
