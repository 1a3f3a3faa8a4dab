"""
Account use cases - Creation and token-based lookup.
"""

from dataclasses import dataclass

from .models import Account, AddAccountParams, AddAccountResult
from .ports import (
    ADMIN_ROLE,
    DEFAULT_ROLE,
    AddAccountRepository,
    Decrypter,
    Hasher,
    LoadAccountByEmailRepository,
    LoadAccountByIdRepository,
)


@dataclass
class DbAddAccount:
    """
    Create an account with a hashed password.

    Duplicate emails are reported as AddAccountStatus.EMAIL_IN_USE,
    both when the lookup finds an existing account and when the store
    rejects the insert (concurrent sign-up with the same email).
    """

    hasher: Hasher
    add_account_repository: AddAccountRepository
    load_account_by_email_repository: LoadAccountByEmailRepository

    async def add(self, params: AddAccountParams) -> AddAccountResult:
        existing = await self.load_account_by_email_repository.load_by_email(params.email)
        if existing is not None:
            return AddAccountResult.email_in_use()

        hashed_password = await self.hasher.hash(params.password)
        account = await self.add_account_repository.add(
            AddAccountParams(name=params.name, email=params.email, password=hashed_password)
        )
        if not account:
            return AddAccountResult.email_in_use()

        return AddAccountResult.created(account)


@dataclass
class DbLoadAccountByToken:
    """
    Resolve an access token to an account holding the required role.

    Role gate: no role or DEFAULT_ROLE admits any account; otherwise the
    account's role must match, and admins pass every gate.
    """

    decrypter: Decrypter
    load_account_by_id_repository: LoadAccountByIdRepository

    async def load(self, access_token: str, role: str | None = None) -> Account | None:
        account_id = await self.decrypter.decrypt(access_token)
        if account_id is None:
            return None

        account = await self.load_account_by_id_repository.load_by_id(account_id)
        if account is None:
            return None

        if not self._has_role(account, role):
            return None
        return account

    def _has_role(self, account: Account, role: str | None) -> bool:
        if role is None or role == DEFAULT_ROLE:
            return True
        return account.role == role or account.role == ADMIN_ROLE
