"""
Authentication use case - Credential verification and token issuance.

Negative outcomes (unknown email, wrong password) are returned as None
so callers cannot probe for account existence. Faults raised by any
capability propagate unchanged.
"""

from dataclasses import dataclass

from .models import AuthenticationParams
from .ports import HashComparer, LoadAccountByEmailRepository, TokenGenerator


@dataclass
class DbAuthentication:
    """
    Authenticate credentials against stored accounts.

    Flow (each step short-circuits to None):
    1. Load account by email
    2. Compare plaintext password against the stored hash
    3. Generate an access token from the account id
    """

    load_account_by_email_repository: LoadAccountByEmailRepository
    hash_comparer: HashComparer
    token_generator: TokenGenerator

    async def auth(self, params: AuthenticationParams) -> str | None:
        account = await self.load_account_by_email_repository.load_by_email(params.email)
        if account is None:
            return None

        is_valid = await self.hash_comparer.compare(params.password, account.password)
        if not is_valid:
            return None

        return await self.token_generator.generate(account.id)
