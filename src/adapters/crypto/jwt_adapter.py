"""
JWT adapter - Implements TokenGenerator and Decrypter protocols.

Tokens are signed JWTs whose `sub` claim is the account id.
"""

from datetime import datetime, timedelta, timezone

import jwt
from jwt.exceptions import InvalidTokenError


class JwtAdapter:
    """Access token encoding/decoding via PyJWT."""

    def __init__(self, secret: str, algorithm: str = "HS256", expires_minutes: int = 60) -> None:
        self._secret = secret
        self._algorithm = algorithm
        self._expires_minutes = expires_minutes

    async def generate(self, account_id: str) -> str:
        expire = datetime.now(timezone.utc) + timedelta(minutes=self._expires_minutes)
        payload = {"sub": account_id, "exp": expire}
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    async def decrypt(self, token: str) -> str | None:
        """Return the account id, or None for invalid or expired tokens."""
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except InvalidTokenError:
            return None
        sub = payload.get("sub")
        return sub if isinstance(sub, str) and sub else None
