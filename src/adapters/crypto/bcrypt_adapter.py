"""
bcrypt adapter - Implements Hasher and HashComparer protocols.

bcrypt is CPU-bound (~100ms+ per call at cost 10), so hashing and
comparison run in a worker thread to keep the event loop responsive.
"""

import asyncio

import bcrypt


class BcryptAdapter:
    """
    Password hashing via bcrypt.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, rounds: int = 12) -> None:
        """
        Args:
            rounds: bcrypt cost factor (log2 of the iteration count)
        """
        self._rounds = rounds

    async def hash(self, value: str) -> str:
        return await asyncio.to_thread(self._hash, value)

    async def compare(self, value: str, hashed: str) -> bool:
        """
        Constant-time comparison of a plaintext value against a bcrypt hash.

        A malformed stored hash compares as False.
        """
        return await asyncio.to_thread(self._compare, value, hashed)

    def _hash(self, value: str) -> str:
        return bcrypt.hashpw(value.encode(), bcrypt.gensalt(rounds=self._rounds)).decode()

    def _compare(self, value: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(value.encode(), hashed.encode())
        except ValueError:
            return False
