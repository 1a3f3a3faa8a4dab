"""Cryptography adapters - Password hashing and access tokens."""

from .bcrypt_adapter import BcryptAdapter
from .jwt_adapter import JwtAdapter

__all__ = ["BcryptAdapter", "JwtAdapter"]
