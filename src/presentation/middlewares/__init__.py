"""Request middleware."""

from .authentication import AuthenticationMiddleware

__all__ = ["AuthenticationMiddleware"]
