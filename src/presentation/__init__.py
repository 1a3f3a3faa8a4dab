"""
Presentation layer - Framework-free controllers and middleware.

Handlers receive an HttpRequest, call injected use cases, and translate
their outcomes and faults into fixed HttpResponse shapes.
"""

from .controllers import LoginController, SignUpController
from .http import HttpRequest, HttpResponse
from .middlewares import AuthenticationMiddleware

__all__ = [
    "AuthenticationMiddleware",
    "HttpRequest",
    "HttpResponse",
    "LoginController",
    "SignUpController",
]
