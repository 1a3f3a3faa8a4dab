"""
HTTP value objects and response helpers.

Transport-neutral request/response shapes produced and consumed by
controllers and middleware.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .errors import PresentationError, ServerError, UnauthorizedError


@dataclass
class HttpRequest:
    body: Any = None
    headers: Mapping[str, str] | None = None


@dataclass
class HttpResponse:
    status_code: int
    body: Any


def ok(data: Any) -> HttpResponse:
    return HttpResponse(status_code=200, body=data)


def bad_request(error: Exception) -> HttpResponse:
    return HttpResponse(status_code=400, body=error)


def unauthorized() -> HttpResponse:
    return HttpResponse(status_code=401, body=UnauthorizedError())


def forbidden(error: PresentationError) -> HttpResponse:
    return HttpResponse(status_code=403, body=error)


def server_error(error: BaseException) -> HttpResponse:
    return HttpResponse(status_code=500, body=ServerError(error))
