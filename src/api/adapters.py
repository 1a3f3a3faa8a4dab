"""
FastAPI adapters - Bind framework-free handlers to FastAPI.

Controllers and middleware speak HttpRequest/HttpResponse; these
adapters translate to and from FastAPI requests and responses.
"""

import json
import logging
from collections.abc import Awaitable, Callable
from typing import Any, Protocol

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from src.presentation.errors import ServerError
from src.presentation.http import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


class Handler(Protocol):
    async def handle(self, request: HttpRequest) -> HttpResponse: ...


class MiddlewareRejected(Exception):
    """Raised by adapted middleware to abort a request with its HttpResponse."""

    def __init__(self, response: HttpResponse) -> None:
        super().__init__(response.status_code)
        self.response = response


def serialize_body(body: Any) -> Any:
    """
    Convert an HttpResponse body to JSON-compatible data.

    Errors become {"error": message}. A ServerError never exposes its
    wrapped exception or traceback.
    """
    if isinstance(body, ServerError):
        return {"error": ServerError.message}
    if isinstance(body, Exception):
        return {"error": str(body)}
    return body


def to_json_response(http_response: HttpResponse) -> JSONResponse:
    return JSONResponse(
        status_code=http_response.status_code,
        content=serialize_body(http_response.body),
    )


async def read_json_body(request: Request) -> Any:
    """Read the request body as JSON; missing or malformed bodies become None."""
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        return None


def adapt_route(
    handler_factory: Callable[..., Handler],
) -> Callable[[Request, Handler], Awaitable[JSONResponse]]:
    """
    Build a FastAPI endpoint from a controller factory dependency.

    The body is passed to the controller unvalidated so that the
    controller's own validation decides the 400 response.
    """

    async def endpoint(request: Request, handler: Handler = Depends(handler_factory)) -> JSONResponse:
        http_request = HttpRequest(
            body=await read_json_body(request),
            headers=dict(request.headers),
        )
        http_response = await handler.handle(http_request)
        if http_response.status_code >= 500:
            logger.error("%s %s -> %d", request.method, request.url.path, http_response.status_code)
        return to_json_response(http_response)

    return endpoint


def adapt_middleware(
    handler_factory: Callable[..., Handler],
) -> Callable[[Request, Handler], Awaitable[str]]:
    """
    Build a FastAPI dependency from a middleware factory.

    On 200 the authenticated account id is stored on request.state and
    returned; any other response aborts the request with its status.
    """

    async def dependency(request: Request, handler: Handler = Depends(handler_factory)) -> str:
        http_request = HttpRequest(headers=dict(request.headers))
        http_response = await handler.handle(http_request)
        if http_response.status_code != 200:
            raise MiddlewareRejected(http_response)
        account_id = http_response.body["accountId"]
        request.state.account_id = account_id
        return account_id

    return dependency


async def middleware_rejected_handler(request: Request, exc: MiddlewareRejected) -> JSONResponse:
    return to_json_response(exc.response)


def register_exception_handlers(app: FastAPI) -> None:
    """Render middleware rejections with the same envelope as controller errors."""
    app.add_exception_handler(MiddlewareRejected, middleware_rejected_handler)
