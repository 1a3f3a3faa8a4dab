"""
Authentication middleware - Gate requests on an access token and role.

The 200 response carries {"accountId": ...} for the HTTP layer to attach
to the downstream request; it is not returned to the client.
"""

import logging

from src.domain.ports import DEFAULT_ROLE, LoadAccountByToken

from ..errors import AccessDeniedError
from ..http import HttpRequest, HttpResponse, forbidden, ok, server_error

logger = logging.getLogger(__name__)

ACCESS_TOKEN_HEADER = "x-access-token"


class AuthenticationMiddleware:
    """
    Authorize requests carrying a valid access token.

    The required role is fixed at construction, so each protected route
    class gets its own middleware instance.
    """

    def __init__(self, load_account_by_token: LoadAccountByToken, role: str = DEFAULT_ROLE) -> None:
        self._load_account_by_token = load_account_by_token
        self._role = role

    async def handle(self, request: HttpRequest) -> HttpResponse:
        try:
            access_token = (request.headers or {}).get(ACCESS_TOKEN_HEADER)
            if access_token:
                account = await self._load_account_by_token.load(access_token, self._role)
                if account:
                    return ok({"accountId": account.id})
            return forbidden(AccessDeniedError())
        except Exception as e:
            logger.exception("Access token check failed")
            return server_error(e)
