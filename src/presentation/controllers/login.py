"""
Login controller - Exchange credentials for an access token.
"""

import logging
from dataclasses import dataclass

from src.domain.models import AuthenticationParams
from src.domain.ports import Authentication, Validation

from ..http import HttpRequest, HttpResponse, bad_request, ok, server_error, unauthorized

logger = logging.getLogger(__name__)


@dataclass
class LoginController:
    authentication: Authentication
    validation: Validation

    async def handle(self, request: HttpRequest) -> HttpResponse:
        try:
            error = self.validation.validate(request.body)
            if error:
                return bad_request(error)

            access_token = await self.authentication.auth(
                AuthenticationParams(email=request.body["email"], password=request.body["password"])
            )
            # Unknown email and wrong password share this response
            if access_token is None:
                return unauthorized()

            return ok({"accessToken": access_token})
        except Exception as e:
            logger.exception("Login failed")
            return server_error(e)
