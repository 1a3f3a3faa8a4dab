"""
Sign-up controller - Account creation followed by authentication.

Linear pipeline, first response wins:
    validate -> 400
    add account -> 403 when the email is already in use
    authenticate -> 200 {"accessToken": ...}
    any exception -> 500
"""

import logging
from dataclasses import dataclass

from src.domain.models import AddAccountParams, AddAccountStatus, AuthenticationParams
from src.domain.ports import AddAccount, Authentication, Validation

from ..errors import EmailAlreadyInUseError
from ..http import HttpRequest, HttpResponse, bad_request, forbidden, ok, server_error

logger = logging.getLogger(__name__)


@dataclass
class SignUpController:
    add_account: AddAccount
    authentication: Authentication
    validation: Validation

    async def handle(self, request: HttpRequest) -> HttpResponse:
        try:
            error = self.validation.validate(request.body)
            if error:
                return bad_request(error)

            name = request.body["name"]
            email = request.body["email"]
            password = request.body["password"]

            result = await self.add_account.add(
                AddAccountParams(name=name, email=email, password=password)
            )
            if result.status is AddAccountStatus.EMAIL_IN_USE or not result.account:
                return forbidden(EmailAlreadyInUseError())

            access_token = await self.authentication.auth(
                AuthenticationParams(email=email, password=password)
            )
            return ok({"accessToken": access_token})
        except Exception as e:
            logger.exception("Sign-up failed")
            return server_error(e)
