"""
Presentation errors - Error types carried in HTTP response bodies.

These communicate request outcomes to the client without leaking
infrastructure details.
"""

import traceback


class PresentationError(Exception):
    """Base class for errors surfaced in an HttpResponse body."""

    message = "Request failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)

    @property
    def name(self) -> str:
        return type(self).__name__


class AccessDeniedError(PresentationError):
    """Missing, invalid, or insufficiently privileged access token."""

    message = "Access denied"


class EmailAlreadyInUseError(PresentationError):
    """Sign-up attempted with an email that already has an account."""

    message = "The received email is already in use"


class UnauthorizedError(PresentationError):
    """Credentials did not match an account."""

    message = "Unauthorized"


class MissingParamError(PresentationError):
    def __init__(self, param_name: str) -> None:
        self.param_name = param_name
        super().__init__(f"Missing param: {param_name}")


class InvalidParamError(PresentationError):
    def __init__(self, param_name: str) -> None:
        self.param_name = param_name
        super().__init__(f"Invalid param: {param_name}")


class ServerError(PresentationError):
    """
    Unexpected fault caught at the presentation boundary.

    The original exception is kept as __cause__ and its formatted
    traceback as `stack`, for logging only.
    """

    message = "Internal server error"

    def __init__(self, error: BaseException | None = None) -> None:
        super().__init__()
        self.__cause__ = error
        self.stack = (
            "".join(traceback.format_exception(type(error), error, error.__traceback__))
            if error is not None
            else None
        )
