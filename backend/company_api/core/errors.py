"""Domain error kinds raised by the repository and service layers."""
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    code: int
    message: str


class NotFoundError(Exception):
    """The backing query matched no rows."""


class ServiceError(Exception):
    message = "service error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class CreateCompanyError(ServiceError):
    message = "error with creating company due a database issue"


class GetCompanyError(ServiceError):
    message = "error with getting company due a database issue"


class UpdateCompanyError(ServiceError):
    message = "error with updating company due a database issue"


class DeleteCompanyError(ServiceError):
    message = "error with deleting company due a database issue"


class CreateUserError(ServiceError):
    message = "error with creating user due a database issue"


class AuthenticationError(ServiceError):
    message = "authentication failed"


class FindOneUserError(AuthenticationError):
    message = "error with finding user"


class WrongPasswordError(AuthenticationError):
    message = "error with using wrong password"


class CreateTokenError(ServiceError):
    message = "error with creation of JWT token of user"


def caused_by_not_found(err: BaseException) -> bool:
    """True if ``err`` was raised from a NotFoundError somewhere down its chain."""
    cause = err.__cause__
    while cause is not None:
        if isinstance(cause, NotFoundError):
            return True
        cause = cause.__cause__
    return False
