"""Custom exceptions for the GoFetch client."""

from typing import Optional, Any


class GoFetchError(Exception):
    """Base exception for all GoFetch client errors."""
    pass


class RequestError(GoFetchError):
    """Raised when a request fails at the transport or HTTP level.

    ``status_code`` is 0 when the failure carried no HTTP status (connection
    errors, undecodable bodies).
    """

    def __init__(
        self,
        message: str,
        status_code: int = 0,
        cause: Optional[BaseException] = None,
        response_data: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.cause = cause
        self.response_data = response_data
        if cause is not None:
            self.__cause__ = cause


class UnauthorizedError(RequestError):
    """Raised when the API answers 401."""

    def __init__(
        self,
        message: str = "Unauthorized",
        cause: Optional[BaseException] = None,
        response_data: Any = None,
    ):
        super().__init__(message, 401, cause, response_data)


class NotFoundError(RequestError):
    """Raised when the API answers 404."""

    def __init__(
        self,
        message: str = "Not Found",
        cause: Optional[BaseException] = None,
        response_data: Any = None,
    ):
        super().__init__(message, 404, cause, response_data)


class UnprocessableEntityError(RequestError):
    """Raised when the API answers 422."""

    def __init__(
        self,
        message: str = "Unprocessable Entity",
        cause: Optional[BaseException] = None,
        response_data: Any = None,
    ):
        super().__init__(message, 422, cause, response_data)


def create_request_error(
    status_code: int,
    message: str,
    cause: Optional[BaseException] = None,
    response_data: Any = None,
) -> RequestError:
    """Create the request error matching an HTTP status code."""

    error_classes = {
        401: UnauthorizedError,
        404: NotFoundError,
        422: UnprocessableEntityError,
    }

    if status_code in error_classes:
        return error_classes[status_code](
            message=message,
            cause=cause,
            response_data=response_data,
        )

    return RequestError(
        message=message,
        status_code=status_code,
        cause=cause,
        response_data=response_data,
    )
