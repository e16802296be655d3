"""HTTP client module for the GoFetch API."""

from gofetch.client.http_client import (
    Client,
    AsyncClient,
    Transport,
    AsyncTransport,
    prepare_exception,
)
from gofetch.client.request_factory import RequestFactory
from gofetch.client.exceptions import (
    GoFetchError,
    RequestError,
    UnauthorizedError,
    NotFoundError,
    UnprocessableEntityError,
    create_request_error,
)

__all__ = [
    "Client",
    "AsyncClient",
    "Transport",
    "AsyncTransport",
    "prepare_exception",
    "RequestFactory",
    "GoFetchError",
    "RequestError",
    "UnauthorizedError",
    "NotFoundError",
    "UnprocessableEntityError",
    "create_request_error",
]
