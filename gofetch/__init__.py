"""GoFetch Python Client

A Python client for the GoFetch delivery API that provides:
- Request building for sessions, sign in, item types and jobs
- JSON response decoding over an injectable httpx transport
- Typed errors for failed requests (401, 404, 422 and the rest)
"""

__version__ = "0.1.0"

from gofetch.config.logging import setup_logging, get_logger
from gofetch.config.settings import PRODUCTION_URL, TESTING_URL
from gofetch.client import (
    Client,
    AsyncClient,
    RequestFactory,
    GoFetchError,
    RequestError,
    UnauthorizedError,
    NotFoundError,
    UnprocessableEntityError,
)
from gofetch.session import SessionContext
from gofetch.operations import DeliveryOperations

__all__ = [
    "setup_logging",
    "get_logger",
    "PRODUCTION_URL",
    "TESTING_URL",
    "Client",
    "AsyncClient",
    "RequestFactory",
    "GoFetchError",
    "RequestError",
    "UnauthorizedError",
    "NotFoundError",
    "UnprocessableEntityError",
    "SessionContext",
    "DeliveryOperations",
    "__version__",
]
