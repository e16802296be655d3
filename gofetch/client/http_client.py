from typing import Any, Optional, Protocol

import httpx

from gofetch.config.logging import get_logger, mask_sensitive_data
from gofetch.config.settings import settings
from gofetch.client.exceptions import RequestError, create_request_error
from gofetch.models.requests import ApiRequest

logger = get_logger(__name__)

SENSITIVE_HEADERS = ("x-user-email", "x-user-token", "authorization")


class Transport(Protocol):
    """Anything able to send an ``httpx.Request``, such as ``httpx.Client``."""

    def send(self, request: httpx.Request) -> httpx.Response:
        ...


class AsyncTransport(Protocol):
    """Async counterpart of ``Transport``, such as ``httpx.AsyncClient``."""

    async def send(self, request: httpx.Request) -> httpx.Response:
        ...


def raise_for_error_status(response: httpx.Response, request: httpx.Request) -> None:
    """Raise ``httpx.HTTPStatusError`` for any status of 400 or above.

    The request is passed explicitly since transports other than httpx
    clients may return responses with no request attached.
    """
    if response.status_code < 400:
        return

    kind = "Client error" if response.status_code < 500 else "Server error"
    message = (
        f"{kind} '{response.status_code} {response.reason_phrase}' "
        f"for url '{request.url}'"
    )
    raise httpx.HTTPStatusError(message, request=request, response=response)


def prepare_response(response: httpx.Response) -> Any:
    """Decode the JSON body of a successful response.

    Raises:
        RequestError: When the body is not valid JSON
    """
    try:
        return response.json()
    except ValueError as e:
        raise prepare_exception(e) from e


def prepare_exception(e: Exception) -> RequestError:
    """Transform an exception into a GoFetch request error.

    Failures without an HTTP response keep their message and get status 0.
    HTTP status failures take their message from the ``error`` field of the
    JSON body when there is one, and fall back to the original message
    otherwise. 401, 404 and 422 map to dedicated error classes.
    """
    if not isinstance(e, httpx.HTTPStatusError):
        return RequestError(str(e), 0, cause=e)

    response_data = _decode_error_body(e.response)

    message = str(e)
    if isinstance(response_data, dict) and response_data.get("error") is not None:
        message = str(response_data["error"])

    return create_request_error(
        status_code=e.response.status_code,
        message=message,
        cause=e,
        response_data=response_data,
    )


def _decode_error_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def _sanitize_headers(request: ApiRequest) -> dict:
    sanitized = {}
    for name, value in request.header_items:
        if name.lower() in SENSITIVE_HEADERS:
            sanitized[name] = mask_sensitive_data(value)
        else:
            sanitized[name] = value
    return sanitized


class Client:
    """Send GoFetch API requests and decode their JSON responses."""

    def __init__(self, http_client: Optional[Transport] = None, timeout: Optional[float] = None):
        """Initialize client.

        Args:
            http_client: Transport used to send requests. When omitted an
                ``httpx.Client`` is created and owned by this client.
            timeout: Timeout in seconds for the owned transport (defaults to
                the configured timeout)
        """
        self._owns_http_client = http_client is None
        if http_client is None:
            http_client = httpx.Client(
                timeout=httpx.Timeout(timeout or settings.gofetch_timeout),
            )
        self._http_client = http_client

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    @property
    def http_client(self) -> Transport:
        return self._http_client

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_http_client:
            self._http_client.close()
            logger.debug("HTTP client closed")

    def send(self, request: ApiRequest) -> Any:
        """Send a request and return the decoded response body.

        Args:
            request: Request built by a ``RequestFactory``

        Returns:
            Decoded JSON value (object, array or scalar)

        Raises:
            RequestError: Or one of its subclasses when the request fails
        """
        logger.debug(
            f"Sending request: {request.method} {request.url} "
            f"headers={_sanitize_headers(request)}"
        )

        try:
            sent = request.to_httpx()
            response = self._http_client.send(sent)
            logger.debug(f"{request.method} {request.url} -> {response.status_code}")
            raise_for_error_status(response, sent)
        except httpx.HTTPError as e:
            raise prepare_exception(e) from e

        return prepare_response(response)


class AsyncClient:
    """Async variant of ``Client`` with the same error handling."""

    def __init__(
        self,
        http_client: Optional[AsyncTransport] = None,
        timeout: Optional[float] = None,
    ):
        self._owns_http_client = http_client is None
        if http_client is None:
            http_client = httpx.AsyncClient(
                timeout=httpx.Timeout(timeout or settings.gofetch_timeout),
            )
        self._http_client = http_client

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    @property
    def http_client(self) -> AsyncTransport:
        return self._http_client

    async def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_http_client:
            await self._http_client.aclose()
            logger.debug("Async HTTP client closed")

    async def send(self, request: ApiRequest) -> Any:
        """Send a request and return the decoded response body."""
        logger.debug(
            f"Sending request: {request.method} {request.url} "
            f"headers={_sanitize_headers(request)}"
        )

        try:
            sent = request.to_httpx()
            response = await self._http_client.send(sent)
            logger.debug(f"{request.method} {request.url} -> {response.status_code}")
            raise_for_error_status(response, sent)
        except httpx.HTTPError as e:
            raise prepare_exception(e) from e

        return prepare_response(response)
