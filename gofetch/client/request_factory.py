"""Build HTTP requests for the GoFetch API endpoints."""

from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import urlencode, urljoin

import httpx

from gofetch.config.settings import PRODUCTION_URL
from gofetch.models.requests import (
    ApiRequest,
    SessionRequest,
    SignInRequest,
    UserCredentials,
    encode_json_body,
)
from gofetch.session.models import SessionContext

SESSIONS_PATH = "/public_api/v1/sessions"
HELLO_WORLD_PATH = "/public_api/v1/hello_world"
USERS_PATH = "/api/v1/users.json"
ITEM_TYPES_PATH = "/api/v1/item_types.json"
JOB_CALCULATION_PATH = "/api/v2/jobs/calculate.json"
CUSTOMER_JOBS_PATH = "/api/v1/my/customer/jobs.json"


class RequestFactory:
    """Create HTTP requests to the GoFetch API.

    Endpoint paths, methods and authentication requirements live here so
    callers never build URLs by hand. Authenticated endpoints go through
    ``authenticate_request`` explicitly.
    """

    def __init__(
        self,
        context: Optional[SessionContext] = None,
        *,
        email: Optional[str] = None,
        token: Optional[str] = None,
        base_url: Union[str, httpx.URL] = PRODUCTION_URL,
    ):
        """Initialize request factory.

        Args:
            context: Session context to use; when given, the keyword
                arguments are ignored
            email: Session email
            token: Session token
            base_url: URL that relative request paths resolve against
        """
        if context is None:
            context = SessionContext(email=email, token=token, base_url=str(base_url))
        self._context = context

    @property
    def context(self) -> SessionContext:
        return self._context

    @property
    def email(self) -> Optional[str]:
        return self._context.email

    @property
    def token(self) -> Optional[str]:
        return self._context.token

    @property
    def base_url(self) -> str:
        return self._context.base_url

    def with_credentials(self, email: Optional[str], token: Optional[str]) -> "RequestFactory":
        """Return a factory that authenticates requests with the given credentials."""
        return RequestFactory(self._context.with_credentials(email, token))

    def with_base_url(self, base_url: Union[str, httpx.URL]) -> "RequestFactory":
        """Return a factory that targets another server."""
        return RequestFactory(self._context.with_base_url(str(base_url)))

    def create_request(self, method: str, url: Union[str, httpx.URL]) -> ApiRequest:
        """Create a request.

        Args:
            method: HTTP method
            url: Absolute URL, or reference resolved against the base URL

        Returns:
            Request with no body
        """
        resolved = urljoin(self.base_url, str(url)) if self.base_url else str(url)

        headers = []
        if method.lower() != "get":
            headers.append(("Content-Type", "application/json"))

        return ApiRequest(method=method, url=resolved, header_items=tuple(headers))

    def create_session_request(self, email: str, password: str) -> ApiRequest:
        """Create the request to get a session token."""
        body = encode_json_body(SessionRequest(email=email, password=password))
        return self.create_request("POST", SESSIONS_PATH).with_body(body)

    def create_hello_world_request(self) -> ApiRequest:
        """Create a test request."""
        return self.create_request("GET", HELLO_WORLD_PATH)

    def create_sign_in_request(self, email: str, password: str) -> ApiRequest:
        """Create the request to sign in."""
        body = encode_json_body(
            SignInRequest(user=UserCredentials(email=email, password=password))
        )
        return self.create_request("POST", USERS_PATH).with_body(body)

    def create_item_types_request(self) -> ApiRequest:
        """Create a request for item types."""
        request = self.create_request("GET", ITEM_TYPES_PATH)
        return self.authenticate_request(request)

    def create_job_calculation_request(self, query: Mapping[str, Any]) -> ApiRequest:
        """Create a request for job price calculation.

        Args:
            query: Calculation parameters, sent as the query string

        Returns:
            Authenticated GET request
        """
        url = JOB_CALCULATION_PATH
        query_string = urlencode(query, doseq=True)
        if query_string:
            url = f"{url}?{query_string}"

        request = self.create_request("GET", url)
        return self.authenticate_request(request)

    def create_job_create_request(self, body: Dict[str, Any]) -> ApiRequest:
        """Create a request to create a new job."""
        request = self.create_request("POST", CUSTOMER_JOBS_PATH)
        return self.authenticate_request(request).with_body(encode_json_body(body))

    def authenticate_request(self, request: ApiRequest) -> ApiRequest:
        """Add authentication headers to a request."""
        return (
            request
            .with_header("X-User-Email", self.email or "")
            .with_header("X-User-Token", self.token or "")
        )
