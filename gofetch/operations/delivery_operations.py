"""Delivery operations for the GoFetch API."""

from typing import Any, Dict, Mapping, Optional

from gofetch.config.logging import get_logger, mask_sensitive_data
from gofetch.client.http_client import Client
from gofetch.client.request_factory import RequestFactory

logger = get_logger(__name__)


class DeliveryOperations:
    """Run GoFetch API operations by pairing a request factory with a client."""

    def __init__(
        self,
        client: Client,
        request_factory: Optional[RequestFactory] = None,
    ):
        """Initialize delivery operations.

        Args:
            client: Client used to send requests
            request_factory: Factory used to build requests (defaults to an
                unauthenticated factory for the production server)
        """
        self.client = client
        self.request_factory = request_factory or RequestFactory()

        logger.debug("Delivery operations initialized")

    def use_credentials(self, email: Optional[str], token: Optional[str]) -> None:
        """Authenticate subsequent requests with the given credentials."""
        self.request_factory = self.request_factory.with_credentials(email, token)
        logger.info(f"Using session credentials for {mask_sensitive_data(email)}")

    def use_base_url(self, base_url: str) -> None:
        """Send subsequent requests to another server."""
        self.request_factory = self.request_factory.with_base_url(base_url)
        logger.info(f"Using base URL {base_url}")

    def create_session(self, email: str, password: str) -> Any:
        """Request a session token.

        The returned data is passed through unchanged; call
        ``use_credentials`` with the token it contains to authenticate
        subsequent requests.

        Raises:
            UnauthorizedError: For invalid credentials
            RequestError: For other API errors
        """
        request = self.request_factory.create_session_request(email, password)
        response = self.client.send(request)

        logger.info(f"Created session for {mask_sensitive_data(email)}")
        return response

    def hello_world(self) -> Any:
        """Check that the API is reachable."""
        return self.client.send(self.request_factory.create_hello_world_request())

    def sign_in(self, email: str, password: str) -> Any:
        """Sign in a user."""
        request = self.request_factory.create_sign_in_request(email, password)
        response = self.client.send(request)

        logger.info(f"Signed in {mask_sensitive_data(email)}")
        return response

    def get_item_types(self) -> Any:
        """Get the item types that can be delivered."""
        response = self.client.send(self.request_factory.create_item_types_request())

        logger.info("Retrieved item types")
        return response

    def calculate_job_price(self, query: Mapping[str, Any]) -> Any:
        """Calculate the price of a job.

        Args:
            query: Calculation parameters

        Returns:
            Decoded price calculation
        """
        request = self.request_factory.create_job_calculation_request(query)
        return self.client.send(request)

    def create_job(self, job: Dict[str, Any]) -> Any:
        """Create a new delivery job.

        Raises:
            UnprocessableEntityError: When the API rejects the job
            RequestError: For other API errors
        """
        response = self.client.send(self.request_factory.create_job_create_request(job))

        logger.info("Created job")
        return response
