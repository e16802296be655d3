"""Session context for authenticated GoFetch requests."""

from gofetch.session.models import SessionContext

__all__ = ["SessionContext"]
