from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from gofetch.config.settings import PRODUCTION_URL, Settings, settings as default_settings


class SessionContext(BaseModel):
    """Credentials and base URL shared by the requests of one API session.

    The context is immutable; use ``with_credentials`` or ``with_base_url``
    to derive a new one.
    """

    model_config = ConfigDict(frozen=True)

    email: Optional[str] = Field(None, description="Session email")
    token: Optional[str] = Field(None, description="Session token")
    base_url: str = Field(PRODUCTION_URL, description="URL relative API paths resolve against")

    def with_credentials(self, email: Optional[str], token: Optional[str]) -> "SessionContext":
        """Derive a context holding the given credentials."""
        return self.model_copy(update={"email": email, "token": token})

    def with_base_url(self, base_url: str) -> "SessionContext":
        """Derive a context pointing at another server."""
        return self.model_copy(update={"base_url": str(base_url)})

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "SessionContext":
        """Create a context from the configured settings."""
        settings = settings or default_settings
        return cls(
            email=settings.gofetch_email,
            token=settings.gofetch_token,
            base_url=settings.gofetch_base_url,
        )
