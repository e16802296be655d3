"""Request models for the GoFetch API."""

import json
from typing import Any, Optional, Tuple

import httpx
from pydantic import BaseModel, ConfigDict, Field


class ApiRequest(BaseModel):
    """An HTTP request ready to be sent to the GoFetch API.

    Requests are immutable: ``with_header`` and ``with_body`` return a new
    request and leave the original untouched.
    """

    model_config = ConfigDict(frozen=True)

    method: str = Field(..., description="HTTP method")
    url: str = Field(..., description="Absolute request URL")
    header_items: Tuple[Tuple[str, str], ...] = Field(
        default=(), description="Ordered header name/value pairs"
    )
    body: Optional[bytes] = Field(None, description="UTF-8 JSON encoded body")

    @property
    def headers(self) -> httpx.Headers:
        """Case-insensitive view of the request headers."""
        return httpx.Headers(list(self.header_items))

    def with_header(self, name: str, value: str) -> "ApiRequest":
        """Return a copy with ``name`` set to ``value``, replacing any existing value."""
        items = tuple(
            (key, val) for key, val in self.header_items if key.lower() != name.lower()
        )
        return self.model_copy(update={"header_items": items + ((name, value),)})

    def with_body(self, body: Optional[bytes]) -> "ApiRequest":
        """Return a copy with the given body attached."""
        return self.model_copy(update={"body": body})

    def to_httpx(self) -> httpx.Request:
        """Build the transport level request."""
        return httpx.Request(
            self.method,
            self.url,
            headers=list(self.header_items),
            content=self.body,
        )


class SessionRequest(BaseModel):
    """Body of the session creation request."""

    email: str = Field(..., description="Account email")
    password: str = Field(..., description="Account password")


class UserCredentials(BaseModel):
    """User credentials nested in the sign in request."""

    email: str = Field(..., description="Account email")
    password: str = Field(..., description="Account password")


class SignInRequest(BaseModel):
    """Body of the sign in request."""

    user: UserCredentials


def encode_json_body(data: Any) -> bytes:
    """Encode a model or plain JSON value as a compact UTF-8 JSON body."""
    if isinstance(data, BaseModel):
        return data.model_dump_json().encode("utf-8")
    return json.dumps(
        data, separators=(",", ":"), ensure_ascii=False, allow_nan=False
    ).encode("utf-8")
