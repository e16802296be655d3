"""Data models for the GoFetch API."""

from gofetch.models.requests import (
    ApiRequest,
    SessionRequest,
    UserCredentials,
    SignInRequest,
    encode_json_body,
)

__all__ = [
    "ApiRequest",
    "SessionRequest",
    "UserCredentials",
    "SignInRequest",
    "encode_json_body",
]
