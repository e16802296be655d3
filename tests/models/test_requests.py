import json

import httpx
import pytest
from pydantic import ValidationError

from gofetch.models.requests import (
    ApiRequest,
    SessionRequest,
    SignInRequest,
    UserCredentials,
    encode_json_body,
)


@pytest.fixture
def request_value():
    """Create a sample request."""
    return ApiRequest(
        method="POST",
        url="https://go-fetch.com.au/api/v1/users.json",
        header_items=(("Content-Type", "application/json"),),
    )


class TestApiRequest:

    def test_is_immutable(self, request_value):
        """Test requests cannot be modified in place."""
        with pytest.raises(ValidationError):
            request_value.method = "GET"

    def test_headers_are_case_insensitive(self, request_value):
        """Test the header view ignores case."""
        assert request_value.headers["content-type"] == "application/json"
        assert isinstance(request_value.headers, httpx.Headers)

    def test_with_header_returns_copy(self, request_value):
        """Test adding a header leaves the original untouched."""
        updated = request_value.with_header("X-User-Email", "a@b.com")

        assert updated.headers["x-user-email"] == "a@b.com"
        assert "X-User-Email" not in request_value.headers

    def test_with_header_replaces_any_case(self, request_value):
        """Test setting a header replaces existing values regardless of case."""
        updated = request_value.with_header("content-type", "text/plain")

        assert updated.header_items == (("content-type", "text/plain"),)

    def test_with_header_keeps_order(self, request_value):
        """Test headers keep insertion order."""
        updated = request_value.with_header("A", "1").with_header("B", "2")

        assert [name for name, _ in updated.header_items] == ["Content-Type", "A", "B"]

    def test_with_body(self, request_value):
        """Test attaching a body returns a copy."""
        updated = request_value.with_body(b'{"a":1}')

        assert updated.body == b'{"a":1}'
        assert request_value.body is None

    def test_to_httpx(self, request_value):
        """Test conversion to a transport request."""
        sent = request_value.with_body(b"{}").to_httpx()

        assert isinstance(sent, httpx.Request)
        assert sent.method == "POST"
        assert sent.url == httpx.URL("https://go-fetch.com.au/api/v1/users.json")
        assert sent.headers["Content-Type"] == "application/json"
        assert sent.content == b"{}"


class TestBodyModels:

    def test_session_body(self):
        """Test the session body encoding."""
        body = encode_json_body(SessionRequest(email="a@b.com", password="pw"))
        assert body == b'{"email":"a@b.com","password":"pw"}'

    def test_sign_in_body(self):
        """Test the sign in body nests the credentials under user."""
        body = encode_json_body(
            SignInRequest(user=UserCredentials(email="a@b.com", password="pw"))
        )
        assert body == b'{"user":{"email":"a@b.com","password":"pw"}}'

    def test_missing_password(self):
        """Test credentials require a password."""
        with pytest.raises(ValidationError):
            SessionRequest(email="a@b.com")

    def test_plain_mapping_is_compact(self):
        """Test plain values are encoded without whitespace."""
        assert encode_json_body({"a": [1, 2], "b": None}) == b'{"a":[1,2],"b":null}'

    def test_non_ascii_is_raw_utf8(self):
        """Test non-ASCII text is sent as UTF-8 for models and plain values alike."""
        plain = encode_json_body({"email": "é@b.com", "password": "pw"})
        model = encode_json_body(SessionRequest(email="é@b.com", password="pw"))

        assert plain == model
        assert "é".encode("utf-8") in plain
        assert json.loads(plain.decode("utf-8")) == {"email": "é@b.com", "password": "pw"}

    @pytest.mark.parametrize("value", [float("nan"), float("inf")])
    def test_non_finite_numbers_are_rejected(self, value):
        """Test values with no JSON representation are refused."""
        with pytest.raises(ValueError):
            encode_json_body({"weight": value})
