"""Tests for Courier data models."""

import pytest
from pydantic import ValidationError

from courier import HttpMethod, RequestSpec


class TestHttpMethod:
    """Tests for HttpMethod."""

    def test_coerce_member(self):
        assert HttpMethod.coerce(HttpMethod.PATCH) is HttpMethod.PATCH

    @pytest.mark.parametrize("value", ["get", "Get", "GET"])
    def test_coerce_any_case(self, value):
        assert HttpMethod.coerce(value) is HttpMethod.GET

    def test_coerce_unknown(self):
        with pytest.raises(ValueError, match="Unsupported HTTP method: 'CONNECTX'"):
            HttpMethod.coerce("CONNECTX")

    def test_members_are_strings(self):
        assert HttpMethod.DELETE == "DELETE"


class TestRequestSpec:
    """Tests for RequestSpec."""

    def test_spec_is_frozen(self):
        spec = RequestSpec(method=HttpMethod.GET, url="http://example.com")
        with pytest.raises(ValidationError):
            spec.url = "http://other.example.com"

    def test_content_length(self):
        assert RequestSpec(method="POST", url="http://example.com", body=b"abc").content_length == 3
        assert RequestSpec(method="POST", url="http://example.com").content_length == 0

    def test_url_required(self):
        with pytest.raises(ValidationError):
            RequestSpec(method=HttpMethod.GET, url="")
