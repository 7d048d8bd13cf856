"""Data models for Courier SDK."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class HttpMethod(str, Enum):
    """HTTP request methods."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"

    @classmethod
    def coerce(cls, method: "HttpMethod | str") -> "HttpMethod":
        """Return the member for ``method``, accepting any letter case."""
        if isinstance(method, cls):
            return method
        try:
            return cls(str(method).upper())
        except ValueError:
            raise ValueError(f"Unsupported HTTP method: {method!r}") from None


class RequestSpec(BaseModel):
    """A request ready to go on the wire."""

    model_config = ConfigDict(frozen=True)

    method: HttpMethod
    url: str = Field(..., min_length=1)
    headers: dict[str, str] = Field(default_factory=dict, description="Merged headers")
    body: bytes | None = Field(None, description="UTF-8 encoded body, None when empty")

    @property
    def content_length(self) -> int:
        return len(self.body) if self.body else 0
