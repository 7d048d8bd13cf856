"""Shared test helpers."""

import json

import httpx


class RecordingTransport(httpx.MockTransport):
    """Mock transport that answers with a fixed response and keeps every request."""

    def __init__(
        self,
        status_code: int = 200,
        content: bytes | str | dict | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        if isinstance(content, dict):
            content = json.dumps(content)
        if isinstance(content, str):
            content = content.encode("utf-8")
        self.requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return httpx.Response(
                status_code=status_code,
                content=content or b"",
                headers=headers or {"Content-Type": "application/json"},
            )

        super().__init__(handler)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


def failing_transport(error: Exception) -> httpx.MockTransport:
    """Mock transport whose every request raises ``error``."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise error

    return httpx.MockTransport(handler)
