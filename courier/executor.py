"""Courier request executor."""

from collections.abc import Mapping
from typing import Any, TypeVar

import httpx
import structlog

from .codec import JsonCodec
from .config import CourierConfig
from .encoding import decode_body, parse_charset
from .exceptions import (
    HttpConfigurationError,
    HttpStatusError,
    HttpTransportError,
    ResponseDecodeError,
)
from .models import HttpMethod, RequestSpec
from .outcome import Outcome, StructuredFailure, Success, TransportFailure

logger = structlog.get_logger(__name__)

T = TypeVar("T")

CHARSET_UTF_8 = "UTF-8"
JSON_CONTENT_TYPE = "application/json"


class RequestExecutor:
    """
    Blocking JSON-over-HTTP request executor.

    Every call opens its own connection, sends one request and reads the
    whole response. A 200 response is decoded into the requested result
    type; any other status is decoded into the failure type when one is
    given, or reported as :class:`HttpStatusError`.

    The executor is configured once and never mutated afterwards, so one
    instance can be shared between threads.

    Example:
        ```python
        from courier import CourierConfig, HttpMethod, RequestExecutor

        executor = RequestExecutor(CourierConfig(read_timeout=10.0))

        ticker = executor.execute(
            HttpMethod.GET,
            "https://api.example.com/ticker",
            Ticker,
            failure_type=ApiError,
        )

        # Or, without exceptions:
        outcome = executor.send(HttpMethod.GET, "https://api.example.com/ticker", Ticker)
        if outcome.ok:
            print(outcome.value)
        ```
    """

    def __init__(
        self,
        config: CourierConfig | None = None,
        codec: JsonCodec | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the executor.

        Args:
            config: Executor configuration. If None, uses default config.
            codec: JSON codec. If None, a fresh :class:`JsonCodec` is used.
            transport: Transport handed to every per-call client, e.g. an
                ``httpx.MockTransport`` in tests
        """
        self.config = config or CourierConfig()
        self.codec = codec or JsonCodec()
        self._transport = transport
        self._default_headers: dict[str, str] = {
            # Always use UTF-8
            "Accept-Charset": CHARSET_UTF_8,
            # Usually replaced by the caller
            "Content-Type": "application/x-www-form-urlencoded",
            # Replaced by application/json on every request
            "Accept": "text/plain",
            # Some servers negotiate content on the user agent
            "User-Agent": self.config.user_agent,
        }
        self.proxy = self.config.proxy_url
        if self.proxy:
            logger.info("Using proxy", proxy=self.proxy)

    @property
    def default_headers(self) -> dict[str, str]:
        """Copy of the headers sent on every request unless overridden."""
        return dict(self._default_headers)

    def _client_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {
            # Only the read phase is bounded
            "timeout": httpx.Timeout(None, read=self.config.read_timeout or None),
            "verify": self.config.verify_ssl,
            "follow_redirects": True,
            "trust_env": False,
        }
        if self.proxy:
            kwargs["proxy"] = self.proxy
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return kwargs

    def _get_client(self) -> httpx.Client:
        """Create a single-use HTTP client."""
        return httpx.Client(**self._client_kwargs())

    def prepare(
        self,
        method: HttpMethod | str,
        url: str,
        body: Any = None,
        headers: Mapping[str, str] | None = None,
        content_type: str | None = None,
    ) -> RequestSpec:
        """
        Build the request that :meth:`send` puts on the wire.

        Caller headers are laid over the defaults, then ``Accept`` is
        forced to ``application/json`` and ``Content-Type`` is forced to
        ``content_type`` when given. ``headers`` itself is left untouched.

        Args:
            method: HTTP method
            url: Absolute request URL
            body: Request body, sent as UTF-8. Anything other than a string
                is serialized to JSON with the executor's codec.
            headers: Header overrides
            content_type: Value forced into Content-Type

        Returns:
            RequestSpec with merged headers and encoded body

        Raises:
            ValueError: If the URL is empty, the method is unknown or a
                header is not ASCII
        """
        if not url:
            raise ValueError("url cannot be empty")

        http_method = HttpMethod.coerce(method)

        merged = dict(self._default_headers)
        if headers:
            merged.update(headers)
        merged["Accept"] = JSON_CONTENT_TYPE
        if content_type is not None:
            merged["Content-Type"] = content_type

        for name, value in merged.items():
            if not (name.isascii() and value.isascii()):
                raise ValueError(f"Header {name!r} must be ASCII, got {value!r}")

        if body is not None and not isinstance(body, str):
            body = self.codec.encode(body)

        payload = body.encode("utf-8") if body else None
        if payload:
            merged["Content-Length"] = str(len(payload))

        return RequestSpec(method=http_method, url=url, headers=merged, body=payload)

    def _check_url(self, spec: RequestSpec) -> None:
        try:
            url = httpx.URL(spec.url)
        except httpx.InvalidURL as e:
            raise self._malformed_url(spec) from e

        if url.scheme not in ("http", "https") or not url.host:
            raise self._malformed_url(spec)

    @staticmethod
    def _malformed_url(spec: RequestSpec) -> HttpConfigurationError:
        return HttpConfigurationError(
            f"Problem executing {spec.method.value} request -- malformed URL: {spec.url}"
        )

    def send(
        self,
        method: HttpMethod | str,
        url: str,
        result_type: type[T] | None,
        body: Any = None,
        headers: Mapping[str, str] | None = None,
        content_type: str | None = None,
        failure_type: type[Any] | None = None,
    ) -> Outcome[T]:
        """
        Execute a request and report how it ended.

        Args:
            method: HTTP method
            url: Absolute request URL
            result_type: Type a 200 body is decoded into; None returns the
                decoded text as is
            body: Request body, sent as UTF-8; non-string values are
                serialized to JSON
            headers: Header overrides (not modified)
            content_type: Value forced into Content-Type
            failure_type: Type an error body is decoded into

        Returns:
            Success with the decoded value, StructuredFailure with the
            decoded error payload, or TransportFailure wrapping a
            CourierError

        Raises:
            ValueError: If the URL is empty, the method is unknown or a
                header is not ASCII
        """
        spec = self.prepare(method, url, body, headers, content_type)
        verb = spec.method.value

        logger.debug("Executing request", method=verb, url=spec.url)
        logger.debug("Request headers", headers=spec.headers)
        if spec.body:
            logger.debug("Request body", body=spec.body.decode("utf-8"))

        try:
            self._check_url(spec)
            with self._get_client() as client:
                request = client.build_request(
                    verb,
                    spec.url,
                    headers=spec.headers,
                    content=spec.body,
                )
                # httpx adds Content-Length: 0 to bodiless POST/PUT/PATCH
                if not spec.content_length:
                    request.headers.pop("Content-Length", None)
                response = client.send(request)
        except HttpConfigurationError as e:
            return TransportFailure(e)
        except (httpx.InvalidURL, httpx.UnsupportedProtocol):
            return TransportFailure(self._malformed_url(spec))
        except httpx.RequestError as e:
            logger.error("Request failed", method=verb, url=spec.url, error=str(e))
            error = HttpTransportError(f"Problem executing {verb} request (IO): {e}")
            error.__cause__ = e
            return TransportFailure(error)

        return self._read_outcome(spec, response, result_type, failure_type)

    def _read_outcome(
        self,
        spec: RequestSpec,
        response: httpx.Response,
        result_type: type[T] | None,
        failure_type: type[Any] | None,
    ) -> Outcome[T]:
        charset = parse_charset(response.headers.get("Content-Type"))
        status_code = response.status_code
        logger.debug("Request http status", status_code=status_code)

        try:
            text = decode_body(response.content, charset)
        except LookupError as e:
            error = HttpTransportError(
                f"Problem executing {spec.method.value} request (IO): unsupported charset {charset}",
                status_code=status_code,
            )
            error.__cause__ = e
            return TransportFailure(error)

        if status_code != 200:
            logger.debug("Http call returned error status", status_code=status_code, body=text)
            if failure_type is not None and text is not None:
                try:
                    payload = self.codec.decode(text, failure_type)
                except ResponseDecodeError as e:
                    logger.warning(
                        "Error body does not match failure type",
                        status_code=status_code,
                        failure_type=getattr(failure_type, "__name__", str(failure_type)),
                        error=e.message,
                    )
                else:
                    return StructuredFailure(payload, status_code, text)
            return TransportFailure(HttpStatusError(status_code, text))

        logger.debug("Response body", body=text)

        if result_type is None:
            return Success(text, status_code)

        try:
            value = self.codec.decode(text, result_type)
        except ResponseDecodeError as e:
            e.status_code = status_code
            return TransportFailure(e)

        return Success(value, status_code)

    def execute(
        self,
        method: HttpMethod | str,
        url: str,
        result_type: type[T] | None,
        body: Any = None,
        headers: Mapping[str, str] | None = None,
        content_type: str | None = None,
        failure_type: type[Any] | None = None,
    ) -> T:
        """
        Execute a request and return the decoded 200 body.

        Takes the same arguments as :meth:`send`.

        Raises:
            HttpStructuredError: If the error body decoded into ``failure_type``
            HttpStatusError: If the status is not 200 and no failure payload
                could be decoded
            HttpConfigurationError: If the URL is malformed
            HttpTransportError: If connecting, writing or reading failed
            ResponseDecodeError: If a 200 body does not fit ``result_type``
        """
        return self.send(
            method,
            url,
            result_type,
            body=body,
            headers=headers,
            content_type=content_type,
            failure_type=failure_type,
        ).unwrap()
