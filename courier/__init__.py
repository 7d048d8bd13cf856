"""Courier Python SDK

Blocking JSON-over-HTTP request execution with typed results.

Example:
    ```python
    from pydantic import BaseModel

    from courier import CourierConfig, HttpMethod, HttpStructuredError, RequestExecutor


    class Balance(BaseModel):
        currency: str
        amount: float


    class ApiError(BaseModel):
        error: str


    executor = RequestExecutor(CourierConfig.from_env())

    try:
        balance = executor.execute(
            HttpMethod.POST,
            "https://api.example.com/balance",
            Balance,
            body='{"currency": "EUR"}',
            headers={"X-API-Key": "your-api-key"},
            content_type="application/json",
            failure_type=ApiError,
        )
    except HttpStructuredError as e:
        print(e.status_code, e.payload.error)
    ```
"""

from .codec import JsonCodec
from .config import CourierConfig
from .encoding import decode_body, parse_charset
from .exceptions import (
    CourierError,
    HttpConfigurationError,
    HttpStatusError,
    HttpStructuredError,
    HttpTransportError,
    ResponseDecodeError,
)
from .executor import RequestExecutor
from .models import HttpMethod, RequestSpec
from .outcome import Outcome, StructuredFailure, Success, TransportFailure
from .settings import CourierSettings

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Executor
    "RequestExecutor",
    "JsonCodec",
    # Configuration
    "CourierConfig",
    "CourierSettings",
    # Exceptions
    "CourierError",
    "HttpConfigurationError",
    "HttpTransportError",
    "HttpStatusError",
    "HttpStructuredError",
    "ResponseDecodeError",
    # Models
    "HttpMethod",
    "RequestSpec",
    # Outcomes
    "Outcome",
    "Success",
    "StructuredFailure",
    "TransportFailure",
    # Encoding helpers
    "parse_charset",
    "decode_body",
]
