"""Pytest configuration for Courier SDK tests."""

import httpx
import pytest

from courier import CourierConfig, RequestExecutor


@pytest.fixture(autouse=True)
def configure_structlog():
    """Configure structlog for testing."""
    import structlog

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


@pytest.fixture
def config():
    """Create a test configuration."""
    return CourierConfig(read_timeout=5.0)


@pytest.fixture
def make_executor(config):
    """Build an executor that sends through the given transport."""

    def _make(transport: httpx.BaseTransport) -> RequestExecutor:
        return RequestExecutor(config, transport=transport)

    return _make
