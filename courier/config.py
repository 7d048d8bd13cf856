"""Configuration for Courier SDK."""

from dataclasses import dataclass

DEFAULT_USER_AGENT = "Courier/0.1 AppleWebKit/535.7 Chrome/16.0.912.36 Safari/535.7"


@dataclass
class CourierConfig:
    """
    Configuration for the Courier request executor.

    Attributes:
        read_timeout: Read timeout in seconds; 0 disables it (default: 0.0)
        proxy_host: HTTP proxy host (default: None, direct connection)
        proxy_port: HTTP proxy port (default: None, direct connection)
        verify_ssl: Whether to verify SSL certificates (default: True)
        user_agent: Value of the default User-Agent header

    Example:
        ```python
        config = CourierConfig(
            read_timeout=10.0,
            proxy_host="proxy.internal",
            proxy_port=3128,
        )
        ```
    """

    read_timeout: float = 0.0
    proxy_host: str | None = None
    proxy_port: int | None = None
    verify_ssl: bool = True
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.read_timeout < 0:
            raise ValueError("read_timeout must be non-negative")

        if self.proxy_host is not None:
            self.proxy_host = self.proxy_host.strip() or None

        if self.proxy_port is not None and not 0 < self.proxy_port < 65536:
            raise ValueError("proxy_port must be between 1 and 65535")

    @property
    def proxy_url(self) -> str | None:
        """HTTP proxy URL, or None when either proxy field is missing."""
        if self.proxy_host is None or self.proxy_port is None:
            return None
        return f"http://{self.proxy_host}:{self.proxy_port}"

    @classmethod
    def from_env(cls) -> "CourierConfig":
        """Create a :class:`CourierConfig` from ``COURIER_*`` environment variables."""
        from .settings import CourierSettings

        return CourierSettings().to_config()
