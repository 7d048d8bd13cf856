"""Environment-backed settings for Courier SDK."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from .config import DEFAULT_USER_AGENT, CourierConfig


class CourierSettings(BaseSettings):
    """Settings read from ``COURIER_*`` environment variables or a ``.env`` file."""

    model_config = SettingsConfigDict(
        env_prefix="COURIER_",
        env_file=".env",
        extra="ignore",
    )

    READ_TIMEOUT: float = 0.0
    PROXY_HOST: Optional[str] = None
    PROXY_PORT: Optional[int] = None
    VERIFY_SSL: bool = True
    USER_AGENT: str = DEFAULT_USER_AGENT

    def to_config(self) -> CourierConfig:
        return CourierConfig(
            read_timeout=self.READ_TIMEOUT,
            proxy_host=self.PROXY_HOST,
            proxy_port=self.PROXY_PORT,
            verify_ssl=self.VERIFY_SSL,
            user_agent=self.USER_AGENT,
        )
