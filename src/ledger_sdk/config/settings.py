"""
Settings for ledger-sdk clients.

Pydantic settings read from the environment (``LEDGER_`` prefix) or a local
``.env`` file. Streamers and HTTP repositories fall back to these values when
they are not given explicit arguments.
"""
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.exceptions import ValidationError
from ..core.value_objects.order import Order
from ..core.value_objects.query_params import clamp_page_size, DEFAULT_PAGE_SIZE


class LedgerSettings(BaseSettings):
    """Connection and pagination defaults for the ledger service."""

    model_config = SettingsConfigDict(
        env_prefix="LEDGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Connection
    base_url: Optional[str] = Field(default=None, description="Base URL of the REST gateway")
    request_timeout: float = Field(default=30.0, gt=0)
    user_agent: str = Field(default="ledger-sdk/1.0")

    # Pagination
    default_page_size: int = Field(default=DEFAULT_PAGE_SIZE)
    default_order: Order = Field(default=Order.DESC)
    verify_page_order: bool = Field(default=False)

    @field_validator("default_page_size", mode="after")
    @classmethod
    def _clamp_page_size(cls, value: int) -> int:
        return clamp_page_size(value)

    @field_validator("default_order", mode="before")
    @classmethod
    def _parse_order(cls, value):
        try:
            return Order.parse(value)
        except ValidationError as e:
            raise ValueError(e.message) from e

    @field_validator("base_url", mode="after")
    @classmethod
    def _strip_base_url(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip().rstrip("/")
        return value or None


@lru_cache()
def get_settings() -> LedgerSettings:
    """Get cached settings instance."""
    return LedgerSettings()
