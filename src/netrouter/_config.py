import os
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from ._utils._ssl_context import get_httpx_client_kwargs
from ._utils.constants import (
    DEFAULT_TIMEOUT,
    ENV_BASE_URL,
    ENV_FOLLOW_REDIRECTS,
    ENV_TIMEOUT,
    ENV_VERIFY_SSL,
)

_FALSY = {"0", "false", "no", "off"}


class RouterConfig(BaseModel):
    """Transport settings shared by every request a router sends."""

    base_url: Optional[str] = None
    timeout: Optional[float] = Field(default=DEFAULT_TIMEOUT)
    verify_ssl: bool = True
    follow_redirects: bool = True

    @field_validator("timeout")
    @classmethod
    def _validate_timeout(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and value <= 0:
            raise ValueError("timeout must be positive")
        return value

    @classmethod
    def from_env(cls, **overrides: Any) -> "RouterConfig":
        """Build a config from ``NETROUTER_*`` environment variables.

        Explicit keyword overrides that are not ``None`` take precedence.
        """
        values: dict[str, Any] = {}
        if base_url := os.getenv(ENV_BASE_URL):
            values["base_url"] = base_url
        if timeout := os.getenv(ENV_TIMEOUT):
            values["timeout"] = float(timeout)
        if verify_ssl := os.getenv(ENV_VERIFY_SSL):
            values["verify_ssl"] = verify_ssl.strip().lower() not in _FALSY
        if follow_redirects := os.getenv(ENV_FOLLOW_REDIRECTS):
            values["follow_redirects"] = (
                follow_redirects.strip().lower() not in _FALSY
            )
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def client_kwargs(self) -> dict[str, Any]:
        return get_httpx_client_kwargs(
            timeout=self.timeout,
            verify_ssl=self.verify_ssl,
            follow_redirects=self.follow_redirects,
        )
