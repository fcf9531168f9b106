"""Lookup configuration."""

from __future__ import annotations

import os
from urllib.parse import urlparse

from pydantic import Field, field_validator, model_validator

from dc311rn.common.config import BaseConfig


class LookupConfig(BaseConfig):
    """Service request lookup API configuration."""

    api_base: str = Field(
        default="https://api.dc311rn.com",
        description="API base URL",
    )
    user_agent: str = Field(
        default="dc311rn-twitterbot",
        description="User-Agent header sent with every request",
    )
    timeout: float = Field(
        default=10.0,
        description="Request timeout in seconds",
        gt=0,
        le=60,
    )
    api_key: str | None = Field(
        default=None,
        description="Optional bearer token",
    )

    @model_validator(mode="before")
    @classmethod
    def validate_credentials(cls, values: dict) -> dict:
        if not values.get("api_key") and (api_key := os.getenv("DC311RN_API_KEY")):
            values["api_key"] = api_key
        return values

    @field_validator("api_base")
    @classmethod
    def validate_api_base(cls, v: str) -> str:
        """Validate API base URL."""
        parsed_url = urlparse(v.strip())
        if parsed_url.scheme not in ("http", "https"):
            raise ValueError("URL must use http or https scheme")
        if not parsed_url.netloc:
            raise ValueError("URL must have a valid host")
        return v.strip().rstrip("/")

    @property
    def headers(self) -> dict[str, str]:
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers
