"""Twitter connector configuration."""

from __future__ import annotations

import os
from typing import Literal

from pydantic import Field, model_validator

from dc311rn.common.config import BaseConfig

CREDENTIAL_ENV = {
    "consumer_key": "TWITTER_CONSUMER_KEY",
    "consumer_secret": "TWITTER_CONSUMER_SECRET",
    "access_token_key": "TWITTER_ACCESS_TOKEN_KEY",
    "access_token_secret": "TWITTER_ACCESS_TOKEN_SECRET",
}


class TwitterConfig(BaseConfig):
    """Twitter connector configuration."""

    provider: Literal["twitter"] = "twitter"

    # creds
    consumer_key: str = Field(..., min_length=1, description="Consumer key")
    consumer_secret: str = Field(..., min_length=1, description="Consumer secret")
    access_token_key: str = Field(..., min_length=1, description="Access token")
    access_token_secret: str = Field(..., min_length=1, description="Access token secret")

    @model_validator(mode="before")
    @classmethod
    def validate_credentials(cls, values: dict) -> dict:
        missing = []
        for field, env in CREDENTIAL_ENV.items():
            value = values.get(field) or os.getenv(env)
            if not value:
                missing.append(env)
                continue
            values[field] = value

        if missing:
            raise ValueError(f"{', '.join(missing)} must be set")
        return values

    # timelines
    mentions_query: str = Field(
        default="from:311dcgov",
        min_length=1,
        description="Search query for posts that may carry request numbers",
    )
    mentions_count: int = Field(
        default=15,
        description="Number of recent posts to search",
        ge=1,
        le=100,
    )
    account: str = Field(
        default="dc311rn",
        min_length=1,
        description="Screen name the bot replies as",
    )

    # posting
    dry_run: bool = Field(
        default=False,
        description="Log replies instead of posting them",
    )
