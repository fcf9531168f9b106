"""Processor configuration."""

from __future__ import annotations

from pydantic import Field, field_validator

from dc311rn.common.config import BaseConfig

# Agency accounts that should not be pulled into replies
DEFAULT_EXCLUDED_MENTION_IDS = [
    "633993114",  # @DCDHCD
    "18768730",  # @DC_HSEMA
    "22509067",  # @dcdmv
    "745716766643523585",  # @OUC_DC
    "2964352984",  # @DCMOCA
    "86340250",  # @DCDPW
    "21789369",  # @DDOTDC
    "301494181",  # @DC_Housing
]


class ReplyConfig(BaseConfig):
    """Reply composition configuration."""

    status_base_url: str = Field(
        default="https://www.dc311rn.com/",
        description="Prefix of the public status page for a request",
    )
    suffix: str = Field(
        default="✨",
        description="Trailing decoration appended to every reply",
    )
    excluded_mention_ids: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXCLUDED_MENTION_IDS),
        description="Account ids never auto-mentioned in replies",
    )

    @field_validator("excluded_mention_ids", mode="before")
    @classmethod
    def validate_excluded_mention_ids(cls, v: list | None) -> list[str]:
        # An empty YAML key means no exclusions
        if v is None:
            return []
        if isinstance(v, (str, bytes)) or not isinstance(v, (list, tuple, set)):
            raise ValueError("excluded_mention_ids must be a list of account ids")
        return [str(i).strip() for i in v if str(i).strip()]


class ProcessorConfig(BaseConfig):
    """Run processor configuration."""

    lookback_minutes: int = Field(
        default=60,
        description="Only posts newer than this many minutes are replied to",
        ge=1,
    )
    reply: ReplyConfig = Field(
        default_factory=ReplyConfig,
        description="Reply composition",
    )
