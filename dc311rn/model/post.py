"""Input models for the reply bot."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

TWITTER_DATETIME_FORMAT = "%a %b %d %H:%M:%S %z %Y"


@dataclass(frozen=True)
class Post:
    """A post read from a timeline."""

    id: str
    text: str
    created_at: datetime
    in_reply_to_id: str | None = None

    @classmethod
    def from_status(cls, status: Any) -> Post:
        """Create a post from a tweepy status object."""
        created_at = status.created_at
        if isinstance(created_at, str):
            created_at = datetime.strptime(created_at, TWITTER_DATETIME_FORMAT)
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)

        text = getattr(status, "full_text", None) or getattr(status, "text", "") or ""
        in_reply_to = getattr(status, "in_reply_to_status_id_str", None)

        return cls(
            id=str(status.id_str),
            text=text,
            created_at=created_at,
            in_reply_to_id=str(in_reply_to) if in_reply_to else None,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert instance to dictionary."""
        return {
            "id": self.id,
            "text": self.text,
            "created_at": self.created_at,
            "in_reply_to_id": self.in_reply_to_id,
        }


@dataclass(frozen=True)
class ReplyDraft:
    """A composed reply, ready to hand to the reply transport."""

    in_reply_to_id: str
    text: str
    latitude: float | None = None
    longitude: float | None = None
    excluded_mention_ids: tuple[str, ...] = field(default_factory=tuple)

    @property
    def postable(self) -> bool:
        """Whether the draft carries anything worth posting."""
        return bool(self.text)

    @property
    def has_location(self) -> bool:
        return self.latitude is not None and self.longitude is not None
