"""Collaborator protocols used by the run processor."""

from collections.abc import Sequence
from typing import Protocol

from typing_extensions import runtime_checkable

from dc311rn.model import Post, ReplyDraft


@runtime_checkable
class TimelineSource(Protocol):
    """Source of the two timelines a run reconciles."""

    async def fetch_recent_mentions(self) -> Sequence[Post]:
        """Fetch recent posts that may reference service requests."""
        ...

    async def fetch_user_timeline(self) -> Sequence[Post]:
        """Fetch the bot account's own posts, replies included."""
        ...


@runtime_checkable
class ReplyTransport(Protocol):
    """Destination for composed replies."""

    async def post_reply(self, draft: ReplyDraft) -> None:
        """Post a reply, raising ``ReplyPostError`` on failure."""
        ...
