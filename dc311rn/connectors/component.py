"""Base connector component."""

from __future__ import annotations

from collections.abc import Sequence

from dc311rn.common.component import ComponentFactory
from dc311rn.model import Post, ReplyDraft


class ConnectorComponent(ComponentFactory):
    """Base class for social media connectors."""

    async def connect(self) -> None:
        """Establish connection."""
        raise NotImplementedError

    async def disconnect(self) -> None:
        """Close connection resources."""
        raise NotImplementedError

    async def fetch_recent_mentions(self) -> Sequence[Post]:
        raise NotImplementedError

    async def fetch_user_timeline(self) -> Sequence[Post]:
        raise NotImplementedError

    async def post_reply(self, draft: ReplyDraft) -> None:
        raise NotImplementedError

    async def __aenter__(self):
        """Enter context."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit context."""
        await self.disconnect()
