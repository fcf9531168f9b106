"""Twitter connector implementation."""

from __future__ import annotations

import asyncio
import logging

import tweepy

from dc311rn.common.errors import ReplyPostError, TimelineFetchError
from dc311rn.connectors.component import ConnectorComponent
from dc311rn.model import Post, ReplyDraft

from .config import TwitterConfig

logger = logging.getLogger(__name__)


class TwitterConnector(ConnectorComponent):
    """Reads timelines from and posts replies to Twitter."""

    _config_type = TwitterConfig

    def __init__(self, config: TwitterConfig) -> None:
        """Initialize Twitter connector."""
        super().__init__(config)
        self._api: tweepy.API | None = None

    def _create_api(self) -> tweepy.API:
        auth = tweepy.OAuth1UserHandler(
            self.config.consumer_key,
            self.config.consumer_secret,
            self.config.access_token_key,
            self.config.access_token_secret,
        )
        return tweepy.API(auth)

    @property
    def api(self) -> tweepy.API:
        """Lazy load API."""
        if self._api is None:
            self._api = self._create_api()
        return self._api

    async def connect(self) -> None:
        """Create the API client."""
        _ = self.api
        logger.info(f"Connected to Twitter as {self.config.account}")

    async def disconnect(self) -> None:
        """Drop the API client."""
        if self._api:
            self._api = None
            logger.info("Disconnected from Twitter")

    async def _read_timeline(self, timeline: str, method, **params) -> list[Post]:
        """Call a timeline endpoint and convert its statuses to posts."""
        try:
            statuses = await asyncio.to_thread(method, **params)
            posts = [Post.from_status(s) for s in statuses]
        except tweepy.TweepyException as e:
            raise TimelineFetchError(timeline, str(e)) from e
        except (ValueError, AttributeError, TypeError) as e:
            raise TimelineFetchError(timeline, f"Malformed status: {e}") from e

        logger.info(f"Read {len(posts)} posts from {timeline}")
        return posts

    async def fetch_recent_mentions(self) -> list[Post]:
        """Search recent posts matching the configured query."""
        return await self._read_timeline(
            self.config.mentions_query,
            self.api.search_tweets,
            q=self.config.mentions_query,
            result_type="recent",
            tweet_mode="extended",
            count=self.config.mentions_count,
        )

    async def fetch_user_timeline(self) -> list[Post]:
        """Read the bot account's own timeline, replies included."""
        return await self._read_timeline(
            self.config.account,
            self.api.user_timeline,
            screen_name=self.config.account,
            exclude_replies=False,
            tweet_mode="extended",
        )

    async def post_reply(self, draft: ReplyDraft) -> None:
        """Post a reply to the given post."""
        params = {
            "status": draft.text,
            "in_reply_to_status_id": draft.in_reply_to_id,
            "auto_populate_reply_metadata": True,
        }
        if draft.excluded_mention_ids:
            params["exclude_reply_user_ids"] = ",".join(draft.excluded_mention_ids)
        if draft.has_location:
            params.update(lat=draft.latitude, long=draft.longitude, display_coordinates=True)

        if self.config.dry_run:
            logger.info(f"Dry run, not posting reply to {draft.in_reply_to_id}: {params}")
            return

        try:
            status = await asyncio.to_thread(self.api.update_status, **params)
        except tweepy.TweepyException as e:
            raise ReplyPostError(draft.in_reply_to_id, str(e)) from e

        logger.info(f"Replied to {draft.in_reply_to_id} with {status.id_str}")
