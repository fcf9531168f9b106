"""Run processor: reconciles timelines and replies to actionable posts."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timedelta, timezone

from dc311rn.common.component import ComponentFactory
from dc311rn.common.errors import ReplyPostError, TimelineFetchError
from dc311rn.connectors.types import ReplyTransport, TimelineSource
from dc311rn.lookup import LookupClient, LookupOutcome, LookupStatus
from dc311rn.model import Post, ProcessOutcome, RunReport

from .classify import classify, log_exclusions, replied_ids
from .compose import ReplyComposer
from .config import ProcessorConfig
from .extract import extract

logger = logging.getLogger(__name__)


class RunProcessor(ComponentFactory[ProcessorConfig]):
    """Runs one pass over the timelines."""

    _config_type = ProcessorConfig

    def __init__(
        self,
        config: ProcessorConfig,
        source: TimelineSource,
        transport: ReplyTransport,
        lookup: LookupClient,
    ) -> None:
        """Initialize processor with its collaborators."""
        super().__init__(config)
        self.source = source
        self.transport = transport
        self.lookup = lookup
        self.composer = ReplyComposer(config.reply)

    def threshold(self, now: datetime | None = None) -> datetime:
        now = now or datetime.now(timezone.utc)
        return now - timedelta(minutes=self.config.lookback_minutes)

    async def _fetch_timelines(self) -> tuple[list[Post], list[Post]]:
        try:
            mentions, own = await asyncio.gather(
                self.source.fetch_recent_mentions(),
                self.source.fetch_user_timeline(),
            )
        except TimelineFetchError as e:
            logger.error(f"Aborting run: {e}")
            raise
        return list(mentions), list(own)

    @staticmethod
    def _first_failure(outcomes: list[LookupOutcome]) -> LookupOutcome | None:
        """Pick the lookup failure that decides a post's outcome, if any."""
        failures = [o for o in outcomes if not o.found]
        for outcome in failures:
            if outcome.status is LookupStatus.NOT_FOUND:
                return outcome
        return failures[0] if failures else None

    async def process_post(self, post: Post) -> ProcessOutcome:
        """Resolve, compose and post the reply for one actionable post."""
        identifiers = extract(post.text)
        outcomes = await self.lookup.resolve_all(identifiers)

        if failure := self._first_failure(outcomes):
            detail = f"{failure.identifier}: {failure.detail}"
            if failure.status is LookupStatus.NOT_FOUND:
                logger.warning(f"Service request not found for post {post.id}: {detail}")
                return ProcessOutcome.not_found(post, detail)
            logger.error(
                f"Unable to fetch service requests for post {post.id} "
                f"({failure.status.value}): {detail}"
            )
            return ProcessOutcome.errored(post, f"{failure.status.value}: {detail}")

        draft = self.composer.compose(post, [o.record for o in outcomes])
        if not draft.postable:
            return ProcessOutcome.errored(post, "Nothing to reply with")

        try:
            await self.transport.post_reply(draft)
        except ReplyPostError as e:
            logger.error(str(e))
            return ProcessOutcome.errored(post, e.detail)

        return ProcessOutcome.replied(post)

    async def run(self, now: datetime | None = None) -> RunReport:
        """Fetch, classify, reply and report."""
        mentions, own = await self._fetch_timelines()

        classification = classify(mentions, self.threshold(now), replied_ids(own))
        log_exclusions(classification)
        report = RunReport(classification=classification)

        actionable = classification.actionable
        logger.info(f"Processing {len(actionable)}/{len(mentions)} posts")

        response = await asyncio.gather(
            *[self.process_post(post) for post in actionable],
            return_exceptions=True,
        )
        for post, res in zip(actionable, response, strict=True):
            if isinstance(res, BaseException):
                logger.error(f"Error processing post {post.id}: {res!r}")
                res = ProcessOutcome.errored(post, repr(res))
            report.add(res)

        report.complete()
        logger.info(report.summary())
        return report
