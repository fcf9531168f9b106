"""Post classification."""

from __future__ import annotations

import logging
from collections.abc import Callable, Collection, Iterable
from datetime import datetime

from dc311rn.model import ClassificationResult, Post

from .extract import extract

logger = logging.getLogger(__name__)


def classify(
    posts: Iterable[Post],
    threshold: datetime,
    already_replied_ids: Collection[str],
    extractor: Callable[[str], list[str]] = extract,
) -> ClassificationResult:
    """Partition posts into four disjoint buckets.

    Checks run in a fixed order and the first match wins: no identifier,
    already replied, created at or before ``threshold``, otherwise actionable.
    Bucket order follows input order.
    """
    buckets: dict[str, list[Post]] = {
        "no_identifier": [],
        "already_replied": [],
        "outside_window": [],
        "actionable": [],
    }

    for post in posts:
        if not extractor(post.text):
            bucket = "no_identifier"
        elif post.id in already_replied_ids:
            bucket = "already_replied"
        elif post.created_at <= threshold:
            bucket = "outside_window"
        else:
            bucket = "actionable"
        buckets[bucket].append(post)

    return ClassificationResult(
        threshold=threshold,
        **{name: tuple(members) for name, members in buckets.items()},
    )


def replied_ids(own_posts: Iterable[Post]) -> frozenset[str]:
    """Ids of every post the bot has already replied to."""
    return frozenset(p.in_reply_to_id for p in own_posts if p.in_reply_to_id)


def log_exclusions(result: ClassificationResult) -> None:
    reasons = (
        (result.no_identifier, "it has no service request number"),
        (result.already_replied, "I have already replied"),
        (result.outside_window, f"it was posted earlier than {result.threshold.isoformat()}"),
    )
    for posts, reason in reasons:
        for post in posts:
            logger.info(
                f"Post {post.id} excluded because {reason}. "
                f"(text={post.text!r}, created_at={post.created_at.isoformat()})"
            )
