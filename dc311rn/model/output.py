"""Output models for a single run."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from dc311rn.model.post import Post


@dataclass(frozen=True)
class ClassificationResult:
    """Partition of a post batch into four disjoint buckets."""

    threshold: datetime
    no_identifier: tuple[Post, ...] = ()
    already_replied: tuple[Post, ...] = ()
    outside_window: tuple[Post, ...] = ()
    actionable: tuple[Post, ...] = ()

    @property
    def too_old(self) -> tuple[Post, ...]:
        """Alias of ``outside_window``, kept under its historical name."""
        return self.outside_window

    @property
    def excluded(self) -> tuple[Post, ...]:
        return self.no_identifier + self.already_replied + self.outside_window

    def __len__(self) -> int:
        return len(self.excluded) + len(self.actionable)

    def to_dict(self) -> dict[str, Any]:
        """Convert instance to dictionary of post ids per bucket."""
        return {
            "no_identifier": [p.id for p in self.no_identifier],
            "already_replied": [p.id for p in self.already_replied],
            "outside_window": [p.id for p in self.outside_window],
            "actionable": [p.id for p in self.actionable],
        }


class ProcessStatus(str, Enum):
    """Final state of an actionable post."""

    REPLIED = "replied"
    NOT_FOUND = "not_found"
    ERRORED = "errored"


@dataclass(frozen=True)
class ProcessOutcome:
    """Outcome of processing one actionable post."""

    post: Post
    status: ProcessStatus
    detail: str | None = None

    @classmethod
    def replied(cls, post: Post) -> ProcessOutcome:
        return cls(post=post, status=ProcessStatus.REPLIED)

    @classmethod
    def not_found(cls, post: Post, detail: str) -> ProcessOutcome:
        return cls(post=post, status=ProcessStatus.NOT_FOUND, detail=detail)

    @classmethod
    def errored(cls, post: Post, detail: str) -> ProcessOutcome:
        return cls(post=post, status=ProcessStatus.ERRORED, detail=detail)


@dataclass
class RunReport:
    """Results from one run over the timelines."""

    classification: ClassificationResult
    outcomes: list[ProcessOutcome] = field(default_factory=list)
    start_time: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    end_time: datetime | None = None

    @property
    def threshold(self) -> datetime:
        return self.classification.threshold

    def _with_status(self, status: ProcessStatus) -> list[ProcessOutcome]:
        return [o for o in self.outcomes if o.status is status]

    @property
    def replied(self) -> list[ProcessOutcome]:
        return self._with_status(ProcessStatus.REPLIED)

    @property
    def not_found(self) -> list[ProcessOutcome]:
        return self._with_status(ProcessStatus.NOT_FOUND)

    @property
    def errored(self) -> list[ProcessOutcome]:
        return self._with_status(ProcessStatus.ERRORED)

    def add(self, outcome: ProcessOutcome) -> None:
        """Add the outcome of one actionable post."""
        self.outcomes.append(outcome)

    def complete(self) -> None:
        """Mark the run as complete."""
        self.end_time = datetime.now(timezone.utc)

    def get_processing_time(self) -> float:
        """Get total processing time in seconds."""
        if not self.end_time:
            return 0.0
        return (self.end_time - self.start_time).total_seconds()

    def summary(self) -> str:
        c = self.classification
        return (
            f"{len(c)} posts: {len(c.actionable)} actionable, "
            f"{len(c.no_identifier)} without identifier, "
            f"{len(c.already_replied)} already replied, "
            f"{len(c.outside_window)} outside window; "
            f"{len(self.replied)} replied, {len(self.not_found)} not found, "
            f"{len(self.errored)} errored"
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert instance to dictionary."""
        return {
            "threshold": self.threshold,
            "classification": self.classification.to_dict(),
            "replied": [o.post.id for o in self.replied],
            "not_found": {o.post.id: o.detail for o in self.not_found},
            "errored": {o.post.id: o.detail for o in self.errored},
            "start_time": self.start_time,
            "end_time": self.end_time,
            "processing_time": self.get_processing_time(),
        }
