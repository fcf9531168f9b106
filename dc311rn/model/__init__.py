"""Model package for the reply bot."""

from .output import ClassificationResult, ProcessOutcome, ProcessStatus, RunReport
from .post import Post, ReplyDraft

__all__ = [
    "ClassificationResult",
    "Post",
    "ProcessOutcome",
    "ProcessStatus",
    "ReplyDraft",
    "RunReport",
]
