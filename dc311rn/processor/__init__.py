"""Classification and reconciliation pipeline."""

from .classify import classify, log_exclusions, replied_ids
from .compose import ReplyComposer
from .config import ProcessorConfig, ReplyConfig
from .extract import extract
from .processor import RunProcessor

__all__ = [
    "ProcessorConfig",
    "ReplyComposer",
    "ReplyConfig",
    "RunProcessor",
    "classify",
    "extract",
    "log_exclusions",
    "replied_ids",
]
