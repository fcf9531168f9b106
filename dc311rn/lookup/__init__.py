"""Service request lookup package."""

from .client import LookupClient
from .config import LookupConfig
from .types import LookupOutcome, LookupStatus, ServiceRequestRecord

__all__ = [
    "LookupClient",
    "LookupConfig",
    "LookupOutcome",
    "LookupStatus",
    "ServiceRequestRecord",
]
