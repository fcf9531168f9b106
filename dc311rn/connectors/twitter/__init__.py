"""Twitter connector package."""

from .client import TwitterConnector
from .config import TwitterConfig

__all__ = ["TwitterConfig", "TwitterConnector"]
