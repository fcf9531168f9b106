import json
from datetime import datetime

from .config import BaseConfig, RootConfig
from .errors import ReplyPostError, TimelineFetchError


class DateTimeEncoder(json.JSONEncoder):
    def default(self, obj):
        if isinstance(obj, datetime):
            return obj.isoformat()
        return super().default(obj)


__all__ = [
    "BaseConfig",
    "DateTimeEncoder",
    "ReplyPostError",
    "RootConfig",
    "TimelineFetchError",
]
