"""Pytest configuration."""

import sys
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock

import path
import pytest

sys.path.append(str(path.Path(__file__).parent.parent))

from dc311rn.lookup import LookupOutcome, ServiceRequestRecord  # noqa: E402
from dc311rn.model import Post  # noqa: E402

pytest_plugins = ["pytest_asyncio"]

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

TWITTER_ENV = {
    "TWITTER_CONSUMER_KEY": "consumer-key",
    "TWITTER_CONSUMER_SECRET": "consumer-secret",
    "TWITTER_ACCESS_TOKEN_KEY": "access-token",
    "TWITTER_ACCESS_TOKEN_SECRET": "access-secret",
}


def make_post(id: str, text: str = "", minutes_ago: int = 30, in_reply_to_id=None) -> Post:
    """Create a post relative to NOW."""
    return Post(
        id=id,
        text=text,
        created_at=NOW - timedelta(minutes=minutes_ago),
        in_reply_to_id=in_reply_to_id,
    )


def make_payload(identifier: str, name: str = "Pothole Repair", lat=38.9, lon=-77.03) -> dict:
    """Create a lookup API response body."""
    return {
        "service_request_id": identifier,
        "service_order": {"service": {"service_name": name}},
        "location": {"latitude": lat, "longitude": lon},
    }


def make_record(identifier: str, **kwargs) -> ServiceRequestRecord:
    return ServiceRequestRecord.model_validate(make_payload(identifier, **kwargs))


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def twitter_env(monkeypatch):
    """Export Twitter credentials."""
    for key, value in TWITTER_ENV.items():
        monkeypatch.setenv(key, value)
    return TWITTER_ENV


@pytest.fixture
def mock_source():
    """Timeline source and reply transport with empty timelines."""

    class MockSource:
        def __init__(self):
            self.fetch_recent_mentions = AsyncMock(return_value=[])
            self.fetch_user_timeline = AsyncMock(return_value=[])
            self.post_reply = AsyncMock(return_value=None)

    return MockSource()


@pytest.fixture
def mock_lookup():
    """Lookup client resolving identifiers from a dict of outcomes."""

    class MockLookup:
        def __init__(self):
            self.outcomes: dict[str, LookupOutcome] = {}
            self.calls: list[list[str]] = []

        def found(self, identifier: str, **kwargs) -> None:
            self.outcomes[identifier] = LookupOutcome.from_record(
                identifier, make_record(identifier, **kwargs)
            )

        async def resolve_all(self, identifiers):
            self.calls.append(list(identifiers))
            return [
                self.outcomes.get(i) or LookupOutcome.not_found(i, "missing") for i in identifiers
            ]

    return MockLookup()
