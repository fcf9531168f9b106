"""Test the job and Lambda entry points."""

import json
from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from conftest import make_payload, make_post

import handler
import main as job
from dc311rn.common import TimelineFetchError
from dc311rn.connectors.twitter import TwitterConnector
from dc311rn.lookup import LookupClient, LookupOutcome, ServiceRequestRecord
from dc311rn.model import ClassificationResult, ProcessStatus, RunReport


@pytest.fixture
def config():
    return {
        "connector": {"provider": "twitter"},
        "lookup": {},
        "processor": {"lookback_minutes": 60},
    }


class TestMain:
    """Test the job wiring."""

    @pytest.mark.asyncio
    async def test_main_runs_pipeline(self, twitter_env, config, monkeypatch, now):
        """Test main builds the components and returns the report."""
        monkeypatch.setattr(
            TwitterConnector,
            "fetch_recent_mentions",
            AsyncMock(return_value=[make_post("1", "SR 10-00000001", minutes_ago=5)]),
        )
        monkeypatch.setattr(TwitterConnector, "fetch_user_timeline", AsyncMock(return_value=[]))
        api = MagicMock()
        monkeypatch.setattr(TwitterConnector, "_create_api", lambda self: api)

        record = ServiceRequestRecord.model_validate(make_payload("10-00000001"))
        resolve_all = AsyncMock(return_value=[LookupOutcome.from_record("10-00000001", record)])
        monkeypatch.setattr(LookupClient, "resolve_all", resolve_all)

        report = await job.main(config, now=now, dry_run=True)

        assert [o.status for o in report.outcomes] == [ProcessStatus.REPLIED]
        resolve_all.assert_awaited_once_with(["10-00000001"])
        api.update_status.assert_not_called()

    @pytest.mark.asyncio
    async def test_main_propagates_fetch_error(self, twitter_env, config, monkeypatch, now):
        """Test a timeline failure escapes main."""
        monkeypatch.setattr(
            TwitterConnector,
            "fetch_recent_mentions",
            AsyncMock(side_effect=TimelineFetchError("from:311dcgov", "unauthorized")),
        )
        monkeypatch.setattr(TwitterConnector, "fetch_user_timeline", AsyncMock(return_value=[]))
        monkeypatch.setattr(TwitterConnector, "_create_api", lambda self: MagicMock())

        with pytest.raises(TimelineFetchError):
            await job.main(config, now=now)


class TestLambdaHandler:
    """Test the Lambda entry point."""

    def test_success(self, monkeypatch, now):
        """Test a completed run returns the report."""
        monkeypatch.delenv("TWITTER_SECRET_NAME", raising=False)
        report = RunReport(
            classification=ClassificationResult(threshold=now - timedelta(hours=1))
        )
        with patch.object(handler, "main", AsyncMock(return_value=report)) as main:
            response = handler.lambda_handler({"dry_run": "true"}, None)

        assert response["statusCode"] == 200
        body = json.loads(response["body"])
        assert body["replied"] == []
        assert body["threshold"] == (now - timedelta(hours=1)).isoformat()
        assert main.await_args.kwargs == {"dry_run": True}

    def test_fetch_error_is_reraised(self, monkeypatch):
        """Test an aborted run fails the invocation."""
        monkeypatch.delenv("TWITTER_SECRET_NAME", raising=False)
        error = TimelineFetchError("dc311rn", "unauthorized")
        with patch.object(handler, "main", AsyncMock(side_effect=error)):
            with pytest.raises(TimelineFetchError):
                handler.lambda_handler({}, None)

    def test_invalid_config(self, monkeypatch):
        """Test invalid configuration maps to a 400."""
        monkeypatch.delenv("TWITTER_SECRET_NAME", raising=False)
        monkeypatch.delenv("TWITTER_CONSUMER_KEY", raising=False)
        with patch.object(handler, "load_config", return_value={}):
            response = handler.lambda_handler({}, None)

        assert response["statusCode"] == 400

    def test_unexpected_error(self, monkeypatch):
        """Test other errors map to a 500."""
        monkeypatch.delenv("TWITTER_SECRET_NAME", raising=False)
        with patch.object(handler, "main", AsyncMock(side_effect=RuntimeError("boom"))):
            response = handler.lambda_handler({}, None)

        assert response["statusCode"] == 500
        assert json.loads(response["body"]) == {"error": "boom"}

    def test_secrets_exported(self, monkeypatch, now):
        """Test secrets are exported into the environment before the run."""
        monkeypatch.setenv("TWITTER_SECRET_NAME", "dc311rn/twitter")
        monkeypatch.setenv("TWITTER_CONSUMER_KEY", "stale")
        secrets = {"TWITTER_CONSUMER_KEY": "fresh"}
        report = RunReport(classification=ClassificationResult(threshold=now))

        with (
            patch.object(handler, "get_secret", AsyncMock(return_value=secrets)) as get_secret,
            patch.object(handler, "main", AsyncMock(return_value=report)),
        ):
            response = handler.lambda_handler({}, None)

        assert response["statusCode"] == 200
        get_secret.assert_awaited_once_with("dc311rn/twitter")
        assert handler.os.environ["TWITTER_CONSUMER_KEY"] == "fresh"
