"""Test lookup configuration and types."""

import pytest
from conftest import make_payload
from pydantic import ValidationError

from dc311rn.lookup import LookupConfig, LookupOutcome, ServiceRequestRecord


def test_defaults(monkeypatch):
    """Test default configuration."""
    monkeypatch.delenv("DC311RN_API_KEY", raising=False)
    config = LookupConfig()
    assert config.api_base == "https://api.dc311rn.com"
    assert config.headers == {"User-Agent": "dc311rn-twitterbot", "Accept": "application/json"}


def test_api_key_from_env(monkeypatch):
    """Test the API key falls back to the environment."""
    monkeypatch.setenv("DC311RN_API_KEY", "from-env")
    assert LookupConfig().headers["Authorization"] == "Bearer from-env"
    assert LookupConfig(api_key="explicit").api_key == "explicit"


@pytest.mark.parametrize("api_base", ["ftp://api.test", "not a url", "https://"])
def test_invalid_api_base(api_base):
    """Test invalid base URLs are rejected."""
    with pytest.raises(ValidationError):
        LookupConfig(api_base=api_base)


def test_unknown_fields_rejected():
    """Test unknown configuration keys are rejected."""
    with pytest.raises(ValidationError):
        LookupConfig(retries=3)


def test_record_parsing():
    """Test records parse the nested API body and ignore extra fields."""
    payload = make_payload("10-00000001", name="Rodent Abatement", lat="38.5", lon="-77.5")
    payload["status"] = "OPEN"
    record = ServiceRequestRecord.model_validate(payload)

    assert record.service_name == "Rodent Abatement"
    assert (record.location.latitude, record.location.longitude) == (38.5, -77.5)


def test_record_missing_fields():
    """Test bodies without the required fields are rejected."""
    with pytest.raises(ValidationError):
        ServiceRequestRecord.model_validate({"service_request_id": "10-00000001"})


def test_outcome_tags():
    """Test outcomes carry exactly one tag."""
    record = ServiceRequestRecord.model_validate(make_payload("10-00000001"))
    assert LookupOutcome.from_record("10-00000001", record).found
    assert not LookupOutcome.not_found("10-00000001", "gone").found
