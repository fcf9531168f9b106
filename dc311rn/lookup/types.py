"""Lookup types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class _Payload(BaseModel):
    model_config = ConfigDict(extra="ignore")


class Service(_Payload):
    service_name: str = Field(..., description="Human readable service name")


class ServiceOrder(_Payload):
    service: Service = Field(..., description="Requested service")


class Location(_Payload):
    latitude: float = Field(..., description="Latitude")
    longitude: float = Field(..., description="Longitude")


class ServiceRequestRecord(_Payload):
    """Service request as returned by the lookup API."""

    service_request_id: str = Field(..., description="Normalized request identifier")
    service_order: ServiceOrder = Field(..., description="Service order")
    location: Location = Field(..., description="Request location")

    @property
    def service_name(self) -> str:
        return self.service_order.service.service_name


class LookupStatus(str, Enum):
    """Result tag for a single identifier lookup."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    UPSTREAM_UNAVAILABLE = "upstream_unavailable"
    UNKNOWN_ERROR = "unknown_error"


@dataclass(frozen=True)
class LookupOutcome:
    """Tagged result of looking up one identifier."""

    identifier: str
    status: LookupStatus
    record: ServiceRequestRecord | None = None
    detail: str | None = None

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND

    @classmethod
    def from_record(cls, identifier: str, record: ServiceRequestRecord) -> LookupOutcome:
        return cls(identifier=identifier, status=LookupStatus.FOUND, record=record)

    @classmethod
    def not_found(cls, identifier: str, detail: str) -> LookupOutcome:
        return cls(identifier=identifier, status=LookupStatus.NOT_FOUND, detail=detail)

    @classmethod
    def upstream_unavailable(cls, identifier: str, detail: str) -> LookupOutcome:
        return cls(identifier=identifier, status=LookupStatus.UPSTREAM_UNAVAILABLE, detail=detail)

    @classmethod
    def unknown_error(cls, identifier: str, detail: str) -> LookupOutcome:
        return cls(identifier=identifier, status=LookupStatus.UNKNOWN_ERROR, detail=detail)
