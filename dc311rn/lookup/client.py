"""Service request lookup client."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

import httpx
from pydantic import ValidationError

from dc311rn.common.component import ComponentFactory

from .config import LookupConfig
from .types import LookupOutcome, ServiceRequestRecord

logger = logging.getLogger(__name__)

HTTP_NOT_FOUND = 404
HTTP_GATEWAY_TIMEOUT = 504


class LookupClient(ComponentFactory[LookupConfig]):
    """Resolves request identifiers against the lookup API."""

    _config_type = LookupConfig

    def __init__(self, config: LookupConfig) -> None:
        """Initialize client."""
        super().__init__(config)
        self._client: httpx.AsyncClient | None = None

        logger.debug(f"Lookup client initialized with config: {config}")

    def _create_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.config.api_base,
            headers=self.config.headers,
            timeout=self.config.timeout,
            follow_redirects=True,
        )

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy load client."""
        if self._client is None:
            self._client = self._create_client()
        return self._client

    async def close(self):
        """Close client."""
        if self._client:
            try:
                await self._client.aclose()
            except Exception as e:
                logger.error(f"Error closing client: {e}")
            finally:
                self._client = None

    async def lookup(self, identifier: str) -> LookupOutcome:
        """Look up a single identifier. Never raises."""
        try:
            response = await self.client.get(f"/service_requests/{identifier}")
        except httpx.TimeoutException as e:
            return LookupOutcome.upstream_unavailable(identifier, f"Timed out: {e!r}")
        except httpx.HTTPError as e:
            return LookupOutcome.unknown_error(identifier, f"Request failed: {e!r}")

        if response.status_code == HTTP_NOT_FOUND:
            return LookupOutcome.not_found(identifier, response.text)
        if response.status_code == HTTP_GATEWAY_TIMEOUT:
            return LookupOutcome.upstream_unavailable(identifier, response.text)
        if not response.is_success:
            return LookupOutcome.unknown_error(
                identifier, f"HTTP {response.status_code}: {response.text}"
            )

        try:
            record = ServiceRequestRecord.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            return LookupOutcome.unknown_error(identifier, f"Invalid response body: {e}")

        logger.debug(f"Resolved {identifier}: {record.service_name}")
        return LookupOutcome.from_record(identifier, record)

    async def resolve_all(self, identifiers: Sequence[str]) -> list[LookupOutcome]:
        """Look up every identifier concurrently, one outcome per input in input order."""
        if not identifiers:
            return []

        response = await asyncio.gather(
            *[self.lookup(identifier) for identifier in identifiers],
            return_exceptions=True,
        )

        outcomes = []
        for identifier, res in zip(identifiers, response, strict=True):
            if isinstance(res, BaseException):
                logger.error(f"Error looking up {identifier}: {res!r}")
                res = LookupOutcome.unknown_error(identifier, repr(res))
            outcomes.append(res)

        return outcomes

    async def __aenter__(self) -> LookupClient:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit, cleanup resources."""
        await self.close()
