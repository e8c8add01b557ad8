"""jaeger-query HTTP client implementing the fetch collaborators."""

from datetime import datetime, timezone
from typing import Any, Protocol

import httpx

from ..logging_config import get_logger
from ..models import TraceBatch
from .decode import decode_services, decode_traces
from .errors import JaegerTransportError, JaegerUpstreamError

logger = get_logger(__name__)


class ITraceFetcher(Protocol):
    """Source of trace batches."""

    async def fetch(
        self,
        service: str,
        start: datetime,
        end: datetime,
        limit: int = 0,
    ) -> TraceBatch:
        """Fetch traces of ``service`` within ``[start, end]``. A zero limit means no limit."""
        ...


class IServiceCatalog(Protocol):
    """Source of known service names."""

    async def list_service_names(self) -> list[str]:
        """List all service names known to the trace store."""
        ...


def to_epoch_micros(value: datetime) -> int:
    """Datetime to epoch microseconds; naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    delta = value - datetime(1970, 1, 1, tzinfo=timezone.utc)
    return (delta.days * 86400 + delta.seconds) * 1_000_000 + delta.microseconds


class JaegerClient:
    """Queries the jaeger-query JSON API (``/api/traces``, ``/api/services``)."""

    def __init__(self, http_client: httpx.AsyncClient, base_url: str):
        self._http = http_client
        self._base_url = base_url.rstrip("/")

    async def fetch(
        self,
        service: str,
        start: datetime,
        end: datetime,
        limit: int = 0,
    ) -> TraceBatch:
        """Fetch traces of ``service`` within ``[start, end]``."""
        params: dict[str, Any] = {
            "start": to_epoch_micros(start),
            "end": to_epoch_micros(end),
            "service": service,
        }
        if limit:
            params["limit"] = limit

        body = await self._get("/api/traces", params)
        traces, errors = decode_traces(body)
        self._raise_for_errors(errors)

        logger.debug(
            "Decoded %d traces for service %s",
            len(traces),
            service,
            extra={"context": {"service": service, "traces": len(traces)}},
        )
        return traces

    async def list_service_names(self) -> list[str]:
        """List all service names known to jaeger-query."""
        body = await self._get("/api/services")
        names, errors = decode_services(body)
        self._raise_for_errors(errors)
        return names

    async def _get(self, path: str, params: dict[str, Any] | None = None) -> bytes:
        url = f"{self._base_url}{path}"
        logger.debug("GET %s params=%s", url, params)
        try:
            response = await self._http.get(url, params=params)
        except httpx.HTTPError as e:
            logger.error(
                "Request to %s failed: %s", url, e, extra={"context": {"url": url}}
            )
            raise JaegerTransportError(f"request to {url} failed: {e}") from e
        return response.content

    def _raise_for_errors(self, errors: list[Any]) -> None:
        if not errors:
            return
        for error in errors:
            logger.error(
                "error: %s", error, extra={"context": {"upstream_error": error}}
            )
        raise JaegerUpstreamError(errors)
