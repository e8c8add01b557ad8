"""SimpleJSON handler: fetches traces and projects them for dashboards."""

from datetime import datetime
from typing import Protocol

from .jaeger import IServiceCatalog, ITraceFetcher
from .links import ILinkBuilder
from .logging_config import get_logger
from .models import Annotation, TableColumn, TimeSeriesPoint
from .projection import (
    build_annotations,
    build_table,
    build_time_series,
    match_services,
)

logger = get_logger(__name__)


class ISimpleJSONHandler(Protocol):
    """Answers the dashboard datasource requests."""

    async def query_time_series(
        self, start: datetime, end: datetime, target: str, max_data_points: int = 0
    ) -> list[TimeSeriesPoint]:
        """Per-trace service durations for a time series panel."""
        ...

    async def query_table(
        self, start: datetime, end: datetime, target: str
    ) -> list[TableColumn]:
        """One row per trace for a table panel."""
        ...

    async def annotations(
        self, start: datetime, end: datetime, query: str
    ) -> list[Annotation]:
        """One event per trace for annotation queries."""
        ...

    async def search(self, target: str) -> list[str]:
        """Service names matching ``target``."""
        ...


class SimpleJSONHandler:
    """Bridges jaeger-query results to SimpleJSON projections."""

    def __init__(
        self,
        fetcher: ITraceFetcher,
        catalog: IServiceCatalog,
        links: ILinkBuilder,
    ):
        self._fetcher = fetcher
        self._catalog = catalog
        self._links = links

    async def query_time_series(
        self, start: datetime, end: datetime, target: str, max_data_points: int = 0
    ) -> list[TimeSeriesPoint]:
        batch = await self._fetcher.fetch(target, start, end, max_data_points)
        points = build_time_series(batch, target)
        logger.debug(
            "Time series for %s: %d points from %d traces",
            target,
            len(points),
            len(batch),
            extra={
                "context": {
                    "service": target,
                    "traces": len(batch),
                    "points": len(points),
                }
            },
        )
        return points

    async def query_table(
        self, start: datetime, end: datetime, target: str
    ) -> list[TableColumn]:
        batch = await self._fetcher.fetch(target, start, end)
        return build_table(batch, target, self._links)

    async def annotations(
        self, start: datetime, end: datetime, query: str
    ) -> list[Annotation]:
        batch = await self._fetcher.fetch(query, start, end)
        return build_annotations(batch, query, self._links)

    async def search(self, target: str) -> list[str]:
        names = await self._catalog.list_service_names()
        return match_services(target, names)
