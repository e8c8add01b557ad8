"""SimpleJSON datasource routes."""

from typing import Any

from fastapi import APIRouter, HTTPException

from ...app import IApplication
from ...jaeger import JaegerError
from ...logging_config import get_logger
from ...models import TableColumn
from ..schemas import (
    AnnotationRequest,
    AnnotationResponse,
    QueryRequest,
    SearchRequest,
    StatusResponse,
)

logger = get_logger(__name__)


def _table_response(columns: list[TableColumn]) -> dict[str, Any]:
    """Transpose builder columns into the rows the datasource expects."""
    return {
        "type": "table",
        "columns": [{"text": c.text, "type": c.type} for c in columns],
        "rows": [list(row) for row in zip(*(c.values for c in columns))],
    }


def _upstream_failure(e: JaegerError) -> HTTPException:
    logger.error("Upstream query failed: %s", e)
    return HTTPException(status_code=502, detail=str(e))


def create_simplejson_router(app: IApplication) -> APIRouter:
    """Create SimpleJSON router."""
    router = APIRouter(tags=["simplejson"])

    @router.get("/", response_model=StatusResponse)
    async def root() -> dict:
        """Datasource health check."""
        return {"status": "ok"}

    @router.post("/search", response_model=list[str])
    async def search(request: SearchRequest) -> list[str]:
        """Service names matching the typed prefix, or all for ``*``."""
        try:
            return await app.handler.search(request.target)
        except JaegerError as e:
            raise _upstream_failure(e)
        except Exception as e:
            logger.exception("Search failed")
            raise HTTPException(status_code=500, detail=str(e))

    @router.post("/query")
    async def query(request: QueryRequest) -> list[dict[str, Any]]:
        """Run each panel target as a time series or table query."""
        start, end = request.range.start, request.range.end
        results: list[dict[str, Any]] = []
        try:
            for target in request.targets:
                if not target.target.strip():
                    continue

                if target.type == "table":
                    columns = await app.handler.query_table(start, end, target.target)
                    results.append(_table_response(columns))
                elif target.type in (None, "timeserie"):
                    points = await app.handler.query_time_series(
                        start, end, target.target, request.max_data_points
                    )
                    results.append(
                        {
                            "target": target.target,
                            "datapoints": [[p.value, p.time] for p in points],
                        }
                    )
                else:
                    logger.warning(
                        "Skipping target %s with unknown type %s",
                        target.target,
                        target.type,
                    )
            return results
        except JaegerError as e:
            raise _upstream_failure(e)
        except Exception as e:
            logger.exception("Query failed")
            raise HTTPException(status_code=500, detail=str(e))

    @router.post("/annotations", response_model=list[AnnotationResponse])
    async def annotations(request: AnnotationRequest) -> list[dict[str, Any]]:
        """One annotation per trace of the queried service."""
        try:
            found = await app.handler.annotations(
                request.range.start, request.range.end, request.annotation.query
            )
        except JaegerError as e:
            raise _upstream_failure(e)
        except Exception as e:
            logger.exception("Annotations failed")
            raise HTTPException(status_code=500, detail=str(e))

        echoed = request.annotation.model_dump(by_alias=True)
        return [
            {
                "annotation": echoed,
                "time": a.time,
                "title": a.title,
                "text": a.text,
                "tags": a.tags,
            }
            for a in found
        ]

    return router
