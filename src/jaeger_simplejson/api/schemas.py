"""Request and response models of the SimpleJSON datasource protocol."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _Model(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class TimeRange(_Model):
    """Dashboard time range."""

    start: datetime = Field(alias="from")
    end: datetime = Field(alias="to")


class QueryTarget(_Model):
    """One panel query; a missing ``type`` means a time series."""

    target: str = ""
    ref_id: str | None = Field(None, alias="refId")
    type: str | None = None


class QueryRequest(_Model):
    """Body of ``POST /query``."""

    range: TimeRange
    max_data_points: int = Field(0, alias="maxDataPoints")
    targets: list[QueryTarget] = Field(default_factory=list)


class SearchRequest(_Model):
    """Body of ``POST /search``."""

    target: str = ""


class AnnotationQuery(_Model):
    """Annotation definition; ``query`` is the service name."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str = ""
    query: str = ""


class AnnotationRequest(_Model):
    """Body of ``POST /annotations``."""

    range: TimeRange
    annotation: AnnotationQuery


class AnnotationResponse(BaseModel):
    """Response model for one annotation."""

    annotation: dict[str, Any]
    time: int
    title: str
    text: str
    tags: list[str]


class StatusResponse(BaseModel):
    """Response model for status."""

    status: str
