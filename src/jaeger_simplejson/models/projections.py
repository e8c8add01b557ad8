"""Projection output shapes consumed by the dashboard layer."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class TimeSeriesPoint:
    """One datapoint: epoch milliseconds and a value in milliseconds."""

    time: int
    value: float


@dataclass(frozen=True)
class TableColumn:
    """A named, typed column of a table projection."""

    text: str
    type: str  # "time", "string" or "number"
    values: list[Any] = field(default_factory=list)


@dataclass(frozen=True)
class Annotation:
    """An event marker for one trace."""

    title: str
    text: str
    time: int
    tags: list[str] = field(default_factory=list)
