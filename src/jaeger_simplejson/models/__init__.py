"""Core data models for the Jaeger SimpleJSON bridge."""

from .projections import Annotation, TableColumn, TimeSeriesPoint
from .trace import (
    INFINITE_START,
    Process,
    Span,
    Tag,
    TagValue,
    Trace,
    TraceBatch,
)

__all__ = [
    # Traces
    "INFINITE_START",
    "Tag",
    "TagValue",
    "Span",
    "Process",
    "Trace",
    "TraceBatch",
    # Projections
    "TimeSeriesPoint",
    "TableColumn",
    "Annotation",
]
