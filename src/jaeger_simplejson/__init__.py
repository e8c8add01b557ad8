"""Jaeger traces as a Grafana SimpleJSON datasource."""

from .app import Application, IApplication
from .config import ConfigError, Settings
from .handler import ISimpleJSONHandler, SimpleJSONHandler
from .jaeger import (
    IServiceCatalog,
    ITraceFetcher,
    JaegerClient,
    JaegerDecodeError,
    JaegerError,
    JaegerTransportError,
    JaegerUpstreamError,
)
from .links import ILinkBuilder, LinkBuilder
from .models import (
    INFINITE_START,
    Annotation,
    Process,
    Span,
    TableColumn,
    Tag,
    TimeSeriesPoint,
    Trace,
    TraceBatch,
)
from .projection import (
    build_annotations,
    build_table,
    build_time_series,
    match_services,
)

__all__ = [
    # Application
    "Application",
    "IApplication",
    "Settings",
    "ConfigError",
    # Models
    "INFINITE_START",
    "Tag",
    "Span",
    "Process",
    "Trace",
    "TraceBatch",
    "TimeSeriesPoint",
    "TableColumn",
    "Annotation",
    # Projections
    "build_time_series",
    "build_table",
    "build_annotations",
    "match_services",
    # Components
    "ISimpleJSONHandler",
    "SimpleJSONHandler",
    "ITraceFetcher",
    "IServiceCatalog",
    "JaegerClient",
    "ILinkBuilder",
    "LinkBuilder",
    # Errors
    "JaegerError",
    "JaegerTransportError",
    "JaegerDecodeError",
    "JaegerUpstreamError",
]
