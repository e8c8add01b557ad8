"""Projection module."""

from .builders import (
    TABLE_COLUMNS,
    build_annotations,
    build_table,
    build_time_series,
)
from .reducer import (
    error_tag_count,
    overall_earliest_start,
    overall_max_duration,
    service_constrained_start,
    service_max_duration,
)
from .services import WILDCARD, match_services

__all__ = [
    "TABLE_COLUMNS",
    "WILDCARD",
    "build_annotations",
    "build_table",
    "build_time_series",
    "error_tag_count",
    "match_services",
    "overall_earliest_start",
    "overall_max_duration",
    "service_constrained_start",
    "service_max_duration",
]
