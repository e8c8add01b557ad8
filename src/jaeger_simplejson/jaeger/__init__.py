"""Jaeger query API module."""

from .client import IServiceCatalog, ITraceFetcher, JaegerClient, to_epoch_micros
from .errors import (
    JaegerDecodeError,
    JaegerError,
    JaegerTransportError,
    JaegerUpstreamError,
)

__all__ = [
    "IServiceCatalog",
    "ITraceFetcher",
    "JaegerClient",
    "to_epoch_micros",
    "JaegerError",
    "JaegerDecodeError",
    "JaegerTransportError",
    "JaegerUpstreamError",
]
