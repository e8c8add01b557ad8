"""Errors raised while talking to jaeger-query."""

from typing import Any


class JaegerError(Exception):
    """Base class for failed upstream fetches."""


class JaegerTransportError(JaegerError):
    """Network failure or timeout."""


class JaegerDecodeError(JaegerError):
    """Response body is not the expected JSON shape."""


class JaegerUpstreamError(JaegerError):
    """jaeger-query answered with a non-empty ``errors`` list."""

    def __init__(self, errors: list[Any]):
        super().__init__(f"errors in response from jaeger ({len(errors)})")
        self.errors = errors
