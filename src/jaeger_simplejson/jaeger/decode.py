"""Decoding of jaeger-query JSON responses into trace models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..models import Process, Span, Tag, TagValue, Trace, TraceBatch
from .errors import JaegerDecodeError


class _Payload(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class TagPayload(_Payload):
    key: str
    type: str = "string"
    value: Any = None


class SpanPayload(_Payload):
    trace_id: str = Field("", alias="traceID")
    process_id: str = Field("", alias="processID")
    start_time: int = Field(alias="startTime")
    duration: int
    operation_name: str = Field("", alias="operationName")
    tags: list[TagPayload] | None = None


class ProcessPayload(_Payload):
    service_name: str = Field("", alias="serviceName")
    tags: list[TagPayload] | None = None


class TracePayload(_Payload):
    trace_id: str = Field(alias="traceID")
    spans: list[SpanPayload] | None = None
    processes: dict[str, ProcessPayload] | None = None


class TracesEnvelope(_Payload):
    """Body of ``GET /api/traces``."""

    data: list[TracePayload] | None = None
    errors: list[Any] | None = None


class ServicesEnvelope(_Payload):
    """Body of ``GET /api/services``."""

    data: list[str] | None = None
    errors: list[Any] | None = None


def _tag_value(value: Any) -> TagValue:
    if isinstance(value, (bool, int, float, str)):
        return value
    if value is None:
        return ""
    return str(value)


def _to_tags(payloads: list[TagPayload] | None) -> tuple[Tag, ...]:
    return tuple(
        Tag(key=t.key, type=t.type, value=_tag_value(t.value))
        for t in payloads or ()
    )


def to_trace(payload: TracePayload) -> Trace:
    """Convert a validated trace payload into an immutable Trace."""
    spans = tuple(
        Span(
            trace_id=s.trace_id or payload.trace_id,
            process_id=s.process_id,
            start_time=s.start_time,
            duration=s.duration,
            operation_name=s.operation_name,
            tags=_to_tags(s.tags),
        )
        for s in payload.spans or ()
    )
    processes = {
        pid: Process(service_name=p.service_name, tags=_to_tags(p.tags))
        for pid, p in (payload.processes or {}).items()
    }
    return Trace(trace_id=payload.trace_id, spans=spans, processes=processes)


def decode_traces(body: bytes) -> tuple[TraceBatch, list[Any]]:
    """Decode a traces response into ``(batch, upstream_errors)``."""
    try:
        envelope = TracesEnvelope.model_validate_json(body)
    except ValidationError as e:
        raise JaegerDecodeError(f"invalid traces response: {e}") from e
    return [to_trace(t) for t in envelope.data or ()], envelope.errors or []


def decode_services(body: bytes) -> tuple[list[str], list[Any]]:
    """Decode a services response into ``(names, upstream_errors)``."""
    try:
        envelope = ServicesEnvelope.model_validate_json(body)
    except ValidationError as e:
        raise JaegerDecodeError(f"invalid services response: {e}") from e
    return list(envelope.data or ()), envelope.errors or []
