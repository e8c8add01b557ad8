"""Projection builders: fold the reducers over a trace batch.

Each builder emits results in batch order and never re-sorts.
"""

from ..links import ILinkBuilder
from ..models import (
    INFINITE_START,
    Annotation,
    TableColumn,
    TimeSeriesPoint,
    TraceBatch,
)
from .reducer import (
    error_tag_count,
    overall_earliest_start,
    overall_max_duration,
    service_constrained_start,
    service_max_duration,
)


def micros_to_millis(micros: int) -> int:
    """Epoch microseconds to epoch milliseconds."""
    return micros // 1000


def duration_ms(micros: int) -> float:
    """Duration in microseconds to float milliseconds."""
    return micros / 1000


def build_time_series(batch: TraceBatch, service: str) -> list[TimeSeriesPoint]:
    """One point per trace in which ``service`` took part.

    Traces where no span of the service was picked are dropped.
    """
    points = []
    for trace in batch:
        start, service_duration = service_constrained_start(trace, service)
        if service_duration == 0:
            continue
        points.append(
            TimeSeriesPoint(
                time=micros_to_millis(start),
                value=duration_ms(service_duration),
            )
        )
    return points


TABLE_COLUMNS = [
    ("Time", "time"),
    ("trace_id", "string"),
    ("operation", "string"),
    ("link", "string"),
    ("html", "string"),
    ("duration", "number"),
    ("serviceDuration", "number"),
    ("spans", "number"),
    ("errors", "number"),
]


def build_table(
    batch: TraceBatch, service: str, links: ILinkBuilder
) -> list[TableColumn]:
    """Column-oriented table with one row per trace."""
    columns = {text: TableColumn(text=text, type=kind) for text, kind in TABLE_COLUMNS}

    for trace in batch:
        service_duration, operation = service_max_duration(trace, service)
        row = {
            "Time": micros_to_millis(overall_earliest_start(trace)),
            "trace_id": trace.trace_id,
            "operation": operation,
            "link": links.build_trace_link(trace.trace_id),
            "html": links.build_trace_link_html(trace.trace_id),
            "duration": duration_ms(overall_max_duration(trace)),
            "serviceDuration": duration_ms(service_duration),
            "spans": float(len(trace.spans)),
            "errors": float(error_tag_count(trace)),
        }
        for text, value in row.items():
            columns[text].values.append(value)

    return [columns[text] for text, _ in TABLE_COLUMNS]


def build_annotations(
    batch: TraceBatch, service: str, links: ILinkBuilder
) -> list[Annotation]:
    """One annotation per trace, anchored at the service's first span.

    Tags come from the earliest span of ``service`` (first seen on ties):
    its process tags followed by its own. A trace without such a span
    still yields an annotation, at INFINITE_START with no tags.
    """
    annotations = []
    for trace in batch:
        start = INFINITE_START
        tags: list[str] = []

        for span in trace.spans:
            process = trace.process_for(span)
            if (
                process is None
                or process.service_name != service
                or span.start_time >= start
            ):
                continue
            start = span.start_time
            tags = [tag.render() for tag in process.tags]
            tags.extend(tag.render() for tag in span.tags)

        annotations.append(
            Annotation(
                title=trace.trace_id,
                text=links.build_trace_link_html(trace.trace_id),
                time=micros_to_millis(start),
                tags=tags,
            )
        )
    return annotations
