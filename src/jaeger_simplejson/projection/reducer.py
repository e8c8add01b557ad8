"""Per-trace reductions over a trace's spans.

Every function walks ``trace.spans`` once, in stored order, and has a
defined result for traces with no (matching) spans.
"""

from ..models import INFINITE_START, Trace


def overall_earliest_start(trace: Trace) -> int:
    """Minimum span start time, or INFINITE_START for an empty trace."""
    start = INFINITE_START
    for span in trace.spans:
        if span.start_time < start:
            start = span.start_time
    return start


def overall_max_duration(trace: Trace) -> int:
    """Maximum span duration, or 0 for an empty trace."""
    duration = 0
    for span in trace.spans:
        if span.duration > duration:
            duration = span.duration
    return duration


def service_max_duration(trace: Trace, service: str) -> tuple[int, str]:
    """Longest span of ``service`` and its operation name.

    Returns ``(0, "")`` when no span belongs to the service. On equal
    durations the first span seen wins.
    """
    duration = 0
    operation = ""
    for span in trace.spans:
        if trace.belongs_to(span, service) and span.duration > duration:
            duration = span.duration
            operation = span.operation_name
    return duration, operation


def service_constrained_start(trace: Trace, service: str) -> tuple[int, int]:
    """Start and duration of the service's span used for time series points.

    A span of ``service`` replaces the current pick only when it is both
    longer than the picked duration and starts before the picked start.
    The result depends on span order and is not necessarily the longest
    span; compare service_max_duration.

    Returns ``(start, duration)``; ``(INFINITE_START, 0)`` when nothing
    matched.
    """
    start = INFINITE_START
    duration = 0
    for span in trace.spans:
        if (
            trace.belongs_to(span, service)
            and span.duration > duration
            and span.start_time < start
        ):
            start = span.start_time
            duration = span.duration
    return start, duration


def error_tag_count(trace: Trace) -> int:
    """Number of boolean ``error`` tags across all spans of the trace."""
    count = 0
    for span in trace.spans:
        for tag in span.tags:
            if tag.is_error:
                count += 1
    return count
