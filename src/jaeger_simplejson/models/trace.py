"""Trace data models decoded from the Jaeger query API."""

from dataclasses import dataclass, field
from typing import Union

# Largest int64; stands in for "no start seen yet".
INFINITE_START = 2**63 - 1

TagValue = Union[bool, int, float, str]


@dataclass(frozen=True)
class Tag:
    """A key/typed-value annotation on a Span or Process."""

    key: str
    type: str  # "bool", "string", "int64", "float64", "binary", ...
    value: TagValue

    @property
    def is_error(self) -> bool:
        """True for the boolean ``error`` tag set by instrumentation."""
        return self.key == "error" and self.type == "bool"

    def render(self) -> str:
        """Render as ``key=value``."""
        return f"{self.key}={render_tag_value(self.value)}"


def render_tag_value(value: TagValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class Span:
    """One timed unit of work. Times are microseconds."""

    trace_id: str
    process_id: str
    start_time: int
    duration: int
    operation_name: str
    tags: tuple[Tag, ...] = ()


@dataclass(frozen=True)
class Process:
    """A service instance that emitted spans."""

    service_name: str
    tags: tuple[Tag, ...] = ()


@dataclass(frozen=True)
class Trace:
    """A fetched trace: spans plus the processes they reference by ID."""

    trace_id: str
    spans: tuple[Span, ...] = ()
    processes: dict[str, Process] = field(default_factory=dict)

    def process_for(self, span: Span) -> Process | None:
        """Look up the span's process; None when the ID is unknown."""
        return self.processes.get(span.process_id)

    def belongs_to(self, span: Span, service: str) -> bool:
        """Whether the span was emitted by a process of ``service``."""
        process = self.process_for(span)
        return process is not None and process.service_name == service


TraceBatch = list[Trace]
