"""Links from dashboard rows back to the Jaeger UI."""

from typing import Protocol


class ILinkBuilder(Protocol):
    """Formats trace viewer links."""

    def build_trace_link(self, trace_id: str) -> str:
        """URL of the trace in the viewer."""
        ...

    def build_trace_link_html(self, trace_id: str) -> str:
        """HTML anchor opening the trace in a new tab."""
        ...


class LinkBuilder:
    """Builds Jaeger UI links under a configured base URL."""

    def __init__(self, link_url: str):
        self._link_url = link_url.rstrip("/")

    def build_trace_link(self, trace_id: str) -> str:
        return f"{self._link_url}/trace/{trace_id}"

    def build_trace_link_html(self, trace_id: str) -> str:
        link = self.build_trace_link(trace_id)
        return f'<a href="{link}" target="_blank">{trace_id}</a>'
