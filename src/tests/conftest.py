"""Pytest configuration and fixtures."""

import json
import sys
from pathlib import Path

import httpx
import pytest
import pytest_asyncio

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

JAEGER_URL = "http://jaeger-query:16686"
UI_URL = "http://jaeger-ui.example"


@pytest.fixture
def make_trace():
    """
    Build a Trace from ``(service, start, duration, operation[, tags])`` tuples.

    A service of None gives the span a process ID missing from the trace.
    """
    from jaeger_simplejson.models import Process, Span, Trace

    def _make(spans, trace_id="trace1", process_tags=None):
        process_tags = process_tags or {}
        processes = {}
        built = []
        for entry in spans:
            service, start, duration, operation = entry[:4]
            tags = tuple(entry[4]) if len(entry) > 4 else ()
            if service is None:
                process_id = "missing"
            else:
                process_id = f"p-{service}"
                processes[process_id] = Process(
                    service_name=service,
                    tags=tuple(process_tags.get(service, ())),
                )
            built.append(
                Span(
                    trace_id=trace_id,
                    process_id=process_id,
                    start_time=start,
                    duration=duration,
                    operation_name=operation,
                    tags=tags,
                )
            )
        return Trace(trace_id=trace_id, spans=tuple(built), processes=processes)

    return _make


@pytest.fixture
def links():
    """LinkBuilder pointing at the test Jaeger UI."""
    from jaeger_simplejson.links import LinkBuilder

    return LinkBuilder(UI_URL)


@pytest.fixture
def settings():
    """Settings for a test deployment."""
    from jaeger_simplejson.config import Settings

    return Settings(base_url=JAEGER_URL, link_url=UI_URL)


@pytest.fixture
def jaeger_traces_payload():
    """A /api/traces body with two traces."""
    return {
        "data": [
            {
                "traceID": "abc123",
                "spans": [
                    {
                        "traceID": "abc123",
                        "spanID": "s1",
                        "processID": "p1",
                        "operationName": "GET /orders",
                        "startTime": 1_600_000_000_000_000,
                        "duration": 25_000,
                        "tags": [
                            {"key": "http.status_code", "type": "int64", "value": 200},
                        ],
                    },
                    {
                        "traceID": "abc123",
                        "spanID": "s2",
                        "processID": "p2",
                        "operationName": "SELECT",
                        "startTime": 1_600_000_000_005_000,
                        "duration": 10_000,
                        "tags": [
                            {"key": "error", "type": "bool", "value": True},
                        ],
                    },
                ],
                "processes": {
                    "p1": {
                        "serviceName": "orders",
                        "tags": [{"key": "hostname", "type": "string", "value": "host-a"}],
                    },
                    "p2": {"serviceName": "postgres", "tags": []},
                },
            },
            {
                "traceID": "def456",
                "spans": [
                    {
                        "traceID": "def456",
                        "processID": "p1",
                        "operationName": "POST /orders",
                        "startTime": 1_600_000_060_000_000,
                        "duration": 40_000,
                        "tags": [],
                    },
                ],
                "processes": {"p1": {"serviceName": "orders", "tags": []}},
            },
        ],
        "total": 0,
        "limit": 0,
        "offset": 0,
        "errors": None,
    }


@pytest.fixture
def jaeger_services_payload():
    """A /api/services body."""
    return {"data": ["orders", "payments", "payroll", "postgres"], "errors": None}


@pytest.fixture
def recorded_requests():
    """Requests seen by the mock Jaeger transport."""
    return []


@pytest.fixture
def jaeger_transport(jaeger_traces_payload, jaeger_services_payload, recorded_requests):
    """httpx transport answering like jaeger-query."""

    def handler(request: httpx.Request) -> httpx.Response:
        recorded_requests.append(request)
        if request.url.path == "/api/traces":
            return httpx.Response(200, content=json.dumps(jaeger_traces_payload))
        if request.url.path == "/api/services":
            return httpx.Response(200, content=json.dumps(jaeger_services_payload))
        return httpx.Response(404, text="404 page not found")

    return httpx.MockTransport(handler)


@pytest_asyncio.fixture
async def jaeger_client(jaeger_transport):
    """JaegerClient talking to the mock transport."""
    from jaeger_simplejson.jaeger import JaegerClient

    async with httpx.AsyncClient(transport=jaeger_transport) as http:
        yield JaegerClient(http, JAEGER_URL)
