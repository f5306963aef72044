"""Integration tests for ConsoleAdapter with real structlog.

Tests cover:
- JSON output shape (event, level, timestamp, bound context)
- Level filtering
- Context binding without mutating the parent adapter
- error/critical exception fields

Architecture:
- Integration tests with REAL structlog (not mocked)
- Output captured through the adapter's stream argument
"""

import json
from io import StringIO

import pytest

from src.infrastructure.logging.console_adapter import ConsoleAdapter


def lines(stream: StringIO) -> list[dict]:
    return [json.loads(line) for line in stream.getvalue().splitlines() if line]


@pytest.mark.integration
class TestConsoleAdapterIntegration:
    def test_json_output(self):
        """Each call writes one JSON object with the event and context."""
        stream = StringIO()
        adapter = ConsoleAdapter(use_json=True, stream=stream, app_name="Gatekeeper")

        adapter.info("Role created", role_id="r-1")

        [record] = lines(stream)
        assert record["event"] == "Role created"
        assert record["level"] == "info"
        assert record["role_id"] == "r-1"
        assert record["app_name"] == "Gatekeeper"
        assert "timestamp" in record

    def test_level_filtering(self):
        stream = StringIO()
        adapter = ConsoleAdapter(use_json=True, level="WARNING", stream=stream)

        adapter.debug("hidden")
        adapter.info("hidden")
        adapter.warning("shown")

        assert [r["event"] for r in lines(stream)] == ["shown"]

    def test_bind_returns_new_adapter(self):
        stream = StringIO()
        adapter = ConsoleAdapter(use_json=True, stream=stream)

        bound = adapter.bind(tenant_id="acme")
        bound.info("bound")
        adapter.info("plain")

        bound_record, plain_record = lines(stream)
        assert bound_record["tenant_id"] == "acme"
        assert "tenant_id" not in plain_record

    @pytest.mark.parametrize("method", ["error", "critical"])
    def test_exception_fields(self, method):
        stream = StringIO()
        adapter = ConsoleAdapter(use_json=True, stream=stream)

        getattr(adapter, method)("Lookup failed", error=KeyError("role"))

        [record] = lines(stream)
        assert record["level"] == method
        assert record["error_type"] == "KeyError"
        assert record["error_message"] == "'role'"

    def test_console_renderer_output(self):
        stream = StringIO()
        adapter = ConsoleAdapter(use_json=False, stream=stream)

        adapter.info("Session created", session_id="s-1")

        output = stream.getvalue()
        assert "Session created" in output
        assert "s-1" in output
