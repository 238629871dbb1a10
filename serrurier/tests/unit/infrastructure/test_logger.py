"""
Unit tests for structured logging helpers.

Usage:
    python -m tests.unit.infrastructure.test_logger
    laborant serrurier --unit
"""

import json
import logging

from serrurier.infrastructure.monitoring.logger import (
    JSONFormatter,
    get_request_id,
    request_id_ctx,
    set_request_id,
)
from shared.tests import LaborantTest


class TestLogger(LaborantTest):
    """Unit tests for JSONFormatter and request id context."""

    component_name = "serrurier"
    test_category = "unit"

    def teardown_test(self):
        request_id_ctx.set(None)

    def _record(self, msg: str, **extra) -> logging.LogRecord:
        record = logging.LogRecord(
            name="serrurier.test",
            level=logging.INFO,
            pathname=__file__,
            lineno=10,
            msg=msg,
            args=(),
            exc_info=None,
        )
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_json_format_basic_fields(self):
        """Test formatter emits one JSON object with core fields."""
        self.reporter.info("Testing JSON log line", context="Test")

        line = JSONFormatter().format(self._record("hello"))
        data = json.loads(line)

        assert data["level"] == "INFO"
        assert data["logger"] == "serrurier.test"
        assert data["message"] == "hello"
        assert "request_id" not in data

        self.reporter.info("Core fields present", context="Test")

    def test_json_format_includes_request_id_and_extra(self):
        """Test request id and extra= fields are included."""
        self.reporter.info("Testing request id and extras", context="Test")

        set_request_id("req-123")
        line = JSONFormatter().format(
            self._record("bound", outcome="created", component="account_binder")
        )
        data = json.loads(line)

        assert data["request_id"] == "req-123"
        assert data["outcome"] == "created"
        assert data["component"] == "account_binder"

        self.reporter.info("Request id and extras present", context="Test")

    def test_set_request_id_generates_uuid(self):
        """Test a request id is generated when none is given."""
        self.reporter.info("Testing generated request id", context="Test")

        request_id = set_request_id()

        assert request_id
        assert len(request_id) == 36
        assert get_request_id() == request_id

        self.reporter.info(f"Generated {request_id}", context="Test")


if __name__ == "__main__":
    TestLogger.run_as_main()
