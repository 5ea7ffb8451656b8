"""
Tests for logging configuration.
"""

import json
import logging
import os
import sys
from unittest.mock import patch

from app.logging_config import JsonFormatter, setup_global_logging


def make_record(msg="hello", level=logging.INFO, **attrs):
    record = logging.LogRecord(
        name="app.test",
        level=level,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in attrs.items():
        setattr(record, key, value)
    return record


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def test_format_basic_fields(self):
        """Test the formatted record contains the standard fields."""
        output = json.loads(JsonFormatter().format(make_record()))

        assert output["severity"] == "INFO"
        assert output["name"] == "app.test"
        assert output["message"] == "hello"
        assert "timestamp" in output

    def test_format_merges_extra_fields(self):
        """Test extra_fields are merged into the JSON object."""
        record = make_record(extra_fields={"redirect_uri": "http://localhost/cb"})

        output = json.loads(JsonFormatter().format(record))

        assert output["redirect_uri"] == "http://localhost/cb"

    def test_format_ignores_non_dict_extra_fields(self):
        """Test a non-dict extra_fields attribute is ignored."""
        record = make_record(extra_fields="oops")

        output = json.loads(JsonFormatter().format(record))

        assert "oops" not in output.values()

    def test_format_includes_exception(self):
        """Test exception info is rendered."""
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = make_record(level=logging.ERROR)
            record.exc_info = sys.exc_info()

        output = json.loads(JsonFormatter().format(record))

        assert "RuntimeError: boom" in output["exception"]


class TestSetupGlobalLogging:
    """Tests for setup_global_logging."""

    def test_installs_single_json_handler(self):
        """Test a single JSON handler is installed on the root logger."""
        root_logger = logging.getLogger()
        saved_handlers = root_logger.handlers[:]
        saved_level = root_logger.level

        try:
            with patch.dict(os.environ, {"LOG_LEVEL": "debug"}):
                setup_global_logging()
                setup_global_logging()

            assert len(root_logger.handlers) == 1
            assert isinstance(root_logger.handlers[0].formatter, JsonFormatter)
            assert root_logger.level == logging.DEBUG
        finally:
            root_logger.handlers[:] = saved_handlers
            root_logger.setLevel(saved_level)
