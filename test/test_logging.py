"""
Tests for structured logging.
"""

import json
import logging

from efax.shared.logging import (
    StructuredFormatter,
    get_logger,
    mask,
    request_id_var,
    setup_logging,
)


def _record(**extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="efax.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Submitting %s",
        args=("fax",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredFormatter:
    def test_formats_json_with_extra_fields(self) -> None:
        data = json.loads(StructuredFormatter().format(_record(doc_id="123")))

        assert data["level"] == "INFO"
        assert data["logger"] == "efax.test"
        assert data["message"] == "Submitting fax"
        assert data["doc_id"] == "123"

    def test_masks_password_fields(self) -> None:
        data = json.loads(StructuredFormatter().format(_record(password="hunter2")))
        assert data["password"] == "***"

    def test_includes_request_id(self) -> None:
        token = request_id_var.set("abc123")
        try:
            data = json.loads(StructuredFormatter().format(_record()))
        finally:
            request_id_var.reset(token)

        assert data["request_id"] == "abc123"


class TestMask:
    def test_mask(self) -> None:
        assert mask("") == ""
        assert mask("abc") == "***"
        assert mask("1234567890") == "1234***"
        assert mask("secret", keep=0) == "***"


class TestSetupLogging:
    def test_installs_structured_handler(self) -> None:
        setup_logging("debug")

        efax_logger = logging.getLogger("efax")
        assert efax_logger.level == logging.DEBUG
        assert len(efax_logger.handlers) == 1
        assert isinstance(efax_logger.handlers[0].formatter, StructuredFormatter)
        assert logging.getLogger("httpx").level == logging.WARNING


    def test_get_logger(self) -> None:
        assert get_logger("efax.client").name == "efax.client"
