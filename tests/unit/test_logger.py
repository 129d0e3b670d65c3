"""Unit tests for structured logging."""

import json
import logging

import pytest

from contract_clarity.utils.logger import ContractClarityLogger, log_debug, log_info, log_warning


@pytest.fixture
def records():
    """Capture records emitted on the main application logger."""
    captured = []
    handler = logging.Handler()
    handler.emit = captured.append

    logger = ContractClarityLogger.get_logger()
    logger.addHandler(handler)
    yield captured
    logger.removeHandler(handler)


class TestStructuredLogging:
    """Context keys are free-form and never clash with logger arguments."""

    def test_context_keys_named_like_parameters(self, records):
        log_info("Contract analysis complete", level="moderate", log_level="x", score=25)

        payload = json.loads(records[-1].getMessage())
        assert records[-1].levelno == logging.INFO
        assert payload["message"] == "Contract analysis complete"
        assert payload["level"] == "moderate"
        assert payload["log_level"] == "x"
        assert payload["score"] == 25

    def test_all_helpers_accept_any_context(self, records):
        log_warning("warn", level="high")
        log_debug("debug", level="low")
        ContractClarityLogger.log_structured(logging.WARNING, "direct", level="critical")

        assert json.loads(records[-1].getMessage())["level"] == "critical"
