"""
Tests for the layer-specific logger factories.

Every factory must bind its layer and component so log lines can be
filtered without parsing message text.
"""

import json
import logging
from io import StringIO

import pytest
import structlog

from wallet_history.infrastructure.observability import (
    get_charting_logger,
    get_history_logger,
    get_infrastructure_logger,
    get_ingestion_logger,
    get_logger,
    get_orchestration_logger,
    setup_logging,
)


@pytest.fixture
def configured_logging():
    logging.root.handlers = []
    structlog.reset_defaults()
    setup_logging(level="INFO", json_logs=True, include_timestamp=True)
    logging.root.setLevel(logging.INFO)

    yield

    logging.root.handlers = []
    structlog.reset_defaults()


def capture_log_output(logger_callable, *args, **kwargs) -> dict:
    """Build a logger, emit one event and return the parsed JSON entry."""
    buffer = StringIO()
    handler = logging.StreamHandler(buffer)
    handler.setLevel(logging.INFO)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logging.root.addHandler(handler)

    try:
        logger = logger_callable(*args, **kwargs)
        logger.info("test_event", test_value="capture")
        handler.flush()
    finally:
        logging.root.removeHandler(handler)

    for line in buffer.getvalue().splitlines():
        try:
            return json.loads(line)
        except json.JSONDecodeError:
            continue
    raise AssertionError(f"No JSON log line in {buffer.getvalue()!r}")


class TestGetLogger:
    def test_binds_layer_component_and_module(self, configured_logging):
        entry = capture_log_output(
            get_logger, "wallet_history.history", layer="history", component="grid"
        )

        assert entry["layer"] == "history"
        assert entry["component"] == "grid"
        assert entry["module"] == "wallet_history.history"
        assert entry["test_value"] == "capture"

    def test_extra_context(self, configured_logging):
        entry = capture_log_output(get_logger, "x", request_id="r-1")

        assert entry["request_id"] == "r-1"
        assert "layer" not in entry

    def test_bind_does_not_leak_between_loggers(self, configured_logging):
        first = get_logger("a", layer="history")
        first.bind(extra="only-here")

        entry = capture_log_output(get_logger, "a", layer="history")

        assert "extra" not in entry


class TestLayerFactories:
    @pytest.mark.parametrize(
        ("factory", "args", "layer", "component"),
        [
            (get_infrastructure_logger, ("config-loader",), "infrastructure", "config-loader"),
            (get_ingestion_logger, (), "ingestion", "normalizer"),
            (get_history_logger, ("reconstructor",), "history", "reconstructor"),
            (get_charting_logger, ("renderer",), "charting", "renderer"),
            (get_orchestration_logger, (), "orchestration", "workflow"),
        ],
    )
    def test_layer_and_component(self, configured_logging, factory, args, layer, component):
        entry = capture_log_output(factory, *args)

        assert entry["layer"] == layer
        assert entry["component"] == component
        assert entry["app"] == "wallet-history"

    def test_orchestration_view(self, configured_logging):
        entry = capture_log_output(get_orchestration_logger, view="reports_30d")

        assert entry["view"] == "reports_30d"

    def test_orchestration_without_view(self, configured_logging):
        entry = capture_log_output(get_orchestration_logger)

        assert "view" not in entry
