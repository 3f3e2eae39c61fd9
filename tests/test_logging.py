"""
Tests for the logging module.

Tests verify:
- JSON output carries ECS field names and service metadata
- Bound context appears in events and is removed on exit
- Events below the configured level are dropped
"""

import io
import json

from manual_assembler.assembler import ManualAssembler
from manual_assembler.logging import (
    LogContext,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


def _events(stream: io.StringIO) -> list[dict]:
    return [json.loads(line) for line in stream.getvalue().splitlines() if line.strip()]


class TestJsonLogging:
    """Tests for JSON output."""

    def test_ecs_fields(self):
        stream = io.StringIO()
        configure_logging(level="INFO", json_format=True, service="docs-build", stream=stream)

        get_logger("manual.test").info("manual_assembled", sections=3)

        (event,) = _events(stream)
        assert event["event"] == "manual_assembled"
        assert event["sections"] == 3
        assert event["log.level"] == "info"
        assert event["service.name"] == "docs-build"
        assert event["logger"] == "manual.test"
        assert "@timestamp" in event

    def test_level_filtering(self):
        stream = io.StringIO()
        configure_logging(level="WARNING", json_format=True, stream=stream)

        logger = get_logger(__name__)
        logger.info("ignored")
        logger.warning("kept")

        assert [e["event"] for e in _events(stream)] == ["kept"]

    def test_console_output(self):
        stream = io.StringIO()
        configure_logging(level="INFO", json_format=False, stream=stream)

        get_logger(__name__).info("console_event", key="value")

        assert "console_event" in stream.getvalue()
        assert "key=value" in stream.getvalue()


class TestContext:
    """Tests for bound logging context."""

    def setup_method(self):
        clear_context()

    def teardown_method(self):
        clear_context()

    def test_bind_context(self):
        stream = io.StringIO()
        configure_logging(level="INFO", json_format=True, stream=stream)

        bind_context(manual_dir="docs/manual")
        get_logger(__name__).info("step")

        assert _events(stream)[0]["manual_dir"] == "docs/manual"

    def test_log_context_scoped(self):
        stream = io.StringIO()
        configure_logging(level="INFO", json_format=True, stream=stream)
        logger = get_logger(__name__)

        with LogContext(format="html"):
            logger.info("inside")
        logger.info("outside")

        inside, outside = _events(stream)
        assert inside["format"] == "html"
        assert "format" not in outside


class TestAssemblerLogging:
    """Tests for events emitted by the assembler."""

    def test_assembled_event(self, sample_manual):
        stream = io.StringIO()
        configure_logging(level="DEBUG", json_format=True, stream=stream)

        ManualAssembler(sample_manual).assemble_with(
            "",
            lambda output, is_last: None,
            lambda output, name, kind: None,
            lambda output, name, path, kind: None,
            lambda output: None,
        )

        events = _events(stream)
        scanned = [e for e in events if e["event"] == "section_scanned"]
        assert [e["section"] for e in scanned] == ["1_getting_started", "2_tools", "Xtextures"]
        (done,) = [e for e in events if e["event"] == "manual_assembled"]
        assert done["sections"] == 3
        assert done["items"] == 5
