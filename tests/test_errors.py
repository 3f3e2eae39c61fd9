"""Tests for the error hierarchy."""

from manual_assembler.errors import (
    ConfigError,
    ErrorCategory,
    ErrorContext,
    InvalidConfigError,
    MalformedStemError,
    ManualError,
    ManualNotFoundError,
    ManualSourceError,
    RenderError,
    RendererNotFoundError,
)


class TestErrorContext:
    """Tests for ErrorContext."""

    def test_to_dict_drops_unset(self):
        ctx = ErrorContext(section="1_basics")

        assert ctx.to_dict() == {"section": "1_basics"}

    def test_metadata_merged(self):
        ctx = ErrorContext(path="a.md", metadata={"format": "html"})

        assert ctx.to_dict() == {"path": "a.md", "format": "html"}


class TestManualError:
    """Tests for the base error."""

    def test_defaults(self):
        error = ManualError("boom")

        assert error.message == "boom"
        assert error.category is ErrorCategory.INTERNAL
        assert error.cause is None

    def test_cause_chained(self):
        cause = OSError("disk")
        error = ManualSourceError("cannot read", cause=cause)

        assert error.__cause__ is cause
        assert error.to_dict()["cause"] == "disk"

    def test_with_context(self):
        error = ManualSourceError("cannot read").with_context(section="2_tools", attempt=1)

        assert error.context.section == "2_tools"
        assert error.context.metadata == {"attempt": 1}

    def test_to_dict(self):
        error = ManualSourceError(
            "cannot read", context=ErrorContext(manual_dir="docs/manual")
        )

        assert error.to_dict() == {
            "error_type": "ManualSourceError",
            "message": "cannot read",
            "category": "SOURCE",
            "context": {"manual_dir": "docs/manual"},
        }

    def test_repr(self):
        assert repr(RenderError("bad")) == "RenderError('bad', category=RENDER)"


class TestSubclasses:
    """Tests for the concrete error types."""

    def test_not_found_is_source_error(self):
        error = ManualNotFoundError("docs/manual")

        assert isinstance(error, ManualSourceError)
        assert error.category is ErrorCategory.SOURCE
        assert error.context.manual_dir == "docs/manual"
        assert "docs/manual" in str(error)

    def test_malformed_stem(self):
        error = MalformedStemError("42")

        assert error.category is ErrorCategory.VALIDATION
        assert error.to_dict()["stem"] == "42"

    def test_invalid_config(self):
        error = InvalidConfigError("formats", "pdf")

        assert isinstance(error, ConfigError)
        assert error.message == "Invalid configuration for formats: 'pdf'"

    def test_renderer_not_found(self):
        error = RendererNotFoundError("pdf")

        assert isinstance(error, RenderError)
        assert error.name == "pdf"
        assert error.category is ErrorCategory.RENDER
