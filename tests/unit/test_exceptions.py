"""Unit tests for the wiki2md exception hierarchy."""

import pytest

from wiki2md.exceptions import (
    InvalidOptionsError,
    OutputWriteError,
    RenderingError,
    ValidationError,
    Wiki2MdError,
)
from wiki2md.options import BaseRendererOptions, MarkdownRendererOptions


@pytest.mark.unit
class TestExceptionHierarchy:
    """Tests for exception classes and their attributes."""

    def test_base_error(self):
        cause = RuntimeError("boom")
        error = Wiki2MdError("failed", original_error=cause)
        assert str(error) == "failed"
        assert error.message == "failed"
        assert error.original_error is cause

    def test_validation_error(self):
        error = ValidationError("bad title", parameter_name="title", parameter_value="..")
        assert isinstance(error, Wiki2MdError)
        assert error.parameter_name == "title"
        assert error.parameter_value == ".."

    def test_invalid_options_default_message(self):
        error = InvalidOptionsError(
            renderer_name="markdown",
            expected_type=MarkdownRendererOptions,
            received_type=BaseRendererOptions,
        )
        assert isinstance(error, ValidationError)
        assert str(error) == "The markdown renderer takes MarkdownRendererOptions, not BaseRendererOptions"
        assert error.parameter_name == "options"
        assert error.renderer_name == "markdown"
        assert error.received_type is BaseRendererOptions

    def test_rendering_error_stage(self):
        error = RenderingError("no sink", rendering_stage="write")
        assert error.rendering_stage == "write"
        assert error.original_error is None

    def test_output_write_error(self):
        """Test the generated message and the attributes of file write failures."""
        cause = PermissionError("denied")
        error = OutputWriteError("out/A.md", title="A", original_error=cause)

        assert isinstance(error, RenderingError)
        assert str(error) == "Cannot write out/A.md for article 'A': denied"
        assert error.file_path == "out/A.md"
        assert error.title == "A"
        assert error.rendering_stage == "file_write"
        assert error.original_error is cause

    def test_output_write_error_without_details(self):
        assert str(OutputWriteError("x.md")) == "Cannot write x.md"

    def test_output_write_error_custom_message(self):
        assert str(OutputWriteError("x.md", message="disk full")) == "disk full"
