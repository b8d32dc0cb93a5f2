"""Unit tests for MarkdownRendererOptions."""

from dataclasses import FrozenInstanceError, fields

import pytest

from wiki2md.options import MarkdownRendererOptions


@pytest.mark.unit
class TestMarkdownRendererOptions:
    """Tests for defaults, cloning and validation."""

    def test_defaults(self):
        options = MarkdownRendererOptions()
        assert options.dump_unsupported is True
        assert options.dump_format == "repr"
        assert options.dump_fence == "```"
        assert options.list_marker == "-"

    def test_frozen(self):
        options = MarkdownRendererOptions()
        with pytest.raises(FrozenInstanceError):
            options.list_marker = "*"  # type: ignore[misc]

    def test_create_updated_returns_new_instance(self):
        """Test that create_updated leaves the original untouched."""
        original = MarkdownRendererOptions()
        updated = original.create_updated(dump_format="json", dump_unsupported=False)

        assert updated.dump_format == "json"
        assert updated.dump_unsupported is False
        assert original.dump_format == "repr"
        assert original.dump_unsupported is True

    def test_create_updated_validates(self):
        with pytest.raises(ValueError, match="dump_format"):
            MarkdownRendererOptions().create_updated(dump_format="yaml")

    def test_invalid_dump_format(self):
        with pytest.raises(ValueError, match="dump_format must be one of"):
            MarkdownRendererOptions(dump_format="xml")  # type: ignore[arg-type]

    def test_empty_dump_fence(self):
        with pytest.raises(ValueError, match="dump_fence must be a non-empty string"):
            MarkdownRendererOptions(dump_fence="")

    def test_empty_list_marker(self):
        with pytest.raises(ValueError, match="list_marker must be a non-empty string"):
            MarkdownRendererOptions(list_marker="")

    def test_every_field_has_help_metadata(self):
        """Test that each option documents itself."""
        for option in fields(MarkdownRendererOptions):
            assert option.metadata.get("help"), option.name
