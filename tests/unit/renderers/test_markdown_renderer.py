#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_markdown_renderer.py
"""Unit tests for MarkdownRenderer.

Tests cover:
- Rendering of every supported node variant
- Unsupported variants and propagation of the unsupported outcome
- Short-circuiting of sequences and prefix/postfix ordering
- Output written before an unsupported node is kept
- Options and error handling

"""

import logging
from io import StringIO

import pytest

from wiki2md.ast import (
    Bold,
    BoldItalic,
    Category,
    CharacterEntity,
    Comment,
    DefinitionList,
    EndTag,
    ExternalLink,
    Heading,
    HorizontalDivider,
    Image,
    Italic,
    Link,
    ListItem,
    MagicWord,
    OrderedList,
    ParagraphBreak,
    Parameter,
    Preformatted,
    Redirect,
    StartTag,
    Table,
    Tag,
    Template,
    Text,
    UnorderedList,
)
from wiki2md.exceptions import InvalidOptionsError, RenderingError
from wiki2md.options import BaseRendererOptions, MarkdownRendererOptions
from wiki2md.renderers.markdown import MarkdownRenderer

UNSUPPORTED_NODES = [
    Bold(),
    BoldItalic(),
    Italic(),
    Category(target="Cats"),
    CharacterEntity(character="&"),
    Comment(text="hidden"),
    MagicWord(name="NOTOC"),
    DefinitionList(),
    OrderedList(items=[ListItem(children=[Text(value="one")])]),
    Preformatted(children=[Text(value="code")]),
    Table(),
    HorizontalDivider(),
    ParagraphBreak(),
    ExternalLink(children=[Text(value="https://example.org")]),
    Image(target="File:A.png"),
    Parameter(name=[Text(value="1")]),
    Template(name=[Text(value="Infobox")]),
    StartTag(name="span"),
    EndTag(name="span"),
    Tag(name="ref", children=[Text(value="cite")]),
]


def render(node):
    output = StringIO()
    result = MarkdownRenderer().render_node(output, node)
    return output.getvalue(), result


@pytest.mark.unit
class TestSupportedNodes:
    """Tests for node variants with a Markdown rendering."""

    def test_text(self):
        assert render(Text(value="Hello world")) == ("Hello world", True)

    def test_heading(self):
        """Test heading markers, text and trailing blank line."""
        assert render(Heading(level=3, children=[Text(value="Hi")])) == ("### Hi\n\n", True)

    @pytest.mark.parametrize("level", range(1, 7))
    def test_heading_levels(self, level):
        output, result = render(Heading(level=level, children=[Text(value="T")]))
        assert output == "#" * level + " T\n\n"
        assert result is True

    def test_empty_heading(self):
        assert render(Heading(level=1)) == ("# \n\n", True)

    def test_link(self):
        """Test an internal link with plain display text."""
        assert render(Link(target="Main Page", display=[Text(value="home")])) == ("[home](Main_Page)", True)

    def test_link_with_multiple_display_nodes(self):
        node = Link(target="A B", display=[Text(value="one "), Text(value="two")])
        assert render(node) == ("[one two](A_B)", True)

    def test_redirect(self):
        """Test that a redirect renders as a link labelled with its target."""
        assert render(Redirect(target="New Name")) == ("[New Name](New_Name)", True)

    def test_unordered_list(self):
        """Test list items with markers and a trailing blank line."""
        node = UnorderedList(
            items=[
                ListItem(children=[Text(value="a")]),
                ListItem(children=[Text(value="b")]),
            ]
        )
        assert render(node) == ("- a\n- b\n\n", True)

    def test_unordered_list_flattens_item_children(self):
        """Test that every child of an item gets its own marker and line."""
        node = UnorderedList(
            items=[
                ListItem(children=[Text(value="a")]),
                ListItem(children=[Text(value="b"), Link(target="X Y", display=[Text(value="c")])]),
            ]
        )
        assert render(node) == ("- a\n- b\n- [c](X_Y)\n\n", True)

    def test_empty_unordered_list(self):
        assert render(UnorderedList()) == ("\n", True)

    def test_link_inside_heading(self):
        node = Heading(level=2, children=[Link(target="P", display=[Text(value="t")])])
        assert render(node) == ("## [t](P)\n\n", True)


NESTING_DEPTH = 50


def nested_tree(leaf, depth=NESTING_DEPTH):
    """Wrap ``leaf`` in ``depth`` levels of list > link, under a heading."""
    node = leaf
    for _ in range(depth):
        node = UnorderedList(items=[ListItem(children=[Link(target="Deep Page", display=[node])])])
    return Heading(level=2, children=[node])


@pytest.mark.unit
class TestDeepNesting:
    """Tests for trees many levels deep."""

    def test_deep_tree_fully_rendered(self):
        expected = "leaf"
        for _ in range(NESTING_DEPTH):
            expected = f"- [{expected}](Deep_Page)\n\n"

        assert render(nested_tree(Text(value="leaf"))) == (f"## {expected}\n\n", True)

    def test_unsupported_deepest_leaf(self):
        """Test the outcome travels up every level and no closing blank lines are written."""
        expected = ""
        for _ in range(NESTING_DEPTH):
            expected = f"- [{expected}](Deep_Page)\n"

        assert render(nested_tree(Bold())) == (f"## {expected}", False)


@pytest.mark.unit
class TestUnsupportedNodes:
    """Tests for node variants without a Markdown rendering."""

    @pytest.mark.parametrize("node", UNSUPPORTED_NODES, ids=lambda node: type(node).__name__)
    def test_writes_nothing_and_reports_unsupported(self, node):
        assert render(node) == ("", False)

    def test_heading_with_unsupported_child(self):
        """Test heading markers stay in the output and no blank line follows."""
        assert render(Heading(level=2, children=[Bold()])) == ("## ", False)

    def test_heading_stops_at_unsupported_child(self):
        node = Heading(level=1, children=[Text(value="a"), Italic(), Text(value="b")])
        assert render(node) == ("# a", False)

    def test_link_with_unsupported_display(self):
        """Test link punctuation is completed around unsupported display text."""
        node = Link(target="Main Page", display=[Text(value="a"), Italic(), Text(value="b")])
        assert render(node) == ("[a](Main_Page)", False)

    def test_unsupported_propagates_through_nesting(self):
        """Test a deeply nested unsupported node fails every enclosing node."""
        node = Heading(level=2, children=[Text(value="a"), Link(target="T", display=[Bold()])])
        assert render(node) == ("## a[](T)", False)

    def test_list_with_unsupported_item(self):
        """Test the failing item's marker and line break are kept, and no blank line follows."""
        node = UnorderedList(
            items=[
                ListItem(children=[Text(value="x")]),
                ListItem(children=[Category(target="Cats")]),
                ListItem(children=[Text(value="never")]),
            ]
        )
        assert render(node) == ("- x\n- \n", False)

    def test_unsupported_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="wiki2md.renderers.markdown"):
            render(Template(name=[Text(value="Infobox")]))
        assert "No Markdown rendering for Template node" in caplog.text


@pytest.mark.unit
class TestRenderSequence:
    """Tests for render_sequence composition."""

    def test_empty_sequence(self, renderer, output):
        assert renderer.render_sequence(output, []) is True
        assert output.getvalue() == ""

    def test_concatenates_supported_nodes(self, renderer, output):
        nodes = [Text(value="a"), Redirect(target="B C"), Heading(level=1, children=[Text(value="d")])]
        assert renderer.render_sequence(output, nodes) is True
        assert output.getvalue() == "a[B C](B_C)# d\n\n"

    def test_stops_at_first_unsupported(self, renderer, output):
        """Test that siblings after the failing node are not rendered."""
        nodes = [Text(value="a"), Template(), Text(value="b")]
        assert renderer.render_sequence(output, nodes) is False
        assert output.getvalue() == "a"

    def test_affix_order(self, renderer, output):
        """Test prefix, node, postfix ordering for each node."""
        nodes = [Text(value="a"), Text(value="b")]
        result = renderer.render_sequence(
            output,
            nodes,
            prefix=lambda: output.write("<"),
            postfix=lambda: output.write(">"),
        )
        assert result is True
        assert output.getvalue() == "<a><b>"

    def test_affixes_run_for_failing_node(self, renderer, output):
        """Test the failing node's prefix and postfix run before the early return."""
        calls = []
        nodes = [Text(value="a"), Bold(), Text(value="b")]
        result = renderer.render_sequence(
            output,
            nodes,
            prefix=lambda: calls.append("prefix"),
            postfix=lambda: calls.append("postfix"),
        )
        assert result is False
        assert calls == ["prefix", "postfix", "prefix", "postfix"]
        assert output.getvalue() == "a"

    def test_accepts_iterators(self, renderer, output):
        """Test that generators are consumed lazily and only up to the failure."""
        consumed = []

        def nodes():
            for node in [Text(value="a"), Bold(), Text(value="b")]:
                consumed.append(node)
                yield node

        assert renderer.render_sequence(output, nodes()) is False
        assert consumed == [Text(value="a"), Bold()]


@pytest.mark.unit
class TestRenderDocument:
    """Tests for render_document."""

    def test_title_and_text(self, renderer, output):
        assert renderer.render_document(output, "Foo/Bar", [Text(value="hello")]) is True
        assert output.getvalue() == "# Foo/Bar\n\nhello"

    def test_title_written_for_empty_document(self, renderer, output):
        assert renderer.render_document(output, "Empty", []) is True
        assert output.getvalue() == "# Empty\n\n"

    def test_list_with_unsupported_second_item(self, renderer, output):
        nodes = [
            UnorderedList(
                items=[
                    ListItem(children=[Text(value="x")]),
                    ListItem(children=[Category(target="Cats")]),
                ]
            )
        ]
        assert renderer.render_document(output, "T", nodes) is False
        assert output.getvalue() == "# T\n\n- x\n- \n"

    def test_render_and_render_to_string(self, renderer):
        """Test the BaseRenderer entry points."""
        text, result = renderer.render_to_string("Title", [Text(value="body")])
        assert text == "# Title\n\nbody"
        assert result is True

        output = StringIO()
        assert renderer.render("Title", [Bold()], output) is False
        assert output.getvalue() == "# Title\n\n"

    def test_renderer_is_reusable(self, renderer):
        """Test that one renderer can render several documents in turn."""
        first, _ = renderer.render_to_string("One", [Text(value="1")])
        second, _ = renderer.render_to_string("Two", [Text(value="2")])
        assert first == "# One\n\n1"
        assert second == "# Two\n\n2"


@pytest.mark.unit
class TestOptionsAndErrors:
    """Tests for renderer options and error handling."""

    def test_custom_list_marker(self, output):
        renderer = MarkdownRenderer(MarkdownRendererOptions(list_marker="*"))
        node = UnorderedList(items=[ListItem(children=[Text(value="a")])])
        assert renderer.render_node(output, node) is True
        assert output.getvalue() == "* a\n\n"

    def test_wrong_options_type(self):
        with pytest.raises(InvalidOptionsError, match="takes MarkdownRendererOptions"):
            MarkdownRenderer(BaseRendererOptions())  # type: ignore[arg-type]

    def test_visit_without_output_raises(self, renderer):
        """Test that visiting a node outside a render call is an error."""
        with pytest.raises(RenderingError, match="No output sink bound"):
            Text(value="x").accept(renderer)

    def test_output_unbound_after_render(self, renderer, output):
        renderer.render_node(output, Text(value="x"))
        with pytest.raises(RenderingError):
            renderer.visit_text(Text(value="y"))

    def test_write_errors_propagate(self, renderer):
        """Test that sink failures abort the render instead of being reported as unsupported."""

        class FullDisk(StringIO):
            def write(self, text):
                if text == "b":
                    raise OSError("No space left on device")
                return super().write(text)

        sink = FullDisk()
        with pytest.raises(OSError, match="No space left"):
            renderer.render_document(sink, "Title", [Text(value="a"), Text(value="b")])
        assert sink.getvalue() == "# Title\n\na"
