#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2md/renderers/markdown.py
"""Markdown rendering from wiki AST nodes.

This module provides the MarkdownRenderer class, which streams a Markdown
rendering of a node tree into a text sink. Only headings, internal links,
redirects, unordered lists and plain text have a rendering; every other node
variant is reported as unsupported.

Every render method returns a boolean outcome: True if the subtree was fully
rendered, False if an unsupported node was encountered. A sequence stops at
its first unsupported node, and that False travels up through every enclosing
node to the caller. Output already written when the unsupported node is found
is left in the sink.

"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from itertools import chain
from typing import IO, Callable, Iterable, Iterator, Optional

from wiki2md.ast.nodes import (
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
    MagicWord,
    Node,
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
from wiki2md.ast.visitors import NodeVisitor
from wiki2md.constants import HEADING_MARKER
from wiki2md.exceptions import RenderingError
from wiki2md.options.markdown import MarkdownRendererOptions
from wiki2md.renderers.base import BaseRenderer
from wiki2md.renderers.links import write_link, write_plain_link

logger = logging.getLogger(__name__)

Affix = Callable[[], None]


class MarkdownRenderer(NodeVisitor, BaseRenderer):
    """Render wiki AST nodes to Markdown text.

    Output is written to the sink as nodes are visited. The renderer keeps a
    reference to the sink only for the duration of a render call, so one
    instance can render many documents in turn. Concurrent renders need one
    instance each.

    Parameters
    ----------
    options : MarkdownRendererOptions or None, default = None
        Markdown formatting options

    Examples
    --------
    Basic usage:

        >>> from io import StringIO
        >>> from wiki2md.ast import Heading, Text
        >>> from wiki2md.renderers.markdown import MarkdownRenderer
        >>> output = StringIO()
        >>> MarkdownRenderer().render_node(output, Heading(level=3, children=[Text(value="Hi")]))
        True
        >>> output.getvalue()
        '### Hi\\n\\n'

    """

    def __init__(self, options: MarkdownRendererOptions | None = None):
        """Initialize the Markdown renderer with options."""
        BaseRenderer._validate_options_type(options, MarkdownRendererOptions, "markdown")
        options = options or MarkdownRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: MarkdownRendererOptions = options
        self._output: Optional[IO[str]] = None

    def render(self, title: str, nodes: Iterable[Node], output: IO[str]) -> bool:
        """Render a titled document into the output sink."""
        return self.render_document(output, title, nodes)

    # ------------------------------------------------------------------
    # Public entry points
    # ------------------------------------------------------------------

    def render_document(self, output: IO[str], title: str, nodes: Iterable[Node]) -> bool:
        """Write the document title line followed by the top-level nodes.

        The ``# title`` line is written unconditionally. Deciding what to do
        with a partially rendered document is left to the caller.

        Parameters
        ----------
        output : IO[str]
            Text sink receiving the rendered document
        title : str
            Document title
        nodes : iterable of Node
            Top-level nodes of the document

        Returns
        -------
        bool
            True if every top-level node was fully rendered

        """
        with self._bound_output(output):
            self._write(f"{HEADING_MARKER} {title}\n\n")
            return self._render_sequence(nodes)

    def render_node(self, output: IO[str], node: Node) -> bool:
        """Render a single node into the output sink.

        Returns
        -------
        bool
            True if the node and all of its descendants were rendered

        """
        with self._bound_output(output):
            return node.accept(self)

    def render_sequence(
        self,
        output: IO[str],
        nodes: Iterable[Node],
        prefix: Optional[Affix] = None,
        postfix: Optional[Affix] = None,
    ) -> bool:
        """Render nodes in order, stopping at the first unsupported one.

        For each node the prefix, the node and the postfix are written in that
        order. If the node was not fully rendered, no later node is visited;
        the prefix and postfix of the failing node have still been written.

        Parameters
        ----------
        output : IO[str]
            Text sink receiving the rendered nodes
        nodes : iterable of Node
            Nodes to render
        prefix : callable or None, default = None
            Called with no arguments before each node
        postfix : callable or None, default = None
            Called with no arguments after each node

        Returns
        -------
        bool
            True if every node was fully rendered (including an empty sequence)

        """
        with self._bound_output(output):
            return self._render_sequence(nodes, prefix, postfix)

    # ------------------------------------------------------------------
    # Traversal helpers
    # ------------------------------------------------------------------

    @contextmanager
    def _bound_output(self, output: IO[str]) -> Iterator[None]:
        saved_output = self._output
        self._output = output
        try:
            yield
        finally:
            self._output = saved_output

    @property
    def _sink(self) -> IO[str]:
        if self._output is None:
            raise RenderingError(
                "No output sink bound; use render_document, render_sequence or render_node",
                rendering_stage="write",
            )
        return self._output

    def _write(self, text: str) -> None:
        self._sink.write(text)

    def _render_sequence(
        self,
        nodes: Iterable[Node],
        prefix: Optional[Affix] = None,
        postfix: Optional[Affix] = None,
    ) -> bool:
        for node in nodes:
            if prefix is not None:
                prefix()
            fully_rendered = node.accept(self)
            if postfix is not None:
                postfix()
            if not fully_rendered:
                return False
        return True

    def _unsupported(self, node: Node) -> bool:
        logger.debug("No Markdown rendering for %s node; stopping", type(node).__name__)
        return False

    # ------------------------------------------------------------------
    # Supported variants
    # ------------------------------------------------------------------

    def visit_heading(self, node: Heading) -> bool:
        """Render ``#`` markers, the heading text and a blank line.

        The blank line is only written when the heading text was fully rendered.
        """
        self._write(f"{HEADING_MARKER * node.level} ")
        if not self._render_sequence(node.children):
            return False
        self._write("\n\n")
        return True

    def visit_link(self, node: Link) -> bool:
        """Render an internal link as ``[display](Target_Page)``."""
        return write_link(self._sink, lambda output: self.render_sequence(output, node.display), node.target)

    def visit_redirect(self, node: Redirect) -> bool:
        """Render a redirect as a link labelled with its own target."""
        return write_plain_link(self._sink, node.target, node.target)

    def visit_unordered_list(self, node: UnorderedList) -> bool:
        """Render every child of every item as a bulleted line.

        Item children are flattened: each child node gets its own marker and
        line break. A blank line follows the list when it was fully rendered.
        """
        marker = f"{self.options.list_marker} "
        children = chain.from_iterable(item.children for item in node.items)
        if not self._render_sequence(
            children,
            prefix=lambda: self._write(marker),
            postfix=lambda: self._write("\n"),
        ):
            return False
        self._write("\n")
        return True

    def visit_text(self, node: Text) -> bool:
        self._write(node.value)
        return True

    # ------------------------------------------------------------------
    # Unsupported variants
    # ------------------------------------------------------------------

    def visit_bold(self, node: Bold) -> bool:
        return self._unsupported(node)

    def visit_bold_italic(self, node: BoldItalic) -> bool:
        return self._unsupported(node)

    def visit_italic(self, node: Italic) -> bool:
        return self._unsupported(node)

    def visit_category(self, node: Category) -> bool:
        return self._unsupported(node)

    def visit_character_entity(self, node: CharacterEntity) -> bool:
        return self._unsupported(node)

    def visit_comment(self, node: Comment) -> bool:
        return self._unsupported(node)

    def visit_magic_word(self, node: MagicWord) -> bool:
        return self._unsupported(node)

    def visit_definition_list(self, node: DefinitionList) -> bool:
        return self._unsupported(node)

    def visit_ordered_list(self, node: OrderedList) -> bool:
        return self._unsupported(node)

    def visit_preformatted(self, node: Preformatted) -> bool:
        return self._unsupported(node)

    def visit_table(self, node: Table) -> bool:
        return self._unsupported(node)

    def visit_horizontal_divider(self, node: HorizontalDivider) -> bool:
        return self._unsupported(node)

    def visit_paragraph_break(self, node: ParagraphBreak) -> bool:
        return self._unsupported(node)

    def visit_external_link(self, node: ExternalLink) -> bool:
        return self._unsupported(node)

    def visit_image(self, node: Image) -> bool:
        return self._unsupported(node)

    def visit_parameter(self, node: Parameter) -> bool:
        return self._unsupported(node)

    def visit_template(self, node: Template) -> bool:
        return self._unsupported(node)

    def visit_start_tag(self, node: StartTag) -> bool:
        return self._unsupported(node)

    def visit_end_tag(self, node: EndTag) -> bool:
        return self._unsupported(node)

    def visit_tag(self, node: Tag) -> bool:
        return self._unsupported(node)


__all__ = ["Affix", "MarkdownRenderer"]
