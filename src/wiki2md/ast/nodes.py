#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2md/ast/nodes.py
"""AST node classes for parsed wiki articles.

This module defines the closed set of node variants an upstream wikitext
parser can produce. Each node represents one markup construct. Nodes are
frozen dataclasses: once a tree has been built, nothing in wiki2md mutates it.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Variants the Markdown renderer can express:
    - Heading, Link, Redirect, UnorderedList, Text

Variants the Markdown renderer reports as unsupported:
    - Bold, BoldItalic, Italic
    - Category, CharacterEntity, Comment, MagicWord
    - DefinitionList, OrderedList, Preformatted, Table
    - ExternalLink, Image, Parameter, Template
    - StartTag, EndTag, Tag
    - HorizontalDivider, ParagraphBreak

Container records (ListItem, DefinitionListItem, TableCaption, TableRow,
TableCell, TemplateParameter) group child nodes but are not nodes themselves.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Literal, Optional

from wiki2md.constants import MAX_HEADING_LEVEL, MIN_HEADING_LEVEL

DefinitionListItemKind = Literal["term", "details"]
TableCellKind = Literal["heading", "ordinary"]


def _freeze_sequences(instance: Any, *names: str) -> None:
    """Store the named sequence fields of a frozen dataclass as tuples."""
    for name in names:
        value = getattr(instance, name)
        if value is not None and not isinstance(value, tuple):
            object.__setattr__(instance, name, tuple(value))


@dataclass(frozen=True)
class SourceLocation:
    """Byte offsets of a node in the source wikitext.

    Parameters
    ----------
    start : int
        Offset of the first character of the construct
    end : int
        Offset one past the last character of the construct

    """

    start: int
    end: int


class Node(ABC):
    """Base class for all AST nodes.

    All wiki nodes inherit from this base class and support the visitor
    pattern for traversal and rendering.

    """

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Container records
# ============================================================================


@dataclass(frozen=True)
class ListItem:
    """One entry of an ordered or unordered list.

    Parameters
    ----------
    children : tuple of Node, default = empty tuple
        Nodes making up the entry

    """

    children: tuple[Node, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _freeze_sequences(self, "children")


@dataclass(frozen=True)
class DefinitionListItem:
    """One term or details entry of a definition list."""

    kind: DefinitionListItemKind
    children: tuple[Node, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _freeze_sequences(self, "children")


@dataclass(frozen=True)
class TableCaption:
    """Caption of a table."""

    content: tuple[Node, ...] = field(default_factory=tuple)
    attributes: Optional[tuple[Node, ...]] = None

    def __post_init__(self) -> None:
        _freeze_sequences(self, "content", "attributes")


@dataclass(frozen=True)
class TableCell:
    """Heading or ordinary cell of a table row."""

    kind: TableCellKind
    content: tuple[Node, ...] = field(default_factory=tuple)
    attributes: Optional[tuple[Node, ...]] = None

    def __post_init__(self) -> None:
        _freeze_sequences(self, "content", "attributes")


@dataclass(frozen=True)
class TableRow:
    """Row of a table."""

    cells: tuple[TableCell, ...] = field(default_factory=tuple)
    attributes: tuple[Node, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _freeze_sequences(self, "cells", "attributes")


@dataclass(frozen=True)
class TemplateParameter:
    """Positional (name is None) or named parameter of a template call."""

    value: tuple[Node, ...] = field(default_factory=tuple)
    name: Optional[tuple[Node, ...]] = None

    def __post_init__(self) -> None:
        _freeze_sequences(self, "value", "name")


# ============================================================================
# Renderable nodes
# ============================================================================


@dataclass(frozen=True)
class Heading(Node):
    """Heading node (levels 1-6).

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)
    children : tuple of Node, default = empty tuple
        Nodes representing the heading text
    source_location : SourceLocation or None, default = None
        Source location information

    """

    level: int
    children: tuple[Node, ...] = field(default_factory=tuple)
    source_location: Optional[SourceLocation] = None

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not MIN_HEADING_LEVEL <= self.level <= MAX_HEADING_LEVEL:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")
        _freeze_sequences(self, "children")

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this heading.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_heading method

        Returns
        -------
        Any
            Result from visitor.visit_heading(self)

        """
        return visitor.visit_heading(self)


@dataclass(frozen=True)
class Link(Node):
    """Internal wiki link.

    Parameters
    ----------
    target : str
        Human-readable page name the link points to
    display : tuple of Node, default = empty tuple
        Nodes representing the link text
    source_location : SourceLocation or None, default = None
        Source location information

    """

    target: str
    display: tuple[Node, ...] = field(default_factory=tuple)
    source_location: Optional[SourceLocation] = None

    def __post_init__(self) -> None:
        _freeze_sequences(self, "display")

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this link."""
        return visitor.visit_link(self)


@dataclass(frozen=True)
class Redirect(Node):
    """Page redirect to another wiki page.

    Parameters
    ----------
    target : str
        Page name the article redirects to
    source_location : SourceLocation or None, default = None
        Source location information

    """

    target: str
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this redirect."""
        return visitor.visit_redirect(self)


@dataclass(frozen=True)
class UnorderedList(Node):
    """Bulleted list.

    Parameters
    ----------
    items : tuple of ListItem, default = empty tuple
        List entries in document order
    source_location : SourceLocation or None, default = None
        Source location information

    """

    items: tuple[ListItem, ...] = field(default_factory=tuple)
    source_location: Optional[SourceLocation] = None

    def __post_init__(self) -> None:
        _freeze_sequences(self, "items")

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list."""
        return visitor.visit_unordered_list(self)


@dataclass(frozen=True)
class Text(Node):
    """Plain text node.

    Parameters
    ----------
    value : str
        Text content, written verbatim
    source_location : SourceLocation or None, default = None
        Source location information

    """

    value: str
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text."""
        return visitor.visit_text(self)


# ============================================================================
# Inline formatting toggles
# ============================================================================


@dataclass(frozen=True)
class Bold(Node):
    """Toggle of bold formatting (``'''``)."""

    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_bold(self)


@dataclass(frozen=True)
class BoldItalic(Node):
    """Toggle of bold and italic formatting (``'''''``)."""

    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_bold_italic(self)


@dataclass(frozen=True)
class Italic(Node):
    """Toggle of italic formatting (``''``)."""

    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_italic(self)


# ============================================================================
# Page-level markers
# ============================================================================


@dataclass(frozen=True)
class Category(Node):
    """Category assignment (``[[Category:Target|ordinal]]``).

    Parameters
    ----------
    target : str
        Category name
    ordinal : tuple of Node or None, default = None
        Sort key given after the pipe, if any
    source_location : SourceLocation or None, default = None
        Source location information

    """

    target: str
    ordinal: Optional[tuple[Node, ...]] = None
    source_location: Optional[SourceLocation] = None

    def __post_init__(self) -> None:
        _freeze_sequences(self, "ordinal")

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_category(self)


@dataclass(frozen=True)
class CharacterEntity(Node):
    """Character entity such as ``&amp;``, already decoded to its character."""

    character: str
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_character_entity(self)


@dataclass(frozen=True)
class Comment(Node):
    """HTML comment (``<!-- ... -->``)."""

    text: str = ""
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_comment(self)


@dataclass(frozen=True)
class MagicWord(Node):
    """Behavior switch such as ``__NOTOC__``."""

    name: str = ""
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_magic_word(self)


# ============================================================================
# Block structures
# ============================================================================


@dataclass(frozen=True)
class DefinitionList(Node):
    """Definition list of alternating terms and details (``;`` and ``:`` lines)."""

    items: tuple[DefinitionListItem, ...] = field(default_factory=tuple)
    source_location: Optional[SourceLocation] = None

    def __post_init__(self) -> None:
        _freeze_sequences(self, "items")

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_definition_list(self)


@dataclass(frozen=True)
class OrderedList(Node):
    """Numbered list (``#`` lines)."""

    items: tuple[ListItem, ...] = field(default_factory=tuple)
    source_location: Optional[SourceLocation] = None

    def __post_init__(self) -> None:
        _freeze_sequences(self, "items")

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_ordered_list(self)


@dataclass(frozen=True)
class Preformatted(Node):
    """Preformatted block (lines starting with a space)."""

    children: tuple[Node, ...] = field(default_factory=tuple)
    source_location: Optional[SourceLocation] = None

    def __post_init__(self) -> None:
        _freeze_sequences(self, "children")

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_preformatted(self)


@dataclass(frozen=True)
class Table(Node):
    """Wiki table (``{| ... |}``).

    Parameters
    ----------
    attributes : tuple of Node, default = empty tuple
        Nodes of the table's attribute text
    captions : tuple of TableCaption, default = empty tuple
        Table captions
    rows : tuple of TableRow, default = empty tuple
        Table rows in document order
    source_location : SourceLocation or None, default = None
        Source location information

    """

    attributes: tuple[Node, ...] = field(default_factory=tuple)
    captions: tuple[TableCaption, ...] = field(default_factory=tuple)
    rows: tuple[TableRow, ...] = field(default_factory=tuple)
    source_location: Optional[SourceLocation] = None

    def __post_init__(self) -> None:
        _freeze_sequences(self, "attributes", "captions", "rows")

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_table(self)


@dataclass(frozen=True)
class HorizontalDivider(Node):
    """Horizontal rule (``----``)."""

    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_horizontal_divider(self)


@dataclass(frozen=True)
class ParagraphBreak(Node):
    """Blank line separating two paragraphs."""

    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_paragraph_break(self)


# ============================================================================
# Links, media and transclusion
# ============================================================================


@dataclass(frozen=True)
class ExternalLink(Node):
    """Bracketed external link (``[https://example.org label]``)."""

    children: tuple[Node, ...] = field(default_factory=tuple)
    source_location: Optional[SourceLocation] = None

    def __post_init__(self) -> None:
        _freeze_sequences(self, "children")

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_external_link(self)


@dataclass(frozen=True)
class Image(Node):
    """File/image embed (``[[File:Target|text]]``)."""

    target: str
    text: tuple[Node, ...] = field(default_factory=tuple)
    source_location: Optional[SourceLocation] = None

    def __post_init__(self) -> None:
        _freeze_sequences(self, "text")

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_image(self)


@dataclass(frozen=True)
class Parameter(Node):
    """Template parameter reference (``{{{name|default}}}``)."""

    name: tuple[Node, ...] = field(default_factory=tuple)
    default: Optional[tuple[Node, ...]] = None
    source_location: Optional[SourceLocation] = None

    def __post_init__(self) -> None:
        _freeze_sequences(self, "name", "default")

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_parameter(self)


@dataclass(frozen=True)
class Template(Node):
    """Template transclusion (``{{name|param|key=value}}``).

    Parameters
    ----------
    name : tuple of Node, default = empty tuple
        Nodes of the template name
    parameters : tuple of TemplateParameter, default = empty tuple
        Parameters passed to the template
    source_location : SourceLocation or None, default = None
        Source location information

    """

    name: tuple[Node, ...] = field(default_factory=tuple)
    parameters: tuple[TemplateParameter, ...] = field(default_factory=tuple)
    source_location: Optional[SourceLocation] = None

    def __post_init__(self) -> None:
        _freeze_sequences(self, "name", "parameters")

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_template(self)


# ============================================================================
# Tags
# ============================================================================


@dataclass(frozen=True)
class StartTag(Node):
    """Unmatched opening HTML-like tag (``<span>``)."""

    name: str
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_start_tag(self)


@dataclass(frozen=True)
class EndTag(Node):
    """Unmatched closing HTML-like tag (``</span>``)."""

    name: str
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_end_tag(self)


@dataclass(frozen=True)
class Tag(Node):
    """Extension tag with its content (``<ref>...</ref>``, ``<math>...</math>``)."""

    name: str
    children: tuple[Node, ...] = field(default_factory=tuple)
    source_location: Optional[SourceLocation] = None

    def __post_init__(self) -> None:
        _freeze_sequences(self, "children")

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_tag(self)


__all__ = [
    "Bold",
    "BoldItalic",
    "Category",
    "CharacterEntity",
    "Comment",
    "DefinitionList",
    "DefinitionListItem",
    "DefinitionListItemKind",
    "EndTag",
    "ExternalLink",
    "Heading",
    "HorizontalDivider",
    "Image",
    "Italic",
    "Link",
    "ListItem",
    "MagicWord",
    "Node",
    "OrderedList",
    "ParagraphBreak",
    "Parameter",
    "Preformatted",
    "Redirect",
    "SourceLocation",
    "StartTag",
    "Table",
    "TableCaption",
    "TableCell",
    "TableCellKind",
    "TableRow",
    "Tag",
    "Template",
    "TemplateParameter",
    "Text",
    "UnorderedList",
]
