#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2md/ast/__init__.py
"""Abstract Syntax Tree (AST) module for parsed wiki articles.

The module consists of several components:

- nodes: Immutable node classes, one per wiki markup construct
- visitors: Exhaustive visitor base class used by renderers
- serialization: Dictionary and JSON conversion used by the fallback dump

Examples
--------
Basic usage:

    >>> from wiki2md.ast import Heading, Link, Text
    >>> from wiki2md.api import to_markdown
    >>>
    >>> nodes = [
    ...     Heading(level=2, children=[Text(value="See also")]),
    ...     Link(target="Main Page", display=[Text(value="home")]),
    ... ]
    >>> print(to_markdown("Example", nodes))
    # Example
    <BLANKLINE>
    ## See also
    <BLANKLINE>
    [home](Main_Page)

"""

from __future__ import annotations

from wiki2md.ast.nodes import (
    Bold,
    BoldItalic,
    Category,
    CharacterEntity,
    Comment,
    DefinitionList,
    DefinitionListItem,
    EndTag,
    ExternalLink,
    Heading,
    HorizontalDivider,
    Image,
    Italic,
    Link,
    ListItem,
    MagicWord,
    Node,
    OrderedList,
    ParagraphBreak,
    Parameter,
    Preformatted,
    Redirect,
    SourceLocation,
    StartTag,
    Table,
    TableCaption,
    TableCell,
    TableRow,
    Tag,
    Template,
    TemplateParameter,
    Text,
    UnorderedList,
)
from wiki2md.ast.serialization import ast_to_dict, ast_to_json
from wiki2md.ast.visitors import NodeVisitor

__all__ = [
    # Nodes
    "Bold",
    "BoldItalic",
    "Category",
    "CharacterEntity",
    "Comment",
    "DefinitionList",
    "DefinitionListItem",
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
    "TableRow",
    "Tag",
    "Template",
    "TemplateParameter",
    "Text",
    "UnorderedList",
    # Visitors
    "NodeVisitor",
    # Serialization
    "ast_to_dict",
    "ast_to_json",
]
