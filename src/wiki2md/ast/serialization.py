#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2md/ast/serialization.py
"""JSON serialization of AST nodes.

This module converts wiki node trees into plain dictionaries and JSON text.
It backs the ``"json"`` format of the fallback dump, which preserves the
structure of documents that could not be fully rendered.

Examples
--------
Serialize a node to JSON:

    >>> from wiki2md.ast import Heading, Text
    >>> from wiki2md.ast.serialization import ast_to_json
    >>>
    >>> ast_to_json(Heading(level=2, children=[Text(value="Title")]))
    '{"schema_version": 1, "node_type": "Heading", "level": 2, ...}'

"""

from __future__ import annotations

import json
from dataclasses import fields
from typing import Any, Union

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
from wiki2md.constants import DumpFormat

SCHEMA_VERSION = 1

# Line breaks for str.splitlines that json.dumps leaves unescaped with ensure_ascii=False
_LINE_SEPARATOR_ESCAPES = {ord(char): f"\\u{ord(char):04x}" for char in "\x85\u2028\u2029"}

Serializable = Union[
    Node, SourceLocation, ListItem, DefinitionListItem, TableCaption, TableCell, TableRow, TemplateParameter
]


def _serialize_value(value: Any) -> Any:
    """Serialize a field value, recursing into nodes and node sequences."""
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    if type(value) in _SERIALIZABLE_TYPES:
        return ast_to_dict(value)
    return value


def _serialize_source_location(node: SourceLocation) -> dict[str, Any]:
    """Serialize a SourceLocation object."""
    return {"node_type": "SourceLocation", "start": node.start, "end": node.end}


def _serialize_fields(node: Serializable) -> dict[str, Any]:
    """Serialize a node or record field by field.

    Parameters
    ----------
    node : Serializable
        Frozen dataclass to serialize

    Returns
    -------
    dict
        Serialized node, keyed by ``node_type`` and the dataclass field names

    """
    result: dict[str, Any] = {"node_type": type(node).__name__}
    for node_field in fields(node):
        result[node_field.name] = _serialize_value(getattr(node, node_field.name))
    return result


_SERIALIZABLE_TYPES: frozenset[type] = frozenset(
    {
        # Records
        ListItem,
        DefinitionListItem,
        TableCaption,
        TableCell,
        TableRow,
        TemplateParameter,
        # Nodes
        Heading,
        Link,
        Redirect,
        UnorderedList,
        Text,
        Bold,
        BoldItalic,
        Italic,
        Category,
        CharacterEntity,
        Comment,
        MagicWord,
        DefinitionList,
        OrderedList,
        Preformatted,
        Table,
        HorizontalDivider,
        ParagraphBreak,
        ExternalLink,
        Image,
        Parameter,
        Template,
        StartTag,
        EndTag,
        Tag,
        SourceLocation,
    }
)


def ast_to_dict(node: Serializable) -> dict[str, Any]:
    """Convert an AST node to a dictionary representation.

    Parameters
    ----------
    node : Node, SourceLocation or container record
        The object to convert

    Returns
    -------
    dict
        Dictionary representation of the node

    Raises
    ------
    ValueError
        If the object is not a known node or record type

    Examples
    --------
    >>> from wiki2md.ast import Text
    >>> ast_to_dict(Text(value="Hello"))
    {'node_type': 'Text', 'value': 'Hello', 'source_location': None}

    """
    node_class = type(node)
    if node_class not in _SERIALIZABLE_TYPES:
        raise ValueError(f"Unknown node type for serialization: {node_class.__name__}")
    if isinstance(node, SourceLocation):
        return _serialize_source_location(node)
    return _serialize_fields(node)


def ast_to_json(node: Node, indent: int | None = None) -> str:
    """Serialize an AST node to JSON string with schema versioning.

    Parameters
    ----------
    node : Node
        The AST node to serialize
    indent : int or None, default = None
        Number of spaces for indentation (None for compact, single-line output)

    Returns
    -------
    str
        JSON string representation with schema version. Non-ASCII text is
        kept as is, except NEL, LINE SEPARATOR and PARAGRAPH SEPARATOR, which
        are written as ``\\u`` escapes so compact output is a single line.

    """
    node_dict = ast_to_dict(node)
    versioned_dict = {"schema_version": SCHEMA_VERSION, **node_dict}
    return json.dumps(versioned_dict, indent=indent, ensure_ascii=False).translate(_LINE_SEPARATOR_ESCAPES)


def format_node_for_dump(node: Node, dump_format: DumpFormat) -> str:
    """Format one top-level node as a single line of the fallback dump.

    Parameters
    ----------
    node : Node
        Node to format
    dump_format : {"repr", "json"}
        ``"repr"`` for the Python debug representation, ``"json"`` for compact JSON

    Returns
    -------
    str
        Single-line representation of the node

    """
    if dump_format == "json":
        return ast_to_json(node)
    return repr(node)


__all__ = ["SCHEMA_VERSION", "ast_to_dict", "ast_to_json", "format_node_for_dump"]
