#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2md/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

This module provides the visitor base class for processing wiki nodes.
Every node variant has exactly one abstract ``visit_*`` method, so a visitor
that does not decide how to handle some variant cannot be instantiated. Adding
a variant to :mod:`wiki2md.ast.nodes` therefore forces every visitor to make an
explicit decision for it.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

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


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses implement one visit_* method per node variant. Nodes call back
    into the matching method from their ``accept`` method.

    Examples
    --------
    Dispatching a node to a visitor:

        >>> result = node.accept(visitor)

    """

    # Variants with a Markdown rendering

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node.

        Parameters
        ----------
        node : Heading
            The heading node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node.

        Parameters
        ----------
        node : Link
            The link node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_redirect(self, node: Redirect) -> Any:
        """Visit a Redirect node."""
        pass

    @abstractmethod
    def visit_unordered_list(self, node: UnorderedList) -> Any:
        """Visit an UnorderedList node.

        Parameters
        ----------
        node : UnorderedList
            The list node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""
        pass

    # Inline formatting toggles

    @abstractmethod
    def visit_bold(self, node: Bold) -> Any:
        pass

    @abstractmethod
    def visit_bold_italic(self, node: BoldItalic) -> Any:
        pass

    @abstractmethod
    def visit_italic(self, node: Italic) -> Any:
        pass

    # Page-level markers

    @abstractmethod
    def visit_category(self, node: Category) -> Any:
        pass

    @abstractmethod
    def visit_character_entity(self, node: CharacterEntity) -> Any:
        pass

    @abstractmethod
    def visit_comment(self, node: Comment) -> Any:
        pass

    @abstractmethod
    def visit_magic_word(self, node: MagicWord) -> Any:
        pass

    # Block structures

    @abstractmethod
    def visit_definition_list(self, node: DefinitionList) -> Any:
        pass

    @abstractmethod
    def visit_ordered_list(self, node: OrderedList) -> Any:
        pass

    @abstractmethod
    def visit_preformatted(self, node: Preformatted) -> Any:
        pass

    @abstractmethod
    def visit_table(self, node: Table) -> Any:
        pass

    @abstractmethod
    def visit_horizontal_divider(self, node: HorizontalDivider) -> Any:
        pass

    @abstractmethod
    def visit_paragraph_break(self, node: ParagraphBreak) -> Any:
        pass

    # Links, media and transclusion

    @abstractmethod
    def visit_external_link(self, node: ExternalLink) -> Any:
        pass

    @abstractmethod
    def visit_image(self, node: Image) -> Any:
        pass

    @abstractmethod
    def visit_parameter(self, node: Parameter) -> Any:
        pass

    @abstractmethod
    def visit_template(self, node: Template) -> Any:
        pass

    # Tags

    @abstractmethod
    def visit_start_tag(self, node: StartTag) -> Any:
        pass

    @abstractmethod
    def visit_end_tag(self, node: EndTag) -> Any:
        pass

    @abstractmethod
    def visit_tag(self, node: Tag) -> Any:
        pass


__all__ = ["NodeVisitor"]
