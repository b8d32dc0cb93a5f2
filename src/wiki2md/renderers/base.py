#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2md/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class that all wiki2md renderers
inherit from. Renderers stream their output into a text sink as they walk
the node tree and report whether every node could be rendered.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from io import StringIO
from typing import IO, Iterable

from wiki2md.ast.nodes import Node
from wiki2md.exceptions import InvalidOptionsError
from wiki2md.options.base import BaseRendererOptions


class BaseRenderer(ABC):
    """Abstract base class for all AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render(self, title: str, nodes: Iterable[Node], output: IO[str]) -> bool:
        """Render a titled document into the output sink.

        Parameters
        ----------
        title : str
            Document title
        nodes : iterable of Node
            Top-level nodes of the document
        output : IO[str]
            Text sink receiving the rendered output

        Returns
        -------
        bool
            True if every node was rendered, False if an unsupported node
            stopped the render

        Raises
        ------
        OSError
            If the output cannot be written

        """
        pass

    def render_to_string(self, title: str, nodes: Iterable[Node]) -> tuple[str, bool]:
        """Render a titled document into a string.

        Returns
        -------
        tuple of (str, bool)
            The rendered text and whether every node was rendered

        """
        buffer = StringIO()
        fully_rendered = self.render(title, nodes, buffer)
        return buffer.getvalue(), fully_rendered

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
