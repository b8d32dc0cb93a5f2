#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2md/renderers/__init__.py
"""Renderers converting wiki AST nodes into output formats."""

from __future__ import annotations

from wiki2md.renderers.base import BaseRenderer
from wiki2md.renderers.links import resolve_link, write_link, write_plain_link
from wiki2md.renderers.markdown import MarkdownRenderer

__all__ = [
    "BaseRenderer",
    "MarkdownRenderer",
    "resolve_link",
    "write_link",
    "write_plain_link",
]
