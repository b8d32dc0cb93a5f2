#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for wiki2md renderers.

Each renderer has its own frozen Options dataclass. Options are immutable;
use ``create_updated`` to derive a modified copy.
"""

from __future__ import annotations

from wiki2md.options.base import BaseRendererOptions, CloneFrozenMixin
from wiki2md.options.markdown import MarkdownRendererOptions

__all__ = [
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "MarkdownRendererOptions",
]
