#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Base classes for renderer options.

This module defines the foundation classes for the renderer options used
throughout the wiki2md conversion pipeline.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Derive modified copies of a frozen options dataclass.

    Examples
    --------
        >>> from wiki2md.options import MarkdownRendererOptions
        >>> json_dump = MarkdownRendererOptions().create_updated(dump_format="json")

    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Return a copy with the given fields replaced.

        The copy is validated again by ``__post_init__``, so invalid values
        raise the same ``ValueError`` as the constructor.
        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Renderers convert a wiki node tree into an output format. Subclasses
    define format-specific rendering options as frozen dataclass fields.

    """

    def __post_init__(self) -> None:
        """Validate base renderer options."""
        pass
