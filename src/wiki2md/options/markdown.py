#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for rendering wiki node trees as Markdown."""
# src/wiki2md/options/markdown.py


from __future__ import annotations

from dataclasses import dataclass, field

from wiki2md.constants import (
    DEFAULT_DUMP_FENCE,
    DEFAULT_DUMP_FORMAT,
    DEFAULT_DUMP_UNSUPPORTED,
    DEFAULT_LIST_MARKER,
    DUMP_FORMATS,
    DumpFormat,
)
from wiki2md.options.base import BaseRendererOptions


@dataclass(frozen=True)
class MarkdownRendererOptions(BaseRendererOptions):
    """Markdown rendering options for converting wiki nodes to Markdown text.

    Parameters
    ----------
    dump_unsupported : bool, default True
        Whether to append a verbatim dump of the top-level nodes when the
        document contains a node kind the renderer cannot express.
    dump_format : {"repr", "json"}, default "repr"
        How each top-level node is written in the fallback dump:
        - "repr": Python debug representation of the node
        - "json": Compact JSON produced by ``ast_to_json``
    dump_fence : str, default "```"
        Fence line written before and after the fallback dump.
    list_marker : str, default "-"
        Marker written (followed by a space) before each unordered list entry.

    Examples
    --------
    Disable the fallback dump:
        >>> options = MarkdownRendererOptions(dump_unsupported=False)

    Switch the dump to JSON on an existing options object:
        >>> options = MarkdownRendererOptions().create_updated(dump_format="json")

    """

    dump_unsupported: bool = field(
        default=DEFAULT_DUMP_UNSUPPORTED,
        metadata={
            "help": "Append a verbatim node dump when the document contains unsupported nodes",
            "importance": "core",
        },
    )
    dump_format: DumpFormat = field(
        default=DEFAULT_DUMP_FORMAT,
        metadata={
            "help": "Representation used for each node in the fallback dump",
            "choices": list(DUMP_FORMATS),
            "importance": "advanced",
        },
    )
    dump_fence: str = field(
        default=DEFAULT_DUMP_FENCE,
        metadata={"help": "Fence line surrounding the fallback dump", "importance": "advanced"},
    )
    list_marker: str = field(
        default=DEFAULT_LIST_MARKER,
        metadata={"help": "Marker written before each unordered list entry", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If dump_format is unknown, or dump_fence or list_marker is empty.

        """
        super().__post_init__()

        if self.dump_format not in DUMP_FORMATS:
            raise ValueError(f"dump_format must be one of {DUMP_FORMATS}, got {self.dump_format!r}")
        if not self.dump_fence:
            raise ValueError("dump_fence must be a non-empty string")
        if not self.list_marker:
            raise ValueError("list_marker must be a non-empty string")
