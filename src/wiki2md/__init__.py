"""wiki2md - Markdown conversion for parsed MediaWiki articles.

wiki2md turns the node tree of a parsed wiki article into Markdown. The
renderer understands headings, internal links, redirects, bulleted lists and
plain text. When an article contains anything else, rendering stops at the
first such node and the caller appends a verbatim dump of the article's nodes,
so converted files never silently lose content.

Examples
--------
Convert an article held in memory:

    >>> from wiki2md import to_markdown
    >>> from wiki2md.ast import Redirect
    >>> to_markdown("Old Name", [Redirect(target="New Name")])
    '# Old Name\\n\\n[New Name](New_Name)'

Write an article into a directory tree mirroring its title:

    >>> from wiki2md import write_document
    >>> from wiki2md.ast import Text
    >>> result = write_document("out", "Guides/Install", [Text(value="Run the installer.")])
    >>> result.path
    PosixPath('out/Guides/Install.md')

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from __future__ import annotations

from wiki2md.api import (
    WrittenDocument,
    convert,
    output_path_for_title,
    to_markdown,
    write_document,
    write_wikitext,
)
from wiki2md.exceptions import (
    InvalidOptionsError,
    OutputWriteError,
    RenderingError,
    ValidationError,
    Wiki2MdError,
)
from wiki2md.options import MarkdownRendererOptions
from wiki2md.renderers import MarkdownRenderer, resolve_link

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # API
    "WrittenDocument",
    "convert",
    "output_path_for_title",
    "to_markdown",
    "write_document",
    "write_wikitext",
    # Rendering
    "MarkdownRenderer",
    "MarkdownRendererOptions",
    "resolve_link",
    # Exceptions
    "Wiki2MdError",
    "ValidationError",
    "InvalidOptionsError",
    "RenderingError",
    "OutputWriteError",
]
