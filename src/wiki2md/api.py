"""The major exported API functions for document conversion."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/wiki2md/api.py
import logging
from dataclasses import dataclass
from io import StringIO
from pathlib import Path
from typing import IO, Iterable, Optional, Union

from wiki2md.ast.nodes import Node
from wiki2md.ast.serialization import format_node_for_dump
from wiki2md.constants import (
    DEFAULT_OUTPUT_ENCODING,
    MARKDOWN_EXTENSION,
    TITLE_PATH_SEPARATOR,
    WIKITEXT_EXTENSION,
)
from wiki2md.exceptions import OutputWriteError, ValidationError
from wiki2md.options.markdown import MarkdownRendererOptions
from wiki2md.renderers.markdown import MarkdownRenderer
from wiki2md.utils.decorators import render_timer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WrittenDocument:
    """Result of writing one converted document to disk.

    Attributes
    ----------
    path : Path
        File the document was written to
    fully_rendered : bool
        False if the document contained unsupported nodes and the rendered
        text is incomplete

    """

    path: Path
    fully_rendered: bool


def write_fallback_dump(output: IO[str], nodes: Iterable[Node], options: MarkdownRendererOptions) -> None:
    """Append a fenced, verbatim listing of the given nodes to the output.

    Parameters
    ----------
    output : IO[str]
        Text sink that already holds the (partial) rendering
    nodes : iterable of Node
        Top-level nodes of the document, one dump line each
    options : MarkdownRendererOptions
        Supplies the fence and the dump format

    """
    output.write("\n")
    output.write(f"{options.dump_fence}\n")
    for node in nodes:
        output.write(f"{format_node_for_dump(node, options.dump_format)}\n")
    output.write(f"{options.dump_fence}\n")


def convert(
    title: str,
    nodes: Iterable[Node],
    output: IO[str],
    options: Optional[MarkdownRendererOptions] = None,
) -> bool:
    """Render a parsed wiki article as Markdown, with a fallback dump.

    The title line and as much of the article as the renderer supports are
    streamed into ``output``. If an unsupported node stopped the render, a
    verbatim dump of every top-level node is appended (unless disabled in the
    options) so that no information from the article is lost.

    Parameters
    ----------
    title : str
        Article title
    nodes : iterable of Node
        Top-level nodes produced by the wikitext parser
    output : IO[str]
        Text sink receiving the Markdown
    options : MarkdownRendererOptions, optional
        Rendering options

    Returns
    -------
    bool
        True if the whole article was rendered, False if the output ends with
        a truncated rendering (and the fallback dump, if enabled)

    Raises
    ------
    OSError
        If the output cannot be written. Writing stops immediately.

    Examples
    --------
        >>> from io import StringIO
        >>> from wiki2md.ast import Bold, Text
        >>> output = StringIO()
        >>> convert("Example", [Text(value="plain"), Bold()], output)
        False
        >>> print(output.getvalue())
        # Example
        <BLANKLINE>
        plain
        ```
        Text(value='plain', source_location=None)
        Bold(source_location=None)
        ```
        <BLANKLINE>

    """
    top_level = tuple(nodes)
    renderer = MarkdownRenderer(options)

    with render_timer(logger, title):
        fully_rendered = renderer.render_document(output, title, top_level)

    if not fully_rendered:
        if renderer.options.dump_unsupported:
            logger.info("Document %r contains unsupported nodes; appending node dump", title)
            write_fallback_dump(output, top_level, renderer.options)
        else:
            logger.info("Document %r contains unsupported nodes; output is truncated", title)

    return fully_rendered


def to_markdown(title: str, nodes: Iterable[Node], options: Optional[MarkdownRendererOptions] = None) -> str:
    """Convert a parsed wiki article to a Markdown string.

    Same output as :func:`convert`, collected in memory.
    """
    buffer = StringIO()
    convert(title, nodes, buffer, options)
    return buffer.getvalue()


def output_path_for_title(
    output_dir: Union[str, Path],
    title: str,
    extension: str = MARKDOWN_EXTENSION,
) -> Path:
    """Compute the output file for an article title.

    Each ``/``-separated component of the title becomes a directory level
    below ``output_dir``. ``extension`` is appended to the last component, so
    dots already in the title are kept (``"Release 1.2"`` becomes
    ``Release 1.2.md``).

    Parameters
    ----------
    output_dir : str or Path
        Root directory for converted documents
    title : str
        Article title, e.g. ``"Guides/Getting started"``
    extension : str, default ".md"
        Suffix of the output file

    Returns
    -------
    Path
        Path of the output file

    Raises
    ------
    ValidationError
        If the title has no usable path component, contains ``.``/``..``
        components that would leave ``output_dir``, or contains a NUL character

    Examples
    --------
        >>> output_path_for_title("out", "Guides/Getting started")
        PosixPath('out/Guides/Getting started.md')

    """
    if "\0" in title:
        raise ValidationError(
            f"Title {title!r} contains a NUL character", parameter_name="title", parameter_value=title
        )

    components = [component for component in title.split(TITLE_PATH_SEPARATOR) if component]
    if not components:
        raise ValidationError(f"Title {title!r} has no path components", parameter_name="title", parameter_value=title)
    if any(component in (".", "..") for component in components):
        raise ValidationError(
            f"Title {title!r} contains relative path components", parameter_name="title", parameter_value=title
        )

    path = Path(output_dir).joinpath(*components)
    return path.with_name(path.name + extension)


def write_document(
    output_dir: Union[str, Path],
    title: str,
    nodes: Iterable[Node],
    options: Optional[MarkdownRendererOptions] = None,
) -> WrittenDocument:
    """Convert a parsed wiki article into a Markdown file below ``output_dir``.

    Parameters
    ----------
    output_dir : str or Path
        Root directory for converted documents
    title : str
        Article title; determines the file path (see :func:`output_path_for_title`)
    nodes : iterable of Node
        Top-level nodes produced by the wikitext parser
    options : MarkdownRendererOptions, optional
        Rendering options

    Returns
    -------
    WrittenDocument
        Path of the written file and whether the article was fully rendered

    Raises
    ------
    ValidationError
        If the title cannot be mapped to a path
    OutputWriteError
        If the directory or file cannot be created or written

    """
    path = output_path_for_title(output_dir, title)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding=DEFAULT_OUTPUT_ENCODING) as output:
            fully_rendered = convert(title, nodes, output, options)
    except OSError as e:
        raise OutputWriteError(str(path), title=title, original_error=e) from e

    logger.debug("Wrote %s", path)
    return WrittenDocument(path=path, fully_rendered=fully_rendered)


def write_wikitext(output_dir: Union[str, Path], title: str, text: str) -> Path:
    """Write an article's raw wikitext below ``output_dir``.

    Uses the same directory layout as :func:`write_document`, with a
    ``.wikitext`` suffix.

    Raises
    ------
    ValidationError
        If the title cannot be mapped to a path
    OutputWriteError
        If the directory or file cannot be created or written

    """
    path = output_path_for_title(output_dir, title, extension=WIKITEXT_EXTENSION)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding=DEFAULT_OUTPUT_ENCODING)
    except OSError as e:
        raise OutputWriteError(str(path), title=title, original_error=e) from e

    logger.debug("Wrote %s", path)
    return path


__all__ = [
    "WrittenDocument",
    "convert",
    "output_path_for_title",
    "to_markdown",
    "write_document",
    "write_fallback_dump",
    "write_wikitext",
]
