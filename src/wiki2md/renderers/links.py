#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wiki2md/renderers/links.py
"""Link target resolution and Markdown link writing.

Wiki page names become URL-safe references by joining words with underscores,
the convention MediaWiki uses in page URLs. No percent-encoding is applied.

"""

from __future__ import annotations

from typing import IO, Callable

from wiki2md.constants import LINK_SPACE, LINK_SPACE_REPLACEMENT

DisplayWriter = Callable[[IO[str]], bool]


def resolve_link(target: str) -> str:
    """Convert a human-readable page name into a link reference.

    Parameters
    ----------
    target : str
        Page name as written in the wiki markup

    Returns
    -------
    str
        The page name with every space replaced by an underscore

    Examples
    --------
    >>> resolve_link("Main Page")
    'Main_Page'

    """
    return target.replace(LINK_SPACE, LINK_SPACE_REPLACEMENT)


def write_link(output: IO[str], display_writer: DisplayWriter, target: str) -> bool:
    """Write a Markdown link ``[display](target)`` to the output.

    The brackets, parentheses and target are always written, even when the
    display writer reports that it could not fully render the link text.

    Parameters
    ----------
    output : IO[str]
        Text sink receiving the link
    display_writer : callable
        Writes the link text to the sink it is given and returns whether the
        text was fully rendered
    target : str
        Page name the link points to, resolved with :func:`resolve_link`

    Returns
    -------
    bool
        The display writer's outcome

    """
    output.write("[")
    fully_rendered = display_writer(output)
    output.write("](")
    output.write(resolve_link(target))
    output.write(")")
    return fully_rendered


def write_plain_link(output: IO[str], text: str, target: str) -> bool:
    """Write a Markdown link whose display text is a plain string.

    Always returns True.
    """

    def write_text(sink: IO[str]) -> bool:
        sink.write(text)
        return True

    return write_link(output, write_text, target)


__all__ = ["DisplayWriter", "resolve_link", "write_link", "write_plain_link"]
