#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Exceptions raised by wiki2md.

A node the renderer has no Markdown form for is not an error. It is reported
through the ``False`` outcome of a render call, and the caller decides whether
to append a node dump. The classes below are for bad configuration, titles
that cannot become file paths, and output that cannot be written.

Hierarchy
---------
- Wiki2MdError
  - ValidationError: a parameter or option value was rejected
    - InvalidOptionsError: a renderer received another renderer's options
  - RenderingError: output could not be produced
    - OutputWriteError: a converted article could not be written to disk

"""

from __future__ import annotations

from typing import Any, Optional


class Wiki2MdError(Exception):
    """Root of the wiki2md exception hierarchy.

    Parameters
    ----------
    message : str
        What went wrong
    original_error : Exception, optional
        Lower-level exception this error was raised from

    """

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Wiki2MdError):
    """A parameter or option value was rejected.

    Parameters
    ----------
    message : str
        Why the value was rejected
    parameter_name : str, optional
        Parameter holding the value, e.g. ``"title"``
    parameter_value : any, optional
        The rejected value
    original_error : Exception, optional
        Lower-level exception this error was raised from

    """

    def __init__(
        self,
        message: str,
        parameter_name: Optional[str] = None,
        parameter_value: Any = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """A renderer was given an options object of the wrong class.

    Parameters
    ----------
    renderer_name : str
        Renderer that rejected the options, e.g. ``"markdown"``
    expected_type : type
        Options class the renderer accepts
    received_type : type
        Class of the object that was passed
    message : str, optional
        Overrides the generated message

    """

    def __init__(
        self,
        renderer_name: str,
        expected_type: type,
        received_type: type,
        message: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        if message is None:
            message = (
                f"The {renderer_name} renderer takes {expected_type.__name__}, "
                f"not {received_type.__name__}"
            )
        super().__init__(
            message,
            parameter_name="options",
            parameter_value=received_type,
            original_error=original_error,
        )
        self.renderer_name = renderer_name
        self.expected_type = expected_type
        self.received_type = received_type


class RenderingError(Wiki2MdError):
    """Output could not be produced.

    ``rendering_stage`` names the step that failed (``"write"`` for a render
    call with no output sink, ``"file_write"`` for file output).
    """

    def __init__(
        self, message: str, rendering_stage: Optional[str] = None, original_error: Optional[Exception] = None
    ):
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class OutputWriteError(RenderingError):
    """A converted article or its wikitext could not be written to disk.

    Parameters
    ----------
    file_path : str
        File that could not be created or written
    title : str, optional
        Title of the article being written
    message : str, optional
        Overrides the generated message
    original_error : Exception, optional
        The ``OSError`` raised by the filesystem

    """

    def __init__(
        self,
        file_path: str,
        title: Optional[str] = None,
        message: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        if message is None:
            message = f"Cannot write {file_path}"
            if title is not None:
                message += f" for article {title!r}"
            if original_error is not None:
                message += f": {original_error}"
        super().__init__(message, rendering_stage="file_write", original_error=original_error)
        self.file_path = file_path
        self.title = title


__all__ = [
    "Wiki2MdError",
    "ValidationError",
    "InvalidOptionsError",
    "RenderingError",
    "OutputWriteError",
]
