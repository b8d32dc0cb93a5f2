#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for wiki2md.

Constants are organized by category:
1. Type Definitions - Literal types used by options
2. Markdown Formatting - Markers emitted by the renderer
3. Fallback Dump - Settings for the verbatim node dump
4. Output Files - File naming for converted documents
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

DumpFormat = Literal["repr", "json"]
DUMP_FORMATS: tuple[DumpFormat, ...] = ("repr", "json")

# =============================================================================
# Markdown Formatting
# =============================================================================

HEADING_MARKER = "#"
MIN_HEADING_LEVEL = 1
MAX_HEADING_LEVEL = 6

DEFAULT_LIST_MARKER = "-"

# Wiki page names use underscores in place of spaces in URLs
LINK_SPACE = " "
LINK_SPACE_REPLACEMENT = "_"

# =============================================================================
# Fallback Dump
# =============================================================================

DEFAULT_DUMP_UNSUPPORTED = True
DEFAULT_DUMP_FORMAT: DumpFormat = "repr"
DEFAULT_DUMP_FENCE = "```"

# =============================================================================
# Output Files
# =============================================================================

TITLE_PATH_SEPARATOR = "/"
MARKDOWN_EXTENSION = ".md"
WIKITEXT_EXTENSION = ".wikitext"
DEFAULT_OUTPUT_ENCODING = "utf-8"
