"""tini_core: minimal INI parser for sections of ordered key/value strings."""

import logging

from .errors import DocumentReleasedError, SourceNotFoundError, TiniCoreError
from .lookup import find_entry, find_section, find_value
from .model import Document, Entry, Section, release
from .parser import load, parse_lines, parse_stream, parse_text, read
from .reader import (
    COMMENT_MARKERS,
    GLOBAL_SECTION,
    LINE_LIMIT,
    SECTION_LIMIT,
    SOURCE_ENCODING,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "read",
    "load",
    "parse_text",
    "parse_stream",
    "parse_lines",
    "find_section",
    "find_entry",
    "find_value",
    "release",
    "Document",
    "Section",
    "Entry",
    "GLOBAL_SECTION",
    "SECTION_LIMIT",
    "LINE_LIMIT",
    "COMMENT_MARKERS",
    "SOURCE_ENCODING",
    "TiniCoreError",
    "SourceNotFoundError",
    "DocumentReleasedError",
]
