"""Parser: single forward pass from INI text to a Document."""

from __future__ import annotations

import io
import logging
import os
from typing import IO, Iterable

from .errors import SourceNotFoundError
from .model import Document, Section
from .reader import (
    GLOBAL_SECTION,
    LineKind,
    classify_line,
    decode_line,
    is_binary_stream,
    iter_lines,
    parse_entry,
    parse_section_name,
    strip_comment,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Core loop
# ---------------------------------------------------------------------------

def parse_lines(lines: Iterable[str]) -> Document:
    """Build a Document from an iterable of raw lines.

    Malformed lines never raise: anything that is neither a section header
    nor contains ``=`` is skipped.
    """
    doc = Document()

    for raw in lines:
        line = strip_comment(raw)
        kind = classify_line(line)

        if kind is LineKind.SECTION:
            section = doc.add_section(parse_section_name(line))
            logger.debug("section [%s]", section.name)
            continue

        if kind is LineKind.ENTRY:
            entry = parse_entry(line)
            _target_section(doc).add_entry(entry)
            logger.debug("entry %s=%r", entry.name, entry.value)

    return doc


def _target_section(doc: Document) -> Section:
    """Section that receives the next entry, creating the global one if needed."""
    section = doc.current_section
    if section is None:
        logger.debug("entry before any header, adding [%s]", GLOBAL_SECTION)
        section = doc.add_section(GLOBAL_SECTION)
    return section


# ---------------------------------------------------------------------------
# Sources
# ---------------------------------------------------------------------------

def parse_stream(stream: IO) -> Document:
    """Parse an open stream. Binary streams are decoded line by line."""
    lines = iter_lines(stream)
    if is_binary_stream(stream):
        lines = map(decode_line, lines)
    return parse_lines(lines)


def parse_text(text: str) -> Document:
    """Parse INI *text* held in memory, with the same line ceiling as files."""
    return parse_stream(io.StringIO(text))


def load(path: str | os.PathLike[str]) -> Document:
    """Open and parse the file at *path*.

    The file is read as bytes, so the line ceiling counts bytes and no
    content fails to decode. Raises SourceNotFoundError when the file
    cannot be opened.
    """
    try:
        f = open(path, "rb")
    except OSError as e:
        raise SourceNotFoundError(os.fspath(path), e.strerror) from e
    with f:
        return parse_stream(f)


def read(path: str | os.PathLike[str]) -> Document | None:
    """Parse the file at *path*, or return ``None`` if it cannot be opened."""
    try:
        return load(path)
    except SourceNotFoundError as e:
        logger.warning("%s", e)
        return None
