"""Reader layer: reads bounded lines and classifies them."""

from __future__ import annotations

import logging
import re
from enum import Enum, auto
from typing import IO, Iterator

from .model import Entry

logger = logging.getLogger(__name__)

GLOBAL_SECTION = "global"
SECTION_LIMIT = 255
LINE_LIMIT = 255
COMMENT_MARKERS = (";", "#")
SOURCE_ENCODING = "utf-8"

_COMMENT_RE = re.compile("[" + re.escape("".join(COMMENT_MARKERS)) + "]")
_VALUE_END_RE = re.compile(r"[\r\n]")


class LineKind(Enum):
    SECTION = auto()
    ENTRY = auto()
    BLANK = auto()
    OTHER = auto()


# ---------------------------------------------------------------------------
# Line input
# ---------------------------------------------------------------------------

def is_binary_stream(stream: IO) -> bool:
    return isinstance(stream.read(0), bytes)


def iter_lines(stream: IO, limit: int = LINE_LIMIT) -> Iterator:
    """Yield lines of at most *limit* units from *stream*.

    *limit* counts bytes for a binary stream and characters for a text
    stream. A longer line comes back in consecutive chunks, each of which
    is classified on its own.
    """
    newline = b"\n" if is_binary_stream(stream) else "\n"
    while True:
        line = stream.readline(limit)
        if not line:
            return
        if len(line) == limit and not line.endswith(newline):
            logger.debug("line exceeds %d units, splitting", limit)
        yield line


def decode_line(raw: bytes) -> str:
    """Decode a raw line as UTF-8, keeping undecodable bytes as surrogates.

    ``line.encode("utf-8", "surrogateescape")`` gives the original bytes back.
    """
    return raw.decode(SOURCE_ENCODING, "surrogateescape")


# ---------------------------------------------------------------------------
# Comment stripping
# ---------------------------------------------------------------------------

def strip_comment(line: str) -> str:
    """Truncate *line* at its first comment marker, keeping a trailing LF."""
    m = _COMMENT_RE.search(line)
    if m is None:
        return line
    if line.endswith("\n"):
        return line[: m.start()] + "\n"
    return line[: m.start()]


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

def is_section_header(line: str) -> bool:
    return line.startswith("[")


def classify_line(line: str) -> LineKind:
    """Classify a comment-stripped line. A section header is never an entry."""
    if is_section_header(line):
        return LineKind.SECTION
    if "=" in line:
        return LineKind.ENTRY
    if not line.strip():
        return LineKind.BLANK
    return LineKind.OTHER


# ---------------------------------------------------------------------------
# Section headers and entries
# ---------------------------------------------------------------------------

def parse_section_name(line: str) -> str:
    """Return the text between ``[`` and the next ``]``.

    An unterminated header runs to the end of the line, terminator excluded.
    """
    body = line[line.index("[") + 1 :].rstrip("\r\n")
    end = body.find("]")
    return body if end == -1 else body[:end]


def parse_entry(line: str) -> Entry:
    """Split *line* at its first ``=`` into an Entry.

    *line* must contain ``=``; callers check with :func:`classify_line`.

    - Every space before ``=`` is dropped from the name, including inner ones:
      ``k e y=v`` → ``key``.
    - Leading spaces of the value are skipped, the value stops at CR or LF,
      and trailing spaces are trimmed.
    """
    key, _, rest = line.partition("=")
    name = key.replace(" ", "")
    value = _VALUE_END_RE.split(rest.lstrip(" "), maxsplit=1)[0].rstrip(" ")
    return Entry(name=name, value=value)
