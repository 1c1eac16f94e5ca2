"""Name-based lookup over a parsed Document."""

from __future__ import annotations

from .model import Document, Entry, Section


def find_section(document: Document, name: str) -> Section | None:
    """Return the first section named *name* (exact, case-sensitive)."""
    for section in document.sections:
        if section.name == name:
            return section
    return None


def find_entry(section: Section, name: str) -> Entry | None:
    """Return the first entry of *section* whose own name is *name*."""
    for entry in section.entries:
        if entry.name == name:
            return entry
    return None


def find_value(
    document: Document,
    section: str,
    name: str,
    default: str | None = None,
) -> str | None:
    """Value of entry *name* in section *section*, or *default*.

    Only the first section with that name is searched.
    """
    sec = find_section(document, section)
    if sec is None:
        return default
    entry = find_entry(sec, name)
    if entry is None:
        return default
    return entry.value
