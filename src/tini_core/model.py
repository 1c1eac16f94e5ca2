"""Document model: Document owns Sections, Section owns Entries."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .errors import DocumentReleasedError

logger = logging.getLogger(__name__)


@dataclass
class Entry:
    name: str
    value: str  # raw text, never coerced


@dataclass
class Section:
    """A named, ordered group of entries. Duplicate entry names are kept."""

    name: str
    entries: list[Entry] = field(default_factory=list)

    def add_entry(self, entry: Entry) -> Entry:
        self.entries.append(entry)
        return entry

    def release(self) -> None:
        self.entries.clear()


@dataclass
class Document:
    """The parsed result of an INI source: sections in source order."""

    sections: list[Section] = field(default_factory=list)

    def __post_init__(self) -> None:
        # Not a dataclass field; set once by release()
        self._released = False

    # -- Convenience accessors ------------------------------------------

    @property
    def section_names(self) -> list[str]:
        return [s.name for s in self.sections]

    @property
    def current_section(self) -> Section | None:
        """The most recently added section, or ``None`` for an empty document."""
        return self.sections[-1] if self.sections else None

    @property
    def released(self) -> bool:
        return self._released

    # -- Construction ---------------------------------------------------

    def add_section(self, name: str) -> Section:
        """Append a new empty section. Same-named sections are never merged."""
        section = Section(name=name)
        self.sections.append(section)
        return section

    # -- Teardown -------------------------------------------------------

    def release(self) -> None:
        """Release every section's entries, then the sections themselves.

        Must be called at most once; a second call raises
        :class:`DocumentReleasedError`.
        """
        if self._released:
            raise DocumentReleasedError("document already released")
        for section in self.sections:
            section.release()
        logger.debug("released document with %d section(s)", len(self.sections))
        self.sections.clear()
        self._released = True


def release(document: Document) -> None:
    """Release *document* and everything it owns."""
    document.release()
