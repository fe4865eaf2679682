"""
Shared entry grouping for multi-line resume sections.

Experience, education and projects are read the same way: a "start" line
opens a new entry, the following lines fill in its fields, and the entry is
closed when the next start line or the end of the section is reached.
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

EntryT = TypeVar("EntryT")


class EntryParser(ABC, Generic[EntryT]):
    """
    Base class for parsers that build one entry from several lines.

    The only state is the entry being built (``None`` until the first start
    line). Lines that arrive before any entry is open are ignored.
    """

    @abstractmethod
    def is_entry_start(self, line: str) -> bool:
        """Return True if the line opens a new entry."""

    @abstractmethod
    def start_entry(self, line: str) -> EntryT:
        """Create a new entry from its start line."""

    @abstractmethod
    def add_line(self, entry: EntryT, line: str) -> None:
        """Route a non-start line into the open entry."""

    def parse_entries(self, lines: list[str]) -> list[EntryT]:
        """Group lines into entries, preserving document order."""
        entries: list[EntryT] = []
        current: Optional[EntryT] = None

        for line in lines:
            if self.is_entry_start(line):
                if current is not None:
                    entries.append(current)
                current = self.start_entry(line)
            elif current is not None:
                self.add_line(current, line)

        if current is not None:
            entries.append(current)

        return entries
