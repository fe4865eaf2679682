"""
Summary/objective/profile parser for resumes.
"""

from dataclasses import dataclass


@dataclass
class SummaryParseResult:
    """Result of summary parsing."""

    text: str = ""


class SummaryParser:
    """Parser for extracting the professional summary from section lines."""

    def parse(self, lines: list[str]) -> SummaryParseResult:
        """Join the summary lines into a single paragraph."""
        return SummaryParseResult(text=" ".join(lines).strip())
