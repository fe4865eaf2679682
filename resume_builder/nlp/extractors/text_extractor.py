"""
Plain text document extractor.
"""

import codecs
from pathlib import Path

from resume_builder.utils.constants import MediaType
from resume_builder.utils.logger import get_logger

from .base import BaseExtractor, ExtractionResult

logger = get_logger(__name__)

ENCODINGS = ("utf-8-sig", "cp1252")


class TextExtractor(BaseExtractor):
    """Extractor for plain text documents."""

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".txt", ".text", ".md")

    @property
    def supported_media_types(self) -> tuple[str, ...]:
        return (MediaType.TEXT.value,)

    def extract(self, file_path: str | Path) -> ExtractionResult:
        """Extract text from a text file."""
        try:
            path = self._validate_file(file_path)
            return self._decode(path.read_bytes())
        except Exception as e:
            logger.error(f"Text extraction failed for {file_path}: {e}")
            return self._create_error_result(e)

    def extract_from_bytes(
        self, content: bytes, filename: str = "document.txt"
    ) -> ExtractionResult:
        """Extract text from bytes."""
        try:
            return self._decode(content)
        except Exception as e:
            logger.error(f"Text extraction from bytes failed for {filename}: {e}")
            return self._create_error_result(e)

    def extract_from_text(self, text: str) -> ExtractionResult:
        """Wrap text that is already decoded."""
        return self._build_result(text, "str")

    def _decode(self, content: bytes) -> ExtractionResult:
        """Decode bytes, trying the common resume encodings in order."""
        encodings = ENCODINGS
        if content.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
            encodings = ("utf-16",) + encodings

        for encoding in encodings:
            try:
                return self._build_result(content.decode(encoding), encoding)
            except UnicodeDecodeError:
                continue

        # latin-1 maps every byte, so it is the final fallback
        return self._build_result(content.decode("latin-1"), "latin-1")

    def _build_result(self, text: str, encoding: str) -> ExtractionResult:
        # Estimate page count (roughly 3000 chars per page)
        page_count = max(1, len(text) // 3000)

        return ExtractionResult(
            text=text,
            page_count=page_count,
            metadata={
                "extractor": "plain_text",
                "encoding": encoding,
            },
        )
