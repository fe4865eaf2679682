"""
Word document text extractor.

Uses python-docx for DOCX files. Files labelled as legacy Word
(application/msword) are also opened with python-docx, since uploads are
frequently OOXML documents with a .doc name; true binary .doc files fail.
"""

import io
from pathlib import Path

from docx import Document

from resume_builder.utils.constants import MediaType
from resume_builder.utils.logger import get_logger

from .base import BaseExtractor, ExtractionResult

logger = get_logger(__name__)


class DOCXExtractor(BaseExtractor):
    """Extractor for Microsoft Word documents (.docx, .doc)."""

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".docx", ".doc")

    @property
    def supported_media_types(self) -> tuple[str, ...]:
        return (MediaType.DOCX.value, MediaType.DOC.value)

    def extract(self, file_path: str | Path) -> ExtractionResult:
        """Extract text from a DOCX/DOC file."""
        try:
            path = self._validate_file(file_path)
            result = self._process_document(Document(str(path)))
            if path.suffix.lower() == ".doc":
                result.warnings.append("Legacy .doc name - read as DOCX content")
            return result
        except Exception as e:
            logger.error(f"Word extraction failed for {file_path}: {e}")
            return self._create_error_result(e)

    def extract_from_bytes(
        self, content: bytes, filename: str = "document.docx"
    ) -> ExtractionResult:
        """Extract text from DOCX bytes."""
        try:
            return self._process_document(Document(io.BytesIO(content)))
        except Exception as e:
            logger.error(f"Word extraction from bytes failed for {filename}: {e}")
            return self._create_error_result(e)

    def _process_document(self, doc) -> ExtractionResult:
        """Process a python-docx Document object."""
        text_parts = []
        metadata = {"extractor": "python-docx"}
        warnings = []

        props = doc.core_properties
        metadata["document_properties"] = {
            "author": props.author,
            "title": props.title,
            "created": str(props.created) if props.created else None,
            "modified": str(props.modified) if props.modified else None,
        }

        for paragraph in doc.paragraphs:
            text = paragraph.text.strip()
            if text:
                text_parts.append(text)

        # Table rows become one line each, cells separated like a skills list
        for table in doc.tables:
            for row in table.rows:
                row_text = [cell.text.strip() for cell in row.cells if cell.text.strip()]
                if row_text:
                    text_parts.append(" | ".join(row_text))

        # Count sections as "pages" (approximate)
        section_count = len(doc.sections) if doc.sections else 1

        full_text = "\n".join(text_parts)

        if not full_text.strip():
            warnings.append("Document appears to be empty or contains only images")

        return ExtractionResult(
            text=full_text,
            page_count=section_count,
            metadata=metadata,
            warnings=warnings,
        )
