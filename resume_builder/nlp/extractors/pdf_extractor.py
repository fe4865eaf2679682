"""
PDF document text extractor.

Uses two extraction backends:
1. pdfplumber - Primary method, good for structured text
2. pypdf - Fallback method
"""

import io
from pathlib import Path

import pdfplumber
from pypdf import PdfReader

from resume_builder.utils.constants import MediaType
from resume_builder.utils.logger import get_logger

from .base import BaseExtractor, ExtractionResult

logger = get_logger(__name__)

# pdfplumber output of this length or less triggers the pypdf fallback
MIN_PRIMARY_TEXT_LENGTH = 50


class PDFExtractor(BaseExtractor):
    """Extractor for PDF documents."""

    @property
    def supported_extensions(self) -> tuple[str, ...]:
        return (".pdf",)

    @property
    def supported_media_types(self) -> tuple[str, ...]:
        return (MediaType.PDF.value,)

    def extract(self, file_path: str | Path) -> ExtractionResult:
        """Extract text from a PDF file."""
        try:
            path = self._validate_file(file_path)
            with open(path, "rb") as f:
                return self._extract_from_file_object(f)
        except Exception as e:
            logger.error(f"PDF extraction failed for {file_path}: {e}")
            return self._create_error_result(e)

    def extract_from_bytes(
        self, content: bytes, filename: str = "document.pdf"
    ) -> ExtractionResult:
        """Extract text from PDF bytes."""
        try:
            return self._extract_from_file_object(io.BytesIO(content))
        except Exception as e:
            logger.error(f"PDF extraction from bytes failed for {filename}: {e}")
            return self._create_error_result(e)

    def _extract_from_file_object(self, file_obj) -> ExtractionResult:
        """
        Extract text from a file-like object.

        Raises the last backend error when neither backend could read the file.
        """
        warnings = []
        primary_error = None

        try:
            text, page_count, metadata = self._extract_with_pdfplumber(file_obj)
        except Exception as e:
            logger.debug(f"pdfplumber extraction error: {e}")
            primary_error = e
            text, page_count, metadata = "", 0, {}

        if len(text.strip()) > MIN_PRIMARY_TEXT_LENGTH:
            return ExtractionResult(
                text=text,
                page_count=page_count,
                metadata=metadata,
                warnings=warnings,
            )

        warnings.append("pdfplumber extraction yielded limited text, trying pypdf")
        file_obj.seek(0)

        try:
            fallback_text, page_count, metadata = self._extract_with_pypdf(file_obj)
        except Exception as e:
            logger.debug(f"pypdf extraction error: {e}")
            if primary_error is not None:
                raise e from primary_error
            # pdfplumber opened the file; keep whatever it found
            fallback_text = ""

        if len(fallback_text.strip()) >= len(text.strip()):
            text = fallback_text

        if len(text.strip()) < 10:
            warnings.append("PDF may be image-based or encrypted")

        return ExtractionResult(
            text=text,
            page_count=page_count,
            metadata=metadata,
            warnings=warnings,
        )

    def _extract_with_pdfplumber(self, file_obj) -> tuple[str, int, dict]:
        """Extract text using pdfplumber."""
        text_parts = []
        metadata = {"extractor": "pdfplumber"}

        with pdfplumber.open(file_obj) as pdf:
            page_count = len(pdf.pages)
            metadata["page_count"] = page_count

            if pdf.metadata:
                metadata["pdf_metadata"] = {
                    k: v for k, v in pdf.metadata.items()
                    if v and isinstance(v, str)
                }

            for page in pdf.pages:
                page_text = page.extract_text()
                if page_text:
                    text_parts.append(page_text)

        return "\n\n".join(text_parts), page_count, metadata

    def _extract_with_pypdf(self, file_obj) -> tuple[str, int, dict]:
        """Extract text using pypdf."""
        text_parts = []
        metadata = {"extractor": "pypdf"}

        reader = PdfReader(file_obj)
        page_count = len(reader.pages)
        metadata["page_count"] = page_count

        if reader.metadata:
            metadata["pdf_metadata"] = {
                k: str(v) for k, v in reader.metadata.items()
                if v and k.startswith("/")
            }

        for page in reader.pages:
            page_text = page.extract_text()
            if page_text:
                text_parts.append(page_text)

        return "\n\n".join(text_parts), page_count, metadata
