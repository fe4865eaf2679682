"""
File content extractors for resume documents.

Supports extraction of text from PDF, DOCX, DOC and plain text files.
"""

from .base import BaseExtractor, ExtractionResult
from .pdf_extractor import PDFExtractor
from .docx_extractor import DOCXExtractor
from .text_extractor import TextExtractor
from .extractor_factory import (
    ExtractorFactory,
    extract_lines,
    extract_text,
    extract_file_lines,
    extract_file_text,
    media_type_for_path,
    split_lines,
)

__all__ = [
    "BaseExtractor",
    "ExtractionResult",
    "PDFExtractor",
    "DOCXExtractor",
    "TextExtractor",
    "ExtractorFactory",
    "extract_lines",
    "extract_text",
    "extract_file_lines",
    "extract_file_text",
    "media_type_for_path",
    "split_lines",
]
