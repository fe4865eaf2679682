"""
Factory for creating appropriate document extractors.

Also provides the uniform "document -> lines" contract used by the parser.
"""

from pathlib import Path
from typing import Optional

from resume_builder.nlp.exceptions import (
    ExtractionError,
    UnsupportedMediaTypeError,
)
from resume_builder.utils.constants import EXTENSION_MEDIA_TYPES, MediaType
from resume_builder.utils.logger import get_logger

from .base import BaseExtractor, ExtractionResult
from .docx_extractor import DOCXExtractor
from .pdf_extractor import PDFExtractor
from .text_extractor import TextExtractor

logger = get_logger(__name__)


class ExtractorFactory:
    """
    Factory class for creating document extractors.

    Selects the appropriate extractor from a MIME type or a file extension.
    """

    _extractors: list[BaseExtractor] = []
    _initialized: bool = False

    @classmethod
    def _initialize(cls) -> None:
        """Initialize available extractors."""
        if cls._initialized:
            return

        cls._extractors = [
            PDFExtractor(),
            DOCXExtractor(),
            TextExtractor(),
        ]
        cls._initialized = True

    @classmethod
    def get_extractor(cls, file_path: str | Path) -> Optional[BaseExtractor]:
        """
        Get the appropriate extractor for a file.

        Args:
            file_path: Path to the file or filename

        Returns:
            Appropriate extractor or None if no extractor supports the format
        """
        cls._initialize()

        for extractor in cls._extractors:
            if extractor.can_extract(file_path):
                return extractor

        logger.warning(f"No extractor found for extension: {Path(file_path).suffix.lower()}")
        return None

    @classmethod
    def get_extractor_for_media_type(cls, media_type: str) -> Optional[BaseExtractor]:
        """Get the extractor registered for a MIME type."""
        cls._initialize()

        for extractor in cls._extractors:
            if media_type in extractor.supported_media_types:
                return extractor

        logger.warning(f"No extractor found for media type: {media_type}")
        return None

    @classmethod
    def extract(
        cls, file_path: str | Path, media_type: Optional[str] = None
    ) -> ExtractionResult:
        """
        Extract text from a file using the appropriate extractor.

        Args:
            file_path: Path to the file
            media_type: MIME type; the extension decides when omitted

        Returns:
            ExtractionResult with extracted text or error
        """
        if media_type is not None:
            extractor = cls.get_extractor_for_media_type(media_type)
        else:
            extractor = cls.get_extractor(file_path)

        if extractor is None:
            return ExtractionResult(
                text="",
                success=False,
                error_message=f"Unsupported file type: {media_type or Path(file_path).suffix}",
            )

        return extractor.extract(file_path)

    @classmethod
    def extract_from_bytes(
        cls, content: bytes, media_type: str, filename: str = "document"
    ) -> ExtractionResult:
        """
        Extract text from file bytes using the extractor for the media type.

        Args:
            content: Raw file bytes
            media_type: MIME type of the content
            filename: Original filename, used in log messages

        Returns:
            ExtractionResult with extracted text or error
        """
        extractor = cls.get_extractor_for_media_type(media_type)

        if extractor is None:
            return ExtractionResult(
                text="",
                success=False,
                error_message=f"Unsupported file type: {media_type}",
            )

        return extractor.extract_from_bytes(content, filename)

    @classmethod
    def get_supported_extensions(cls) -> list[str]:
        """Get list of all supported file extensions."""
        cls._initialize()

        extensions = []
        for extractor in cls._extractors:
            extensions.extend(extractor.supported_extensions)
        return extensions

    @classmethod
    def is_supported(cls, file_path: str | Path) -> bool:
        """Check if a file format is supported."""
        return cls.get_extractor(file_path) is not None


def media_type_for_path(file_path: str | Path) -> MediaType:
    """Infer the upload MIME type from a file extension."""
    extension = Path(file_path).suffix.lower()
    try:
        return EXTENSION_MEDIA_TYPES[extension]
    except KeyError:
        raise UnsupportedMediaTypeError(extension or str(file_path)) from None


def _coerce_media_type(media_type: str | MediaType) -> MediaType:
    try:
        return MediaType(media_type)
    except ValueError:
        raise UnsupportedMediaTypeError(str(media_type)) from None


def _raise_for_failed_result(result: ExtractionResult, media: MediaType) -> None:
    message = f"Failed to extract text from {media.value}: {result.error_message}"
    if media.is_word:
        message += " (Word documents must be saved in .docx format)"
    raise ExtractionError(
        message,
        media_type=media.value,
        cause=result.error,
    ) from result.error


def _log_warnings(result: ExtractionResult) -> None:
    for warning in result.warnings:
        logger.debug(f"Extraction warning: {warning}")


def extract_text(source: bytes | str, media_type: str | MediaType) -> str:
    """
    Decode a document into text.

    Plain text may be given as ``str`` (used as-is) or ``bytes``; PDF and Word
    documents must be given as ``bytes``.

    Raises:
        UnsupportedMediaTypeError: media type is not a supported upload type
        ExtractionError: the decoder could not read the document
    """
    media = _coerce_media_type(media_type)

    if isinstance(source, str):
        if media is not MediaType.TEXT:
            raise ExtractionError(
                f"Expected raw bytes for {media.value}, got text",
                media_type=media.value,
            )
        result = TextExtractor().extract_from_text(source)
    else:
        result = ExtractorFactory.extract_from_bytes(source, media.value)

    if not result.success:
        _raise_for_failed_result(result, media)

    _log_warnings(result)
    return result.text


def extract_file_text(
    file_path: str | Path, media_type: str | MediaType | None = None
) -> str:
    """
    Read a document from disk and decode it into text.

    The media type is inferred from the file extension unless given.

    Raises:
        UnsupportedMediaTypeError: media type is not a supported upload type
        FileNotFoundError: the path does not exist
        ExtractionError: the file is too large or could not be read
    """
    path = Path(file_path)
    media = _coerce_media_type(media_type) if media_type else media_type_for_path(path)

    result = ExtractorFactory.extract(path, media.value)
    if not result.success:
        if isinstance(result.error, FileNotFoundError):
            raise result.error
        _raise_for_failed_result(result, media)

    _log_warnings(result)
    return result.text


def split_lines(text: str) -> list[str]:
    """Split text on newlines, trim each line and drop empty lines."""
    return [line.strip() for line in text.split("\n") if line.strip()]


def extract_lines(source: bytes | str, media_type: str | MediaType) -> list[str]:
    """Decode a document into its ordered, non-empty, trimmed text lines."""
    return split_lines(extract_text(source, media_type))


def extract_file_lines(
    file_path: str | Path, media_type: str | MediaType | None = None
) -> list[str]:
    """Read a document from disk into its ordered, non-empty, trimmed lines."""
    return split_lines(extract_file_text(file_path, media_type))
