"""
Pre-checks for uploaded resume files.
"""

from dataclasses import dataclass, field
from typing import Optional

from resume_builder.utils.config import get_settings
from resume_builder.utils.constants import SUPPORTED_MEDIA_TYPES, MediaType
from resume_builder.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class UploadValidation:
    """Outcome of validating an upload."""

    is_valid: bool = True
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def validate_upload(
    filename: Optional[str], size: Optional[int], media_type: Optional[str]
) -> UploadValidation:
    """
    Check an uploaded file before it is parsed.

    Args:
        filename: Original file name, or None when nothing was uploaded
        size: File size in bytes
        media_type: MIME type reported for the upload

    Returns:
        UploadValidation with errors (blocking) and warnings (informational)
    """
    if not filename:
        return UploadValidation(is_valid=False, errors=["No file provided"])

    settings = get_settings().upload
    errors: list[str] = []
    warnings: list[str] = []
    size = size or 0

    if size > settings.max_file_size:
        errors.append(f"File size exceeds {settings.max_file_size_mb}MB limit")

    if media_type not in SUPPORTED_MEDIA_TYPES:
        errors.append("Unsupported file type")

    if media_type == MediaType.TEXT.value and size < settings.small_text_warning_bytes:
        warnings.append("Text file seems very small, parsing may be limited")

    if errors:
        logger.warning(f"Upload rejected: {filename} ({'; '.join(errors)})")

    return UploadValidation(is_valid=not errors, errors=errors, warnings=warnings)
