"""
Errors raised by the resume parsing pipeline.

Only document decoding and empty documents are errors. Lines or sections
the heuristics cannot classify never raise; they simply yield less data.
"""

from typing import Optional


class ResumeParseError(Exception):
    """Base class for resume parsing failures."""


class UnsupportedMediaTypeError(ResumeParseError):
    """The document's media type is not one the parser can read."""

    def __init__(self, media_type: str):
        super().__init__(f"Unsupported file type: {media_type}")
        self.media_type = media_type


class ExtractionError(ResumeParseError):
    """The source bytes could not be decoded into text."""

    def __init__(
        self,
        message: str,
        media_type: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.media_type = media_type
        self.cause = cause


class EmptyContentError(ResumeParseError):
    """Decoding succeeded but the document has no non-empty lines."""

    def __init__(self, message: str = "No readable content found in the file"):
        super().__init__(message)
