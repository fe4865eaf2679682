"""
Services built on top of the parsing pipeline.
"""

from resume_builder.services.enhancement import (
    EnhancementError,
    ResumeEnhancer,
    clean_enhanced_text,
    enhance_full_resume,
    resolve_enhancement_request,
)
from resume_builder.services.upload_validation import UploadValidation, validate_upload

__all__ = [
    "EnhancementError",
    "ResumeEnhancer",
    "clean_enhanced_text",
    "enhance_full_resume",
    "resolve_enhancement_request",
    "UploadValidation",
    "validate_upload",
]
