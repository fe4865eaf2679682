"""
Data layer for the resume builder.

Submodules:
- models: Pydantic models for the structured resume record
"""

from .models import ResumeRecord

__all__ = [
    "ResumeRecord",
]
