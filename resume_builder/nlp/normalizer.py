"""
Resume record normalization.

Fills required contact fields with placeholders and drops empty list items
and entries without their identifying field. Normalizing an already
normalized record returns an equal record.
"""

from resume_builder.data.models import ResumeRecord
from resume_builder.utils.constants import PLACEHOLDERS
from resume_builder.utils.logger import get_logger

logger = get_logger(__name__)


def _is_blank(value: str) -> bool:
    return not value or not value.strip()


class ResumeNormalizer:
    """Final clean-up stage of the parsing pipeline."""

    def normalize(self, record: ResumeRecord) -> ResumeRecord:
        """
        Return a normalized copy of the record.

        Args:
            record: Record assembled from the section parsers

        Returns:
            New ResumeRecord; the input is left untouched
        """
        update: dict = {}

        for field_name, placeholder in PLACEHOLDERS.items():
            if _is_blank(getattr(record, field_name)):
                update[field_name] = placeholder

        if update:
            logger.debug(f"Using placeholders for: {sorted(update)}")

        update["skills"] = [s for s in record.skills if not _is_blank(s)]
        update["languages"] = [lang for lang in record.languages if not _is_blank(lang)]

        update["experience"] = [e for e in record.experience if not _is_blank(e.title)]
        update["education"] = [e for e in record.education if not _is_blank(e.degree)]
        update["achievements"] = [
            a for a in record.achievements if not _is_blank(a.key_achievements)
        ]
        update["projects"] = [p for p in record.projects if not _is_blank(p.title)]
        update["certifications"] = [c for c in record.certifications if not _is_blank(c.title)]
        update["courses"] = [c for c in record.courses if not _is_blank(c.title)]

        return record.model_copy(update=update)


def normalize_record(record: ResumeRecord) -> ResumeRecord:
    """Normalize a record with the default normalizer."""
    return ResumeNormalizer().normalize(record)
