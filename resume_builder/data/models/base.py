"""
Base model classes for resume builder data models.

Provides the shared pydantic configuration for record models.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class EmbeddedModel(BaseModel):
    """
    Base model for records and their embedded entries.

    Field names are snake_case in Python and camelCase on the wire; both
    spellings are accepted when validating. Instances are frozen: callers
    derive modified copies with ``model_copy(update=...)``.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        frozen=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert the model to its persisted (camelCase) dictionary shape."""
        return self.model_dump(by_alias=True)
