"""Shared base model for stored documents and request payloads."""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class KanbanModel(BaseModel):
    """Base model with camelCase aliases.

    Fields may be populated either by their Python name or by their
    alias.  ``to_document`` leaves out fields that were never set, so
    a task created without a description has no ``description`` key
    at all rather than a ``null`` placeholder.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)
