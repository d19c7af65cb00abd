"""Entity validation rules used by the create and update use cases.

Every check returns the message key suffix of the first violated rule (for
example ``"name_too_short"``) or None. Use cases prefix it with
``"<entity>.validation."``.
"""

from typing import Optional

from ..config.constants import (
    MAX_DESCRIPTION_LENGTH,
    MAX_NAME_LENGTH,
    MIN_ID_LENGTH,
    MIN_NAME_LENGTH,
)
from ..domain.base import EntityDefinition, Record


class EntityValidationRules:
    """Centralized validation rules for entity records."""

    ID_MIN_LENGTH = MIN_ID_LENGTH
    NAME_MIN_LENGTH = MIN_NAME_LENGTH
    NAME_MAX_LENGTH = MAX_NAME_LENGTH
    DESCRIPTION_MAX_LENGTH = MAX_DESCRIPTION_LENGTH

    @staticmethod
    def validate_id(record_id: Optional[str], min_length: int = MIN_ID_LENGTH) -> Optional[str]:
        if not record_id or not record_id.strip():
            return "id_required"
        if len(record_id.strip()) < min_length:
            return "id_too_short"
        return None

    @staticmethod
    def validate_name(name: Optional[str]) -> Optional[str]:
        if not name or not isinstance(name, str) or not name.strip():
            return "name_required"

        normalized = name.strip()
        if len(normalized) < EntityValidationRules.NAME_MIN_LENGTH:
            return "name_too_short"
        if len(normalized) > EntityValidationRules.NAME_MAX_LENGTH:
            return "name_too_long"
        return None

    @staticmethod
    def validate_description(description: Optional[str]) -> Optional[str]:
        if not description:
            return None
        if not isinstance(description, str):
            return "description_invalid"
        if len(description.strip()) > EntityValidationRules.DESCRIPTION_MAX_LENGTH:
            return "description_too_long"
        return None

    @staticmethod
    def validate_record(definition: EntityDefinition, record: Record) -> Optional[str]:
        """Name and description rules, then the entity's own rules."""
        if definition.name_field:
            problem = EntityValidationRules.validate_name(getattr(record, definition.name_field, None))
            if problem:
                return problem

        problem = EntityValidationRules.validate_description(getattr(record, "description", None))
        if problem:
            return problem

        return definition.validate(record)
