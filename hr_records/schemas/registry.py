"""Entity Registry — dispatch validation by entity name.

Invariants:
    - Every EntityName has exactly one EntityValidator
    - Unknown names raise UnknownEntityError; malformed payloads never raise
"""

from typing import Any

from hr_records.core.domain_types import EntityName
from hr_records.core.errors import UnknownEntityError
from hr_records.core.validate_record import EntityValidator, ValidationResult
from hr_records.schemas.additional_information import ADDITIONAL_INFORMATION
from hr_records.schemas.address import PERMANENT_ADDRESS, PRESENT_ADDRESS
from hr_records.schemas.contact_information import CONTACT_INFORMATION
from hr_records.schemas.employee import EMPLOYEE


ENTITY_VALIDATORS: dict[EntityName, EntityValidator] = {
    v.entity: v for v in (
        PRESENT_ADDRESS, PERMANENT_ADDRESS, CONTACT_INFORMATION,
        ADDITIONAL_INFORMATION, EMPLOYEE,
    )
}


def get_entity_validator(entity: EntityName | str) -> EntityValidator:
    try:
        return ENTITY_VALIDATORS[EntityName(entity)]
    except ValueError:
        raise UnknownEntityError(str(entity)) from None


def validate_stored(entity: EntityName | str, raw: Any) -> ValidationResult:
    """Validate a record read back from persistence."""
    return get_entity_validator(entity).validate_stored(raw)


def validate_create_input(entity: EntityName | str, raw: Any) -> ValidationResult:
    """Validate an external create payload before it is persisted."""
    return get_entity_validator(entity).validate_create_input(raw)
