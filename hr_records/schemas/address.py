"""Address Schemas — present and permanent addresses share one geographic table.

Invariants:
    - All seven geographic fields are required in both stored and create shapes
    - roadNo is optional AND nullable; legacy "n/a" sentinels are plain strings
    - id and createdAt are server-assigned

Design Decisions:
    - One table builder for both entities: identical shape, distinct names
      (ADR: two entities, not one, because they persist separately)
"""

from hr_records.core.domain_types import EntityName
from hr_records.core.primitives import ADDRESS_ID, DATE_LIKE, TEXT
from hr_records.core.record_schema import FieldSpec, RecordSchema
from hr_records.core.validate_record import EntityValidator


GEOGRAPHIC_FIELDS: tuple[str, ...] = (
    "division", "district", "upazila_or_thana", "post_office",
    "post_code", "block", "house_no_or_village",
)
SERVER_ASSIGNED: frozenset[str] = frozenset({"id", "created_at"})


def _address_schema(name: str) -> RecordSchema:
    return RecordSchema(name, (
        FieldSpec("id", "id", ADDRESS_ID),
        FieldSpec("division", "division", TEXT),
        FieldSpec("district", "district", TEXT),
        FieldSpec("upazila_or_thana", "upazilaOrThana", TEXT),
        FieldSpec("post_office", "postOffice", TEXT),
        FieldSpec("post_code", "postCode", TEXT),
        FieldSpec("block", "block", TEXT),
        FieldSpec("house_no_or_village", "houseNoOrVillage", TEXT),
        FieldSpec("road_no", "roadNo", TEXT, required=False, nullable=True),
        FieldSpec("created_at", "createdAt", DATE_LIKE, required=False),
    ))


PRESENT_ADDRESS_SCHEMA = _address_schema("PresentAddress")
PERMANENT_ADDRESS_SCHEMA = _address_schema("PermanentAddress")

PRESENT_ADDRESS = EntityValidator(
    EntityName.PRESENT_ADDRESS, PRESENT_ADDRESS_SCHEMA,
    SERVER_ASSIGNED, GEOGRAPHIC_FIELDS,
)
PERMANENT_ADDRESS = EntityValidator(
    EntityName.PERMANENT_ADDRESS, PERMANENT_ADDRESS_SCHEMA,
    SERVER_ASSIGNED, GEOGRAPHIC_FIELDS,
)

PresentAddress = PRESENT_ADDRESS.stored_model
PresentAddressCreate = PRESENT_ADDRESS.create_model
PermanentAddress = PERMANENT_ADDRESS.stored_model
PermanentAddressCreate = PERMANENT_ADDRESS.create_model
