"""AdditionalInformation Schema — biographical details attached to an employee."""

from hr_records.core.domain_types import EntityName
from hr_records.core.primitives import (
    ADDITIONAL_INFORMATION_ID, DATE_LIKE, MARITAL_STATUS, TEXT,
)
from hr_records.core.record_schema import FieldSpec, RecordSchema
from hr_records.core.validate_record import EntityValidator


ADDITIONAL_INFORMATION_SCHEMA = RecordSchema("AdditionalInformation", (
    FieldSpec("id", "id", ADDITIONAL_INFORMATION_ID),
    FieldSpec("father_name", "fatherName", TEXT, required=False, nullable=True),
    FieldSpec("mother_name", "motherName", TEXT, required=False, nullable=True),
    FieldSpec("national_id", "nationalId", TEXT, required=False, nullable=True),
    FieldSpec("place_of_birth", "placeOfBirth", TEXT, required=False, nullable=True),
    FieldSpec("marital_status", "maritalStatus", MARITAL_STATUS, required=False),
    FieldSpec("e_tin", "eTIN", TEXT, required=False, nullable=True),
    FieldSpec("program", "program", TEXT, required=False, nullable=True),
    FieldSpec("unit", "unit", TEXT, required=False, nullable=True),
    # pre-retirement leave
    FieldSpec("prl_date", "prlDate", DATE_LIKE, required=False, nullable=True),
    FieldSpec("date_of_regularity", "dateofRegularity", DATE_LIKE, required=False, nullable=True),
    FieldSpec("created_at", "createdAt", DATE_LIKE, required=False),
))

ADDITIONAL_INFORMATION = EntityValidator(
    EntityName.ADDITIONAL_INFORMATION, ADDITIONAL_INFORMATION_SCHEMA,
    server_assigned={"id", "created_at"}, always_required=(),
)

AdditionalInformation = ADDITIONAL_INFORMATION.stored_model
AdditionalInformationCreate = ADDITIONAL_INFORMATION.create_model
