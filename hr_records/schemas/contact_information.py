"""ContactInformation Schema — loosely typed contact details for spouse / emergency contact.

Invariants:
    - Every business field is optional and non-nullable
    - gender is free text here, unlike Employee.gender; email is not format-checked
    - Create shape requires nothing

Design Decisions:
    - Free-text gender kept on purpose: unifying it with the Gender enum is an open question
"""

from hr_records.core.domain_types import EntityName
from hr_records.core.primitives import CONTACT_INFORMATION_ID, DATE_LIKE, TEXT
from hr_records.core.record_schema import FieldSpec, RecordSchema
from hr_records.core.validate_record import EntityValidator


CONTACT_INFORMATION_SCHEMA = RecordSchema("ContactInformation", (
    FieldSpec("id", "id", CONTACT_INFORMATION_ID),
    FieldSpec("full_name", "fullName", TEXT, required=False),
    FieldSpec("date_of_birth", "dateOfBirth", DATE_LIKE, required=False),
    FieldSpec("gender", "gender", TEXT, required=False),
    FieldSpec("occupation", "occupation", TEXT, required=False),
    FieldSpec("nid", "nid", TEXT, required=False),
    FieldSpec("mobile_number", "mobileNumber", TEXT, required=False),
    FieldSpec("email", "email", TEXT, required=False),
    FieldSpec("created_at", "createdAt", DATE_LIKE, required=False),
))

CONTACT_INFORMATION = EntityValidator(
    EntityName.CONTACT_INFORMATION, CONTACT_INFORMATION_SCHEMA,
    server_assigned={"id", "created_at"}, always_required=(),
)

ContactInformation = CONTACT_INFORMATION.stored_model
ContactInformationCreate = CONTACT_INFORMATION.create_model
