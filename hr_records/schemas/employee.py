"""Employee Schema — the aggregate, linking value objects by identifier only.

Invariants:
    - Relations are Identifier fields; nothing is dereferenced or nested
    - spouseInformationId is the only optional-and-nullable relation
    - id, createdAt, updatedAt are server-assigned
    - ALWAYS_REQUIRED_ON_CREATE is the single source of truth for a valid create payload

Design Decisions:
    - Non-recursive on purpose: no circular types, validation decoupled from retrieval
    - Wire name addtionalInformationId kept as persisted (ADR: payload compatibility)
"""

from hr_records.core.domain_types import EntityName
from hr_records.core.primitives import (
    ADDITIONAL_INFORMATION_ID, ADDRESS_ID, CONTACT_INFORMATION_ID, DATE_LIKE,
    EMAIL, EMPLOYEE_ID, FLAG, GENDER, TEXT,
)
from hr_records.core.record_schema import FieldSpec, RecordSchema
from hr_records.core.validate_record import EntityValidator


EMPLOYEE_SCHEMA = RecordSchema("Employee", (
    FieldSpec("id", "id", EMPLOYEE_ID),
    FieldSpec("full_name", "fullName", TEXT),
    FieldSpec("image_url", "imageUrl", TEXT),
    FieldSpec("office_email", "officeEmail", EMAIL),
    FieldSpec("personal_email", "personalEmail", EMAIL),
    FieldSpec("personal_number", "personalNumber", TEXT),
    FieldSpec("office_number", "officeNumber", TEXT),
    FieldSpec("employee_type", "employeeType", TEXT),
    FieldSpec("employee_status", "employeeStatus", TEXT),
    FieldSpec("nationality", "nationality", TEXT),
    FieldSpec("disability", "disability", FLAG),
    FieldSpec("gender", "gender", GENDER),
    FieldSpec("religion", "religion", TEXT),
    FieldSpec("joining_designation", "joiningDesignation", TEXT),
    FieldSpec("current_designation", "currentDesignation", TEXT),
    FieldSpec("date_of_birth", "dateOfBirth", DATE_LIKE, required=False),
    FieldSpec("date_of_confirmation", "dateOfConfirmation", DATE_LIKE, required=False),
    FieldSpec("bank_name", "bankName", TEXT),
    FieldSpec("branch_name", "branchName", TEXT),
    FieldSpec("account_number", "accountNumber", TEXT),
    FieldSpec("wallet_type", "walletType", TEXT),
    FieldSpec("wallet_number", "walletNumber", TEXT),
    FieldSpec("created_at", "createdAt", DATE_LIKE, required=False),
    FieldSpec("updated_at", "updatedAt", DATE_LIKE, required=False),
    # Relations
    FieldSpec(
        "additional_information_id", "addtionalInformationId", ADDITIONAL_INFORMATION_ID,
    ),
    FieldSpec("present_address_id", "presentAddressId", ADDRESS_ID),
    FieldSpec("permanent_address_id", "permanentAddressId", ADDRESS_ID),
    FieldSpec(
        "spouse_information_id", "spouseInformationId", CONTACT_INFORMATION_ID,
        required=False, nullable=True,
    ),
    FieldSpec("emergency_contact_id", "emergencyContactId", CONTACT_INFORMATION_ID),
))

SERVER_ASSIGNED: frozenset[str] = frozenset({"id", "created_at", "updated_at"})

# imageUrl is uploaded after creation, so it is not pinned here
ALWAYS_REQUIRED_ON_CREATE: frozenset[str] = frozenset({
    "full_name", "office_email", "personal_email", "personal_number",
    "office_number", "employee_type", "employee_status", "nationality",
    "disability", "gender", "religion", "joining_designation",
    "current_designation", "bank_name", "branch_name", "account_number",
    "wallet_type", "wallet_number", "additional_information_id",
    "present_address_id", "permanent_address_id", "emergency_contact_id",
})

EMPLOYEE = EntityValidator(
    EntityName.EMPLOYEE, EMPLOYEE_SCHEMA,
    SERVER_ASSIGNED, ALWAYS_REQUIRED_ON_CREATE,
)

Employee = EMPLOYEE.stored_model
EmployeeCreate = EMPLOYEE.create_model
