"""Domain Types — enums and identity types shared by every schema.

Invariants:
    - Gender and MaritalStatus values are the exact wire literals, in declaration order
    - ErrorKind values are the names reported to API consumers
    - Identity types wrap UUIDs; every entity id and relation field is typed with one

Design Decisions:
    - str Enums: serialize to JSON without custom encoders (ADR: API boundary is JSON)
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

EmployeeId = NewType("EmployeeId", UUID)
AddressId = NewType("AddressId", UUID)
ContactInformationId = NewType("ContactInformationId", UUID)
AdditionalInformationId = NewType("AdditionalInformationId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class Gender(str, Enum):
    """Constrained gender on the Employee aggregate."""
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class MaritalStatus(str, Enum):
    """Marital status on AdditionalInformation."""
    SINGLE = "Single"
    MARRIED = "Married"
    DIVORCED = "Divorced"
    WIDOWED = "Widowed"
    SEPARATED = "Separated"


class ErrorKind(str, Enum):
    """Field-level failure kinds surfaced in a validation error list."""
    MISSING_REQUIRED_FIELD = "MissingRequiredField"
    NULL_NOT_ALLOWED = "NullNotAllowed"
    INVALID_FORMAT = "InvalidFormat"
    INVALID_DATE = "InvalidDate"
    INVALID_ENUM_VALUE = "InvalidEnumValue"
    INVALID_EMAIL_FORMAT = "InvalidEmailFormat"
    INVALID_TYPE = "InvalidType"


class EntityName(str, Enum):
    """Registry keys for every validated entity."""
    PRESENT_ADDRESS = "present_address"
    PERMANENT_ADDRESS = "permanent_address"
    CONTACT_INFORMATION = "contact_information"
    ADDITIONAL_INFORMATION = "additional_information"
    EMPLOYEE = "employee"


class ValidationMode(str, Enum):
    """Which shape a payload is validated against."""
    STORED = "stored"
    CREATE = "create"
