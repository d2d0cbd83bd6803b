"""Primitive Validators — atomic rules shared by every field table.

Invariants:
    - Identifier accepts only canonical 8-4-4-4-12 hex text (or a UUID) and yields a UUID
    - DateLike runs BEFORE structural validation and always yields an aware UTC datetime
    - DateLike never accepts arbitrary non-date strings; parse failures become InvalidDate
    - Enumerated values are string-equal to one declared literal, reported in declared order
    - Every failure is a PydanticCustomError whose type maps 1:1 onto an ErrorKind

Design Decisions:
    - PlainValidator over pydantic's built-in UUID/datetime/EmailStr: built-ins accept
      forms we must reject (hex without dashes, unix timestamps, display names)
    - Date-only input normalizes to midnight UTC so coercion is idempotent
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, timezone
from email.utils import parsedate_to_datetime
from enum import Enum
from typing import Annotated, Any, Callable
from uuid import UUID

from email_validator import EmailNotValidError, validate_email
from pydantic import PlainValidator, StrictBool, StrictStr
from pydantic_core import PydanticCustomError

from hr_records.core.domain_types import (
    AdditionalInformationId, AddressId, ContactInformationId, EmployeeId,
    ErrorKind, Gender, MaritalStatus,
)


UUID_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$",
)

# pydantic error `type` -> ErrorKind; single source of truth for the classifier
CUSTOM_ERROR_KINDS: dict[str, ErrorKind] = {
    "invalid_format": ErrorKind.INVALID_FORMAT,
    "invalid_date": ErrorKind.INVALID_DATE,
    "invalid_enum_value": ErrorKind.INVALID_ENUM_VALUE,
    "invalid_email_format": ErrorKind.INVALID_EMAIL_FORMAT,
}


# ─── Identifier ──────────────────────────────────────────────────

def check_identifier(value: Any) -> UUID:
    if isinstance(value, UUID):
        return value
    if isinstance(value, str) and UUID_PATTERN.match(value):
        return UUID(value)
    raise PydanticCustomError(
        "invalid_format", "Input should be a UUID in canonical 8-4-4-4-12 form",
    )


# ─── Date-like ───────────────────────────────────────────────────

# Legacy layouts found in records written before ISO-8601 was enforced.
# Slashed day/month forms (12/05/1990) are ambiguous and stay rejected.
DATE_FORMATS: tuple[str, ...] = (
    "%Y/%m/%d",
    "%Y/%m/%d %H:%M:%S",
    "%B %d, %Y",
    "%b %d, %Y",
    "%d %B %Y",
    "%d %b %Y",
)


def _parse_date_string(text: str) -> datetime | None:
    try:
        return datetime.fromisoformat(text)
    except (ValueError, TypeError, OverflowError):
        pass
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    try:
        return parsedate_to_datetime(text)
    except (ValueError, TypeError, IndexError, OverflowError):
        return None


def coerce_date_like(value: Any) -> datetime:
    """Normalize a date string or native date/datetime to an aware UTC datetime.

    The input is a tagged union resolved by type: a string form is parsed
    (ISO-8601 first, then the legacy layouts in DATE_FORMATS, then RFC 2822),
    a native form is taken as-is. Naive values are read as UTC.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        parsed = _parse_date_string(value.strip())
        if parsed is None:
            raise PydanticCustomError(
                "invalid_date", "Input should be a valid date, got '{value}'",
                {"value": value[:64]},
            )
    else:
        raise PydanticCustomError(
            "invalid_date", "Input should be a date or a date-formatted string",
        )

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    try:
        return parsed.astimezone(timezone.utc)
    except OverflowError:
        raise PydanticCustomError(
            "invalid_date", "Date is out of the representable range",
        ) from None


# ─── Enumerations ────────────────────────────────────────────────

def enum_validator(enum_cls: type[Enum]) -> Callable[[Any], Enum]:
    """Build a validator accepting exactly the literal values of enum_cls."""
    allowed = tuple(member.value for member in enum_cls)
    expected = ", ".join(f"'{v}'" for v in allowed)

    def check(value: Any) -> Enum:
        if isinstance(value, str) and value in allowed:
            return enum_cls(value)
        raise PydanticCustomError(
            "invalid_enum_value", "Input should be one of: {expected}",
            {"expected": expected, "allowed": list(allowed)},
        )

    check.__name__ = f"check_{enum_cls.__name__.lower()}"
    return check


# ─── Email ───────────────────────────────────────────────────────

def check_email(value: Any) -> str:
    if not isinstance(value, str):
        raise PydanticCustomError(
            "invalid_email_format", "Input should be an email address string",
        )
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise PydanticCustomError(
            "invalid_email_format", "Invalid email address: {reason}",
            {"reason": str(exc)},
        ) from None
    return value


# ─── Annotated types ─────────────────────────────────────────────

Identifier = Annotated[UUID, PlainValidator(check_identifier)]
DateLike = Annotated[datetime, PlainValidator(coerce_date_like)]
GenderValue = Annotated[Gender, PlainValidator(enum_validator(Gender))]
MaritalStatusValue = Annotated[MaritalStatus, PlainValidator(enum_validator(MaritalStatus))]
EmailAddress = Annotated[str, PlainValidator(check_email)]
Text = StrictStr
Flag = StrictBool


@dataclass(frozen=True)
class Primitive:
    """Named reference to a validator type, stored in field descriptors."""
    name: str
    annotation: Any


IDENTIFIER = Primitive("identifier", Identifier)
DATE_LIKE = Primitive("date_like", DateLike)
GENDER = Primitive("gender", GenderValue)
MARITAL_STATUS = Primitive("marital_status", MaritalStatusValue)
EMAIL = Primitive("email", EmailAddress)
TEXT = Primitive("text", Text)
FLAG = Primitive("flag", Flag)

# Identifiers typed by the entity they point at; same validation as IDENTIFIER
EMPLOYEE_ID = Primitive("employee_id", Annotated[EmployeeId, PlainValidator(check_identifier)])
ADDRESS_ID = Primitive("address_id", Annotated[AddressId, PlainValidator(check_identifier)])
CONTACT_INFORMATION_ID = Primitive(
    "contact_information_id",
    Annotated[ContactInformationId, PlainValidator(check_identifier)],
)
ADDITIONAL_INFORMATION_ID = Primitive(
    "additional_information_id",
    Annotated[AdditionalInformationId, PlainValidator(check_identifier)],
)
