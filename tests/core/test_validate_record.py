"""Record Validation — generic validation, error classification, EntityValidator.

Tests:
    - Every violated field is reported, in declaration order, never fail-fast
    - Classification: missing, null, custom kinds, wrong type, non-mapping record
    - Result holds value XOR errors; unwrap raises RecordValidationError
    - A date parse failure never hides sibling field errors
"""

import logging

import pytest

from hr_records.core.domain_types import EntityName, ErrorKind
from hr_records.core.errors import FieldError, RecordValidationError
from hr_records.core.primitives import DATE_LIKE, EMAIL, GENDER, IDENTIFIER, TEXT
from hr_records.core.record_schema import FieldSpec, RecordSchema, compile_model
from hr_records.core.validate_record import (
    EntityValidator,
    classify_error,
    field_errors_from,
    validate_record,
)

BADGE = RecordSchema("Badge", (
    FieldSpec("id", "id", IDENTIFIER),
    FieldSpec("holder", "holder", TEXT),
    FieldSpec("issued_on", "issuedOn", DATE_LIKE),
    FieldSpec("gender", "gender", GENDER, required=False),
    FieldSpec("email", "email", EMAIL, required=False),
    FieldSpec("note", "note", TEXT, required=False, nullable=True),
))
Badge = compile_model(BADGE)
BADGE_ID = "0d6f3c1e-2b7a-4c55-9f1e-7a3b2c1d0e9f"


def kinds(result) -> list[tuple[str, ErrorKind]]:
    return [(e.field_path, e.kind) for e in result.errors]


# ─── Success ─────────────────────────────────────────────────────

def test_valid_record_returns_value_without_errors():
    result = validate_record(Badge, {
        "id": BADGE_ID, "holder": "Rafiq", "issuedOn": "2020-02-29",
    })
    assert result.ok
    assert result.errors == ()
    assert result.value.issued_on.year == 2020
    assert result.unwrap() is result.value


# ─── Aggregated failures ─────────────────────────────────────────

def test_all_violations_reported_in_declaration_order():
    result = validate_record(Badge, {
        "id": "badge-1",
        "issuedOn": "not-a-date",
        "gender": "Unknown",
        "email": "nobody",
        "note": None,
    })
    assert not result.ok
    assert result.value is None
    assert kinds(result) == [
        ("id", ErrorKind.INVALID_FORMAT),
        ("holder", ErrorKind.MISSING_REQUIRED_FIELD),
        ("issuedOn", ErrorKind.INVALID_DATE),
        ("gender", ErrorKind.INVALID_ENUM_VALUE),
        ("email", ErrorKind.INVALID_EMAIL_FORMAT),
    ]


def test_null_on_non_nullable_fields():
    result = validate_record(Badge, {
        "id": None, "holder": None, "issuedOn": None, "gender": None,
    })
    assert kinds(result) == [
        ("id", ErrorKind.NULL_NOT_ALLOWED),
        ("holder", ErrorKind.NULL_NOT_ALLOWED),
        ("issuedOn", ErrorKind.NULL_NOT_ALLOWED),
        ("gender", ErrorKind.NULL_NOT_ALLOWED),
    ]
    assert result.errors[1].message == "'holder' may not be null"


def test_wrong_type_is_invalid_type():
    result = validate_record(Badge, {
        "id": BADGE_ID, "holder": 7, "issuedOn": "2020-01-01",
    })
    assert kinds(result) == [("holder", ErrorKind.INVALID_TYPE)]


@pytest.mark.parametrize("raw", [None, [], "record", 42])
def test_non_mapping_record_is_a_single_record_error(raw):
    result = validate_record(Badge, raw)
    assert kinds(result) == [("", ErrorKind.INVALID_TYPE)]
    assert result.errors[0].message.startswith("Record must be an object")


def test_missing_message_names_the_field():
    result = validate_record(Badge, {"id": BADGE_ID, "issuedOn": "2020-01-01"})
    assert result.errors == (
        FieldError("holder", ErrorKind.MISSING_REQUIRED_FIELD, "'holder' is required"),
    )


def test_unwrap_raises_with_every_error():
    result = validate_record(Badge, {}, entity="badge", operation="stored")
    with pytest.raises(RecordValidationError) as exc_info:
        result.unwrap()
    exc = exc_info.value
    assert [e.field_path for e in exc.errors] == ["id", "holder", "issuedOn"]
    assert exc.context.entity == "badge"
    assert exc.context.operation == "stored"


def test_error_dicts_use_wire_keys():
    result = validate_record(Badge, {"id": BADGE_ID, "issuedOn": "2020-01-01"})
    assert result.error_dicts() == [{
        "fieldPath": "holder",
        "errorKind": "MissingRequiredField",
        "message": "'holder' is required",
    }]


def test_rejection_is_logged_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="hr_records.core.validate_record"):
        validate_record(Badge, {}, entity="badge", operation="create")
    record = caplog.records[-1]
    assert record.error_count == 3
    assert record.entity == "badge"


# ─── Classifier ──────────────────────────────────────────────────

def test_classify_unknown_type_falls_back_to_invalid_type():
    assert classify_error(
        {"type": "int_parsing", "loc": ("age",), "input": "x"},
    ) is ErrorKind.INVALID_TYPE


def test_field_errors_join_nested_locations():
    errors = field_errors_from([
        {"type": "missing", "loc": ("contact", "email"), "msg": "Field required", "input": {}},
    ])
    assert errors[0].field_path == "contact.email"


# ─── EntityValidator ─────────────────────────────────────────────

def test_entity_validator_builds_both_shapes():
    validator = EntityValidator(
        EntityName.EMPLOYEE, BADGE, server_assigned={"id"}, always_required={"holder"},
    )
    assert validator.create_schema.required_fields == {"holder"}
    assert "id" not in validator.create_schema.field_names

    stored = validator.validate_stored({"holder": "Rafiq"})
    assert {e.field_path for e in stored.errors} == {"id", "issuedOn"}
    assert stored.operation == "stored"

    created = validator.validate_create_input({"holder": "Rafiq", "id": "ignored"})
    assert created.ok
    assert created.operation == "create"
    assert not hasattr(created.value, "id")
