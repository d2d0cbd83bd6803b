"""Record Validation — generic table-driven validation with a structured result.

Invariants:
    - validate_record NEVER raises for malformed input; it returns a ValidationResult
    - A result holds either a fully validated model or the complete error list, never both
    - Errors are reported for every violated field, in declaration order
    - Error classification order: missing -> record-level -> null -> custom kind -> InvalidType

Design Decisions:
    - One generic function over per-entity code: entities differ only by table
      (ADR: no bespoke validators)
    - EntityValidator compiles both shapes once at import; instances are shared read-only
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import ValidationError

from hr_records.core.derive_create_schema import derive_create_schema
from hr_records.core.domain_types import EntityName, ErrorKind, ValidationMode
from hr_records.core.errors import ErrorContext, FieldError, RecordValidationError
from hr_records.core.primitives import CUSTOM_ERROR_KINDS
from hr_records.core.record_schema import RecordModel, RecordSchema, compile_model

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=RecordModel)

_NO_INPUT = object()


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """Either a validated record (value) or every violation (errors)."""
    value: T | None = None
    errors: tuple[FieldError, ...] = ()
    entity: str | None = None
    operation: str | None = None

    @property
    def ok(self) -> bool:
        return not self.errors

    def error_dicts(self) -> list[dict]:
        return [e.to_dict() for e in self.errors]

    def unwrap(self) -> T:
        """Return the record or raise RecordValidationError with every violation."""
        if self.errors:
            raise RecordValidationError(
                self.errors,
                ErrorContext(entity=self.entity, operation=self.operation),
            )
        return self.value


def classify_error(error: dict) -> ErrorKind:
    """Map one pydantic error dict onto an ErrorKind."""
    if error["type"] == "missing":
        return ErrorKind.MISSING_REQUIRED_FIELD
    if not error["loc"]:
        return ErrorKind.INVALID_TYPE
    if error.get("input", _NO_INPUT) is None:
        return ErrorKind.NULL_NOT_ALLOWED
    return CUSTOM_ERROR_KINDS.get(error["type"], ErrorKind.INVALID_TYPE)


def field_errors_from(errors: Iterable[dict]) -> tuple[FieldError, ...]:
    """Convert pydantic error dicts (ValidationError.errors()) into FieldErrors."""
    result = []
    for error in errors:
        path = ".".join(str(loc) for loc in error["loc"])
        kind = classify_error(error)
        if kind is ErrorKind.MISSING_REQUIRED_FIELD:
            message = f"'{path}' is required"
        elif kind is ErrorKind.NULL_NOT_ALLOWED:
            message = f"'{path}' may not be null"
        elif not path:
            message = f"Record must be an object: {error['msg']}"
        else:
            message = error["msg"]
        result.append(FieldError(path, kind, message))
    return tuple(result)


def validate_record(
    model: type[T],
    raw: Any,
    entity: str | None = None,
    operation: str | None = None,
) -> ValidationResult[T]:
    """Validate raw input against a compiled model, collecting all field errors."""
    try:
        value = model.model_validate(raw)
    except ValidationError as exc:
        errors = field_errors_from(exc.errors())
        logger.debug(
            f"Rejected {model.__name__} input with {len(errors)} error(s)",
            extra={
                "entity": entity, "operation": operation,
                "error_count": len(errors),
            },
        )
        return ValidationResult(errors=errors, entity=entity, operation=operation)
    return ValidationResult(value=value, entity=entity, operation=operation)


class EntityValidator:
    """Stored and create shapes of one entity, compiled once."""

    def __init__(
        self,
        entity: EntityName,
        stored_schema: RecordSchema,
        server_assigned: Iterable[str],
        always_required: Iterable[str],
    ):
        self.entity = entity
        self.server_assigned = frozenset(server_assigned)
        self.always_required = frozenset(always_required)
        self.stored_schema = stored_schema
        self.create_schema = derive_create_schema(
            stored_schema, self.server_assigned, self.always_required,
        )
        self.stored_model = compile_model(self.stored_schema)
        self.create_model = compile_model(self.create_schema)

    def validate_stored(self, raw: Any) -> ValidationResult:
        return validate_record(
            self.stored_model, raw, self.entity.value, ValidationMode.STORED.value,
        )

    def validate_create_input(self, raw: Any) -> ValidationResult:
        return validate_record(
            self.create_model, raw, self.entity.value, ValidationMode.CREATE.value,
        )
