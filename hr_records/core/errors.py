"""Error Hierarchy — typed field errors and exceptions for HR record validation.

Invariants:
    - FieldError is the unit of a validation error list: (field_path, kind, message)
    - Every HrRecordsError has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Malformed input never raises from validate_*; exceptions are for opt-in unwrap()
      and for programmer errors while declaring schemas
    - No raw input values leaked in to_response() envelopes

Design Decisions:
    - Single hierarchy with HrRecordsError base: API handler catches all (ADR: uniform error shape)
    - FieldError as frozen dataclass: hashable, comparable, safe to share across threads
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from hr_records.core.domain_types import ErrorKind


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    SCHEMA_DEFINITION = "schema_definition"


@dataclass(frozen=True)
class FieldError:
    """One violated field: wire-name path, failure kind, human-readable message."""
    field_path: str
    kind: ErrorKind
    message: str

    def to_dict(self) -> dict:
        return {
            "fieldPath": self.field_path,
            "errorKind": self.kind.value,
            "message": self.message,
        }


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity: str | None = None
    operation: str | None = None


class HrRecordsError(Exception):
    """Base exception for all HR record errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "entity": self.context.entity,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class RecordValidationError(HrRecordsError):
    """A record failed validation; carries every violated field."""
    def __init__(self, errors: tuple[FieldError, ...], context: ErrorContext | None = None):
        fields = ", ".join(e.field_path or "<record>" for e in errors)
        super().__init__(
            f"{len(errors)} invalid field(s): {fields}",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.errors = errors

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = [e.to_dict() for e in self.errors]
        return response


class UnknownEntityError(HrRecordsError):
    """No validator is registered under the requested entity name."""
    def __init__(self, entity: str, context: ErrorContext | None = None):
        super().__init__(
            f"Unknown entity '{entity}'",
            "UNKNOWN_ENTITY", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.entity = entity


# ─── Definition Errors (500-level) ──────────────────────────────

class SchemaDefinitionError(HrRecordsError):
    """A schema table or derivation was declared inconsistently."""
    def __init__(self, message: str, schema: str, context: ErrorContext | None = None):
        super().__init__(
            f"Schema '{schema}': {message}",
            "SCHEMA_DEFINITION_ERROR", ErrorCategory.SCHEMA_DEFINITION,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.schema = schema
