"""Schema Deriver — produces the create shape from a stored shape.

Invariants:
    - server_assigned fields are absent from the result, not merely optional
    - Every surviving field is optional unless named in always_required
    - The result's required set equals always_required exactly
    - Validators, nullability, and field order are carried over unchanged
    - Pure and deterministic: set iteration order never affects the result

Design Decisions:
    - Data-driven (three sets in, one table out) over chained omit/partial calls
      (ADR: inspectable and testable without any entity)
    - Inconsistent inputs raise SchemaDefinitionError at import time, not at validation time
"""

import logging
from collections.abc import Iterable
from dataclasses import replace

from hr_records.core.errors import SchemaDefinitionError
from hr_records.core.record_schema import RecordSchema

logger = logging.getLogger(__name__)

CREATE_SUFFIX = "Create"


def derive_create_schema(
    stored: RecordSchema,
    server_assigned: Iterable[str],
    always_required: Iterable[str],
) -> RecordSchema:
    """Omit server-assigned fields, relax the rest, re-require business fields."""
    server_assigned = frozenset(server_assigned)
    always_required = frozenset(always_required)
    _check_derivation_inputs(stored, server_assigned, always_required)

    fields = tuple(
        replace(spec, required=spec.name in always_required)
        for spec in stored.fields
        if spec.name not in server_assigned
    )
    derived = RecordSchema(f"{stored.name}{CREATE_SUFFIX}", fields)
    logger.debug(
        f"Derived {derived.name}: {len(fields)} fields, "
        f"{len(always_required)} required",
    )
    return derived


def _check_derivation_inputs(
    stored: RecordSchema,
    server_assigned: frozenset[str],
    always_required: frozenset[str],
) -> None:
    unknown = (server_assigned | always_required) - stored.field_names
    if unknown:
        raise SchemaDefinitionError(
            f"unknown field(s) in derivation: {', '.join(sorted(unknown))}",
            stored.name,
        )
    conflicting = server_assigned & always_required
    if conflicting:
        raise SchemaDefinitionError(
            f"server-assigned field(s) cannot be required on create: "
            f"{', '.join(sorted(conflicting))}",
            stored.name,
        )
