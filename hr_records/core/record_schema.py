"""Record Schemas — declarative field-descriptor tables and their pydantic compilation.

Invariants:
    - A RecordSchema is immutable; field order is declaration order and drives error order
    - required and nullable are independent flags: absent != null
    - Field names and wire names are unique within a schema
    - Compiled models ignore unknown keys and are frozen

Design Decisions:
    - Tables over hand-written BaseModel classes: the create shape is derived from data,
      not duplicated by hand (ADR: single source of truth)
    - pydantic.create_model as the compiler: pydantic collects every field error in one pass
"""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, create_model

from hr_records.core.errors import SchemaDefinitionError
from hr_records.core.primitives import Primitive


@dataclass(frozen=True)
class FieldSpec:
    """One declared field: python name, wire name, validator, required/nullable flags."""
    name: str
    wire_name: str
    validator: Primitive
    required: bool = True
    nullable: bool = False


@dataclass(frozen=True)
class RecordSchema:
    """Named, ordered table of FieldSpecs."""
    name: str
    fields: tuple[FieldSpec, ...]

    def __post_init__(self):
        for attr in ("name", "wire_name"):
            seen = [getattr(f, attr) for f in self.fields]
            duplicates = sorted({v for v in seen if seen.count(v) > 1})
            if duplicates:
                raise SchemaDefinitionError(
                    f"duplicate field {attr}(s): {', '.join(duplicates)}", self.name,
                )

    @property
    def field_names(self) -> frozenset[str]:
        return frozenset(f.name for f in self.fields)

    @property
    def required_fields(self) -> frozenset[str]:
        return frozenset(f.name for f in self.fields if f.required)

    def field(self, name: str) -> FieldSpec:
        for spec in self.fields:
            if spec.name == name:
                return spec
        raise KeyError(name)

    def describe(self) -> dict[str, dict]:
        """Inspectable view keyed by wire name, in declaration order."""
        return {
            f.wire_name: {
                "required": f.required,
                "nullable": f.nullable,
                "validator": f.validator.name,
            }
            for f in self.fields
        }


class RecordModel(BaseModel):
    """Base for every compiled record model."""
    model_config = ConfigDict(extra="ignore", frozen=True)

    def to_wire(self) -> dict:
        """Dump by wire name, keeping only keys the input supplied."""
        return self.model_dump(by_alias=True, exclude_unset=True)


def compile_model(schema: RecordSchema) -> type[RecordModel]:
    """Build a pydantic model from a descriptor table."""
    definitions = {}
    for spec in schema.fields:
        annotation = spec.validator.annotation
        if spec.nullable:
            annotation = annotation | None
        default = ... if spec.required else None
        definitions[spec.name] = (annotation, Field(default, alias=spec.wire_name))
    return create_model(
        schema.name, __base__=RecordModel, __module__=__name__, **definitions,
    )
