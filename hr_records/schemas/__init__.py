"""Entity Schemas — declarative field tables for every HR entity.

Invariants:
    - Each entity declares its stored table once; the create table is derived
    - Relations appear only as Identifier fields, never as nested objects

Design Decisions:
    - Separate from core: core knows how to validate, schemas know what (ADR: DDD boundary)
"""
