"""HR Records — validated data shapes for the employee record domain.

Invariants:
    - Every entity exposes a stored shape and a create shape
    - Malformed input is a first-class outcome, never an unhandled exception

Design Decisions:
    - Declarative field tables compiled to pydantic models (ADR: one generic validator, no per-entity code)
"""
