"""Core Layer — pure validation logic, no IO, no web framework, no logging setup.

Invariants:
    - No module in core/ imports from schemas/, api/, or infrastructure/
    - Schemas and compiled models are immutable once built at import time

Design Decisions:
    - Functional core separated from the API adapter (ADR: ExMA impureim sandwich)
"""
