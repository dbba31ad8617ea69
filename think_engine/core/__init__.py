"""Core Layer - pure domain logic, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - check_* functions are pure and deterministic
    - State containers are plain dataclasses mutated only by services/ handlers

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
