"""Pydantic Schemas - artifact models validated at the tool boundary.

Invariants:
    - Wire names are camelCase; Python attributes are snake_case (alias generator)
    - Domain enums from core/ used for enum fields
    - Unknown extra fields are ignored, never rejected
"""
