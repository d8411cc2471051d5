"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - JSON field names are camelCase; Python attributes stay snake_case
    - Money crosses the wire as decimal strings, months as "YYYY-MM"

Design Decisions:
    - Separate from models: schemas are API contracts, models are stored entities
"""
