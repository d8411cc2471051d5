"""Core Layer — pure domain logic: accounting, joins, aggregation. No IO, no async.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - Functions read the store only through repository_protocols contracts

Design Decisions:
    - Functional core separated from imperative shell (routes + services)
"""
