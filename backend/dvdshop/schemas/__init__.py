"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Response field names are camelCase on the wire, snake_case in Python

Design Decisions:
    - Separate from core dataclasses: schemas are API contracts, core types are pricing values
"""
