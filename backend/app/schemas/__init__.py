"""Pydantic Schemas — request/response DTOs for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)

Design Decisions:
    - Separate from models and core entities: schemas are API contracts, models are persistence
"""
