"""Pydantic Schemas — wire documents for the sites endpoint.

Invariants:
    - Schemas validate at the system boundary (request bodies, responses)

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
"""
