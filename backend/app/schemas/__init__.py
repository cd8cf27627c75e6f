"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Core dataclasses are converted here, never returned raw from routes

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
