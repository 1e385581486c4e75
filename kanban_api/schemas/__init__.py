"""Pydantic Schemas: request/response contracts for the REST API.

Invariants:
    - Field names are camelCase on the wire, snake_case in Python
    - Domain enums from core/ are used for enum fields

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
