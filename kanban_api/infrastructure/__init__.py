"""Infrastructure Layer: database pool, store queries, and logging setup.

Invariants:
    - All SQLAlchemy failures leave this layer as core.errors.DatabaseError
"""
