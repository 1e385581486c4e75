"""Services Layer: request-level orchestration between core rules and the store.

Invariants:
    - Services call the store only through the Protocols in core/repository_protocols.py
"""
