"""Kanban API Package: board and card REST backend gated by bearer tokens.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
