"""ORM Models: SQLAlchemy declarative models for tokens, boards and cards.

Invariants:
    - All models inherit from Base (db/base.py)
    - Board owns its cards; deleting a board cascades in the database

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before any query
      or create_all runs
"""

from kanban_api.models.board import Board  # noqa: F401
from kanban_api.models.card import Card  # noqa: F401
from kanban_api.models.token import Token  # noqa: F401
