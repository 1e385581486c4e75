"""Board Schemas: bodies and responses for /api/boards.

Invariants:
    - BoardCreate.name is required; emptiness is left to the database
    - BoardSummaryResponse always has all three status counts
"""

from datetime import datetime

from kanban_api.schemas.base import CamelModel


class BoardCreate(CamelModel):
    name: str


class BoardResponse(CamelModel):
    id: int
    name: str
    created_at: datetime


class BoardSummaryResponse(CamelModel):
    todo: int = 0
    doing: int = 0
    done: int = 0
