"""Card Schemas: bodies and responses for /api/cards and /api/boards/{id}/cards.

Invariants:
    - CardUpdate is a full replace: description and status are both required
    - status travels as "todo" | "doing" | "done"
"""

from datetime import datetime

from kanban_api.core.domain_types import CardStatus
from kanban_api.schemas.base import CamelModel


class CardCreate(CamelModel):
    board_id: int
    description: str


class CardUpdate(CamelModel):
    description: str
    status: CardStatus


class CardResponse(CamelModel):
    id: int
    board_id: int
    description: str
    status: CardStatus
    created_at: datetime
