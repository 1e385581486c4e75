"""Card Routes: list a board's cards, create, update and delete cards.

Invariants:
    - Every route requires a valid bearer token (require_token)
    - Creating a card for an unknown board fails with 500 and stores nothing
    - PATCH replaces description and status; an unknown card id is a 500
    - DELETE is idempotent: a missing id still returns 200 with an empty body
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from kanban_api.api.dependencies import get_store, require_token
from kanban_api.core.domain_types import BoardId, CardId
from kanban_api.core.repository_protocols import KanbanRepository
from kanban_api.models.token import Token
from kanban_api.schemas.card import CardCreate, CardResponse, CardUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["cards"])


@router.get("/boards/{board_id}/cards", response_model=list[CardResponse])
async def list_cards(
    board_id: int,
    _token: Token = Depends(require_token),
    store: KanbanRepository = Depends(get_store),
):
    return await store.cards(BoardId(board_id))


@router.post("/cards", response_model=CardResponse)
async def create_card(
    body: CardCreate,
    _token: Token = Depends(require_token),
    store: KanbanRepository = Depends(get_store),
):
    """Create a card; status is defaulted by the database."""
    return await store.create_card(BoardId(body.board_id), body.description)


@router.patch("/cards/{card_id}", response_model=CardResponse)
async def update_card(
    card_id: int,
    body: CardUpdate,
    _token: Token = Depends(require_token),
    store: KanbanRepository = Depends(get_store),
):
    card = await store.update_card(CardId(card_id), body.description, body.status)
    logger.info("Card updated", extra={"card_id": card_id})
    return card


@router.delete("/cards/{card_id}")
async def delete_card(
    card_id: int,
    _token: Token = Depends(require_token),
    store: KanbanRepository = Depends(get_store),
):
    await store.delete_card(CardId(card_id))
    return Response(status_code=status.HTTP_200_OK)
