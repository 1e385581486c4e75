"""Kanban Store: parameterized queries for tokens, boards and cards.

Invariants:
    - Each operation borrows one session from the pool and returns it before
      the call completes; nothing is held across requests
    - Single-row expectations (token lookup, update) use scalar_one(), so zero
      rows surface as DatabaseError through DatabaseSessionManager.session()
    - Deletes by id affect zero or one row and never raise for a missing id
    - No retries: a failed query propagates immediately

Design Decisions:
    - SQL-level UPDATE ... RETURNING for card updates: one round trip, and the
      returned row is exactly what the database stored
    - Expiry compared against the database clock (now()), not the app clock
"""

import logging

from sqlalchemy import delete, func, select, update

from kanban_api.core.domain_types import BoardId, CardId, CardStatus, TokenId
from kanban_api.infrastructure.database import DatabaseSessionManager
from kanban_api.models.board import Board
from kanban_api.models.card import Card
from kanban_api.models.token import Token

logger = logging.getLogger(__name__)


class KanbanStore:
    """Store implementation of KanbanRepository over a DatabaseSessionManager."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    # ─── Tokens ──────────────────────────────────────────────────

    async def validate_token(self, token_id: TokenId) -> Token:
        """Return the token row if it exists and has not expired."""
        async with self._db.session() as db:
            result = await db.execute(
                select(Token).where(
                    Token.id == token_id, Token.expired_at > func.now(),
                ),
            )
            return result.scalar_one()

    # ─── Boards ──────────────────────────────────────────────────

    async def boards(self) -> list[Board]:
        async with self._db.session() as db:
            result = await db.execute(select(Board))
            return list(result.scalars().all())

    async def create_board(self, name: str) -> Board:
        async with self._db.session() as db:
            board = Board(name=name)
            db.add(board)
            await db.commit()
            await db.refresh(board)
            logger.info("Board created", extra={"board_id": board.id})
            return board

    async def board_status_counts(
        self, board_id: BoardId,
    ) -> list[tuple[int, CardStatus]]:
        """Card counts grouped by status; statuses with no cards are absent."""
        async with self._db.session() as db:
            result = await db.execute(
                select(func.count(), Card.status)
                .where(Card.board_id == board_id)
                .group_by(Card.status),
            )
            return [(count, status) for count, status in result.all()]

    async def delete_board(self, board_id: BoardId) -> None:
        async with self._db.session() as db:
            await db.execute(delete(Board).where(Board.id == board_id))
            await db.commit()
            logger.info("Board deleted", extra={"board_id": board_id})

    # ─── Cards ───────────────────────────────────────────────────

    async def cards(self, board_id: BoardId) -> list[Card]:
        async with self._db.session() as db:
            result = await db.execute(
                select(Card).where(Card.board_id == board_id),
            )
            return list(result.scalars().all())

    async def create_card(self, board_id: BoardId, description: str) -> Card:
        async with self._db.session() as db:
            card = Card(board_id=board_id, description=description)
            db.add(card)
            await db.commit()
            await db.refresh(card)
            logger.info(
                "Card created",
                extra={"board_id": board_id, "card_id": card.id},
            )
            return card

    async def update_card(
        self, card_id: CardId, description: str, status: CardStatus,
    ) -> Card:
        """Replace description and status; exactly one row must match."""
        async with self._db.session() as db:
            result = await db.execute(
                update(Card)
                .where(Card.id == card_id)
                .values(description=description, status=status)
                .returning(Card),
            )
            card = result.scalar_one()
            await db.commit()
            return card

    async def delete_card(self, card_id: CardId) -> None:
        async with self._db.session() as db:
            await db.execute(delete(Card).where(Card.id == card_id))
            await db.commit()
            logger.info("Card deleted", extra={"card_id": card_id})
