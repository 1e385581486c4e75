"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass plain fakes
    - Async in Protocol: boundary methods are async because implementations do IO
"""

from datetime import datetime
from typing import Protocol

from kanban_api.core.domain_types import BoardId, CardId, CardStatus, TokenId


class TokenLike(Protocol):
    """Structural contract for a stored bearer token."""
    id: str
    expired_at: datetime


class BoardLike(Protocol):
    """Structural contract for a stored board."""
    id: int
    name: str
    created_at: datetime


class CardLike(Protocol):
    """Structural contract for a stored card."""
    id: int
    board_id: int
    description: str
    status: CardStatus
    created_at: datetime


class TokenRepository(Protocol):
    """Contract for token lookup, implemented by the store."""
    async def validate_token(self, token_id: TokenId) -> TokenLike: ...


class KanbanRepository(TokenRepository, Protocol):
    """Contract for board and card persistence, implemented by the store.

    Return values are ORM rows detached from their session, so they are
    plain value copies once the call returns.
    """
    async def boards(self) -> list[BoardLike]: ...
    async def create_board(self, name: str) -> BoardLike: ...
    async def board_status_counts(
        self, board_id: BoardId,
    ) -> list[tuple[int, CardStatus]]: ...
    async def delete_board(self, board_id: BoardId) -> None: ...
    async def cards(self, board_id: BoardId) -> list[CardLike]: ...
    async def create_card(self, board_id: BoardId, description: str) -> CardLike: ...
    async def update_card(
        self, card_id: CardId, description: str, status: CardStatus,
    ) -> CardLike: ...
    async def delete_card(self, card_id: CardId) -> None: ...
