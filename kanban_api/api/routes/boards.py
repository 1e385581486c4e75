"""Board Routes: list, create, summarize and delete boards.

Invariants:
    - Every route requires a valid bearer token (require_token)
    - Summary of an unknown board is all zeros, not 404
    - DELETE is idempotent: a missing id still returns 200 with an empty body
"""

from fastapi import APIRouter, Depends, Response, status

from kanban_api.api.dependencies import get_store, require_token
from kanban_api.core.board_summary import summarize_status_counts
from kanban_api.core.domain_types import BoardId
from kanban_api.core.repository_protocols import KanbanRepository
from kanban_api.models.token import Token
from kanban_api.schemas.board import (
    BoardCreate, BoardResponse, BoardSummaryResponse,
)

router = APIRouter(prefix="/api/boards", tags=["boards"])


@router.get("", response_model=list[BoardResponse])
async def list_boards(
    _token: Token = Depends(require_token),
    store: KanbanRepository = Depends(get_store),
):
    """All boards, in store order."""
    return await store.boards()


@router.post("", response_model=BoardResponse)
async def create_board(
    body: BoardCreate,
    _token: Token = Depends(require_token),
    store: KanbanRepository = Depends(get_store),
):
    return await store.create_board(body.name)


@router.get("/{board_id}/summary", response_model=BoardSummaryResponse)
async def board_summary(
    board_id: int,
    _token: Token = Depends(require_token),
    store: KanbanRepository = Depends(get_store),
):
    """Card counts per status, zero-filled."""
    counts = await store.board_status_counts(BoardId(board_id))
    return summarize_status_counts(counts)


@router.delete("/{board_id}")
async def delete_board(
    board_id: int,
    _token: Token = Depends(require_token),
    store: KanbanRepository = Depends(get_store),
):
    await store.delete_board(BoardId(board_id))
    return Response(status_code=status.HTTP_200_OK)
