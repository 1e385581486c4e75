"""Wire Format: camelCase fields and lowercase status on requests and responses."""

from datetime import datetime, timezone
from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from kanban_api.core.board_summary import BoardSummary
from kanban_api.core.domain_types import CardStatus
from kanban_api.schemas.board import BoardResponse, BoardSummaryResponse
from kanban_api.schemas.card import CardCreate, CardResponse, CardUpdate

CREATED = datetime(2026, 10, 18, 9, 30, tzinfo=timezone.utc)


def test_card_response_is_camel_case():
    row = SimpleNamespace(
        id=7, board_id=3, description="Ship it",
        status=CardStatus.DOING, created_at=CREATED,
    )
    dumped = CardResponse.model_validate(row).model_dump(mode="json", by_alias=True)
    assert dumped == {
        "id": 7,
        "boardId": 3,
        "description": "Ship it",
        "status": "doing",
        "createdAt": "2026-10-18T09:30:00Z",
    }


def test_board_response_is_camel_case():
    row = SimpleNamespace(id=1, name="Ops", created_at=CREATED)
    dumped = BoardResponse.model_validate(row).model_dump(by_alias=True)
    assert set(dumped) == {"id", "name", "createdAt"}


def test_summary_from_core_value():
    summary = BoardSummaryResponse.model_validate(BoardSummary(todo=2, doing=1))
    assert summary.model_dump() == {"todo": 2, "doing": 1, "done": 0}


def test_card_create_reads_board_id_alias():
    body = CardCreate.model_validate({"boardId": 5, "description": "d"})
    assert body.board_id == 5


def test_card_create_requires_board_id():
    with pytest.raises(ValidationError):
        CardCreate.model_validate({"description": "d"})


@pytest.mark.parametrize("status", ["todo", "doing", "done"])
def test_card_update_accepts_lowercase_statuses(status):
    body = CardUpdate.model_validate({"description": "d", "status": status})
    assert body.status is CardStatus(status)


@pytest.mark.parametrize("status", ["Todo", "DONE", "blocked"])
def test_card_update_rejects_other_statuses(status):
    with pytest.raises(ValidationError):
        CardUpdate.model_validate({"description": "d", "status": status})
