"""Service test fixtures: in-memory database, seeded tokens, FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys on
    - The process-wide db_manager is swapped in as the lifespan would set it,
      and restored afterwards
    - The lifespan itself does not run (ASGITransport skips it)
"""

from datetime import datetime, timedelta, timezone

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select

from kanban_api.core.domain_types import CardStatus
from kanban_api.db.base import Base
from kanban_api.infrastructure import database as db_module
from kanban_api.infrastructure.database import DatabaseSessionManager
from kanban_api.main import app
from kanban_api.models.board import Board
from kanban_api.models.card import Card
from kanban_api.models.token import Token

VALID_TOKEN = "valid-token"
EXPIRED_TOKEN = "expired-token"


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite://")
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield manager
    await manager.dispose()


@pytest.fixture
async def tokens(db_manager):
    """One current and one expired token."""
    now = datetime.now(timezone.utc)
    async with db_manager.session() as db:
        db.add(Token(id=VALID_TOKEN, expired_at=now + timedelta(hours=1)))
        db.add(Token(id=EXPIRED_TOKEN, expired_at=now - timedelta(hours=1)))
        await db.commit()


@pytest.fixture
def auth_headers(tokens):
    return {"Authorization": f"Bearer {VALID_TOKEN}"}


@pytest.fixture
async def client(db_manager):
    """Test client wired to the in-memory database."""
    original_manager = db_module.db_manager
    db_module.db_manager = db_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    db_module.db_manager = original_manager


@pytest.fixture
def seed_board(db_manager):
    """Insert a board with one card per given status; returns the board."""

    async def _seed(
        name: str = "Roadmap", statuses: tuple[CardStatus, ...] = (),
    ) -> Board:
        async with db_manager.session() as db:
            board = Board(name=name)
            db.add(board)
            await db.flush()
            for i, card_status in enumerate(statuses):
                db.add(Card(
                    board_id=board.id, description=f"card {i}",
                    status=card_status,
                ))
            await db.commit()
            await db.refresh(board)
            return board

    return _seed


@pytest.fixture
def count_rows(db_manager):
    """Count rows of an ORM model straight from the database."""

    async def _count(model) -> int:
        async with db_manager.session() as db:
            result = await db.execute(select(func.count()).select_from(model))
            return result.scalar_one()

    return _count
