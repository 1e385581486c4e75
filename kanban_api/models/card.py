"""Card ORM: one work item on a board.

Invariants:
    - board_id references an existing board (FK, ON DELETE CASCADE)
    - status defaults to "todo" in the database when not supplied
    - status is stored as its lowercase value, loaded back as CardStatus
"""

from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Enum, ForeignKey, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from kanban_api.core.domain_types import CardStatus
from kanban_api.db.base import Base

# BIGSERIAL on PostgreSQL, INTEGER PRIMARY KEY (rowid alias) on SQLite
_ID_TYPE = BigInteger().with_variant(Integer, "sqlite")


class Card(Base):
    __tablename__ = "cards"

    id: Mapped[int] = mapped_column(
        _ID_TYPE, primary_key=True, autoincrement=True,
    )
    board_id: Mapped[int] = mapped_column(
        _ID_TYPE,
        ForeignKey("boards.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    description: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[CardStatus] = mapped_column(
        Enum(
            CardStatus, name="status",
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        nullable=False, server_default=CardStatus.TODO.value,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now(),
    )
