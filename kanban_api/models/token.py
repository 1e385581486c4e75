"""Token ORM: bearer credentials provisioned outside this service.

Invariants:
    - Read-only to the API; rows are never inserted, updated or deleted here
    - A token is valid only while now < expired_at
"""

from datetime import datetime

from sqlalchemy import DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column

from kanban_api.db.base import Base


class Token(Base):
    __tablename__ = "tokens"

    id: Mapped[str] = mapped_column(Text, primary_key=True)
    expired_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
