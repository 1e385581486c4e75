"""Initial schema: boards, cards, tokens.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

Tokens are provisioned by an external process; this migration only creates
the table the API reads from.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_status = sa.Enum("todo", "doing", "done", name="status")


def upgrade() -> None:
    op.create_table(
        "boards",
        sa.Column("id", sa.BigInteger, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "cards",
        sa.Column("id", sa.BigInteger, primary_key=True, autoincrement=True),
        sa.Column(
            "board_id", sa.BigInteger,
            sa.ForeignKey("boards.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("status", _status, nullable=False, server_default="todo"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_cards_board_id", "cards", ["board_id"])

    op.create_table(
        "tokens",
        sa.Column("id", sa.Text, primary_key=True),
        sa.Column("expired_at", sa.DateTime(timezone=True), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("tokens")
    op.drop_index("ix_cards_board_id", table_name="cards")
    op.drop_table("cards")
    op.drop_table("boards")
    _status.drop(op.get_bind(), checkfirst=True)
