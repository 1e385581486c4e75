"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - BoardId, CardId wrap store-assigned integers; TokenId wraps the opaque credential
    - Card status is always one of the CardStatus members (never a raw string)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: values are the wire and storage spelling ("todo", "doing", "done")
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

BoardId = NewType("BoardId", int)
CardId = NewType("CardId", int)
TokenId = NewType("TokenId", str)


# ─── Enums ───────────────────────────────────────────────────────

class CardStatus(str, Enum):
    """Card workflow column."""
    TODO = "todo"
    DOING = "doing"
    DONE = "done"
