"""Board Summary: fold per-status card counts into a zero-filled summary.

Invariants:
    - Every status is present in the result (missing statuses count as 0)
    - Summing over zero rows yields all zeros, never an error
"""

from collections.abc import Iterable
from dataclasses import dataclass

from kanban_api.core.domain_types import CardStatus


@dataclass(frozen=True)
class BoardSummary:
    """Card counts per status for one board. Derived, never stored."""
    todo: int = 0
    doing: int = 0
    done: int = 0


def summarize_status_counts(
    counts: Iterable[tuple[int, CardStatus]],
) -> BoardSummary:
    """Build a BoardSummary from (count, status) rows."""
    totals = {status: 0 for status in CardStatus}
    for count, status in counts:
        totals[CardStatus(status)] += count
    return BoardSummary(
        todo=totals[CardStatus.TODO],
        doing=totals[CardStatus.DOING],
        done=totals[CardStatus.DONE],
    )
