"""Base template selection from a user's most recent sessions."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from load_engine.models.enums import TEMPLATE_LOOKBACK_SESSIONS
from load_engine.models.session import CompletedSession


def most_common_template(sessions: Sequence[CompletedSession]) -> tuple[str, int] | None:
    """Most frequent template id among *sessions*, with its count.

    *sessions* must be ordered most recent first. On a tie the template that
    appears earliest in that order (the most recently used) wins. Returns
    None when no session references a template.
    """
    ordered_ids = [s.template_id for s in sessions if s.template_id]
    if not ordered_ids:
        return None
    counts = Counter(ordered_ids)
    best_count = max(counts.values())
    # First in recency order among the tied ids
    winner = next(tid for tid in ordered_ids if counts[tid] == best_count)
    return winner, best_count


def select_base_template(
    sessions: Sequence[CompletedSession],
    lookback: int = TEMPLATE_LOOKBACK_SESSIONS,
) -> str | None:
    """Pick the template to adapt from the *lookback* most recent completed sessions.

    Sessions are re-sorted by ``started_at`` descending so the tie-break does
    not depend on the order the provider returned them in.
    """
    completed = sorted(
        (s for s in sessions if s.is_completed),
        key=lambda s: s.started_at,
        reverse=True,
    )
    result = most_common_template(completed[:lookback])
    return result[0] if result else None
