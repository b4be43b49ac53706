"""Win/loss summary aggregation.

Counts wins for a viewpoint across a set of duels. Every duel that is not a
win counts as a loss, including unresolved duels and duels the viewpoint
did not take part in, so the two counts always partition the input.
"""

from __future__ import annotations

from collections.abc import Sequence

from duelhistory.core.viewpoint import resolve_role
from duelhistory.models.domain import DuelRecord
from duelhistory.models.types import AggregateSummary, DuelHistory
from duelhistory.projection.duels import duel_outcome, project_duels


def summarize_duels(records: Sequence[DuelRecord], viewpoint: str) -> AggregateSummary:
    """Compute the win/loss summary for a viewpoint.

    A duel is a win when its winner matches the viewpoint, whether or not the
    viewpoint occupies a participant slot.

    Args:
        records: Duel records to summarize.
        viewpoint: Viewing address.

    Returns:
        AggregateSummary where wins + losses == len(records).
    """
    wins = 0
    undetermined = 0
    non_participant = 0

    for record in records:
        outcome = duel_outcome(record, viewpoint)
        if outcome == "you":
            wins += 1
            continue

        # Informational breakdown of losses
        if outcome == "undetermined":
            undetermined += 1
        if resolve_role(record, viewpoint) == "not_participant":
            non_participant += 1

    return AggregateSummary(
        wins=wins,
        losses=len(records) - wins,
        undetermined=undetermined,
        non_participant=non_participant,
    )


def build_duel_history(records: Sequence[DuelRecord], viewpoint: str) -> DuelHistory:
    """Build projections and summary for one lookup.

    Args:
        records: Duel records returned for the viewpoint.
        viewpoint: Viewing address.

    Returns:
        DuelHistory with ordered projections and the aggregate summary.
    """
    return DuelHistory(
        viewpoint=viewpoint,
        duels_found=len(records),
        summary=summarize_duels(records, viewpoint),
        duels=project_duels(records, viewpoint),
    )
