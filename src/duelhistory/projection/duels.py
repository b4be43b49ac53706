"""Per-duel projection into viewpoint-relative terms.

Pure functions: no I/O, no retained state. Every call recomputes from the
records and viewpoint it is given.
"""

from __future__ import annotations

from collections.abc import Iterable

from duelhistory.core.viewpoint import resolve_role, same_address
from duelhistory.models.domain import DuelRecord, Outcome
from duelhistory.models.types import DuelProjection


def duel_outcome(record: DuelRecord, viewpoint: str) -> Outcome:
    """Compute the outcome of a duel for the viewpoint.

    Compared directly against the viewpoint, independent of the resolved
    participant slot.

    Args:
        record: Duel record.
        viewpoint: Viewing address.

    Returns:
        "undetermined" when there is no winner, else "you" or "opponent".
    """
    if not record.winner_address:
        return "undetermined"
    if same_address(record.winner_address, viewpoint):
        return "you"
    return "opponent"


def project_duel(record: DuelRecord, viewpoint: str) -> DuelProjection:
    """Project a duel record into "you" vs "opponent" terms.

    When the viewpoint is not a participant the participant A perspective is
    used, and the projection reports role="not_participant" so callers can
    tell the perspective was defaulted.

    Args:
        record: Duel record.
        viewpoint: Viewing address.

    Returns:
        DuelProjection for the viewpoint.
    """
    role = resolve_role(record, viewpoint)

    if role == "second":
        you_shots, you_dodges = record.shot_steps_b, record.dodge_steps_b
        opp_shots, opp_dodges = record.shot_steps_a, record.dodge_steps_a
        opponent = record.participant_a
    else:
        you_shots, you_dodges = record.shot_steps_a, record.dodge_steps_a
        opp_shots, opp_dodges = record.shot_steps_b, record.dodge_steps_b
        opponent = record.participant_b

    return DuelProjection(
        duel_id=record.duel_id,
        opponent_label=opponent.label,
        your_shot_steps=tuple(you_shots or ()),
        your_dodge_steps=tuple(you_dodges or ()),
        opponent_shot_steps=tuple(opp_shots or ()),
        opponent_dodge_steps=tuple(opp_dodges or ()),
        outcome=duel_outcome(record, viewpoint),
        role=role,
    )


def project_duels(records: Iterable[DuelRecord], viewpoint: str) -> list[DuelProjection]:
    """Project every duel, preserving input order."""
    return [project_duel(record, viewpoint) for record in records]
