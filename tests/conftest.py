"""Shared pytest fixtures for duelhistory tests."""

import pytest

from duelhistory.models.domain import DuelRecord, Participant


def build_record(
    duel_id: str = "d1",
    address_a: str = "0xAA",
    address_b: str = "0xBB",
    winner: str | None = None,
    name_a: str | None = None,
    name_b: str | None = None,
) -> DuelRecord:
    """Build a duel record with distinct step values per slot."""
    return DuelRecord(
        duel_id=duel_id,
        participant_a=Participant(address=address_a, display_name=name_a),
        participant_b=Participant(address=address_b, display_name=name_b),
        shot_steps_a=(1, 2),
        dodge_steps_a=(3,),
        shot_steps_b=(4, 5),
        dodge_steps_b=(6,),
        winner_address=winner,
    )


@pytest.fixture
def make_record():
    """Factory fixture for duel records."""
    return build_record
