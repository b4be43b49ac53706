"""Viewpoint resolution for duel records.

Determines which participant slot a viewpoint address occupies in a duel.
Addresses compare case-insensitively with no other normalization (no
trimming, no checksum or hex-padding handling).
"""

from __future__ import annotations

from duelhistory.models.domain import DuelRecord, Role


def same_address(left: str | None, right: str | None) -> bool:
    """Compare two addresses case-insensitively.

    An empty or missing address never equals anything, including another
    empty address.

    Args:
        left: First address.
        right: Second address.

    Returns:
        True if both are non-empty and equal ignoring case.
    """
    if not left or not right:
        return False
    return left.lower() == right.lower()


def resolve_role(record: DuelRecord, viewpoint: str) -> Role:
    """Resolve the slot the viewpoint occupies in a duel.

    Participant A is checked first, so a record naming the same address on
    both sides resolves to "first".

    Args:
        record: Duel record to inspect.
        viewpoint: Address of the user whose history is being viewed.

    Returns:
        "first", "second", or "not_participant".
    """
    if same_address(record.participant_a.address, viewpoint):
        return "first"
    if same_address(record.participant_b.address, viewpoint):
        return "second"
    return "not_participant"
