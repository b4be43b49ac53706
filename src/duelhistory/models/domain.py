"""Domain models for duelhistory.

Pure Python dataclasses representing duel records as read from the game
world. These are independent of the GraphQL wire format and of the API
response models, and are never mutated after parsing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

# ============================================================================
# Viewpoint Domain
# ============================================================================

Role = Literal["first", "second", "not_participant"]
Outcome = Literal["you", "opponent", "undetermined"]

# Step values are opaque and passed through untouched.
StepValue = Any


# ============================================================================
# Duel Domain
# ============================================================================


@dataclass(frozen=True)
class Participant:
    """One named side of a duel."""

    address: str
    display_name: str | None = None

    @property
    def label(self) -> str:
        """Display name when present, otherwise the address."""
        return self.display_name or self.address


@dataclass(frozen=True)
class DuelRecord:
    """Symmetric duel record naming both participants as A and B."""

    duel_id: str
    participant_a: Participant
    participant_b: Participant
    shot_steps_a: tuple[StepValue, ...] = ()
    dodge_steps_a: tuple[StepValue, ...] = ()
    shot_steps_b: tuple[StepValue, ...] = ()
    dodge_steps_b: tuple[StepValue, ...] = ()
    winner_address: str | None = None
