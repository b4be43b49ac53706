"""Pydantic models for duelhistory.

Derived, viewpoint-relative values and the API payloads built from them.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict

from duelhistory.models.domain import Outcome, Role, StepValue


class DuelProjection(BaseModel):
    """A duel record reshaped into "you" vs "opponent" terms."""

    model_config = ConfigDict(frozen=True)

    duel_id: str
    opponent_label: str
    your_shot_steps: tuple[StepValue, ...]
    your_dodge_steps: tuple[StepValue, ...]
    opponent_shot_steps: tuple[StepValue, ...]
    opponent_dodge_steps: tuple[StepValue, ...]
    outcome: Outcome
    role: Role


class AggregateSummary(BaseModel):
    """Two-category win/loss partition of a set of duels.

    wins + losses always equals the number of records summarized.
    undetermined and non_participant are informational subsets of losses.
    """

    wins: int
    losses: int
    undetermined: int = 0
    non_participant: int = 0


class DuelHistory(BaseModel):
    """Projections and summary for one viewpoint lookup."""

    viewpoint: str
    duels_found: int
    summary: AggregateSummary
    duels: list[DuelProjection]


class ChartSlice(BaseModel):
    """One slice of the win/loss pie chart."""

    name: Literal["Wins", "Losses"]
    value: int
    color: str


class DuelRow(BaseModel):
    """Duel table row with step sequences joined for display."""

    duel_id: str
    opponent: str
    your_shots: str
    your_dodges: str
    opponent_shots: str
    opponent_dodges: str
    winner: str


class DuelHistoryResponse(BaseModel):
    """Full duel history payload for API response."""

    player: str
    duels_found: int
    summary: AggregateSummary
    chart: list[ChartSlice]
    rows: list[DuelRow]
