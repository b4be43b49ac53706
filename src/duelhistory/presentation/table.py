"""Display shaping for duel histories.

Turns projections and summaries into table rows and pie chart slices.
"""

from __future__ import annotations

from collections.abc import Iterable

from duelhistory.models.domain import Outcome, StepValue
from duelhistory.models.types import AggregateSummary, ChartSlice, DuelProjection, DuelRow

WIN_COLOR = "#0088FE"
LOSS_COLOR = "#FF8042"

# Unresolved duels render an empty winner cell
OUTCOME_LABELS: dict[Outcome, str] = {
    "you": "You",
    "opponent": "Opponent",
    "undetermined": "",
}


def join_steps(steps: Iterable[StepValue] | None) -> str:
    """Join a step sequence into a human-readable string."""
    if not steps:
        return ""
    return ", ".join(str(step) for step in steps)


def build_duel_row(projection: DuelProjection) -> DuelRow:
    """Build a table row from a projection.

    Args:
        projection: Viewpoint-relative duel.

    Returns:
        DuelRow with joined step strings and the outcome label.
    """
    return DuelRow(
        duel_id=projection.duel_id,
        opponent=projection.opponent_label,
        your_shots=join_steps(projection.your_shot_steps),
        your_dodges=join_steps(projection.your_dodge_steps),
        opponent_shots=join_steps(projection.opponent_shot_steps),
        opponent_dodges=join_steps(projection.opponent_dodge_steps),
        winner=OUTCOME_LABELS[projection.outcome],
    )


def build_chart_slices(summary: AggregateSummary) -> list[ChartSlice]:
    """Build the Wins/Losses pie chart slices, wins first."""
    return [
        ChartSlice(name="Wins", value=summary.wins, color=WIN_COLOR),
        ChartSlice(name="Losses", value=summary.losses, color=LOSS_COLOR),
    ]
