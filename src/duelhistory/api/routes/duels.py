"""Duels API endpoint.

GET /api/duels?player=<address> - Get a player's duel history
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from duelhistory.aggregation.summary import build_duel_history
from duelhistory.api.app import get_torii_client
from duelhistory.client.errors import DuelLookupError
from duelhistory.client.torii import ToriiClient
from duelhistory.models.types import DuelHistoryResponse
from duelhistory.presentation.table import build_chart_slices, build_duel_row

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/duels", response_model=DuelHistoryResponse)
def get_duels(
    player: str = Query(..., min_length=1, description="Player address (hex)"),
    client: ToriiClient = Depends(get_torii_client),
) -> DuelHistoryResponse:
    """Get a player's duel history.

    Args:
        player: Player address to look up.
        client: Torii client (injected).

    Returns:
        DuelHistoryResponse with summary, chart slices and table rows.

    Raises:
        HTTPException: 502 if the lookup fails. No partial results are
            returned.
    """
    try:
        records = client.fetch_duels(player)
    except DuelLookupError as e:
        logger.warning(f"Duel lookup for {player} failed: {e}")
        raise HTTPException(status_code=502, detail=str(e)) from e

    history = build_duel_history(records, player)

    return DuelHistoryResponse(
        player=player,
        duels_found=history.duels_found,
        summary=history.summary,
        chart=build_chart_slices(history.summary),
        rows=[build_duel_row(duel) for duel in history.duels],
    )
