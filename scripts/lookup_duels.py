#!/usr/bin/env python3
"""Look up a player's duel history and print it.

Queries the configured Torii endpoint (DUELHISTORY_TORII_GRAPHQL_URL) and
prints the win/loss summary followed by one line per duel.

Usage:
    python scripts/lookup_duels.py <player-address>

Exit codes:
    0: Lookup succeeded
    1: Lookup failed
    2: Usage error
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from duelhistory.aggregation.summary import build_duel_history  # noqa: E402
from duelhistory.client.errors import DuelLookupError  # noqa: E402
from duelhistory.client.torii import ToriiClient  # noqa: E402
from duelhistory.config import load_settings  # noqa: E402
from duelhistory.presentation.table import build_duel_row  # noqa: E402


def main() -> int:
    """Run the lookup."""
    if len(sys.argv) != 2 or not sys.argv[1]:
        print("Usage: python scripts/lookup_duels.py <player-address>")
        return 2

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    player = sys.argv[1]
    settings = load_settings()

    try:
        with ToriiClient.from_settings(settings) as client:
            records = client.fetch_duels(player)
    except DuelLookupError as e:
        print(f"FAIL: {e}")
        return 1

    history = build_duel_history(records, player)
    summary = history.summary

    print(f"{history.duels_found} duels found")
    print(f"    Wins: {summary.wins}")
    print(f"    Losses: {summary.losses}")
    if summary.undetermined:
        print(f"    (of which undetermined: {summary.undetermined})")

    for duel in history.duels:
        row = build_duel_row(duel)
        print(
            f"{row.duel_id} vs {row.opponent}: "
            f"shots [{row.your_shots}] dodges [{row.your_dodges}] | "
            f"opponent shots [{row.opponent_shots}] dodges [{row.opponent_dodges}] | "
            f"winner: {row.winner or '-'}"
        )

    return 0


if __name__ == "__main__":
    sys.exit(main())
