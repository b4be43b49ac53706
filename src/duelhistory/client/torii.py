"""Torii GraphQL client for duel records.

Issues a single query per lookup. No retries, no pagination: the endpoint's
result set is taken as-is.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

from duelhistory.client.errors import DuelQueryError, DuelTransportError
from duelhistory.config import Settings
from duelhistory.models.domain import DuelRecord, Participant

logger = logging.getLogger(__name__)

DUELS_QUERY = """
  query DuelsByPlayer($player: Bytes!) {
    allDuels(filter: { participants: { contains: $player } }) {
      id
      player1 { address, username }
      player2 { address, username }
      shotStepsP1
      shotStepsP2
      dodgeStepsP1
      dodgeStepsP2
      winner
    }
  }
"""


def _text(value: Any) -> str:
    """Coerce an optional scalar to text, mapping None to an empty string."""
    if value is None:
        return ""
    return str(value)


def _parse_participant(raw: dict[str, Any] | None) -> Participant:
    """Map a wire player object, tolerating a missing one."""
    if not raw:
        return Participant(address="")
    return Participant(
        address=_text(raw.get("address")),
        display_name=_text(raw.get("username")) or None,
    )


def _steps(raw: dict[str, Any], key: str) -> tuple:
    values = raw.get(key)
    if not values:
        return ()
    return tuple(values)


def parse_duel_record(raw: dict[str, Any]) -> DuelRecord:
    """Convert one allDuels entry into a DuelRecord.

    Missing step lists become empty tuples and a missing winner becomes None.
    Identifiers and names are coerced to text; step values are left as-is.

    Args:
        raw: Duel object from the GraphQL response.

    Returns:
        Parsed DuelRecord.
    """
    return DuelRecord(
        duel_id=_text(raw.get("id")),
        participant_a=_parse_participant(raw.get("player1")),
        participant_b=_parse_participant(raw.get("player2")),
        shot_steps_a=_steps(raw, "shotStepsP1"),
        dodge_steps_a=_steps(raw, "dodgeStepsP1"),
        shot_steps_b=_steps(raw, "shotStepsP2"),
        dodge_steps_b=_steps(raw, "dodgeStepsP2"),
        winner_address=_text(raw.get("winner")) or None,
    )


class ToriiClient:
    """Synchronous client for the Torii GraphQL endpoint."""

    def __init__(
        self,
        endpoint: str,
        *,
        timeout: float = 30.0,
        client: httpx.Client | None = None,
    ):
        """Initialize the client.

        Args:
            endpoint: GraphQL endpoint URL.
            timeout: Request timeout in seconds.
            client: Optional pre-built httpx client (tests pass one with a
                mock transport). The caller keeps ownership of it.
        """
        self.endpoint = endpoint
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout)

    @classmethod
    def from_settings(cls, settings: Settings) -> ToriiClient:
        return cls(settings.torii_graphql_url, timeout=settings.http_timeout)

    def __enter__(self) -> ToriiClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def _raise_for_status(self, response: httpx.Response, player: str) -> None:
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"Duel request for {player} failed: {e}")
            raise DuelTransportError(str(e)) from e

    def fetch_duels(self, player: str) -> list[DuelRecord]:
        """Fetch every duel involving a player.

        Args:
            player: Player address used as the participant filter.

        Returns:
            Duel records in the order the endpoint returned them.

        Raises:
            DuelQueryError: If the response carries GraphQL errors.
            DuelTransportError: If the request fails or the response is
                not a readable GraphQL result.
        """
        payload = {"query": DUELS_QUERY, "variables": {"player": player}}
        logger.info(f"Fetching duels for {player} from {self.endpoint}")

        try:
            response = self._client.post(
                self.endpoint,
                json=payload,
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as e:
            logger.error(f"Duel request for {player} failed: {e}")
            raise DuelTransportError(str(e)) from e

        # GraphQL errors often arrive with a 4xx status; read them first
        try:
            body = response.json()
        except ValueError as e:
            self._raise_for_status(response, player)
            logger.error(f"Error decoding JSON response: {e}")
            raise DuelTransportError(f"invalid JSON response: {e}") from e

        if isinstance(body, dict) and body.get("errors"):
            logger.error(f"GraphQL errors for {player}: {body['errors']}")
            raise DuelQueryError(body["errors"])

        self._raise_for_status(response, player)

        if not isinstance(body, dict):
            raise DuelTransportError("unexpected response shape")

        data = body.get("data")
        if not isinstance(data, dict) or "allDuels" not in data:
            raise DuelTransportError("response is missing data.allDuels")

        raw_duels = data["allDuels"] or []
        records = [parse_duel_record(raw) for raw in raw_duels]
        logger.info(f"Fetched {len(records)} duels for {player}")
        return records
