"""API layer for duelhistory.

- Validates inputs, fetches duels through the Torii client
- Returns payloads for UI
- Forbidden: projection or aggregation logic of its own
"""
