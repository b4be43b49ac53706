"""Aggregation module for duel histories.

- Folds duel records into win/loss summaries for one viewpoint
- Forbidden: network calls, rendering concerns
"""
