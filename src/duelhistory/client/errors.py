"""Errors raised while looking up duels from the game world."""

from __future__ import annotations

import json
from typing import Any


class DuelLookupError(Exception):
    """Base class for lookup failures.

    str(error) is the message shown to the user.
    """


class DuelQueryError(DuelLookupError):
    """The GraphQL endpoint answered with an errors payload."""

    def __init__(self, errors: Any):
        self.errors = errors
        super().__init__(f"GraphQL error: {json.dumps(errors)}")


class DuelTransportError(DuelLookupError):
    """The request failed or the response could not be read."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Request failed: {detail}")
