"""Runtime configuration.

Settings come from environment variables so the API and scripts can point
at a different Torii deployment without code changes.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_TORII_GRAPHQL_URL = "https://api.cartridge.gg/x/pistols-mainnet-2/torii/graphql"
DEFAULT_HTTP_TIMEOUT = 30.0

ENV_TORII_GRAPHQL_URL = "DUELHISTORY_TORII_GRAPHQL_URL"
ENV_HTTP_TIMEOUT = "DUELHISTORY_HTTP_TIMEOUT"


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings.

    Attributes:
        torii_graphql_url: GraphQL endpoint of the Torii indexer.
        http_timeout: Request timeout in seconds.
    """

    torii_graphql_url: str = DEFAULT_TORII_GRAPHQL_URL
    http_timeout: float = DEFAULT_HTTP_TIMEOUT


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    """Load settings from the environment.

    Args:
        environ: Mapping to read from. Defaults to os.environ.

    Returns:
        Settings with defaults applied for unset variables.

    Raises:
        ValueError: If the timeout is not a positive number.
    """
    if environ is None:
        environ = dict(os.environ)

    url = environ.get(ENV_TORII_GRAPHQL_URL) or DEFAULT_TORII_GRAPHQL_URL

    raw_timeout = environ.get(ENV_HTTP_TIMEOUT)
    timeout = DEFAULT_HTTP_TIMEOUT
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError as e:
            raise ValueError(f"{ENV_HTTP_TIMEOUT} must be a number, got {raw_timeout!r}") from e
        if timeout <= 0:
            raise ValueError(f"{ENV_HTTP_TIMEOUT} must be positive, got {timeout}")

    return Settings(torii_graphql_url=url, http_timeout=timeout)
