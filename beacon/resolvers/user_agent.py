from __future__ import annotations

import logging

from ua_parser import parse_os, parse_user_agent

logger = logging.getLogger(__name__)

# Any header that matches both the browser and OS tables.
_WARM_UP_UA = "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/112.0.0.0 Safari/537.36"


def _family(result) -> str | None:
    family = getattr(result, "family", None)
    return family or None


def resolve_user_agent(user_agent: str) -> tuple[str | None, str | None]:
    """Return (browser family, OS family) from the uap-core regex database.

    Unmatched or empty families come back as None.
    """
    return _family(parse_user_agent(user_agent)), _family(parse_os(user_agent))


def warm_up() -> None:
    """Build the shared parser before serving traffic."""
    browser, platform = resolve_user_agent(_WARM_UP_UA)
    logger.info("User-agent parser ready (%s on %s)", browser, platform)
