from __future__ import annotations

import logging

from beacon.settings import load_timezones

logger = logging.getLogger(__name__)


def resolve_region(tz: str) -> str | None:
    """Exact-match lookup of an IANA zone name. Returns None for unknown zones."""
    region = load_timezones().get(tz)
    if region is None and tz:
        logger.debug("No region for timezone %r", tz)
    return region
