from __future__ import annotations

from beacon.fingerprint.hasher import Hasher, to_signed
from beacon.models import UtmParam
from beacon.normalizer.urls import query_pairs

# Hash order. Query-string order never matters.
UTM_KEYS = ("campaign", "content", "medium", "source", "term")


def utm_param_id(project_id: int, fields: dict[str, str]) -> int:
    hasher = Hasher()
    hasher.write(project_id)
    for key in UTM_KEYS:
        if key in fields:
            hasher.write_str(fields[key])
    return to_signed(hasher.finalize())


def normalize_utm_param(project_id: int, url: str) -> UtmParam | None:
    """Campaign parameters found on the page url, or None when there are none.

    Keys match exactly and the last occurrence of a repeated key wins.
    """
    found: dict[str, str] = {}
    for key, value in query_pairs(url):
        if key in UTM_KEYS:
            found[key] = value

    if not found:
        return None
    return UtmParam(id=utm_param_id(project_id, found), project=project_id, **found)
