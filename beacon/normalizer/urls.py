from __future__ import annotations

import ipaddress
from urllib.parse import SplitResult, parse_qsl, quote, urlsplit

# Code points that may never appear in a domain.
_FORBIDDEN_HOST = frozenset("\x00\t\n\r #%/:<>?@[\\]^|\x7f")

# Printable ASCII left as-is in a path. Everything else is percent-encoded.
_PATH_SAFE = "!$%&'()*+,/:;=@[\\]^|"

_SINGLE_DOT = {".", "%2e"}
_DOUBLE_DOT = {"..", ".%2e", "%2e.", "%2e%2e"}


def split_url(url: str) -> SplitResult | None:
    try:
        return urlsplit(url)
    except ValueError:
        # e.g. an unbalanced IPv6 bracket
        return None


def url_domain(url: str) -> str | None:
    """ASCII (punycode) lower-cased domain of an absolute URL, or None.

    Relative URLs, hosts with forbidden characters and IP literals all give None.
    """
    parts = split_url(url)
    if parts is None or not parts.scheme:
        return None
    try:
        host = parts.hostname
    except ValueError:
        return None
    if not host or any(ch in _FORBIDDEN_HOST or ch < " " for ch in host):
        return None
    try:
        ipaddress.ip_address(host)
    except ValueError:
        pass
    else:
        return None
    try:
        return host.encode("idna").decode("ascii").lower()
    except UnicodeError:
        return None


def remove_dot_segments(path: str) -> str:
    """RFC 3986 section 5.2.4 for an absolute path. ``%2e`` counts as a dot."""
    if not path.startswith("/"):
        return path
    segments = path.split("/")[1:]
    resolved: list[str] = []
    for seg in segments:
        folded = seg.lower()
        if folded in _DOUBLE_DOT:
            if resolved:
                resolved.pop()
        elif folded not in _SINGLE_DOT:
            resolved.append(seg)
    if segments[-1].lower() in _SINGLE_DOT | _DOUBLE_DOT:
        resolved.append("")
    return "/" + "/".join(resolved)


def url_path(url: str) -> str:
    """Path with dot segments removed and percent-encoded like a browser would."""
    parts = split_url(url)
    path = (parts.path if parts else "") or "/"
    return quote(remove_dot_segments(path), safe=_PATH_SAFE)


def query_pairs(url: str) -> list[tuple[str, str]]:
    """Form-urlencoded query pairs in source order, blank values kept."""
    parts = split_url(url)
    if parts is None or not parts.query:
        return []
    return parse_qsl(parts.query, keep_blank_values=True)
