from __future__ import annotations

from beacon.errors import MissingFieldError
from beacon.fingerprint.hasher import Hasher, to_signed
from beacon.models import Page
from beacon.normalizer.urls import url_domain, url_path


def page_id(project_id: int, domain: str, path: str) -> int:
    hasher = Hasher()
    hasher.write(project_id)
    hasher.write_str(domain)
    hasher.write_str(path)
    return to_signed(hasher.finalize())


def normalize_page(project_id: int, url: str) -> Page:
    """Raises MissingFieldError if the url has no valid domain."""
    domain = url_domain(url)
    if domain is None:
        raise MissingFieldError("domain")
    path = url_path(url)
    return Page(id=page_id(project_id, domain, path), project=project_id, domain=domain, path=path)
