from __future__ import annotations

from beacon.fingerprint.hasher import Hasher, to_signed
from beacon.models import Referrer
from beacon.normalizer.urls import url_domain


def referrer_id(project_id: int, domain: str) -> int:
    hasher = Hasher()
    hasher.write(project_id)
    hasher.write_str(domain)
    return to_signed(hasher.finalize())


def normalize_referrer(project_id: int, referrer: str | None, host: str) -> Referrer | None:
    """External referrer domain, lower-cased. Self-referrals give None."""
    if not referrer:
        return None
    domain = url_domain(referrer)
    if domain is None:
        return None
    domain = domain.lower()
    if domain == host.lower():
        return None
    return Referrer(id=referrer_id(project_id, domain), project=project_id, domain=domain)
