"""Entry points called by the transport layer, one per beacon kind.

Each handler either returns a complete record or raises an IngestError;
nothing partial is ever produced.
"""
from __future__ import annotations

import copy
import logging
import re
from typing import Any

from beacon.errors import (
    IngestError,
    InvalidProjectError,
    MalformedSessionError,
    UnknownBeaconKindError,
)
from beacon.models import (
    BeaconKind,
    Event,
    Page,
    PubEvent,
    PubExit,
    PubVisit,
    Visit,
    Visitor,
)
from beacon.normalizer.page import normalize_page
from beacon.normalizer.referrer import normalize_referrer
from beacon.normalizer.utm import normalize_utm_param
from beacon.normalizer.visitor import normalize_visitor

logger = logging.getLogger(__name__)

_SESSION_RE = re.compile(r"[+-]?[0-9]+")
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


def parse_session(value: str) -> int:
    """Strict base-10 signed 64-bit integer, no surrounding whitespace."""
    if not _SESSION_RE.fullmatch(value):
        raise MalformedSessionError(value)
    try:
        session = int(value)
    except ValueError:
        # over the interpreter's int digit limit
        raise MalformedSessionError(value) from None
    if not _I64_MIN <= session <= _I64_MAX:
        raise MalformedSessionError(value)
    return session


def check_project(project_id: int) -> int:
    if not _I64_MIN <= project_id <= _I64_MAX:
        raise InvalidProjectError(project_id)
    return project_id


def _common(project_id: int, body: PubVisit, user_agent: str) -> tuple[int, Visitor, Page]:
    try:
        check_project(project_id)
        session = parse_session(body.session)
        visitor = normalize_visitor(project_id, body.visitor, user_agent)
        page = normalize_page(project_id, body.page.url)
    except IngestError as exc:
        logger.debug("Rejected beacon for project %d: %s", project_id, exc)
        raise
    return session, visitor, page


def _visit(project_id: int, body: PubVisit, user_agent: str, **extra: Any) -> Visit:
    session, visitor, page = _common(project_id, body, user_agent)
    return Visit(
        project=project_id,
        session=session,
        visitor=visitor,
        page=page,
        utm_param=normalize_utm_param(project_id, body.page.url),
        referrer=normalize_referrer(project_id, body.page.referrer, page.domain),
        **extra,
    )


def handle_visit(project_id: int, body: PubVisit, user_agent: str) -> Visit:
    return _visit(project_id, body, user_agent)


def handle_exit(project_id: int, body: PubExit, user_agent: str) -> Visit:
    return _visit(project_id, body, user_agent, duration=body.dur, distance=body.dist)


def handle_event(project_id: int, body: PubEvent, user_agent: str) -> Event:
    session, visitor, page = _common(project_id, body, user_agent)
    return Event(
        project=project_id,
        session=session,
        visitor=visitor,
        page=page,
        name=body.name,
        data=copy.deepcopy(body.data),
    )


_BODIES = {
    BeaconKind.VISIT: (PubVisit, handle_visit),
    BeaconKind.EXIT: (PubExit, handle_exit),
    BeaconKind.EVENT: (PubEvent, handle_event),
}


def handle_beacon(
    kind: str,
    project_id: int,
    payload: str | bytes | dict,
    user_agent: str,
) -> Visit | Event:
    """Validate a raw JSON payload for ``kind`` and run the matching handler.

    Raises pydantic.ValidationError for a malformed body.
    """
    try:
        beacon_kind = BeaconKind(kind)
    except ValueError:
        raise UnknownBeaconKindError(str(kind)) from None

    model, handler = _BODIES[beacon_kind]
    if isinstance(payload, (str, bytes)):
        body = model.model_validate_json(payload)
    else:
        body = model.model_validate(payload)
    return handler(project_id, body, user_agent)
