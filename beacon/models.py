from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field

Int32 = Annotated[int, Field(ge=-(2**31), le=2**31 - 1)]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ── Enums ────────────────────────────────────────────────────────────────

class BeaconKind(str, Enum):
    VISIT = "visit"
    EXIT = "exit"
    EVENT = "event"


# ── Wire bodies (as posted by the tracking script) ───────────────────────

class PubVisitor(BaseModel):
    tz: str = ""
    lang: str = ""
    screen: tuple[Int32, Int32] = (0, 0)


class PubPage(BaseModel):
    url: str
    referrer: str | None = Field(default=None, alias="ref")


class PubVisit(BaseModel):
    session: str
    visitor: PubVisitor
    page: PubPage


class PubExit(PubVisit):
    dur: Int32
    dist: float


class PubEvent(PubVisit):
    name: str
    data: Any = None


# ── Entities (fingerprinted, immutable) ──────────────────────────────────

class Visitor(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    project: int
    region: str | None = None
    timezone: str
    language: str
    browser: str | None = None
    platform: str | None = None
    width: int
    height: int


class Page(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    project: int
    domain: str
    path: str


class UtmParam(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    project: int
    campaign: str | None = None
    content: str | None = None
    medium: str | None = None
    source: str | None = None
    term: str | None = None


class Referrer(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    project: int
    domain: str


# ── Records (handed to storage) ──────────────────────────────────────────

class Visit(BaseModel):
    model_config = ConfigDict(frozen=True)

    time: datetime = Field(default_factory=_utcnow)
    project: int
    session: int
    visitor: Visitor
    page: Page
    utm_param: UtmParam | None = None
    referrer: Referrer | None = None
    duration: int | None = None
    distance: float | None = None


class Event(BaseModel):
    model_config = ConfigDict(frozen=True)

    time: datetime = Field(default_factory=_utcnow)
    project: int
    session: int
    visitor: Visitor
    page: Page
    name: str
    data: Any = None
