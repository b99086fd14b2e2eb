from __future__ import annotations

from beacon.fingerprint.hasher import Hasher, to_signed
from beacon.models import PubVisitor, Visitor
from beacon.resolvers.timezones import resolve_region
from beacon.resolvers.user_agent import resolve_user_agent


def visitor_id(
    project_id: int,
    region: str | None,
    timezone: str,
    language: str,
    browser: str | None,
    platform: str | None,
    width: int,
    height: int,
) -> int:
    hasher = Hasher()
    hasher.write(project_id)
    if region is not None:
        hasher.write_str(region)
    hasher.write_str(timezone)
    hasher.write_str(language)
    if browser is not None:
        hasher.write_str(browser)
    if platform is not None:
        hasher.write_str(platform)
    # i32 -> u64 sign extension; write() masks negatives to two's complement
    hasher.write(width)
    hasher.write(height)
    return to_signed(hasher.finalize())


def normalize_visitor(project_id: int, visitor: PubVisitor, user_agent: str) -> Visitor:
    """Build the canonical visitor. Unknown timezone or user agent degrade to None."""
    region = resolve_region(visitor.tz)
    browser, platform = resolve_user_agent(user_agent)
    width, height = visitor.screen

    return Visitor(
        id=visitor_id(
            project_id, region, visitor.tz, visitor.lang, browser, platform, width, height
        ),
        project=project_id,
        region=region,
        timezone=visitor.tz,
        language=visitor.lang,
        browser=browser,
        platform=platform,
        width=width,
        height=height,
    )
