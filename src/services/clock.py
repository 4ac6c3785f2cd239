"""Time helpers for stamping records."""

from datetime import datetime, timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
import logging

from config import settings

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    """Current instant as a naive UTC datetime, the form stored in the database."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def is_valid_zone(zone_id: str) -> bool:
    try:
        ZoneInfo(zone_id)
    except (ZoneInfoNotFoundError, ValueError):
        return False
    return True


def resolve_zone(zone_id: Optional[str]) -> tzinfo:
    """Return the zone for a request hint.

    Without a hint the configured default zone is used. Unknown ids fall
    back to UTC instead of failing the request.
    """
    zone_id = zone_id or settings.default_timezone
    if not is_valid_zone(zone_id):
        logger.warning(f"Unknown time zone '{zone_id}', falling back to UTC")
        return timezone.utc
    return ZoneInfo(zone_id)


def local_time(instant: datetime, zone: tzinfo) -> datetime:
    """Civil time in ``zone`` for a naive UTC instant."""
    return instant.replace(tzinfo=timezone.utc).astimezone(zone)
