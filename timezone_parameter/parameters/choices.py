"""Choice list rendering and normalization of submitted selections."""
from __future__ import annotations

from typing import List, Tuple

from timezone_parameter.config.timezones import OFFSET_MARKER, ZoneCatalog, ZoneRules

SECONDS_PER_HOUR = 3600
SECONDS_PER_MINUTE = 60


def _trunc_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return -quotient if value < 0 else quotient


def _trunc_rem(value: int, divisor: int) -> int:
    remainder = abs(value) % divisor
    return -remainder if value < 0 else remainder


def _split_seconds(seconds: int) -> Tuple[int, int]:
    hours = _trunc_div(seconds, SECONDS_PER_HOUR)
    minutes = _trunc_rem(_trunc_div(seconds, SECONDS_PER_MINUTE), 60)
    return hours, minutes


def compute_offset(rules: ZoneRules) -> Tuple[int, int]:
    """Return the ``(hours, minutes)`` shown for a zone.

    Both parts truncate toward zero and carry the sign of the offset. The
    daylight-saving amount is added whenever the zone observes DST at all, not
    only while it is in effect, and minutes are never carried into hours.
    """
    hours, minutes = _split_seconds(rules.standard_offset_seconds)
    if rules.observes_dst:
        dst_hours, dst_minutes = _split_seconds(rules.dst_savings_seconds)
        hours += dst_hours
        minutes += dst_minutes
    return hours, minutes


def format_offset_label(hours: int, minutes: int) -> str:
    return f"UTC{hours:+03d}:{abs(minutes):02d}"


def offset_label(rules: ZoneRules) -> str:
    return format_offset_label(*compute_offset(rules))


def decorate(identifier: str, rules: ZoneRules) -> str:
    """Append the offset label, e.g. ``Asia/Tokyo (UTC+09:00)``."""
    return f"{identifier} ({offset_label(rules)})"


def build_choices(catalog: ZoneCatalog, decorate_offsets: bool = True) -> List[str]:
    """Return one display entry per catalog zone, in catalog order."""
    if not decorate_offsets:
        return list(catalog)
    return [decorate(zone_name, catalog.rules_for(zone_name)) for zone_name in catalog]


def normalize_selection(value: str) -> str:
    """Strip an offset decoration, returning the bare zone identifier."""
    index = value.find(OFFSET_MARKER)
    if index == -1:
        return value
    return value[:index]
