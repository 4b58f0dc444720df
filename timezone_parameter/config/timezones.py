"""Read-only catalog of time zone identifiers and their offset rules."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Iterable, Iterator, Mapping, Optional, Tuple
from zoneinfo import ZoneInfo, available_timezones

from timezone_parameter.config.settings import get_settings
from timezone_parameter.errors import CatalogError
from timezone_parameter.utils.logging import get_logger

logger = get_logger("catalog")

OFFSET_MARKER = " (UTC"


@dataclass(frozen=True)
class ZoneRules:
    """Standard offset and daylight-saving metadata for one zone, in seconds."""

    standard_offset_seconds: int
    observes_dst: bool = False
    dst_savings_seconds: int = 0


UNKNOWN_ZONE_RULES = ZoneRules(standard_offset_seconds=0)


@dataclass(frozen=True)
class TimezoneOption:
    value: str
    label: str


class ZoneCatalog:
    """Ordered, immutable set of zone identifiers with per-zone rules.

    Membership checks are exact string matches. Iteration follows the order the
    catalog was built in, which also decides the parameter default.
    """

    __slots__ = ("_identifiers", "_rules")

    def __init__(self, entries: Iterable[Tuple[str, ZoneRules]]) -> None:
        identifiers: list[str] = []
        rules: dict[str, ZoneRules] = {}
        for identifier, zone_rules in entries:
            if OFFSET_MARKER in identifier:
                raise CatalogError(f"Zone identifier {identifier!r} contains the offset marker {OFFSET_MARKER!r}")
            if identifier in rules:
                raise CatalogError(f"Duplicate zone identifier {identifier!r}")
            identifiers.append(identifier)
            rules[identifier] = zone_rules
        self._identifiers: Tuple[str, ...] = tuple(identifiers)
        self._rules: Mapping[str, ZoneRules] = rules

    @classmethod
    def from_rules(cls, rules: Mapping[str, ZoneRules] | Iterable[Tuple[str, ZoneRules]]) -> "ZoneCatalog":
        items = rules.items() if isinstance(rules, Mapping) else rules
        return cls(items)

    @property
    def identifiers(self) -> Tuple[str, ...]:
        return self._identifiers

    def __len__(self) -> int:
        return len(self._identifiers)

    def __iter__(self) -> Iterator[str]:
        return iter(self._identifiers)

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and identifier in self._rules

    def __repr__(self) -> str:
        return f"ZoneCatalog({len(self)} zones)"

    def first(self) -> str:
        if not self._identifiers:
            raise CatalogError("Zone catalog is empty")
        return self._identifiers[0]

    def rules_for(self, identifier: str) -> ZoneRules:
        """Return the rules for ``identifier``; unknown zones behave like GMT."""
        zone_rules = self._rules.get(identifier)
        if zone_rules is None:
            logger.warning("Unknown zone %r, falling back to UTC+00:00", identifier)
            return UNKNOWN_ZONE_RULES
        return zone_rules


def _sample_instants(reference: datetime) -> Iterator[datetime]:
    # 1st and 15th of every month covers both halves of any DST regime.
    for month in range(1, 13):
        for day in (1, 15):
            yield datetime(reference.year, month, day, 12, tzinfo=timezone.utc)


def read_zone_rules(zone_name: str, reference: datetime) -> ZoneRules:
    """Derive :class:`ZoneRules` for ``zone_name`` from the tz database."""
    tz = ZoneInfo(zone_name)
    local = reference.astimezone(tz)
    current_dst = local.dst() or timedelta(0)
    standard = (local.utcoffset() or timedelta(0)) - current_dst

    savings = timedelta(0)
    for instant in _sample_instants(reference):
        dst = instant.astimezone(tz).dst() or timedelta(0)
        if abs(dst) > abs(savings):
            savings = dst
    if abs(current_dst) > abs(savings):
        savings = current_dst
    # Zones such as Europe/Dublin mark winter time as a negative saving;
    # express them as a standard offset plus a positive saving instead.
    if savings < timedelta(0):
        standard += savings
        savings = -savings

    return ZoneRules(
        standard_offset_seconds=int(standard.total_seconds()),
        observes_dst=bool(savings),
        dst_savings_seconds=int(savings.total_seconds()),
    )


def load_system_catalog(reference: Optional[datetime] = None) -> ZoneCatalog:
    """Build a catalog from every zone the installed tz database knows about."""
    if reference is None:
        reference = datetime.now(timezone.utc)
    elif reference.tzinfo is None:
        reference = reference.replace(tzinfo=timezone.utc)

    names = sorted(available_timezones())
    catalog = ZoneCatalog((name, read_zone_rules(name, reference)) for name in names)
    logger.info("Loaded %d zones from the tz database (reference %s)", len(catalog), reference.isoformat())
    return catalog


@lru_cache(maxsize=1)
def get_system_catalog() -> ZoneCatalog:
    """Return the process-wide system catalog, loading it on first use."""
    return load_system_catalog(get_settings().offset_reference)


def build_timezone_options(catalog: ZoneCatalog) -> list[TimezoneOption]:
    """Return one option per zone for host list boxes, value and label alike."""
    return [TimezoneOption(value=zone_name, label=zone_name) for zone_name in catalog]
