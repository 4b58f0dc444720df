import logging
import re
from datetime import datetime, timezone

import pytest

from timezone_parameter.config.timezones import (
    UNKNOWN_ZONE_RULES,
    TimezoneOption,
    ZoneCatalog,
    ZoneRules,
    build_timezone_options,
    load_system_catalog,
    read_zone_rules,
)
from timezone_parameter.errors import CatalogError
from timezone_parameter.parameters.choices import build_choices, normalize_selection

WINTER = datetime(2024, 1, 15, 12, tzinfo=timezone.utc)
SUMMER = datetime(2024, 7, 15, 12, tzinfo=timezone.utc)


class _Collect(logging.Handler):
    def __init__(self) -> None:
        super().__init__()
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


def test_catalog_preserves_order_and_membership(catalog):
    assert catalog.first() == "Africa/Abidjan"
    assert catalog.identifiers[-1] == "UTC"
    assert "Asia/Tokyo" in catalog
    assert "asia/tokyo" not in catalog
    assert 42 not in catalog
    assert len(catalog) == 10


def test_catalog_rejects_marker_in_identifier():
    with pytest.raises(CatalogError):
        ZoneCatalog.from_rules({"Bad (UTC+01:00)": ZoneRules(3600)})


def test_catalog_rejects_duplicates():
    with pytest.raises(CatalogError):
        ZoneCatalog.from_rules([("UTC", ZoneRules(0)), ("UTC", ZoneRules(0))])


def test_empty_catalog_has_no_first():
    with pytest.raises(CatalogError):
        ZoneCatalog.from_rules({}).first()


def test_unknown_zone_falls_back_to_zero_offset(catalog):
    handler = _Collect()
    logger = logging.getLogger("timezone_parameter.catalog")
    logger.addHandler(handler)
    try:
        assert catalog.rules_for("Mars/Phobos") == UNKNOWN_ZONE_RULES
    finally:
        logger.removeHandler(handler)
    assert handler.records and handler.records[0].levelno == logging.WARNING


def test_build_timezone_options_lists_every_zone(catalog):
    options = build_timezone_options(catalog)
    assert options[0] == TimezoneOption(value="Africa/Abidjan", label="Africa/Abidjan")
    assert [option.value for option in options] == list(catalog)


def test_read_zone_rules_for_zone_with_dst():
    winter = read_zone_rules("America/New_York", WINTER)
    summer = read_zone_rules("America/New_York", SUMMER)
    expected = ZoneRules(-5 * 3600, observes_dst=True, dst_savings_seconds=3600)
    assert winter == expected
    assert summer == expected


def test_read_zone_rules_for_zone_without_dst():
    assert read_zone_rules("Asia/Tokyo", WINTER) == ZoneRules(9 * 3600)
    assert read_zone_rules("Asia/Kolkata", SUMMER) == ZoneRules(5 * 3600 + 30 * 60)
    assert read_zone_rules("UTC", SUMMER) == ZoneRules(0)


def test_read_zone_rules_southern_hemisphere():
    rules = read_zone_rules("Australia/Adelaide", SUMMER)
    assert rules == ZoneRules(9 * 3600 + 30 * 60, observes_dst=True, dst_savings_seconds=3600)


@pytest.mark.parametrize("zone_name", ["Europe/Dublin", "Africa/Casablanca"])
def test_negative_dst_becomes_positive_saving(zone_name):
    expected = ZoneRules(0, observes_dst=True, dst_savings_seconds=3600)
    assert read_zone_rules(zone_name, WINTER) == expected
    assert read_zone_rules(zone_name, SUMMER) == expected


def test_negative_dst_zones_label_like_their_neighbours():
    choices = set(build_choices(load_system_catalog(WINTER)))
    assert "Europe/Dublin (UTC+01:00)" in choices
    assert "Europe/London (UTC+01:00)" in choices
    assert "Africa/Casablanca (UTC+01:00)" in choices


def test_system_catalog_round_trips():
    system = load_system_catalog(WINTER)
    assert len(system) > 300
    assert list(system) == sorted(system)
    assert "UTC" in system

    pattern = re.compile(r"^.+ \(UTC[+-]\d{2}:\d{2}\)$")
    for entry in build_choices(system):
        assert pattern.match(entry), entry
        assert normalize_selection(entry) in system


def test_system_catalog_labels():
    choices = set(build_choices(load_system_catalog(WINTER)))
    assert "UTC (UTC+00:00)" in choices
    assert "Asia/Tokyo (UTC+09:00)" in choices
    assert "America/New_York (UTC-04:00)" in choices
    assert "Australia/Adelaide (UTC+10:30)" in choices


def test_naive_reference_is_treated_as_utc():
    naive = load_system_catalog(datetime(2024, 1, 15, 12))
    aware = load_system_catalog(WINTER)
    assert naive.rules_for("Europe/Paris") == aware.rules_for("Europe/Paris")
