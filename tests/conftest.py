import pytest

from timezone_parameter.config.timezones import ZoneCatalog, ZoneRules


SAMPLE_RULES = {
    "Africa/Abidjan": ZoneRules(0),
    "America/Bogota": ZoneRules(-5 * 3600),
    "America/New_York": ZoneRules(-5 * 3600, observes_dst=True, dst_savings_seconds=3600),
    "America/St_Johns": ZoneRules(-(3 * 3600 + 30 * 60), observes_dst=True, dst_savings_seconds=3600),
    "Asia/Kolkata": ZoneRules(5 * 3600 + 30 * 60),
    "Asia/Tokyo": ZoneRules(9 * 3600),
    "Australia/Adelaide": ZoneRules(9 * 3600 + 30 * 60, observes_dst=True, dst_savings_seconds=3600),
    "Australia/Lord_Howe": ZoneRules(10 * 3600 + 30 * 60, observes_dst=True, dst_savings_seconds=30 * 60),
    "Europe/Paris": ZoneRules(3600, observes_dst=True, dst_savings_seconds=3600),
    "UTC": ZoneRules(0),
}


@pytest.fixture
def catalog() -> ZoneCatalog:
    return ZoneCatalog.from_rules(SAMPLE_RULES)
