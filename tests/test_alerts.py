"""
Unit tests for low water level alert derivation.
"""

import random
from datetime import date

import pytest

from hydrowatch.core.alerts import (
    alert_fill_percent,
    check_for_alerts,
    classify_severity,
    describe_alert,
    location_label,
    most_critical,
    random_season_alerts,
    seasonal_alerts,
    sort_alerts,
    threshold_for,
)
from hydrowatch.core.models import AlertData, Place, SeasonalPoint
from hydrowatch.utils.constants import ALERT_THRESHOLD, CRITICAL_THRESHOLD


def make_alert(severity, value, season="Summer"):
    return AlertData(season=season, value=value, severity=severity, year=2026)


@pytest.mark.unit
class TestSeverity:

    @pytest.mark.parametrize("value", [0, 1, 1500, 1999, 1999.9])
    def test_below_critical_threshold_is_critical(self, value):
        assert classify_severity(value) == "critical"

    @pytest.mark.parametrize("value", [2000, 2500, 2999])
    def test_between_thresholds_is_low(self, value):
        assert classify_severity(value) == "low"

    @pytest.mark.parametrize("value", [3000, 3001, 4800])
    def test_at_or_above_alert_threshold_is_no_alert(self, value):
        assert classify_severity(value) is None

    def test_threshold_for(self):
        assert threshold_for("critical") == CRITICAL_THRESHOLD
        assert threshold_for("low") == ALERT_THRESHOLD


@pytest.mark.unit
class TestSorting:

    def test_critical_first_then_ascending_value(self):
        alerts = [make_alert("low", 2900), make_alert("critical", 1500), make_alert("critical", 1900)]
        ordered = sort_alerts(alerts)
        assert [(a.severity, a.value) for a in ordered] == [
            ("critical", 1500),
            ("critical", 1900),
            ("low", 2900),
        ]

    def test_low_alerts_sorted_by_value(self):
        ordered = sort_alerts([make_alert("low", 2800), make_alert("low", 2100)])
        assert [a.value for a in ordered] == [2100, 2800]

    def test_most_critical(self):
        alerts = [make_alert("low", 2100), make_alert("critical", 1999)]
        assert most_critical(alerts).value == 1999
        assert most_critical([make_alert("low", 2100)]).value == 2100
        assert most_critical([]) is None


@pytest.mark.unit
class TestCheckForAlerts:

    def test_only_current_year_points(self):
        points = [
            SeasonalPoint("Summer 2025", 100, 2025),
            SeasonalPoint("Summer 2026", 2500, 2026),
        ]
        alerts = check_for_alerts(points, "Summer", 2026, "17/10/2026", "Chennai")
        assert len(alerts) == 1
        assert alerts[0].value == 2500
        assert alerts[0].severity == "low"
        assert alerts[0].location == "Chennai"
        assert alerts[0].date == "17/10/2026"

    def test_no_alert_at_threshold(self):
        points = [SeasonalPoint("Winter 2026", 3000, 2026)]
        assert check_for_alerts(points, "Winter", 2026) == []

    def test_seasonal_alerts_use_current_year_point(self):
        series = {
            "Summer": [SeasonalPoint("Summer 2025", 100, 2025), SeasonalPoint("Summer 2026", 2900, 2026)],
            "Monsoon": [SeasonalPoint("Monsoon 2026", 4000, 2026)],
            "Winter": [SeasonalPoint("Winter 2026", 1500, 2026)],
        }
        alerts = seasonal_alerts(series, 2026)
        assert [(a.season, a.severity, a.value) for a in alerts] == [
            ("Winter", "critical", 1500),
            ("Summer", "low", 2900),
        ]

    def test_seasonal_alerts_fall_back_to_last_point(self):
        series = {"Summer": [SeasonalPoint("Summer 2024", 1000, 2024), SeasonalPoint("Summer 2025", 1800, 2025)]}
        alerts = seasonal_alerts(series, 2026)
        assert len(alerts) == 1
        assert alerts[0].value == 1800
        assert alerts[0].year == 2025


@pytest.mark.unit
class TestRandomSeasonAlerts:

    def test_alerts_are_sorted_and_below_threshold(self):
        for seed in range(30):
            alerts = random_season_alerts(random.Random(seed), "Pune", date(2026, 10, 17))
            assert len(alerts) <= 3
            assert alerts == sort_alerts(alerts)
            for a in alerts:
                assert 0 <= a.value < ALERT_THRESHOLD
                assert a.severity == classify_severity(a.value)
                assert a.location == "Pune"
                assert a.date == "17/10/2026"
                assert a.year == 2026

    def test_same_rng_seed_reproduces_alerts(self):
        a = random_season_alerts(random.Random(7), "Pune", date(2026, 1, 1))
        b = random_season_alerts(random.Random(7), "Pune", date(2026, 1, 1))
        assert a == b


@pytest.mark.unit
class TestPresentationHelpers:

    def test_location_label_takes_first_part(self, chennai):
        assert location_label(chennai) == "Chennai"

    def test_location_label_default(self):
        assert location_label(None) == "Current Location"
        assert location_label(Place(description="")) == "Current Location"

    def test_fill_percent(self):
        assert alert_fill_percent(make_alert("critical", 1000)) == 50.0
        assert alert_fill_percent(make_alert("low", 1500)) == 50.0

    def test_describe_critical_alert(self):
        banner = describe_alert(make_alert("critical", 1500, "Winter"), "Fix any leaks immediately")
        assert "Critical" in banner["title"]
        assert banner["variant"] == "error"
        assert "1500m" in banner["text"]
        assert "threshold of 2000m" in banner["text"]
        assert banner["text"].endswith("Fix any leaks immediately")

    def test_describe_low_alert(self):
        banner = describe_alert(make_alert("low", 2500), "Collect and store rainwater")
        assert banner["variant"] == "warning"
        assert "recommended threshold of 3000m" in banner["text"]
