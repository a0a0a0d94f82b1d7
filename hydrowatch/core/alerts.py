"""Low water level alert derivation."""

import random
from datetime import date
from typing import Dict, List, Optional

from hydrowatch.core.models import AlertData, Place, SeasonalPoint
from hydrowatch.utils.constants import (
    ALERT_PRECAUTIONS,
    ALERT_THRESHOLD,
    CRITICAL_THRESHOLD,
    SEASONS,
)


def classify_severity(value: float) -> Optional[str]:
    if value < CRITICAL_THRESHOLD:
        return "critical"
    if value < ALERT_THRESHOLD:
        return "low"
    return None


def threshold_for(severity: str) -> int:
    return CRITICAL_THRESHOLD if severity == "critical" else ALERT_THRESHOLD


def location_label(place: Optional[Place]) -> str:
    if place and place.description:
        return place.description.split(",")[0]
    return "Current Location"


def today_str(today: Optional[date] = None) -> str:
    return (today or date.today()).strftime("%d/%m/%Y")


def check_for_alerts(points: List[SeasonalPoint], season: str, current_year: int,
                     date_str: str = "", location: str = "") -> List[AlertData]:
    """Alerts for current-year points below the alert threshold."""
    alerts = []
    for p in points:
        if p.year != current_year:
            continue
        severity = classify_severity(p.value)
        if severity is None:
            continue
        alerts.append(AlertData(
            season=season,
            value=p.value,
            severity=severity,
            year=p.year,
            date=date_str,
            location=location,
        ))
    return alerts


def sort_alerts(alerts: List[AlertData]) -> List[AlertData]:
    """Critical first, then lowest value first."""
    return sorted(alerts, key=lambda a: (0 if a.severity == "critical" else 1, a.value))


def seasonal_alerts(series: Dict[str, List[SeasonalPoint]], current_year: int,
                    date_str: str = "", location: str = "") -> List[AlertData]:
    """Alerts from the current-year point of each season's series."""
    alerts = []
    for season in SEASONS:
        points = series.get(season) or []
        if not points:
            continue
        current = next((p for p in points if p.year == current_year), points[-1])
        alerts.extend(check_for_alerts([current], season, current.year, date_str, location))
    return sort_alerts(alerts)


def most_critical(alerts: List[AlertData]) -> Optional[AlertData]:
    if not alerts:
        return None
    return next((a for a in alerts if a.severity == "critical"), alerts[0])


def random_season_alerts(rng: Optional[random.Random] = None, location: str = "Current Location",
                         today: Optional[date] = None) -> List[AlertData]:
    """One random reading per season (0-3499m); readings under threshold become alerts."""
    rng = rng or random.Random()
    date_str = today_str(today)
    year = (today or date.today()).year
    alerts = []
    for season in SEASONS:
        value = rng.randrange(3500)
        severity = classify_severity(value)
        if severity:
            alerts.append(AlertData(season=season, value=value, severity=severity,
                                    year=year, date=date_str, location=location))
    return sort_alerts(alerts)


def random_precaution(rng: Optional[random.Random] = None) -> str:
    return (rng or random).choice(ALERT_PRECAUTIONS)


def alert_fill_percent(alert: AlertData) -> float:
    return min(100.0, alert.value / threshold_for(alert.severity) * 100)


def describe_alert(alert: AlertData, precaution: str) -> Dict[str, str]:
    """Banner title and text for an alert."""
    critical = alert.severity == "critical"
    title = "🚨 Critical Water Level Alert! 🚨" if critical else "⚠️ Low Water Level Alert"
    text = (
        f"{alert.season} {alert.year} water level is {'critically ' if critical else ''}low at {alert.value}m. "
        f"This is below the {'critical' if critical else 'recommended'} threshold of "
        f"{threshold_for(alert.severity)}m. Recommended action: {precaution}"
    )
    return {"title": title, "text": text, "variant": "error" if critical else "warning"}
