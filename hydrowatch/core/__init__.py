"""Core module."""
from hydrowatch.core.models import AlertData, ForecastDay, Place, Prediction, SeasonalPoint, WaterLevelData
from hydrowatch.core.generator import seasonal_series, seed_for_place, seeded_value
from hydrowatch.core.alerts import classify_severity, seasonal_alerts, sort_alerts
from hydrowatch.core.store import JsonFileStorage, KeyValueStorage, MappingStorage, WaterLevelStore
