"""Data models for places, water levels and alerts."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Place:
    """Normalized search result."""
    description: str
    place_id: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None
    formatted_address: Optional[str] = None
    name: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "description": self.description,
            "place_id": self.place_id,
            "lat": self.lat,
            "lng": self.lng,
            "formatted_address": self.formatted_address,
            "name": self.name,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Place":
        return cls(
            description=data["description"],
            place_id=data.get("place_id"),
            lat=data.get("lat"),
            lng=data.get("lng"),
            formatted_address=data.get("formatted_address"),
            name=data.get("name"),
        )

    @property
    def has_coordinates(self) -> bool:
        return self.lat is not None and self.lng is not None


@dataclass
class Prediction:
    """Autocomplete suggestion."""
    description: str
    place_id: str
    main_text: str = ""
    secondary_text: str = ""

    def to_dict(self) -> dict:
        return {
            "description": self.description,
            "place_id": self.place_id,
            "main_text": self.main_text,
            "secondary_text": self.secondary_text,
        }


@dataclass
class ForecastDay:
    day: str
    level: int
    precipitation: int  # %
    temperature: int  # °C

    def to_dict(self) -> dict:
        return {
            "day": self.day,
            "level": self.level,
            "precipitation": self.precipitation,
            "temperature": self.temperature,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ForecastDay":
        return cls(
            day=data["day"],
            level=data["level"],
            precipitation=data["precipitation"],
            temperature=data["temperature"],
        )


@dataclass
class WaterLevelData:
    """Current water level with a 5-day forecast."""
    current_level: int
    average_level: int
    trend: str
    last_updated: str
    forecast: list = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "current_level": self.current_level,
            "average_level": self.average_level,
            "trend": self.trend,
            "last_updated": self.last_updated,
            "forecast": [d.to_dict() for d in self.forecast],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WaterLevelData":
        return cls(
            current_level=data["current_level"],
            average_level=data["average_level"],
            trend=data["trend"],
            last_updated=data["last_updated"],
            forecast=[ForecastDay.from_dict(d) for d in data.get("forecast", [])],
        )

    @property
    def trend_label(self) -> str:
        if self.trend == "up":
            return "Above average"
        if self.trend == "down":
            return "Below average"
        return "Stable"

    @property
    def peak_level(self) -> int:
        return max((d.level for d in self.forecast), default=self.current_level)

    @property
    def lowest_level(self) -> int:
        return min((d.level for d in self.forecast), default=self.current_level)


@dataclass
class SeasonalPoint:
    label: str
    value: int
    year: int

    def to_dict(self) -> dict:
        return {"label": self.label, "value": self.value, "year": self.year}


@dataclass
class AlertData:
    """Low water level alert for one season."""
    season: str
    value: int
    severity: str
    year: int
    date: str = ""
    location: str = ""

    def to_dict(self) -> dict:
        return {
            "season": self.season,
            "value": self.value,
            "severity": self.severity,
            "year": self.year,
            "date": self.date,
            "location": self.location,
        }
