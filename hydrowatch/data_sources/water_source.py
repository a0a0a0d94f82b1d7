"""Water level data sources."""

import random
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from loguru import logger

from hydrowatch.core.models import ForecastDay, Place, WaterLevelData
from hydrowatch.utils.constants import FORECAST_DAYS, TRENDS


class WaterLevelSource(ABC):
    """Anything that can produce water level readings for a place."""

    @abstractmethod
    def fetch(self, place: Place) -> WaterLevelData:
        ...


class MockWaterLevelSource(WaterLevelSource):
    """Uniform random readings, regenerated on every fetch."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def fetch(self, place: Place) -> WaterLevelData:
        forecast = [
            ForecastDay(
                day=day,
                level=self.rng.randrange(1000) + 500,
                precipitation=self.rng.randrange(30),
                temperature=self.rng.randrange(15) + 15,
            )
            for day in FORECAST_DAYS
        ]
        data = WaterLevelData(
            current_level=self.rng.randrange(1000) + 500,
            average_level=1000,
            trend=self.rng.choice(TRENDS),
            last_updated=datetime.now().strftime("%d/%m/%Y, %H:%M:%S"),
            forecast=forecast,
        )
        logger.debug(f"Mock water data for {place.description}: {data.current_level}m ({data.trend})")
        return data


water_source = MockWaterLevelSource()
