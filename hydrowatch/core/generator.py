"""Seeded synthetic data for the seasonal water level charts.

Values come from a sine-based pseudo-random function so that the same seed
always draws the same charts. The seed is derived from the selected place,
which keeps a location's charts stable between reloads.
"""

import math
from datetime import date
from typing import Dict, List, Optional, Tuple

from hydrowatch.core.models import Place, SeasonalPoint
from hydrowatch.utils.constants import CHART_YEARS, DEFAULT_SEED, SERIES_PARAMS, Y_AXIS_STEP


def seeded_value(index: int, seed: int, min_value: int, max_value: int) -> int:
    """Deterministic value in [min_value, max_value] for (index, seed)."""
    x = math.sin(index + seed) * 10000
    fraction = x - math.floor(x)
    return math.floor(fraction * (max_value - min_value + 1) + min_value)


def seed_for_place(place: Optional[Place]) -> int:
    if place and place.lat and place.lng:
        return math.floor((place.lat + place.lng) * 1000)
    return DEFAULT_SEED


def chart_years(current_year: Optional[int] = None) -> List[int]:
    """The CHART_YEARS years ending with the current year."""
    current_year = current_year or date.today().year
    start = current_year - (CHART_YEARS - 1)
    return [start + i for i in range(CHART_YEARS)]


def seasonal_series(seed: int, current_year: Optional[int] = None) -> Dict[str, List[SeasonalPoint]]:
    """Annual water level plus Summer/Monsoon/Winter series for a seed."""
    years = chart_years(current_year)
    series = {}
    for name, (offset, lo, hi) in SERIES_PARAMS.items():
        points = []
        for idx, year in enumerate(years):
            label = str(year) if name == "water_level" else f"{name} {year}"
            points.append(SeasonalPoint(label=label, value=seeded_value(idx + offset, seed, lo, hi), year=year))
        series[name] = points
    return series


def filter_by_year_range(points: List[SeasonalPoint], years: List[int],
                         start_index: int, end_index: int) -> List[SeasonalPoint]:
    """Keep points whose year falls in years[start_index]..years[end_index]."""
    start_index = max(0, min(start_index, len(years) - 1))
    end_index = max(start_index, min(end_index, len(years) - 1))
    start_year, end_year = years[start_index], years[end_index]
    return [p for p in points if start_year <= p.year <= end_year]


def y_axis_scale(series: Dict[str, List[SeasonalPoint]]) -> Tuple[int, List[int]]:
    """Shared y-axis top (rounded up to Y_AXIS_STEP) and its ticks."""
    max_value = max((p.value for points in series.values() for p in points), default=0)
    top = math.ceil(max_value / Y_AXIS_STEP) * Y_AXIS_STEP
    ticks = [i * Y_AXIS_STEP for i in range(top // Y_AXIS_STEP + 1)]
    return top, ticks
