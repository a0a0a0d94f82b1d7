"""
Unit tests for the seeded seasonal data generator.
"""

import pytest

from hydrowatch.core.generator import (
    chart_years,
    filter_by_year_range,
    seasonal_series,
    seed_for_place,
    seeded_value,
    y_axis_scale,
)
from hydrowatch.core.models import Place, SeasonalPoint
from hydrowatch.utils.constants import DEFAULT_SEED, SERIES_PARAMS


@pytest.mark.unit
class TestSeededValue:

    @pytest.mark.parametrize("seed", [0, 42, 93353, -1200, 10**6])
    def test_same_seed_and_index_repeat(self, seed):
        first = [seeded_value(i, seed, 200, 4800) for i in range(50)]
        second = [seeded_value(i, seed, 200, 4800) for i in range(50)]
        assert first == second

    @pytest.mark.parametrize("lo,hi", [(200, 4800), (100, 4000), (500, 5000), (50, 3000), (0, 0), (7, 8)])
    def test_values_within_range(self, lo, hi):
        for seed in (0, 42, 93353, -77):
            for i in range(200):
                v = seeded_value(i, seed, lo, hi)
                assert lo <= v <= hi
                assert isinstance(v, int)

    def test_different_seeds_give_different_sequences(self):
        a = [seeded_value(i, 1, 0, 10000) for i in range(20)]
        b = [seeded_value(i, 2, 0, 10000) for i in range(20)]
        assert a != b


@pytest.mark.unit
class TestSeedForPlace:

    def test_seed_from_coordinates(self, chennai):
        assert seed_for_place(chennai) == 93353

    def test_default_seed_without_place(self):
        assert seed_for_place(None) == DEFAULT_SEED

    def test_default_seed_without_coordinates(self):
        assert seed_for_place(Place(description="Somewhere")) == DEFAULT_SEED

    def test_zero_coordinate_falls_back_to_default(self):
        assert seed_for_place(Place(description="Null Island", lat=0.0, lng=10.0)) == DEFAULT_SEED


@pytest.mark.unit
class TestSeasonalSeries:

    def test_chart_years_end_with_current_year(self):
        years = chart_years(2026)
        assert len(years) == 20
        assert years[0] == 2007
        assert years[-1] == 2026

    def test_series_names_and_lengths(self):
        series = seasonal_series(42, 2026)
        assert set(series) == set(SERIES_PARAMS)
        assert all(len(points) == 20 for points in series.values())

    def test_labels(self):
        series = seasonal_series(42, 2026)
        assert series["water_level"][0].label == "2007"
        assert series["Summer"][-1].label == "Summer 2026"
        assert series["Monsoon"][3].label == "Monsoon 2010"
        assert series["Winter"][-1].year == 2026

    def test_values_follow_series_params(self):
        series = seasonal_series(93353, 2026)
        for name, (offset, lo, hi) in SERIES_PARAMS.items():
            for idx, point in enumerate(series[name]):
                assert point.value == seeded_value(idx + offset, 93353, lo, hi)
                assert lo <= point.value <= hi

    def test_same_seed_reproduces_chart(self):
        a = seasonal_series(1234, 2026)
        b = seasonal_series(1234, 2026)
        assert a == b


@pytest.mark.unit
class TestYearRangeAndScale:

    def test_filter_by_year_range_inclusive(self):
        years = chart_years(2026)
        points = seasonal_series(42, 2026)["Summer"]
        filtered = filter_by_year_range(points, years, 5, 9)
        assert [p.year for p in filtered] == [2012, 2013, 2014, 2015, 2016]

    def test_filter_full_range(self):
        years = chart_years(2026)
        points = seasonal_series(42, 2026)["Winter"]
        assert filter_by_year_range(points, years, 0, 19) == points

    def test_filter_clamps_indices(self):
        years = chart_years(2026)
        points = seasonal_series(42, 2026)["Winter"]
        assert [p.year for p in filter_by_year_range(points, years, 18, 40)] == [2025, 2026]

    def test_y_axis_rounds_up_to_500(self):
        series = {
            "a": [SeasonalPoint("2025", 1234, 2025)],
            "b": [SeasonalPoint("2026", 4801, 2026)],
        }
        top, ticks = y_axis_scale(series)
        assert top == 5000
        assert ticks == [0, 500, 1000, 1500, 2000, 2500, 3000, 3500, 4000, 4500, 5000]

    def test_y_axis_exact_multiple(self):
        top, ticks = y_axis_scale({"a": [SeasonalPoint("2026", 4500, 2026)]})
        assert top == 4500
        assert ticks[-1] == 4500
