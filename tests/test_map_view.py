"""
Tests for the single-marker map view.
"""

import folium
import pytest

from hydrowatch.core.models import Place
from hydrowatch.ui.map_view import MapView


@pytest.fixture
def view():
    return MapView(center={"lat": 20.5937, "lng": 78.9629}, zoom=5, selected_zoom=12)


@pytest.mark.unit
class TestLazyBuild:

    def test_nothing_built_until_visible(self, view):
        assert view.map is None
        view.mark_visible()
        assert isinstance(view.map, folium.Map)
        assert view.marker_count == 0

    def test_place_before_visible_is_drawn_on_build(self, view, chennai):
        view.show(chennai)
        assert view.map is None

        view.mark_visible()
        assert view.marker_count == 1
        assert view.map.location == [chennai.lat, chennai.lng]

    def test_mark_visible_twice_keeps_map(self, view):
        view.mark_visible()
        first = view.map
        view.mark_visible()
        assert view.map is first


@pytest.mark.unit
class TestSingleMarker:

    def test_two_places_leave_one_marker(self, view, chennai, pune):
        view.mark_visible()
        view.show(chennai)
        view.show(pune)

        assert view.marker_count == 1
        assert view.marker.location == [pune.lat, pune.lng]
        assert view.map.location == [pune.lat, pune.lng]
        assert view.map.options["zoom"] == 12

    def test_place_without_coordinates_is_ignored(self, view, chennai):
        view.mark_visible()
        view.show(chennai)
        view.show(Place(description="Unknown"))

        assert view.marker_count == 1
        assert view.marker.location == [chennai.lat, chennai.lng]

    def test_listeners_notified(self, view, chennai):
        seen = []
        view.on_show(seen.append)
        view.mark_visible()
        view.show(chennai)
        assert seen == [chennai]


@pytest.mark.unit
class TestTeardown:

    def test_teardown_resets_view(self, view, chennai):
        seen = []
        view.on_show(seen.append)
        view.mark_visible()
        view.show(chennai)

        view.teardown()
        assert view.map is None
        assert view.marker is None
        assert view.visible is False
        assert view.marker_count == 0

        view.mark_visible()
        view.show(chennai)
        assert seen == [chennai]
        assert view.marker_count == 1
