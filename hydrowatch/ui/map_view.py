"""Folium map holding a single selected-place marker."""

from typing import Callable, List, Optional

import folium
from loguru import logger

from hydrowatch.core.models import Place
from hydrowatch.utils.config import settings


class MapView:
    """Lazily built map with at most one marker.

    Nothing is built until the view is marked visible; a place shown before
    then is kept and drawn on first build.
    """

    def __init__(self, center: Optional[dict] = None, zoom: Optional[int] = None,
                 selected_zoom: Optional[int] = None, tiles: str = "CartoDB positron"):
        self.center = center or settings.ui.map_center
        self.zoom = zoom or settings.ui.map_zoom
        self.selected_zoom = selected_zoom or settings.ui.selected_zoom
        self.tiles = tiles
        self.map: Optional[folium.Map] = None
        self.marker: Optional[folium.Marker] = None
        self.visible = False
        self._pending: Optional[Place] = None
        self._listeners: List[Callable[[Place], None]] = []

    def on_show(self, callback: Callable[[Place], None]) -> None:
        self._listeners.append(callback)

    def mark_visible(self) -> None:
        if self.visible:
            return
        self.visible = True
        self._build()
        if self._pending is not None:
            place, self._pending = self._pending, None
            self.show(place)

    def _build(self) -> None:
        self.map = folium.Map(
            location=[self.center["lat"], self.center["lng"]],
            zoom_start=self.zoom,
            tiles=self.tiles,
        )
        logger.debug("Map initialized")

    def show(self, place: Place) -> None:
        """Re-center on place and replace the marker."""
        if not place.has_coordinates:
            logger.warning(f"No coordinates for {place.description}; marker not placed")
            return
        if not self.visible:
            self._pending = place
            return
        if self.map is None:
            self._build()

        self._remove_marker()
        position = [place.lat, place.lng]
        self.marker = folium.Marker(
            location=position,
            tooltip=place.description or "Selected Location",
            popup=folium.Popup(place.formatted_address or place.description, max_width=300),
            icon=folium.Icon(color="blue", icon="tint"),
        )
        self.marker.add_to(self.map)
        self.map.location = position
        self.map.options["zoom"] = self.selected_zoom

        for callback in self._listeners:
            callback(place)

    def _remove_marker(self) -> None:
        if self.marker is not None and self.map is not None:
            self.map._children.pop(self.marker.get_name(), None)
        self.marker = None

    @property
    def marker_count(self) -> int:
        if self.map is None:
            return 0
        return sum(1 for child in self.map._children.values() if isinstance(child, folium.Marker))

    def teardown(self) -> None:
        self._remove_marker()
        self._listeners.clear()
        self._pending = None
        self.map = None
        self.visible = False
