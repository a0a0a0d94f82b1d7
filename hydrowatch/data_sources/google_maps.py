"""Google Maps Platform client for place search and map rendering."""

import threading
from abc import ABC, abstractmethod
from typing import List, Optional

import httpx
from loguru import logger

from hydrowatch.core.models import Place, Prediction
from hydrowatch.utils.config import GoogleMapsConfig, settings

MISSING_KEY_NOTICE = "Google Maps API key is not configured. Please check your environment variables."
LOAD_FAILED_NOTICE = "Google Maps failed to load. Check API key and network."


class MapsConfigError(RuntimeError):
    """Mapping credential is missing."""


class MapsServiceError(RuntimeError):
    """Mapping service unreachable or timed out."""


class MappingProvider(ABC):
    """Geocoding and mapping capability."""

    @abstractmethod
    def search(self, text: str) -> List[Prediction]:
        ...

    @abstractmethod
    def details(self, place_id: str, description: str = "") -> Optional[Place]:
        ...

    @abstractmethod
    def render(self, container, place: Optional[Place]) -> None:
        ...

    @abstractmethod
    def teardown(self) -> None:
        ...


class GoogleMapsClient(MappingProvider):
    """Places autocomplete/details over the Places web service."""

    def __init__(self, api_key: str, config: Optional[GoogleMapsConfig] = None,
                 http_client: Optional[httpx.Client] = None):
        self.config = config or settings.google_maps
        self.api_key = api_key
        self.http = http_client or httpx.Client(
            base_url=self.config.base_url, timeout=self.config.timeout_seconds
        )
        self._container = None

    def _get(self, path: str, params: dict) -> dict:
        try:
            resp = self.http.get(path, params={**params, "key": self.api_key})
            resp.raise_for_status()
            return resp.json()
        except httpx.HTTPError as e:
            logger.error(f"Google Maps request failed: {e}")
            raise MapsServiceError(LOAD_FAILED_NOTICE) from e

    def search(self, text: str) -> List[Prediction]:
        """Region predictions restricted to the configured country."""
        if not text or not text.strip():
            return []

        data = self._get("/place/autocomplete/json", {
            "input": text,
            "components": f"country:{self.config.country}",
            "types": self.config.types,
            "language": self.config.language,
        })

        status = data.get("status")
        if status != "OK":
            logger.error(f"Error fetching predictions: {status}")
            return []

        predictions = []
        for p in data.get("predictions", []):
            fmt = p.get("structured_formatting", {})
            predictions.append(Prediction(
                description=p["description"],
                place_id=p["place_id"],
                main_text=fmt.get("main_text", ""),
                secondary_text=fmt.get("secondary_text", ""),
            ))
        return predictions

    def details(self, place_id: str, description: str = "") -> Optional[Place]:
        data = self._get("/place/details/json", {
            "place_id": place_id,
            "fields": "geometry,name,formatted_address",
            "language": self.config.language,
            "region": self.config.region,
        })

        status = data.get("status")
        result = data.get("result")
        if status != "OK" or not result:
            logger.error(f"Error getting place details: {status}")
            return None

        location = result.get("geometry", {}).get("location", {})
        return Place(
            description=description or result.get("formatted_address") or result.get("name", ""),
            place_id=place_id,
            name=result.get("name"),
            formatted_address=result.get("formatted_address"),
            lat=location.get("lat"),
            lng=location.get("lng"),
        )

    def render(self, container, place: Optional[Place]) -> None:
        """Show place on a MapView, tearing down any previous container."""
        if self._container is not None and self._container is not container:
            self._container.teardown()
        self._container = container
        container.mark_visible()
        if place is not None:
            container.show(place)

    def teardown(self) -> None:
        if self._container is not None:
            self._container.teardown()
            self._container = None
        self.http.close()


_maps_client: Optional[GoogleMapsClient] = None
_maps_lock = threading.Lock()


def load_google_maps(api_key: Optional[str] = None) -> GoogleMapsClient:
    """Shared client; concurrent callers get the same instance."""
    global _maps_client
    if _maps_client is not None:
        return _maps_client

    with _maps_lock:
        if _maps_client is None:
            key = api_key or settings.google_maps.api_key
            if not key:
                raise MapsConfigError(MISSING_KEY_NOTICE)
            _maps_client = GoogleMapsClient(api_key=key)
            logger.info("Google Maps client initialized")
    return _maps_client


def reset_google_maps() -> None:
    """Drop the shared client so the next load starts fresh."""
    global _maps_client
    with _maps_lock:
        if _maps_client is not None:
            _maps_client.teardown()
        _maps_client = None
