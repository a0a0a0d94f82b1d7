"""Application state: selected place and its water data, mirrored to a key-value store."""

import json
import threading
import time
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, MutableMapping, Optional, TypeVar

from loguru import logger

from hydrowatch.core.models import Place, WaterLevelData
from hydrowatch.data_sources.water_source import WaterLevelSource
from hydrowatch.utils.constants import STORAGE_KEYS

T = TypeVar("T")

FETCH_ERROR = "Failed to fetch water level data. Please try again."


class KeyValueStorage(ABC):
    """String key-value persistence (browser local storage analogue)."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        ...

    @abstractmethod
    def remove(self, key: str) -> None:
        ...


class MappingStorage(KeyValueStorage):
    """Storage over any mutable mapping (a dict, Streamlit session state)."""

    def __init__(self, mapping: Optional[MutableMapping] = None):
        self.mapping = mapping if mapping is not None else {}

    def get(self, key: str) -> Optional[str]:
        return self.mapping.get(key)

    def set(self, key: str, value: str) -> None:
        self.mapping[key] = value

    def remove(self, key: str) -> None:
        self.mapping.pop(key, None)


class JsonFileStorage(KeyValueStorage):
    """All keys in one JSON file on disk."""

    def __init__(self, path):
        self.path = Path(path)
        self._lock = threading.Lock()

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with open(self.path) as f:
                data = json.load(f)
            return data if isinstance(data, dict) else {}
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Could not read state file {self.path}: {e}")
            return {}

    def _write(self, data: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w") as f:
            json.dump(data, f, indent=2)

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            data = self._read()
            data[key] = value
            self._write(data)

    def remove(self, key: str) -> None:
        with self._lock:
            data = self._read()
            if data.pop(key, None) is not None:
                self._write(data)


def _load(storage: KeyValueStorage, key: str, parse: Callable[[dict], T]) -> Optional[T]:
    raw = storage.get(key)
    if not raw:
        return None
    try:
        return parse(json.loads(raw))
    except (ValueError, KeyError, TypeError) as e:
        logger.error(f"Error parsing {key} from storage: {e}")
        return None


class WaterLevelStore:
    """Selected place, water data and loading/error flags.

    Overlapping fetches resolve as "last call wins": each call takes a
    generation number and only the newest generation commits its data and
    clears the loading flag.
    """

    def __init__(self, source: WaterLevelSource, storage: KeyValueStorage,
                 delay_seconds: float = 2.0):
        self.source = source
        self.storage = storage
        self.delay_seconds = delay_seconds
        self._lock = threading.Lock()
        self._generation = 0

        self.selected_location: Optional[Place] = _load(
            storage, STORAGE_KEYS["selected_location"], Place.from_dict
        )
        self.water_data: Optional[WaterLevelData] = _load(
            storage, STORAGE_KEYS["water_data"], WaterLevelData.from_dict
        )
        self.is_loading = False
        self.error: Optional[str] = None

    def set_selected_location(self, place: Optional[Place]) -> None:
        """Select place; data for a different place is dropped."""
        with self._lock:
            if place != self.selected_location:
                # in-flight fetches belong to the old place
                self._generation += 1
                self.is_loading = False
                self.water_data = None
                self._persist(STORAGE_KEYS["water_data"], None)
            self.selected_location = place
            self._persist(STORAGE_KEYS["selected_location"], place)

    def set_water_data(self, data: Optional[WaterLevelData]) -> None:
        with self._lock:
            self.water_data = data
            self._persist(STORAGE_KEYS["water_data"], data)

    def set_error(self, message: Optional[str]) -> None:
        self.error = message

    def _persist(self, key: str, value) -> None:
        if value is None:
            self.storage.remove(key)
        else:
            self.storage.set(key, json.dumps(value.to_dict()))

    def fetch_water_data(self, place: Place) -> Optional[WaterLevelData]:
        """Select place, simulate a fetch and persist the result."""
        with self._lock:
            self._generation += 1
            generation = self._generation
            self.is_loading = True
            self.error = None
            self.selected_location = place

        try:
            if self.delay_seconds > 0:
                time.sleep(self.delay_seconds)
            data = self.source.fetch(place)

            with self._lock:
                if generation != self._generation:
                    logger.debug(f"Discarding stale fetch for {place.description}")
                    return None
                self.water_data = data
                self._persist(STORAGE_KEYS["selected_location"], place)
                self._persist(STORAGE_KEYS["water_data"], data)
            logger.info(f"Water data loaded for {place.description}")
            return data
        except Exception as e:
            logger.error(f"Error fetching water data: {e}")
            with self._lock:
                if generation == self._generation:
                    self.error = FETCH_ERROR
            return None
        finally:
            with self._lock:
                if generation == self._generation:
                    self.is_loading = False
