"""Data sources module."""

from hydrowatch.data_sources.google_maps import (
    GoogleMapsClient,
    MappingProvider,
    MapsConfigError,
    MapsServiceError,
    load_google_maps,
)
from hydrowatch.data_sources.llm_client import ChatCompletionClient, chat_client_from_settings
from hydrowatch.data_sources.water_source import MockWaterLevelSource, WaterLevelSource, water_source

__all__ = [
    "GoogleMapsClient", "MappingProvider", "MapsConfigError", "MapsServiceError", "load_google_maps",
    "ChatCompletionClient", "chat_client_from_settings",
    "MockWaterLevelSource", "WaterLevelSource", "water_source",
]
