"""Configuration loader for HydroWatch."""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()


class APIConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = True
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://localhost:8501",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
        "http://127.0.0.1:8501",
    ]


class UIConfig(BaseModel):
    port: int = 8501
    page_title: str = "DWLR – Seasonal Water Insights"
    api_base_url: str = "http://localhost:8000"
    api_timeout_seconds: int = 60
    map_center: dict = {"lat": 20.5937, "lng": 78.9629}
    map_zoom: int = 5
    selected_zoom: int = 12


class LLMConfig(BaseModel):
    api_key: Optional[str] = None
    model: str = "llama-3.1-8b-instant"
    temperature: float = 0.7
    max_tokens: int = 1000
    top_p: float = 1.0
    timeout_seconds: int = 60


class GoogleMapsConfig(BaseModel):
    api_key: Optional[str] = None
    base_url: str = "https://maps.googleapis.com/maps/api"
    country: str = "in"
    types: str = "(regions)"
    language: str = "en"
    region: str = "IN"
    timeout_seconds: int = 15


class StoreConfig(BaseModel):
    simulated_delay_seconds: float = 2.0
    state_file: str = "data/state.json"


class LoggingConfig(BaseModel):
    level: str = "DEBUG"
    format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
    rotation: str = "10 MB"
    retention: str = "7 days"
    to_file: bool = True


class AppConfig(BaseModel):
    name: str = "hydrowatch"
    version: str = "0.1.0"
    environment: str = "development"
    debug: bool = True


class Settings(BaseModel):
    app: AppConfig = AppConfig()
    logging: LoggingConfig = LoggingConfig()
    api: APIConfig = APIConfig()
    ui: UIConfig = UIConfig()
    llm: LLMConfig = LLMConfig()
    google_maps: GoogleMapsConfig = GoogleMapsConfig()
    store: StoreConfig = StoreConfig()
    ping_message: str = "pong"


def get_project_root() -> Path:
    return Path(__file__).parent.parent.parent


def load_yaml_config(env: str = "development") -> dict[str, Any]:
    config_path = get_project_root() / "config" / "environments" / f"{env}.yaml"
    if not config_path.exists():
        return {}
    with open(config_path, "r") as f:
        return yaml.safe_load(f) or {}


def get_settings(env: Optional[str] = None) -> Settings:
    env = env or os.getenv("APP_ENV", "development")
    yaml_config = load_yaml_config(env)
    yaml_config.setdefault("app", {})["environment"] = env

    # Override with env vars
    if os.getenv("GROQ_API_KEY"):
        yaml_config.setdefault("llm", {})["api_key"] = os.getenv("GROQ_API_KEY")
    if os.getenv("GOOGLE_MAPS_API_KEY"):
        yaml_config.setdefault("google_maps", {})["api_key"] = os.getenv("GOOGLE_MAPS_API_KEY")
    if os.getenv("PING_MESSAGE"):
        yaml_config["ping_message"] = os.getenv("PING_MESSAGE")
    if os.getenv("HYDROWATCH_API_URL"):
        yaml_config.setdefault("ui", {})["api_base_url"] = os.getenv("HYDROWATCH_API_URL")
    if os.getenv("HYDROWATCH_STATE_FILE"):
        yaml_config.setdefault("store", {})["state_file"] = os.getenv("HYDROWATCH_STATE_FILE")

    return Settings(**yaml_config)


settings = get_settings()
