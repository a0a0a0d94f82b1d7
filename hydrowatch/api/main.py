"""FastAPI application."""

from datetime import date
from typing import Literal, Optional

from fastapi import Depends, FastAPI, Query, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from groq import APIStatusError
from loguru import logger
from pydantic import BaseModel, Field, ValidationError
from starlette.concurrency import run_in_threadpool

import hydrowatch.utils.logger  # noqa: F401
from hydrowatch.core.alerts import location_label, most_critical, seasonal_alerts, today_str
from hydrowatch.core.generator import chart_years, filter_by_year_range, seasonal_series, seed_for_place, y_axis_scale
from hydrowatch.core.models import Place
from hydrowatch.data_sources.google_maps import (
    MappingProvider,
    MapsConfigError,
    MapsServiceError,
    load_google_maps,
)
from hydrowatch.data_sources.llm_client import ChatCompletionClient, chat_client_from_settings
from hydrowatch.data_sources.water_source import WaterLevelSource, water_source
from hydrowatch.utils.config import settings
from hydrowatch.utils.constants import (
    ALERT_PRECAUTIONS,
    EMERGENCY_NOTICE,
    PRECAUTIONS,
    REGIONAL_TIPS,
    SEASONAL_TIPS,
)

app = FastAPI(
    title="HydroWatch API",
    description="Seasonal water level insights and AI assistant proxy",
    version=settings.app.version,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.api.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

MISSING_LLM_KEY = "GROQ_API_KEY is not set. Add it in environment settings."
INVALID_CHAT_BODY = "Invalid request body. Expected { messages: ChatMessage[] }."


class ChatMessage(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    messages: list[ChatMessage] = Field(min_length=1)


class PlaceRequest(BaseModel):
    description: str
    place_id: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None
    formatted_address: Optional[str] = None
    name: Optional[str] = None


# ============ DEPENDENCIES ============

def get_chat_client() -> Optional[ChatCompletionClient]:
    return chat_client_from_settings()


def get_maps_provider() -> MappingProvider:
    return load_google_maps()


def get_water_source() -> WaterLevelSource:
    return water_source


def error_response(status_code: int, error: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error, **extra})


# ============ ERROR HANDLERS ============

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return error_response(400, "Invalid request", details=jsonable_encoder(exc.errors()))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Server error on {request.url.path}: {exc}")
    extra = {"message": str(exc)} if settings.app.environment == "development" else {}
    return error_response(500, "Internal server error", **extra)


# ============ BASIC ENDPOINTS ============

@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}


@app.get("/api/ping")
async def ping():
    return {"message": settings.ping_message}


@app.get("/api/demo")
async def demo():
    return {"message": "Hello from HydroWatch server"}


# ============ AI CHAT PROXY ============

@app.post("/api/ai/chat")
async def ai_chat(request: Request, client: Optional[ChatCompletionClient] = Depends(get_chat_client)):
    """Forward a chat transcript to the completion API and return its reply."""
    if client is None:
        return error_response(400, MISSING_LLM_KEY)

    try:
        body = await request.json()
        chat = ChatRequest.model_validate(body)
    except (ValueError, ValidationError):
        return error_response(400, INVALID_CHAT_BODY)

    messages = [m.model_dump() for m in chat.messages]
    try:
        content = await run_in_threadpool(client.complete, messages)
    except APIStatusError as e:
        logger.error(f"Completion API error: {e}")
        return error_response(e.status_code or 500, "Error processing your request", details=str(e))
    except Exception as e:
        logger.error(f"Completion API error: {e}")
        return error_response(500, "Error processing your request", details=str(e) or "Unknown error occurred")

    return {"content": content}


# ============ PLACES ============

@app.get("/api/places/search")
def search_places(q: str = Query("", description="Free-text location query")):
    """Region predictions for a query."""
    try:
        provider = get_maps_provider()
        predictions = provider.search(q)
    except MapsConfigError as e:
        return error_response(503, str(e))
    except MapsServiceError as e:
        return error_response(502, str(e))
    return {"predictions": [p.to_dict() for p in predictions]}


@app.get("/api/places/{place_id}")
def place_details(place_id: str, description: str = Query("")):
    """Coordinates and address for a prediction."""
    try:
        provider = get_maps_provider()
        place = provider.details(place_id, description)
    except MapsConfigError as e:
        return error_response(503, str(e))
    except MapsServiceError as e:
        return error_response(502, str(e))
    if place is None:
        return error_response(404, f"No details for place {place_id}")
    return place.to_dict()


# ============ WATER DATA ============

@app.post("/api/water-levels")
def water_levels(request: PlaceRequest, source: WaterLevelSource = Depends(get_water_source)):
    """Current level and 5-day forecast for a place."""
    place = Place(**request.model_dump())
    return source.fetch(place).to_dict()


@app.get("/api/seasonal")
def seasonal(
    lat: Optional[float] = Query(None),
    lng: Optional[float] = Query(None),
    start: int = Query(0, ge=0, le=19),
    end: int = Query(19, ge=0, le=19),
):
    """Seasonal chart series for a location's seed, filtered to a year range."""
    place = Place(description="", lat=lat, lng=lng)
    seed = seed_for_place(place)
    years = chart_years()
    series = seasonal_series(seed)
    top, ticks = y_axis_scale(series)
    return {
        "seed": seed,
        "years": [years[min(start, end)], years[max(start, end)]],
        "y_axis": {"top": top, "ticks": ticks},
        "series": {
            name: [p.to_dict() for p in filter_by_year_range(points, years, min(start, end), max(start, end))]
            for name, points in series.items()
        },
    }


@app.get("/api/alerts")
def alerts(
    lat: Optional[float] = Query(None),
    lng: Optional[float] = Query(None),
    location: str = Query(""),
):
    """Current-year seasonal alerts, critical first."""
    place = Place(description=location, lat=lat, lng=lng)
    current_year = date.today().year
    found = seasonal_alerts(
        seasonal_series(seed_for_place(place), current_year),
        current_year,
        date_str=today_str(),
        location=location_label(place),
    )
    active = most_critical(found)
    return {
        "alerts": [a.to_dict() for a in found],
        "active": active.to_dict() if active else None,
    }


@app.get("/api/precautions")
async def precautions():
    return {
        "general": PRECAUTIONS,
        "alert": ALERT_PRECAUTIONS,
        "seasonal": SEASONAL_TIPS,
        "regional": REGIONAL_TIPS,
        "emergency_notice": EMERGENCY_NOTICE,
    }


@app.api_route("/api/{path:path}", methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"])
async def api_not_found(path: str):
    return error_response(404, "API endpoint not found")
