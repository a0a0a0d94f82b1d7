"""HydroWatch dashboard - seasonal water level insights for India."""

import sys
from pathlib import Path

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import random
from typing import Optional, Tuple

import pandas as pd
import streamlit as st
from streamlit_folium import st_folium

from hydrowatch.utils.config import get_project_root, settings  # noqa: E402

st.set_page_config(
    page_title=settings.ui.page_title,
    page_icon="💧",
    layout="wide",
)

import hydrowatch.utils.logger  # noqa: F401,E402
from loguru import logger  # noqa: E402

from hydrowatch.core.alerts import (  # noqa: E402
    alert_fill_percent,
    describe_alert,
    location_label,
    most_critical,
    random_precaution,
    random_season_alerts,
    seasonal_alerts,
    threshold_for,
    today_str,
)
from hydrowatch.core.assistant import GREETING, build_messages, fallback_reply  # noqa: E402
from hydrowatch.core.generator import (  # noqa: E402
    chart_years,
    filter_by_year_range,
    seasonal_series,
    seed_for_place,
    y_axis_scale,
)
from hydrowatch.core.models import Place  # noqa: E402
from hydrowatch.core.store import JsonFileStorage, WaterLevelStore  # noqa: E402
from hydrowatch.data_sources.google_maps import (  # noqa: E402
    GoogleMapsClient,
    MapsConfigError,
    MapsServiceError,
    load_google_maps,
)
from hydrowatch.data_sources.water_source import water_source  # noqa: E402
from hydrowatch.ui.api_client import ChatProxyError, HydroWatchAPI  # noqa: E402
from hydrowatch.ui.map_view import MapView  # noqa: E402
from hydrowatch.utils.constants import (  # noqa: E402
    ALERT_PRECAUTIONS,
    EMERGENCY_NOTICE,
    PRECAUTIONS,
    REGIONAL_TIPS,
    SEASON_MONTHS,
    SEASONAL_TIPS,
    SEASONS,
)

# ============ INITIALIZE ============

if "store" not in st.session_state:
    state_file = Path(settings.store.state_file)
    if not state_file.is_absolute():
        state_file = get_project_root() / state_file
    st.session_state.store = WaterLevelStore(
        source=water_source,
        storage=JsonFileStorage(state_file),
        delay_seconds=settings.store.simulated_delay_seconds,
    )
if "map_view" not in st.session_state:
    st.session_state.map_view = MapView()
if "messages" not in st.session_state:
    st.session_state.messages = [{"role": "assistant", "content": GREETING}]
if "alert_sets" not in st.session_state:
    st.session_state.alert_sets = {}


def get_maps() -> Tuple[Optional[GoogleMapsClient], Optional[str]]:
    """Shared maps client, or a notice explaining why it is unavailable."""
    try:
        return load_google_maps(), None
    except MapsConfigError as e:
        return None, str(e)


# ============ COMPONENTS ============

def render_location_search(key: str) -> Optional[Place]:
    """Search box with predictions; returns the place once one is selected."""
    provider, notice = get_maps()
    if notice:
        st.info(notice)
        return None

    current = st.session_state.store.selected_location
    text = st.text_input(
        "Location",
        value=current.description if current else "",
        placeholder="Search for a location in India...",
        key=f"{key}_query",
    )
    if not text or (current and text == current.description):
        return None

    try:
        predictions = provider.search(text)
    except MapsServiceError as e:
        st.warning(str(e))
        return None

    if not predictions:
        st.caption("No matching locations.")
        return None

    choice = st.selectbox(
        "Matches", predictions, format_func=lambda p: p.description, key=f"{key}_choice"
    )
    if not st.button("Select", key=f"{key}_select", type="primary"):
        return None

    try:
        place = provider.details(choice.place_id, choice.description)
    except MapsServiceError as e:
        st.warning(str(e))
        return None
    if place is None:
        st.warning("Could not load details for that place. Please try again.")
    return place


def render_alert_banner(alert, key: str) -> None:
    banner = describe_alert(alert, random_precaution())
    show = getattr(st, banner["variant"])
    show(f"**{banner['title']}**\n\n{banner['text']}")

    if st.toggle("Show Precautions", key=f"{key}_precautions"):
        st.markdown("**💧 Water Conservation Tips:**")
        for tip in ALERT_PRECAUTIONS:
            st.markdown(f"- {tip}")


def render_seasonal_charts(place: Optional[Place]) -> None:
    years = chart_years()
    current_year = years[-1]
    series = seasonal_series(seed_for_place(place), current_year)
    top, _ = y_axis_scale(series)

    start_year, end_year = st.select_slider(
        "Year Range", options=years, value=(years[0], years[-1]), key="year_range"
    )
    start, end = years.index(start_year), years.index(end_year)
    st.caption(f"{end - start + 1} years selected · shared scale 0–{top} m")

    found = seasonal_alerts(series, current_year, today_str(), location_label(place))
    active = most_critical(found)
    if active:
        render_alert_banner(active, "seasonal")

    def chart(points):
        df = pd.DataFrame([p.to_dict() for p in filter_by_year_range(points, years, start, end)])
        st.bar_chart(df.set_index("label")["value"], height=240)

    st.markdown(f"#### Annual Water Level ({start_year} - {end_year})")
    chart(series["water_level"])

    cols = st.columns(3)
    for col, season in zip(cols, SEASONS):
        with col:
            st.markdown(f"**{season} ({SEASON_MONTHS[season]})**")
            chart(series[season])


# ============ PAGES ============

def render_home():
    st.subheader("🌊 Seasonal Water Insights")
    store = st.session_state.store

    place = render_location_search("home")
    if place:
        with st.spinner("Fetching water level data..."):
            store.fetch_water_data(place)

    if store.selected_location:
        st.markdown(f"Showing insights for: **{store.selected_location.description}**")

    render_seasonal_charts(store.selected_location)


def render_location():
    st.subheader("📍 Location")
    store = st.session_state.store
    map_view = st.session_state.map_view

    place = render_location_search("location")
    if place:
        if not place.has_coordinates:
            st.warning("The selected place has no coordinates.")
        else:
            with st.spinner("Fetching water level data..."):
                store.fetch_water_data(place)

    col_map, col_data = st.columns([3, 2])

    with col_map:
        if st.toggle("Show map", value=True, key="show_map"):
            if map_view.map is None:
                map_view.on_show(lambda p: logger.info(f"Map centered on {p.description}"))
            provider, _ = get_maps()
            if provider:
                provider.render(map_view, store.selected_location)
            else:
                map_view.mark_visible()
                if store.selected_location:
                    map_view.show(store.selected_location)
            st_folium(map_view.map, height=500, use_container_width=True, key="location_map")
        else:
            map_view.teardown()

    with col_data:
        render_water_card(store)


def render_water_card(store: WaterLevelStore):
    st.markdown("#### 💧 Water Level Data")
    if not store.selected_location:
        st.info("Search for a location to see its water level data.")
        return

    if store.error:
        st.error(store.error)
        if st.button("Retry", key="retry_fetch"):
            with st.spinner("Fetching water level data..."):
                store.fetch_water_data(store.selected_location)
            st.rerun()
        return

    data = store.water_data
    if data is None:
        st.caption("No water level data yet. Select the location again to load it.")
        return

    arrows = {"up": "↑", "down": "↓", "stable": "→"}
    st.metric(
        "Current Level",
        f"{data.current_level}m",
        delta=f"{data.current_level - data.average_level}m vs avg",
    )
    st.caption(f"{arrows[data.trend]} {data.trend_label} · Average {data.average_level}m · Updated {data.last_updated}")

    forecast_df = pd.DataFrame([d.to_dict() for d in data.forecast]).rename(columns={
        "day": "Day", "level": "Level (m)", "precipitation": "Rain (%)", "temperature": "Temp (°C)",
    })
    st.dataframe(forecast_df, hide_index=True, use_container_width=True)
    st.caption("Open the Analysis tab for the detailed forecast.")


def render_analysis():
    st.subheader("📊 Analysis")
    store = st.session_state.store
    data = store.water_data
    if not store.selected_location or data is None:
        st.info("Select a location on the Location tab first.")
        return

    st.markdown(f"📍 {store.selected_location.description}")

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Current Water Level", f"{data.current_level}m", help=data.trend_label)
    col2.metric("Average Level", f"{data.average_level}m")
    col3.metric("Forecast Peak", f"{data.peak_level}m")
    col4.metric("Forecast Lowest", f"{data.lowest_level}m")

    df = pd.DataFrame([d.to_dict() for d in data.forecast]).set_index("day")

    st.markdown("#### 5-Day Forecast")
    st.area_chart(df[["level"]].rename(columns={"level": "Water Level (m)"}))

    st.markdown("#### Detailed Forecast")
    st.line_chart(df[["level", "temperature"]].rename(
        columns={"level": "Water Level (m)", "temperature": "Temperature (°C)"}
    ))

    col_rain, col_temp = st.columns(2)
    with col_rain:
        st.markdown("#### Precipitation Forecast")
        for d in data.forecast:
            st.progress(min(d.precipitation / 30, 1.0), text=f"{d.day}: {d.precipitation}%")
    with col_temp:
        st.markdown("#### Temperature Trends")
        st.area_chart(df[["temperature"]].rename(columns={"temperature": "Temperature (°C)"}))


def render_alerts():
    st.subheader("🚨 Water Level Alerts")
    st.caption("Real-time monitoring of water levels and seasonal alerts")
    location_name = location_label(st.session_state.store.selected_location)
    st.markdown(f"📍 **{location_name}**")

    alert_sets = st.session_state.alert_sets
    if location_name not in alert_sets:
        alert_sets[location_name] = random_season_alerts(random.Random(), location_name)
    alerts = alert_sets[location_name]

    if not alerts:
        st.success("No active alerts. Water levels are normal for all seasons.")
        return

    selected = st.radio(
        "Active Alerts",
        alerts,
        format_func=lambda a: f"{a.season} · {a.value}m · {'Critical' if a.severity == 'critical' else 'Warning'}",
        horizontal=True,
        key="selected_alert",
    )
    render_alert_banner(selected, "alerts")

    cols = st.columns(min(len(alerts), 3))
    for col, alert in zip(cols, alerts):
        with col:
            label = "Critical" if alert.severity == "critical" else "Warning"
            st.markdown(f"**{alert.season} Water Level** · `{label}`")
            st.caption(f"{alert.location} • {alert.date}")
            st.markdown(f"### {alert.value}m")
            st.caption(f"(Threshold: {threshold_for(alert.severity)}m)")
            st.progress(alert_fill_percent(alert) / 100)


def render_precautions():
    st.subheader("🛡️ Precautions")
    st.caption("Essential water conservation measures and safety precautions for different seasons and regions.")

    st.markdown("### General Water Conservation")
    for i, tip in enumerate(PRECAUTIONS, 1):
        st.markdown(f"{i}. {tip}")

    st.markdown("### Seasonal Tips")
    icons = {"summer": "☀️", "monsoon": "🌧️", "winter": "❄️"}
    for col, (season, tips) in zip(st.columns(3), SEASONAL_TIPS.items()):
        with col:
            st.markdown(f"**{icons[season]} {season.title()}**")
            for tip in tips:
                st.markdown(f"- {tip}")

    st.markdown("### Regional Tips")
    for col, (region, tips) in zip(st.columns(2), REGIONAL_TIPS.items()):
        with col:
            st.markdown(f"**{region.title()} Areas**")
            for tip in tips:
                st.markdown(f"- {tip}")

    st.warning(f"**Emergency Measures:** {EMERGENCY_NOTICE}")


def render_ai_assistant():
    st.subheader("💬 AI Assistant")
    api = HydroWatchAPI()
    if "api_online" not in st.session_state:
        st.session_state.api_online = api.health()
    if not st.session_state.api_online:
        st.caption("⚠️ Assistant server is offline; replies will use offline answers.")

    for msg in st.session_state.messages:
        with st.chat_message(msg["role"]):
            st.markdown(msg["content"])

    prompt = st.chat_input("Ask about water levels, seasonal trends or precautions...")
    if not prompt:
        return

    st.session_state.messages.append({"role": "user", "content": prompt})
    with st.chat_message("user"):
        st.markdown(prompt)

    with st.chat_message("assistant"):
        with st.spinner("Thinking..."):
            try:
                reply = api.chat(build_messages(st.session_state.messages))
            except ChatProxyError as e:
                logger.warning(f"Assistant unavailable: {e}")
                st.caption("⚠️ The assistant service is unavailable right now.")
                reply = fallback_reply(prompt)
        st.markdown(reply)
    st.session_state.messages.append({"role": "assistant", "content": reply})


# ============ MAIN APP ============

def main():
    st.title("💧 DWLR – Seasonal Water Insights")
    st.markdown("*Water levels • Seasonal trends • Alerts • Conservation tips*")

    tabs = st.tabs([
        "🏠 Home",
        "📍 Location",
        "📊 Analysis",
        "🚨 Alerts",
        "🛡️ Precautions",
        "💬 AI Assistant",
    ])

    with tabs[0]:
        render_home()
    with tabs[1]:
        render_location()
    with tabs[2]:
        render_analysis()
    with tabs[3]:
        render_alerts()
    with tabs[4]:
        render_precautions()
    with tabs[5]:
        render_ai_assistant()


if __name__ == "__main__":
    main()
