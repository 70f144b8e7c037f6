import pandas as pd
import streamlit as st
from streamlit_folium import st_folium

from rangering.airports import (
    AirportLookupError,
    ChainedAirportResolver,
    OpenAIAirportResolver,
    StaticAirportResolver,
    lookup_airport,
)
from rangering.config import DEFAULT_CENTER, apply_custom_css, get_openai_settings, set_header, set_page_config
from rangering.e6b import calculate_advanced_range, calculate_basic_range
from rangering.fuelpolicy import calculate_basic_summary, calculate_fuel_policy, format_quantity
from rangering.layer import build_range_map
from rangering.models import Coordinates, FlightMode
from rangering.sidebar import create_sidebar

# Set page configuration and custom CSS
set_page_config()
apply_custom_css()

# Add header
set_header()

if "center" not in st.session_state:
    st.session_state.center = DEFAULT_CENTER
    st.session_state.airport = None
    st.session_state.last_click = None

# Offline table first, then the AI lookup when a key is configured
api_key, model = get_openai_settings()
resolvers = [StaticAirportResolver()]
if api_key:
    resolvers.append(OpenAIAirportResolver(api_key=api_key, model=model))
resolver = ChainedAirportResolver(resolvers)

# Create sidebar and get user inputs
mode, basic_params, advanced_params, search_query = create_sidebar(ai_lookup_enabled=bool(api_key))

if search_query:
    with st.spinner(f"Looking up {search_query}..."):
        try:
            airport = lookup_airport(search_query, resolver)
        except AirportLookupError as err:
            st.sidebar.error("Search failed.")
            st.sidebar.caption(str(err))
        else:
            if airport is None:
                st.sidebar.error("Airport not found.")
            else:
                st.session_state.center = airport.coordinates
                st.session_state.airport = airport

if st.session_state.airport is not None:
    airport = st.session_state.airport
    st.sidebar.success(f"{airport.name}, {airport.city}" if airport.city else airport.name)

# Calculate range for the selected mode
if mode is FlightMode.BASIC:
    result = calculate_basic_range(basic_params)
else:
    result = calculate_advanced_range(advanced_params)

col1, col2, col3, col4 = st.columns(4)
col1.metric(
    "Safe Range",
    format_quantity(result.safe_range_nm, "NM"),
    delta="Limited" if result.is_limited else None,
    delta_color="inverse",
)
col2.metric("Max Range (Dry)", format_quantity(result.max_range_nm, "NM"))
col3.metric("Endurance", format_quantity(result.endurance_hours, "h", decimals=1))
if mode is FlightMode.ADVANCED:
    col4.metric("Reserve", f"{result.reserve_fuel:g} {advanced_params.unit_system.fuel_label}")
else:
    col4.metric("Reserve", "1 HR")

if result.message:
    st.warning(result.message)

center = st.session_state.center
m = build_range_map(center, result)
map_state = st_folium(m, use_container_width=True, height=640, key="range_map")

# Move the origin to the clicked location
last_clicked = (map_state or {}).get("last_clicked")
if last_clicked and last_clicked != st.session_state.last_click:
    st.session_state.last_click = last_clicked
    st.session_state.center = Coordinates(lat=last_clicked["lat"], lng=last_clicked["lng"])
    st.session_state.airport = None
    st.rerun()

if mode is FlightMode.ADVANCED:
    fuel_data, trip_fuel = calculate_fuel_policy(advanced_params, result)
    st.markdown("### Fuel Policy")
    st.dataframe(pd.DataFrame(fuel_data), hide_index=True)
    st.caption(f"Trip fuel: {trip_fuel:.1f} {advanced_params.unit_system.fuel_label}")
else:
    st.markdown("### Endurance")
    st.dataframe(pd.DataFrame(calculate_basic_summary(basic_params, result)), hide_index=True)
