import os

import streamlit as st

from rangering.airports import DEFAULT_MODEL
from rangering.models import Coordinates

MAP_TILE_URL = "https://{s}.basemaps.cartocdn.com/dark_all/{z}/{x}/{y}{r}.png"
MAP_ATTRIBUTION = (
    '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors '
    '&copy; <a href="https://carto.com/attributions">CARTO</a>'
)

DEFAULT_CENTER = Coordinates(lat=34.0522, lng=-118.2437)  # Los Angeles
DEFAULT_ZOOM = 8


def set_page_config():
    st.set_page_config(page_title="RangeRing", page_icon=":airplane:", layout="wide")


def apply_custom_css():
    st.markdown(
        """
        <style>
        body {
            background-color: #0f172a;
            color: #e2e8f0;
        }
        .block-container {
            padding-top: 1rem;
            padding-bottom: 0;
        }
        .sidebar .sidebar-content {
            background-color: #1e293b;
        }
        .stNumberInput, .stTextInput {
            color: black;
        }
        .range-warning {
            color: #f87171;
            font-weight: 600;
        }
        </style>
        """,
        unsafe_allow_html=True,
    )


def set_header():
    st.markdown("## :airplane: RangeRing")
    st.caption("Click the map to move the origin.")


def get_openai_settings():
    """API key and model for the airport lookup, from secrets or environment.

    Secrets take precedence:

        [openai]
        api_key = "sk-..."
        model = "gpt-4o-mini"
    """
    try:
        section = dict(st.secrets.get("openai", {}))
    except Exception:
        # No secrets.toml at all; the error type varies across Streamlit releases
        section = {}

    api_key = section.get("api_key") or os.environ.get("OPENAI_API_KEY")
    model = section.get("model") or os.environ.get("RANGERING_OPENAI_MODEL") or DEFAULT_MODEL
    return api_key, model
