import math

import folium
from geopy.distance import distance as geodesic_distance

from rangering.config import DEFAULT_ZOOM, MAP_ATTRIBUTION, MAP_TILE_URL

MAX_RANGE_COLOR = "#f59e0b"   # Amber
SAFE_RANGE_COLOR = "#10b981"  # Emerald

LEGEND_HTML = f"""
<div style="position: fixed; bottom: 24px; right: 24px; z-index: 1000;
            background: rgba(15, 23, 42, 0.9); color: white; padding: 10px 12px;
            border: 1px solid rgba(255, 255, 255, 0.1); border-radius: 8px; font-size: 12px;">
  <div style="font-weight: bold; margin-bottom: 6px; color: #94a3b8;">RANGE LEGEND</div>
  <div><span style="display: inline-block; width: 10px; height: 10px; border-radius: 50%;
        border: 2px solid {SAFE_RANGE_COLOR}; background: rgba(16, 185, 129, 0.2);"></span>
       Safe Range (with Reserve)</div>
  <div><span style="display: inline-block; width: 10px; height: 10px; border-radius: 50%;
        border: 2px dashed {MAX_RANGE_COLOR};"></span>
       Max Range (Dry Tanks)</div>
</div>
"""


def _drawable(radius_meters):
    return math.isfinite(radius_meters) and radius_meters > 0


def ring_bounds(center, radius_meters):
    """South-west and north-east corners of the box enclosing a ring."""
    origin = (center.lat, center.lng)
    reach = geodesic_distance(meters=radius_meters)
    north = reach.destination(origin, bearing=0)
    east = reach.destination(origin, bearing=90)
    south = reach.destination(origin, bearing=180)
    west = reach.destination(origin, bearing=270)
    return [[south.latitude, west.longitude], [north.latitude, east.longitude]]


def add_range_rings(m, center, result):
    location = [center.lat, center.lng]

    # Max range ring (dry tanks)
    if _drawable(result.max_range_meters):
        folium.Circle(
            location=location,
            radius=result.max_range_meters,
            color=MAX_RANGE_COLOR,
            weight=2,
            fill=False,
            dash_array="8, 8",
            tooltip=f"{round(result.max_range_nm)} NM Max (Dry)",
        ).add_to(m)

    # Safe range ring (with reserve)
    if _drawable(result.safe_range_meters):
        folium.Circle(
            location=location,
            radius=result.safe_range_meters,
            color=SAFE_RANGE_COLOR,
            weight=2,
            fill=True,
            fill_color=SAFE_RANGE_COLOR,
            fill_opacity=0.1,
            tooltip=f"{round(result.safe_range_nm)} NM Safe Range",
        ).add_to(m)

    return m


def build_range_map(center, result, zoom_start=DEFAULT_ZOOM):
    m = folium.Map(location=[center.lat, center.lng], zoom_start=zoom_start, tiles=None)

    folium.TileLayer(
        tiles=MAP_TILE_URL,
        attr=MAP_ATTRIBUTION,
        name="CARTO Dark",
        overlay=False,
        control=False,
    ).add_to(m)

    folium.Marker(
        location=[center.lat, center.lng],
        tooltip=folium.Tooltip("Origin", permanent=True, direction="top"),
        icon=folium.Icon(color="blue", icon="plane"),
    ).add_to(m)

    add_range_rings(m, center, result)
    m.get_root().html.add_child(folium.Element(LEGEND_HTML))

    # Fit the map to the outer ring
    outer = max(
        (r for r in (result.max_range_meters, result.safe_range_meters) if _drawable(r)),
        default=None,
    )
    if outer is not None:
        m.fit_bounds(ring_bounds(center, outer))

    return m
