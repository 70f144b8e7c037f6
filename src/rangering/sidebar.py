import streamlit as st

from rangering.models import (
    AdvancedFlightParameters,
    BasicFlightParameters,
    FlightMode,
    PhasePerformance,
    UnitSystem,
)
from rangering.performance import default_advanced_parameters, default_basic_parameters

UNIT_CHOICES = {"Gal / US": UnitSystem.IMPERIAL, "Liters / SI": UnitSystem.METRIC}


def _search_form():
    with st.form("airport_search", clear_on_submit=False):
        query = st.text_input("ICAO Code or City", placeholder="e.g. KLAX, SBBP, Munich")
        submitted = st.form_submit_button("Search")
    return query if submitted else None


def _basic_inputs(defaults):
    cruise_speed = st.number_input("Cruise Speed (KT)", min_value=0.0, value=float(defaults.cruise_speed), step=5.0)
    total_endurance = st.number_input("Total Endurance (HRS)", min_value=0.0, value=float(defaults.total_endurance), step=0.5)
    is_round_trip = st.toggle("Round Trip", value=defaults.is_round_trip, key="basic_round_trip")
    return BasicFlightParameters(cruise_speed, total_endurance, is_round_trip)


def _advanced_inputs(defaults):
    unit_choice = st.radio("Units", list(UNIT_CHOICES), horizontal=True)
    unit_system = UNIT_CHOICES[unit_choice]
    fuel_unit, burn_unit = unit_system.fuel_label, unit_system.burn_label

    total_fuel = st.number_input(f"Total Usable Fuel ({fuel_unit})", min_value=0.0, value=float(defaults.total_fuel), step=1.0, key="total_fuel")

    st.markdown("**Climb**")
    col1, col2, col3 = st.columns(3)
    with col1:
        climb_speed = st.number_input("Speed (KT)", value=float(defaults.climb.speed), key="climb_speed")
    with col2:
        climb_time = st.number_input("Time (MIN)", value=float(defaults.climb.time_minutes), key="climb_time")
    with col3:
        climb_burn = st.number_input(f"Burn ({burn_unit})", value=float(defaults.climb.burn_rate), key="climb_burn")

    st.markdown("**Cruise**")
    col1, col2 = st.columns(2)
    with col1:
        cruise_speed = st.number_input("Speed (KT)", value=float(defaults.cruise.speed), key="cruise_speed")
    with col2:
        cruise_burn = st.number_input(f"Burn ({burn_unit})", value=float(defaults.cruise.burn_rate), key="cruise_burn")

    st.caption(f"Reserve: 1h @ Cruise ({cruise_burn:g} {fuel_unit.lower()})")

    st.markdown("**Descent**")
    col1, col2, col3 = st.columns(3)
    with col1:
        descent_speed = st.number_input("Speed (KT)", value=float(defaults.descent.speed), key="descent_speed")
    with col2:
        descent_time = st.number_input("Time (MIN)", value=float(defaults.descent.time_minutes), key="descent_time")
    with col3:
        descent_burn = st.number_input(f"Burn ({burn_unit})", value=float(defaults.descent.burn_rate), key="descent_burn")

    is_round_trip = st.toggle("Round Trip", value=defaults.is_round_trip, key="advanced_round_trip")

    return AdvancedFlightParameters(
        climb=PhasePerformance(climb_speed, climb_burn, climb_time),
        cruise=PhasePerformance(cruise_speed, cruise_burn),
        descent=PhasePerformance(descent_speed, descent_burn, descent_time),
        total_fuel=total_fuel,
        is_round_trip=is_round_trip,
        unit_system=unit_system,
    )


def create_sidebar(ai_lookup_enabled=True):
    basic_defaults = default_basic_parameters()
    advanced_defaults = default_advanced_parameters()

    with st.sidebar:
        search_query = _search_form()
        if not ai_lookup_enabled:
            st.caption("No OpenAI key configured: only built-in airports can be found.")

        mode_label = st.radio('Mode', ['Basic', 'Advanced'], horizontal=True, key="mode")
        mode = FlightMode.BASIC if mode_label == 'Basic' else FlightMode.ADVANCED

        st.markdown("")
        if mode is FlightMode.BASIC:
            basic_params = _basic_inputs(basic_defaults)
            advanced_params = advanced_defaults
        else:
            basic_params = basic_defaults
            advanced_params = _advanced_inputs(advanced_defaults)

    return mode, basic_params, advanced_params, search_query
