import math

from rangering.e6b import RESERVE_HOURS


def format_quantity(value, unit, decimals=0):
    """Metric text for a distance or time; infinite or NaN values do not round."""
    if math.isnan(value):
        return "n/a"
    if math.isinf(value):
        return f"\N{INFINITY} {unit}"
    return f"{value:.{decimals}f} {unit}"


def calculate_fuel_policy(params, result):
    """Fuel and time per flight phase when flying the max range.

    Returns the table columns (ready for a DataFrame) and the trip fuel,
    i.e. everything burned before reaching dry tanks.
    """
    unit = params.unit_system.fuel_label
    climb_fuel = params.climb.fuel
    descent_fuel = params.descent.fuel

    if result.is_limited:
        cruise_fuel = 0
    else:
        cruise_fuel = params.total_fuel - climb_fuel - descent_fuel

    trip_fuel = climb_fuel + cruise_fuel + descent_fuel

    fuel_data = {
        "Phase": ["Climb", "Cruise", "Descent", "Final Reserve"],
        "Time (min)": [
            round(params.climb.time_minutes, 1),
            round(result.cruise_time_minutes, 1),
            round(params.descent.time_minutes, 1),
            RESERVE_HOURS * 60,
        ],
        f"Fuel ({unit})": [
            round(climb_fuel, 1),
            round(cruise_fuel, 1),
            round(descent_fuel, 1),
            round(result.reserve_fuel, 1),
        ],
    }

    return fuel_data, trip_fuel


def calculate_basic_summary(params, result):
    safe_endurance = max(0, params.total_endurance - RESERVE_HOURS)

    summary_data = {
        "Item": ["Endurance (h)", "Reserve (h)", "Endurance after Reserve (h)", "Round Trip"],
        "Value": [
            f"{round(result.endurance_hours, 2):g}",
            f"{RESERVE_HOURS:g}",
            f"{round(safe_endurance, 2):g}",
            "Yes" if params.is_round_trip else "No",
        ],
    }

    return summary_data

