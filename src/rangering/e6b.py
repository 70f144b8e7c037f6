import logging
import math
from dataclasses import dataclass
from typing import Optional

from rangering.models import AdvancedFlightParameters, BasicFlightParameters, RangeResult

logger = logging.getLogger(__name__)

NM_TO_METERS = 1852
RESERVE_HOURS = 1

RESERVE_CUT_MESSAGE = "Fuel sufficient for flight but cuts into reserve."
INSUFFICIENT_FUEL_MESSAGE = "Insufficient fuel for Climb/Descent."


@dataclass(frozen=True)
class PhaseBudget:
    """Distance flown on a given amount of fuel.

    cruise_time_hours is None when climb and descent alone exceed the fuel.
    """

    distance_nm: float
    limited: bool
    cruise_time_hours: Optional[float] = None


def nm_to_meters(distance_nm):
    return distance_nm * NM_TO_METERS


# Function to calculate range from cruise speed and endurance only
def calculate_basic_range(params: BasicFlightParameters) -> RangeResult:
    effective_endurance = params.total_endurance
    safe_endurance = max(0, params.total_endurance - RESERVE_HOURS)

    # Out and back on the same endurance
    if params.is_round_trip:
        effective_endurance = effective_endurance / 2
        safe_endurance = safe_endurance / 2

    max_range_nm = params.cruise_speed * effective_endurance
    safe_range_nm = params.cruise_speed * safe_endurance

    return RangeResult(
        safe_range_nm=max(0, safe_range_nm),
        safe_range_meters=max(0, nm_to_meters(safe_range_nm)),
        max_range_nm=max(0, max_range_nm),
        max_range_meters=max(0, nm_to_meters(max_range_nm)),
        endurance_hours=params.total_endurance,
        cruise_time_minutes=params.total_endurance * 60,
        is_limited=False,
        reserve_fuel=0,
    )


def _cruise_hours(cruise_fuel, burn_rate):
    if burn_rate == 0:
        return math.inf if cruise_fuel > 0 else 0.0
    return cruise_fuel / burn_rate


# Function to calculate the distance flown on a given amount of fuel
def range_for_fuel(params: AdvancedFlightParameters, available_fuel) -> PhaseBudget:
    climb, cruise, descent = params.climb, params.cruise, params.descent

    cruise_fuel_available = available_fuel - climb.fuel - descent.fuel
    if cruise_fuel_available < 0:
        return PhaseBudget(distance_nm=0, limited=True)

    cruise_time_hours = _cruise_hours(cruise_fuel_available, cruise.burn_rate)
    cruise_dist = cruise.speed * cruise_time_hours

    total_dist = climb.distance_nm + descent.distance_nm + cruise_dist
    if params.is_round_trip:
        total_dist = total_dist / 2

    return PhaseBudget(distance_nm=total_dist, limited=False, cruise_time_hours=cruise_time_hours)


# Function to calculate safe and max range from the climb / cruise / descent fuel model
def calculate_advanced_range(params: AdvancedFlightParameters) -> RangeResult:
    # Burn everything
    max_budget = range_for_fuel(params, params.total_fuel)

    # Reserve is always priced at cruise burn
    reserve_fuel = RESERVE_HOURS * params.cruise.burn_rate
    safe_budget = range_for_fuel(params, params.total_fuel - reserve_fuel)

    # No cruise at all when climb and descent use up the tank
    cruise_time_hours = max_budget.cruise_time_hours or 0.0

    if max_budget.limited:
        message = INSUFFICIENT_FUEL_MESSAGE
    elif safe_budget.limited:
        message = RESERVE_CUT_MESSAGE
    else:
        message = None

    logger.debug(
        "Advanced range: max %.1f NM, safe %.1f NM, reserve %.1f, limited=%s",
        max_budget.distance_nm, safe_budget.distance_nm, reserve_fuel, max_budget.limited,
    )

    return RangeResult(
        safe_range_nm=safe_budget.distance_nm,
        safe_range_meters=nm_to_meters(safe_budget.distance_nm),
        max_range_nm=max_budget.distance_nm,
        max_range_meters=nm_to_meters(max_budget.distance_nm),
        endurance_hours=params.climb.time_hours + params.descent.time_hours + cruise_time_hours,
        cruise_time_minutes=cruise_time_hours * 60,
        is_limited=max_budget.limited,
        reserve_fuel=reserve_fuel,
        message=message,
    )
