"""Value records passed between the sidebar form, the calculators and the map."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class UnitSystem(Enum):
    """Fuel unit labels. Only the labels change, never the arithmetic."""

    IMPERIAL = "IMPERIAL"  # Gallons
    METRIC = "METRIC"  # Liters

    @property
    def fuel_label(self) -> str:
        return "GAL" if self is UnitSystem.IMPERIAL else "L"

    @property
    def burn_label(self) -> str:
        return "GPH" if self is UnitSystem.IMPERIAL else "LPH"


class FlightMode(Enum):
    BASIC = "BASIC"
    ADVANCED = "ADVANCED"


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lng: float


@dataclass(frozen=True)
class BasicFlightParameters:
    """Inputs of the basic (speed x time) range estimate.

    Attributes:
        cruise_speed: Cruise speed (kt)
        total_endurance: Total endurance (h)
        is_round_trip: Out-and-back flight on the same endurance
    """

    cruise_speed: float
    total_endurance: float
    is_round_trip: bool = False


@dataclass(frozen=True)
class PhasePerformance:
    """Speed, fuel burn and duration of one flight phase.

    Attributes:
        speed: True airspeed during the phase (kt)
        burn_rate: Fuel burn (fuel units per hour)
        time_minutes: Phase duration (min). Unused for cruise, whose
            duration follows from the fuel left over.
    """

    speed: float
    burn_rate: float
    time_minutes: float = 0.0

    @property
    def time_hours(self) -> float:
        return self.time_minutes / 60

    @property
    def fuel(self) -> float:
        return self.time_hours * self.burn_rate

    @property
    def distance_nm(self) -> float:
        return self.speed * self.time_hours


@dataclass(frozen=True)
class AdvancedFlightParameters:
    """Inputs of the three-phase (climb / cruise / descent) fuel model.

    Attributes:
        climb: Climb phase performance
        cruise: Cruise phase performance (time_minutes ignored)
        descent: Descent phase performance
        total_fuel: Total usable fuel (fuel units)
        is_round_trip: Out-and-back flight on the same fuel
        unit_system: Label set used when displaying fuel quantities
    """

    climb: PhasePerformance
    cruise: PhasePerformance
    descent: PhasePerformance
    total_fuel: float
    is_round_trip: bool = False
    unit_system: UnitSystem = UnitSystem.IMPERIAL


@dataclass(frozen=True)
class RangeResult:
    """Output of either range calculator.

    Attributes:
        safe_range_nm: Range keeping the 1 hour reserve (NM)
        safe_range_meters: Same, in meters
        max_range_nm: Range burning all fuel (NM)
        max_range_meters: Same, in meters
        endurance_hours: Total time airborne (h)
        cruise_time_minutes: Time spent in cruise (min)
        is_limited: Fuel does not even cover climb and descent
        reserve_fuel: Fuel set aside as reserve (fuel units, 0 in basic mode)
        message: Advisory warning, None when there is nothing to report
    """

    safe_range_nm: float
    safe_range_meters: float
    max_range_nm: float
    max_range_meters: float
    endurance_hours: float
    cruise_time_minutes: float
    is_limited: bool
    reserve_fuel: float
    message: Optional[str] = None


@dataclass(frozen=True)
class AirportLocation:
    lat: float
    lng: float
    name: str
    city: str = ""

    @property
    def coordinates(self) -> Coordinates:
        return Coordinates(lat=self.lat, lng=self.lng)
