# performance.py

from rangering.models import (
    AdvancedFlightParameters,
    BasicFlightParameters,
    PhasePerformance,
    UnitSystem,
)

DEFAULT_BASIC_PERFORMANCE = {
    'cruise_speed_kt': 120,       # Cruise speed in knots
    'endurance_h': 4,             # Total endurance in hours
    'round_trip': False
}

# Light single, fuel in US gallons
DEFAULT_ADVANCED_PERFORMANCE = {
    'unit_system': 'IMPERIAL',
    'climb': {
        'speed_kt': 90,           # Climb speed in knots
        'time_min': 15,           # Time to top of climb in minutes
        'fuel_burn_ph': 18        # Fuel burn during climb per hour
    },
    'cruise': {
        'speed_kt': 135,          # Cruising speed in knots
        'fuel_burn_ph': 12        # Fuel burn in cruise per hour
    },
    'descend': {
        'speed_kt': 145,          # Descend speed in knots
        'time_min': 20,           # Time from top of descent in minutes
        'fuel_burn_ph': 10        # Fuel burn during descend per hour
    },
    'total_fuel': 60,             # Usable fuel
    'round_trip': False
}


def default_basic_parameters(performance=DEFAULT_BASIC_PERFORMANCE):
    return BasicFlightParameters(
        cruise_speed=performance['cruise_speed_kt'],
        total_endurance=performance['endurance_h'],
        is_round_trip=performance['round_trip'],
    )


def default_advanced_parameters(performance=DEFAULT_ADVANCED_PERFORMANCE):
    climb = performance['climb']
    cruise = performance['cruise']
    descend = performance['descend']
    return AdvancedFlightParameters(
        climb=PhasePerformance(climb['speed_kt'], climb['fuel_burn_ph'], climb['time_min']),
        cruise=PhasePerformance(cruise['speed_kt'], cruise['fuel_burn_ph']),
        descent=PhasePerformance(descend['speed_kt'], descend['fuel_burn_ph'], descend['time_min']),
        total_fuel=performance['total_fuel'],
        is_round_trip=performance['round_trip'],
        unit_system=UnitSystem(performance['unit_system']),
    )
