"""Shared fixtures for the range calculator tests."""

import dataclasses

import pytest

from rangering.models import AdvancedFlightParameters, BasicFlightParameters, Coordinates
from rangering.performance import default_advanced_parameters, default_basic_parameters


@pytest.fixture
def basic_params() -> BasicFlightParameters:
    """120 kt for 4 hours, one way."""
    return default_basic_parameters()


@pytest.fixture
def advanced_params() -> AdvancedFlightParameters:
    """Light single: climb 90 kt / 15 min / 18 gph, cruise 135 kt / 12 gph,
    descent 145 kt / 20 min / 10 gph, 60 gal."""
    return default_advanced_parameters()


@pytest.fixture
def with_fuel(advanced_params):
    def _with_fuel(total_fuel: float) -> AdvancedFlightParameters:
        return dataclasses.replace(advanced_params, total_fuel=total_fuel)

    return _with_fuel


@pytest.fixture
def los_angeles() -> Coordinates:
    return Coordinates(lat=34.0522, lng=-118.2437)
