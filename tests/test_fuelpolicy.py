"""Tests for the fuel and endurance breakdown tables."""

import dataclasses
import math

import pandas as pd
import pytest

from rangering.e6b import calculate_advanced_range, calculate_basic_range
from rangering.fuelpolicy import calculate_basic_summary, calculate_fuel_policy, format_quantity
from rangering.models import PhasePerformance, UnitSystem


class TestFuelPolicy:
    def test_phases_and_columns(self, advanced_params) -> None:
        fuel_data, _ = calculate_fuel_policy(advanced_params, calculate_advanced_range(advanced_params))

        assert fuel_data["Phase"] == ["Climb", "Cruise", "Descent", "Final Reserve"]
        assert list(fuel_data) == ["Phase", "Time (min)", "Fuel (GAL)"]

    def test_values(self, advanced_params) -> None:
        fuel_data, _ = calculate_fuel_policy(advanced_params, calculate_advanced_range(advanced_params))

        assert fuel_data["Fuel (GAL)"] == [4.5, 52.2, 3.3, 12]
        assert fuel_data["Time (min)"] == [15, 260.8, 20, 60]

    def test_trip_fuel_burns_whole_tank(self, advanced_params) -> None:
        _, trip_fuel = calculate_fuel_policy(advanced_params, calculate_advanced_range(advanced_params))

        assert trip_fuel == pytest.approx(60)

    def test_limited_has_no_cruise_fuel(self, with_fuel) -> None:
        params = with_fuel(5)
        fuel_data, trip_fuel = calculate_fuel_policy(params, calculate_advanced_range(params))

        assert fuel_data["Fuel (GAL)"][1] == 0
        assert fuel_data["Time (min)"][1] == 0
        assert trip_fuel == pytest.approx(4.5 + 10 / 3)

    def test_metric_label(self, advanced_params) -> None:
        params = dataclasses.replace(advanced_params, unit_system=UnitSystem.METRIC)
        fuel_data, _ = calculate_fuel_policy(params, calculate_advanced_range(params))

        assert "Fuel (L)" in fuel_data

    def test_builds_dataframe(self, advanced_params) -> None:
        fuel_data, _ = calculate_fuel_policy(advanced_params, calculate_advanced_range(advanced_params))

        df = pd.DataFrame(fuel_data)

        assert df.shape == (4, 3)


class TestBasicSummary:
    def test_summary(self, basic_params) -> None:
        summary = calculate_basic_summary(basic_params, calculate_basic_range(basic_params))

        assert summary["Value"] == ["4", "1", "3", "No"]

    def test_short_endurance_floors_at_zero(self, basic_params) -> None:
        params = dataclasses.replace(basic_params, total_endurance=0.5, is_round_trip=True)
        summary = calculate_basic_summary(params, calculate_basic_range(params))

        assert summary["Value"][2] == "0"
        assert summary["Value"][3] == "Yes"

    def test_values_are_all_text(self, basic_params) -> None:
        """A single-typed column keeps Arrow from rejecting the table."""
        summary = calculate_basic_summary(basic_params, calculate_basic_range(basic_params))

        assert all(isinstance(value, str) for value in summary["Value"])
        assert pd.DataFrame(summary)["Value"].tolist() == ["4", "1", "3", "No"]


class TestFormatQuantity:
    def test_rounds_finite_values(self) -> None:
        assert format_quantity(657.708, "NM") == "658 NM"
        assert format_quantity(4.9306, "h", decimals=1) == "4.9 h"

    def test_infinite_value(self) -> None:
        assert format_quantity(math.inf, "NM") == "\N{INFINITY} NM"

    def test_nan_value(self) -> None:
        assert format_quantity(math.nan, "h", decimals=1) == "n/a"

    def test_zero_cruise_burn_result(self, advanced_params) -> None:
        params = dataclasses.replace(advanced_params, cruise=PhasePerformance(speed=135, burn_rate=0))
        result = calculate_advanced_range(params)

        assert format_quantity(result.max_range_nm, "NM") == "\N{INFINITY} NM"
        assert format_quantity(result.endurance_hours, "h", decimals=1) == "\N{INFINITY} h"

    def test_zero_cruise_speed_and_burn_result(self, advanced_params) -> None:
        params = dataclasses.replace(advanced_params, cruise=PhasePerformance(speed=0, burn_rate=0))
        result = calculate_advanced_range(params)

        assert format_quantity(result.max_range_nm, "NM") == "n/a"
