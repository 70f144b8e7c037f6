"""Tests for the Streamlit script, run headless through AppTest."""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

import rangering

APP_PATH = str(Path(rangering.__file__).with_name("main.py"))


@pytest.fixture
def app(monkeypatch) -> AppTest:
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()
    return at


def metric(at: AppTest, label: str):
    return next(m for m in at.metric if m.label == label)


def advanced(at: AppTest) -> AppTest:
    at.radio(key="mode").set_value("Advanced").run()
    return at


class TestMetricsPanel:
    def test_basic_defaults(self, app: AppTest) -> None:
        assert not app.exception
        assert metric(app, "Safe Range").value == "360 NM"
        assert metric(app, "Max Range (Dry)").value == "480 NM"
        assert metric(app, "Endurance").value == "4.0 h"

    def test_advanced_defaults(self, app: AppTest) -> None:
        at = advanced(app)

        assert not at.exception
        assert metric(at, "Safe Range").value == "523 NM"
        assert metric(at, "Max Range (Dry)").value == "658 NM"

    def test_zero_cruise_burn_renders(self, app: AppTest) -> None:
        at = advanced(app)
        at.number_input(key="cruise_burn").set_value(0.0).run()

        assert not at.exception
        assert metric(at, "Max Range (Dry)").value == "\N{INFINITY} NM"
        assert metric(at, "Endurance").value == "\N{INFINITY} h"

    def test_zero_cruise_speed_and_burn_renders(self, app: AppTest) -> None:
        at = advanced(app)
        at.number_input(key="cruise_speed").set_value(0.0).run()
        at.number_input(key="cruise_burn").set_value(0.0).run()

        assert not at.exception
        assert metric(at, "Max Range (Dry)").value == "n/a"

    def test_limited_badge(self, app: AppTest) -> None:
        at = advanced(app)
        at.number_input(key="total_fuel").set_value(5.0).run()

        assert not at.exception
        assert metric(at, "Safe Range").delta == "Limited"
        assert [w.value for w in at.warning] == ["Insufficient fuel for Climb/Descent."]

    def test_no_badge_when_fuel_covers_climb_and_descent(self, app: AppTest) -> None:
        at = advanced(app)

        assert not metric(at, "Safe Range").delta
