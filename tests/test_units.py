"""Tests for unit conversion and display formatting."""

import pytest

from agriops.core import units
from agriops.core.config import settings


@pytest.fixture
def metric(monkeypatch):
    monkeypatch.setattr(settings, "display_units", "metric")


class TestConversions:
    def test_lb_to_kg(self):
        assert units.lb_to_kg(1) == pytest.approx(0.45359237)

    def test_acres_to_hectares(self):
        assert units.acres_to_hectares(1) == pytest.approx(0.40468564)

    def test_lb_per_acre_to_kg_per_ha(self):
        assert units.lb_per_acre_to_kg_per_ha(1) == pytest.approx(1.12085, rel=1e-5)


class TestImperialFormatting:
    def test_dm_rate(self):
        assert units.format_dm_rate(960) == "960 lb/ac"
        assert units.format_dm_rate(13.75, 1) == "13.8 lb/ac"

    def test_mass(self):
        assert units.format_mass(4800) == "4,800 lb"

    def test_area(self):
        assert units.format_area(12) == "12.0 ac"

    def test_is_imperial(self):
        assert units.is_imperial()


class TestMetricFormatting:
    def test_dm_rate(self, metric):
        assert units.format_dm_rate(960) == "1,076 kg/ha"

    def test_mass(self, metric):
        assert units.format_mass(4800) == "2,177 kg"

    def test_area(self, metric):
        assert units.format_area(12) == "4.9 ha"

    def test_is_imperial(self, metric):
        assert not units.is_imperial()


class TestFormatCurrency:
    def test_rounds_to_dollars(self):
        assert units.format_currency(1752.4) == "$1,752"

    def test_negative(self):
        assert units.format_currency(-5) == "-$5"

    def test_never_converted(self, metric):
        assert units.format_currency(1234) == "$1,234"
