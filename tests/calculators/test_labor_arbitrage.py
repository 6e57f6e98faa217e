"""
DLA calculator tests
"""

import pytest

from prompt_valuation_core.calculators.labor_arbitrage import calculate_dla
from prompt_valuation_core.domain.constants import DLA_DEFAULTS


def _example(**overrides):
    inputs = {
        "output_char_count": 5000,
        "api_latency_seconds": 12.5,
        "edit_session_seconds": 180,
        "api_cost_usd": 0.04,
        "human_wpm": 40,
        "human_reading_wpm": 250,
        "hourly_wage": 60,
    }
    inputs.update(overrides)
    return calculate_dla(**inputs)


class TestCalculateDLA:
    """calculate_dla() tests"""

    def test_worked_example(self):
        result = _example()
        assert result.total_words == pytest.approx(1000)
        assert result.manual_minutes == pytest.approx(25)
        assert result.gross_labor_value == pytest.approx(25.0)
        assert result.wait_cost == pytest.approx(0.2083, abs=1e-4)
        # 1000 words / 250 wpm = 4 minutes at $1/min
        assert result.reading_cost == pytest.approx(4.0)
        assert result.fixing_cost == pytest.approx(3.0)
        assert result.hidden_friction_cost == pytest.approx(7.2483, abs=1e-4)
        assert result.true_net_value == pytest.approx(17.7517, abs=1e-4)
        assert result.is_profitable is True

    def test_friction_is_sum_of_components(self):
        result = _example()
        assert result.hidden_friction_cost == pytest.approx(
            result.wait_cost + result.reading_cost + result.fixing_cost + 0.04
        )

    def test_net_is_gross_minus_friction(self):
        result = calculate_dla(**DLA_DEFAULTS)
        assert result.true_net_value == pytest.approx(
            result.gross_labor_value - result.hidden_friction_cost
        )

    def test_arbitrage_efficiency(self):
        result = _example()
        assert result.arbitrage_efficiency == pytest.approx(17.7517 / 25, abs=1e-4)

    def test_long_edit_session_is_unprofitable(self):
        result = _example(edit_session_seconds=3600)
        assert result.true_net_value < 0
        assert result.is_profitable is False

    def test_zero_wage_gives_zero_efficiency(self):
        result = _example(hourly_wage=0)
        assert result.gross_labor_value == 0
        assert result.arbitrage_efficiency == 0
        assert result.is_profitable is False

    def test_zero_typing_speed_does_not_divide_by_zero(self):
        result = _example(human_wpm=0)
        assert result.manual_minutes == 0
        assert result.gross_labor_value == 0

    def test_zero_reading_speed_does_not_divide_by_zero(self):
        result = _example(human_reading_wpm=0)
        assert result.reading_cost == 0
