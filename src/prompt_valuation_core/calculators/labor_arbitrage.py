"""
Differential Labor Arbitrage (DLA)

Compares the labor value of typing an output by hand against the hidden friction
of getting it from a model: waiting, reading, fixing, and paying for the call.
"""

from prompt_valuation_core.calculators.common import safe_divide
from prompt_valuation_core.domain.constants import CHARS_PER_WORD
from prompt_valuation_core.domain.entities import DLACalculation


def calculate_dla(
    output_char_count: float,
    api_latency_seconds: float,
    edit_session_seconds: float,
    api_cost_usd: float,
    human_wpm: float,
    human_reading_wpm: float,
    hourly_wage: float,
) -> DLACalculation:
    """
    Calculate the labor arbitrage of one model run

    Net value = gross labor value - (wait + reading + fixing + API cost)

    Args:
        output_char_count: Characters in the model output
        api_latency_seconds: Time spent waiting for the model
        edit_session_seconds: Time spent fixing the output
        api_cost_usd: Raw API cost of the run
        human_wpm: Human typing speed (words/min)
        human_reading_wpm: Human reading speed (words/min)
        hourly_wage: Hourly wage of the human

    Returns:
        DLACalculation
    """
    minute_rate = hourly_wage / 60
    total_words = output_char_count / CHARS_PER_WORD

    manual_minutes = safe_divide(total_words, human_wpm)
    gross_labor_value = manual_minutes * minute_rate

    wait_cost = (api_latency_seconds / 60) * minute_rate
    reading_cost = safe_divide(total_words, human_reading_wpm) * minute_rate
    fixing_cost = (edit_session_seconds / 60) * minute_rate
    hidden_friction_cost = wait_cost + reading_cost + fixing_cost + api_cost_usd

    true_net_value = gross_labor_value - hidden_friction_cost

    return DLACalculation(
        total_words=total_words,
        manual_minutes=manual_minutes,
        gross_labor_value=gross_labor_value,
        wait_cost=wait_cost,
        reading_cost=reading_cost,
        fixing_cost=fixing_cost,
        hidden_friction_cost=hidden_friction_cost,
        true_net_value=true_net_value,
        is_profitable=true_net_value > 0,
        arbitrage_efficiency=safe_divide(true_net_value, gross_labor_value),
    )
