"""
Empirical Asset Verification Protocol (EAVP)

Audits the time actually saved once edits and regenerations are charged back.
"""

from prompt_valuation_core.calculators.common import safe_divide
from prompt_valuation_core.domain.constants import CHARS_PER_WORD, EAVP_CONFIG
from prompt_valuation_core.domain.entities import EAVPCalculation


def calculate_eavp(
    output_chars: float,
    user_wpm: float,
    edit_time_minutes: float,
    regenerations: float,
    market_rate: float,
) -> EAVPCalculation:
    """
    Calculate the audited value of one model run

    Args:
        output_chars: Characters in the accepted output
        user_wpm: The user's typing speed (words/min)
        edit_time_minutes: Minutes spent editing the output
        regenerations: Number of times the output was regenerated
        market_rate: Market hourly rate for the work

    Returns:
        EAVPCalculation (a positive audited_value is a net gain)
    """
    manual_creation_minutes = safe_divide(output_chars / CHARS_PER_WORD, user_wpm)
    correction_tax_minutes = (
        edit_time_minutes + regenerations * EAVP_CONFIG["regeneration_penalty_minutes"]
    )
    net_minutes_saved = manual_creation_minutes - correction_tax_minutes
    audited_value = (net_minutes_saved / 60) * market_rate

    return EAVPCalculation(
        manual_creation_minutes=manual_creation_minutes,
        correction_tax_minutes=correction_tax_minutes,
        net_minutes_saved=net_minutes_saved,
        audited_value=audited_value,
        gross_labor_value=(manual_creation_minutes / 60) * market_rate,
        correction_cost=(correction_tax_minutes / 60) * market_rate,
        efficiency_ratio=safe_divide(net_minutes_saved, manual_creation_minutes),
        is_net_gain=audited_value > 0,
    )
