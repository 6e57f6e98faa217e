"""
V.E.C.T.O.R. viability valuation

Derives a reliability coefficient Q from four 0-5 quality scores and claws back
part of the time saved as correction labor when Q is low.
"""

from prompt_valuation_core.domain.constants import VECTOR_CONFIG
from prompt_valuation_core.domain.entities import VECTORCalculation

VIABLE = "VIABLE ASSET"
SCRAP = "SCRAP ASSET"


def reliability_coefficient(
    score_constraints: float,
    score_context: float,
    score_feasibility: float,
    score_safety: float,
) -> tuple[float, float]:
    """
    Calculate the reliability coefficient Q

    Base quality is the geometric mean of the three positive scores normalized
    to [0, 1], so a single 0 collapses it to 0 (weakest link). Q scales the base
    by (1 - safety / 5), where a higher safety score is worse.

    Returns:
        (base_quality, Q)
    """
    max_score = VECTOR_CONFIG["max_score"]
    product = (
        (score_constraints / max_score)
        * (score_context / max_score)
        * (score_feasibility / max_score)
    )
    base_quality = product ** (1 / 3)
    q = base_quality * (1 - score_safety / max_score)
    return base_quality, q


def calculate_vector(
    score_constraints: float,
    score_context: float,
    score_feasibility: float,
    score_safety: float,
    vector_hourly_rate: float,
    time_saved_minutes: float,
    annual_volume: float,
    api_cost_per_run: float,
) -> VECTORCalculation:
    """
    Calculate production viability of a prompt asset

    Args:
        score_constraints: Constraint hardness (0-5)
        score_context: Context quality (0-5)
        score_feasibility: Feasibility (0-5)
        score_safety: Safety risk (0-5, higher is worse)
        vector_hourly_rate: Hourly rate of the human being replaced (separate from
            PRICE's human_hourly_rate)
        time_saved_minutes: Minutes saved per run
        annual_volume: Runs per year
        api_cost_per_run: API cost per run

    Returns:
        VECTORCalculation
    """
    base_quality, q = reliability_coefficient(
        score_constraints, score_context, score_feasibility, score_safety
    )
    minute_rate = vector_hourly_rate / 60

    gross_value_per_run = time_saved_minutes * minute_rate
    correction_cost = (
        time_saved_minutes * VECTOR_CONFIG["correction_time_multiplier"] * (1 - q) * minute_rate
    )
    net_utility = gross_value_per_run - correction_cost - api_cost_per_run
    total_annual_value = net_utility * annual_volume

    # An asset that cannot be relied on at all is never viable
    if q <= 0:
        status = SCRAP
        reason = (
            "Reliability coefficient is 0: a core quality score "
            "(constraints, context or feasibility) is 0 or the safety risk is maximal."
        )
    elif net_utility <= 0:
        status = SCRAP
        reason = "Correction labor and API cost consume all of the labor value saved per run."
    else:
        status = VIABLE
        reason = None

    return VECTORCalculation(
        base_quality=base_quality,
        q=q,
        gross_value_per_run=gross_value_per_run,
        correction_cost=correction_cost,
        net_utility=net_utility,
        total_annual_value=total_annual_value,
        freelance_price=total_annual_value * VECTOR_CONFIG["freelance_price_percentage"],
        marketplace_price=total_annual_value * VECTOR_CONFIG["marketplace_price_percentage"],
        status=status,
        reason=reason,
    )
