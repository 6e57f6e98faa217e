"""
P.R.I.C.E. asset pricing

Prices a prompt as a reusable asset from per-run savings, reliability and yearly volume.
"""

from prompt_valuation_core.domain.constants import (
    INDUSTRY_VOLUME_MULTIPLIERS,
    PRICE_CONFIG,
    PRICE_USE_CASES,
)
from prompt_valuation_core.domain.entities import PRICECalculation
from prompt_valuation_core.domain.errors import InvalidInputError


def calculate_price(
    human_time_minutes: float,
    human_hourly_rate: float,
    review_time_minutes: float,
    token_cost: float,
    reliability: float,
    yearly_volume: float,
    parameter_weight: float,
) -> PRICECalculation:
    """
    Calculate the total asset value and suggested sale prices

    Volume, weight and reliability are multiplicative: a zero in any of them
    yields a total asset value of zero.

    Args:
        human_time_minutes: Minutes the task takes a human
        human_hourly_rate: Hourly rate of that human
        review_time_minutes: Minutes spent reviewing each model run
        token_cost: Token/API cost per run
        reliability: Fraction of runs that succeed (0-1)
        yearly_volume: Runs per year
        parameter_weight: Multiplier for the valued parameter

    Returns:
        PRICECalculation
    """
    minute_rate = human_hourly_rate / 60
    human_cost = human_time_minutes * minute_rate
    review_cost = review_time_minutes * minute_rate
    operational_cost = token_cost + review_cost

    net_run_savings = (human_cost - operational_cost) * reliability
    total_asset_value = net_run_savings * yearly_volume * parameter_weight

    return PRICECalculation(
        human_cost=human_cost,
        ai_cost=token_cost,
        review_cost=review_cost,
        operational_cost=operational_cost,
        net_run_savings=net_run_savings,
        total_asset_value=total_asset_value,
        freelance_price=total_asset_value * PRICE_CONFIG["freelance_fee_percentage"],
        marketplace_price=total_asset_value * PRICE_CONFIG["marketplace_fee_percentage"],
    )


def suggest_yearly_volume(use_case: str, industry: str = "Other") -> int:
    """
    Suggest a yearly run volume from the use-case benchmark and industry multiplier

    Args:
        use_case: One of Ad-hoc, SOP, Pipeline
        industry: Industry name (unknown industries use a multiplier of 1.0)

    Returns:
        Rounded yearly volume
    """
    if use_case not in PRICE_USE_CASES:
        raise InvalidInputError(
            f"Unknown use_case: {use_case} (available: {list(PRICE_USE_CASES)})"
        )
    benchmark = PRICE_USE_CASES[use_case]["benchmark"]
    multiplier = INDUSTRY_VOLUME_MULTIPLIERS.get(industry, 1.0)
    return round(benchmark * multiplier)
