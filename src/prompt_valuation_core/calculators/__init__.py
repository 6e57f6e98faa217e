"""
Calculators sub-package

One module per valuation method. The numeric calculators are pure functions of
their inputs; PVC and SCOPE additionally consult a QualitativeJudge.
"""

from prompt_valuation_core.calculators.asset_pricing import calculate_price, suggest_yearly_volume
from prompt_valuation_core.calculators.empirical_verification import calculate_eavp
from prompt_valuation_core.calculators.labor_arbitrage import calculate_dla
from prompt_valuation_core.calculators.quality import (
    calculate_pvc,
    estimate_token_count,
    evaluate_pvc,
    length_penalty,
)
from prompt_valuation_core.calculators.semantic_density import (
    calculate_scope,
    evaluate_scope,
    scope_tier,
)
from prompt_valuation_core.calculators.viability_vector import (
    calculate_vector,
    reliability_coefficient,
)

__all__ = [
    "calculate_dla",
    "calculate_eavp",
    "calculate_price",
    "suggest_yearly_volume",
    "calculate_vector",
    "reliability_coefficient",
    "calculate_pvc",
    "estimate_token_count",
    "evaluate_pvc",
    "length_penalty",
    "calculate_scope",
    "evaluate_scope",
    "scope_tier",
]
