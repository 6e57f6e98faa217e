"""
S.C.O.P.E. semantic density

PVI = ((S * 1.0 + H * 2.0 + D * 1.0) / (1 + E)^2) * Teff
"""

from prompt_valuation_core.calculators.common import safe_divide
from prompt_valuation_core.domain.constants import SCOPE_CONFIG
from prompt_valuation_core.domain.entities import SCOPECalculation
from prompt_valuation_core.domain.errors import InvalidInputError
from prompt_valuation_core.domain.value_objects import QualitativeJudgment
from prompt_valuation_core.scoring.judge import QualitativeJudge, validate_judgment


def scope_tier(pvi: float) -> str:
    """Display tier for a Prompt-Value-Index"""
    for lower_bound, label in SCOPE_CONFIG["tiers"]:
        if pvi > lower_bound:
            return label
    return SCOPE_CONFIG["floor_tier"]


def calculate_scope(judgment: QualitativeJudgment) -> SCOPECalculation:
    """
    Calculate the Prompt-Value-Index from a SCOPE judgment

    Args:
        judgment: Judgment with S, H, D, E, Teff

    Returns:
        SCOPECalculation (a zero denominator yields a PVI of 0)
    """
    weights = SCOPE_CONFIG["weights"]
    signal = (
        judgment["S"] * weights["S"]
        + judgment["H"] * weights["H"]
        + judgment["D"] * weights["D"]
    )
    pvi = safe_divide(signal, (1 + judgment["E"]) ** 2) * judgment["Teff"]
    return SCOPECalculation(pvi=pvi, tier=scope_tier(pvi))


def evaluate_scope(
    prompt_text: str,
    judge: QualitativeJudge,
) -> tuple[QualitativeJudgment, SCOPECalculation]:
    """
    Judge the prompt and compute its PVI

    Raises:
        InvalidInputError: If the prompt is empty
        ScorerError: If the judge fails or returns an incomplete or non-finite judgment
    """
    if not prompt_text.strip():
        raise InvalidInputError("SCOPE requires a non-empty prompt")

    judgment = validate_judgment(judge.judge(prompt_text, "SCOPE"), "SCOPE")
    return judgment, calculate_scope(judgment)
