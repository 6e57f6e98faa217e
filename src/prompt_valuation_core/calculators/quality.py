"""
Prompt Value Calculator (PVC)

Combines the scorer's seven 0-4 sub-scores with fixed weights, ambiguity/risk
penalties and a length normalization penalty into a 0-100 quality score.
"""

import logging

from prompt_valuation_core.calculators.common import clamp
from prompt_valuation_core.domain.constants import CHARS_PER_TOKEN, PVC_CONFIG, PVC_SCORE_FIELDS
from prompt_valuation_core.domain.entities import PVCCalculation
from prompt_valuation_core.domain.errors import InvalidInputError
from prompt_valuation_core.domain.value_objects import QualitativeJudgment
from prompt_valuation_core.scoring.judge import QualitativeJudge, validate_judgment

logger = logging.getLogger(__name__)


def estimate_token_count(prompt_text: str) -> int:
    """Rough token estimate (characters / 4, floored)"""
    return len(prompt_text) // CHARS_PER_TOKEN


def length_penalty(token_count: int) -> float:
    """
    Length normalization penalty in [0, 1]

    0 inside the optimal band [T_min, T_opt]. Below T_min it grows linearly to 1
    at zero tokens; above T_opt it grows linearly to 1 at T_max and stays capped.
    """
    length = PVC_CONFIG["length"]
    t_min, t_opt, t_max = length["T_min"], length["T_opt"], length["T_max"]

    if token_count < t_min:
        return (t_min - token_count) / t_min
    if token_count > t_opt:
        return min((token_count - t_opt) / (t_max - t_opt), 1.0)
    return 0.0


def calculate_pvc(prompt_text: str, judgment: QualitativeJudgment) -> PVCCalculation:
    """
    Calculate the PVC composite score from a qualitative judgment

    Args:
        prompt_text: The prompt that was judged (used for the length penalty)
        judgment: Judgment with G_r, C_r, S_r, D_r, F_r, A_r, R_r

    Returns:
        PVCCalculation with final_score clamped to [0, 100]
    """
    max_raw = PVC_CONFIG["max_raw_score"]
    weights = PVC_CONFIG["weights"]
    penalties = PVC_CONFIG["penalties"]

    normalized = {
        name.removesuffix("_r"): judgment[name] / max_raw
        for name in PVC_SCORE_FIELDS
    }

    base_quality = 100 * sum(normalized[key] * weight for key, weight in weights.items())

    # Floor at 0 so an out-of-range ambiguity never takes a fractional power of a negative
    ambiguity_factor = max(0.0, 1 - penalties["A"] * normalized["A"]) ** PVC_CONFIG["ambiguity_exponent"]
    risk_factor = 1 - penalties["R"] * normalized["R"]
    quality_after_penalty = base_quality * ambiguity_factor * risk_factor

    token_count = estimate_token_count(prompt_text)
    l_norm = length_penalty(token_count)

    final_score = clamp(quality_after_penalty * (1 - penalties["L"] * l_norm), 0.0, 100.0)

    return PVCCalculation(
        normalized_scores=normalized,
        base_quality=base_quality,
        quality_after_penalty=quality_after_penalty,
        token_count=token_count,
        length_penalty=l_norm,
        final_score=final_score,
    )


def evaluate_pvc(
    prompt_text: str,
    judge: QualitativeJudge,
) -> tuple[QualitativeJudgment, PVCCalculation]:
    """
    Judge the prompt and compute its PVC score

    Raises:
        InvalidInputError: If the prompt is empty
        ScorerError: If the judge fails or returns an incomplete or non-finite judgment
    """
    if not prompt_text.strip():
        raise InvalidInputError("PVC requires a non-empty prompt")

    judgment = validate_judgment(judge.judge(prompt_text, "PVC"), "PVC")
    calculation = calculate_pvc(prompt_text, judgment)
    logger.debug("PVC final score %.2f (tokens=%d)", calculation.final_score, calculation.token_count)
    return judgment, calculation
