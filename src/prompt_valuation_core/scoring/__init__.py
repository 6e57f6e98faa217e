"""
Scoring sub-package

Provides the qualitative scorer interface, its LLM-backed implementation and the rubrics.
"""

from prompt_valuation_core.domain.value_objects import QualitativeJudgment
from prompt_valuation_core.scoring.judge import (
    LLMQualitativeJudge,
    QualitativeJudge,
    validate_judgment,
    validate_scores,
)
from prompt_valuation_core.scoring.rubrics import RUBRICS, Rubric

__all__ = [
    # value objects (re-exported from domain)
    "QualitativeJudgment",
    # judge
    "LLMQualitativeJudge",
    "QualitativeJudge",
    "validate_judgment",
    "validate_scores",
    # rubrics
    "RUBRICS",
    "Rubric",
]
