"""
Qualitative scorer adapter

Defines the QualitativeJudge interface consumed by the PVC and SCOPE calculators,
and LLMQualitativeJudge, which asks a model client to grade a prompt against a rubric.
"""

from __future__ import annotations

import json
import logging
import math
import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from prompt_valuation_core.infrastructure.model_clients.base import ModelClient

from prompt_valuation_core.domain.errors import ScorerError
from prompt_valuation_core.domain.value_objects import QualitativeJudgment
from prompt_valuation_core.scoring.rubrics import RUBRICS, Rubric

logger = logging.getLogger(__name__)


def validate_scores(scores: Mapping, rubric: Rubric) -> dict[str, float]:
    """
    Check that every rubric field is present and a finite number

    Args:
        scores: Raw sub-scores (extra keys are ignored)
        rubric: Rubric the scores were produced for

    Returns:
        Dict holding only the rubric fields

    Raises:
        ScorerError: If a field is missing, non-numeric or non-finite
    """
    missing = [name for name in rubric.score_fields if name not in scores]
    if missing:
        raise ScorerError(f"{rubric.rubric_id} judgment is missing fields: {missing}")

    validated: dict[str, float] = {}
    for name in rubric.score_fields:
        value = scores[name]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ScorerError(f"{rubric.rubric_id} field {name} is not numeric: {value!r}")
        if not math.isfinite(value):
            raise ScorerError(f"{rubric.rubric_id} field {name} is not finite")
        validated[name] = value
    return validated


def validate_judgment(judgment: QualitativeJudgment, rubric_id: str) -> QualitativeJudgment:
    """
    Check a judgment returned by any QualitativeJudge before it enters a formula

    Raises:
        ScorerError: If the judgment is not for rubric_id or its scores are unusable
    """
    rubric = RUBRICS[rubric_id]
    if not isinstance(judgment, QualitativeJudgment):
        raise ScorerError(
            f"{rubric_id} scorer returned {type(judgment).__name__}, expected QualitativeJudgment"
        )
    if judgment.rubric_id != rubric_id:
        raise ScorerError(f"Expected a {rubric_id} judgment, got {judgment.rubric_id}")
    validate_scores(judgment.scores, rubric)
    return judgment


class QualitativeJudge(ABC):
    """Interface to an external text-judgment service"""

    @abstractmethod
    def judge(self, prompt_text: str, rubric_id: str) -> QualitativeJudgment:
        """
        Grade prompt_text against the rubric

        Raises:
            ScorerError: When the judgment cannot be produced
        """
        pass


class LLMQualitativeJudge(QualitativeJudge):
    """
    Judge that uses an LLM as the grader

    Sends the rubric as the system instruction and the prompt as the user turn,
    then parses the JSON judgment. Retries and timeouts belong to the model
    client; any failure that reaches this class is terminal.
    """

    _CODE_BLOCK_RE = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```")

    def __init__(self, client: ModelClient) -> None:
        self._client = client

    def judge(self, prompt_text: str, rubric_id: str) -> QualitativeJudgment:
        rubric = RUBRICS.get(rubric_id)
        if rubric is None:
            raise ScorerError(f"Unknown rubric: {rubric_id} (available: {list(RUBRICS)})")

        try:
            response = self._client.generate(
                prompt_text,
                system_instruction=rubric.system_instruction,
                json_mode=True,
            )
        except Exception as e:
            logger.warning("Scorer call failed for rubric %s: %s", rubric_id, e)
            raise ScorerError(f"Scorer call failed for rubric {rubric_id}: {e}") from e

        return self._parse_judgment(response.output, rubric)

    def _parse_judgment(self, raw: str, rubric: Rubric) -> QualitativeJudgment:
        """
        Parse the grader's JSON reply into a QualitativeJudgment

        Accepts a bare JSON object or one wrapped in a ```json code block.
        Every rubric field must be present and a finite number.
        """
        text = (raw or "").strip()
        match = self._CODE_BLOCK_RE.search(text)
        json_text = match.group(1) if match else text

        try:
            data = json.loads(json_text)
        except json.JSONDecodeError as e:
            raise ScorerError(
                f"Failed to parse {rubric.rubric_id} judgment: {text[:200]}"
            ) from e

        if not isinstance(data, dict):
            raise ScorerError(f"{rubric.rubric_id} judgment must be a JSON object: {text[:200]}")

        scores = validate_scores(data, rubric)

        rationale = None
        if rubric.rationale_field:
            rationale = data.get(rubric.rationale_field)

        return QualitativeJudgment(
            rubric_id=rubric.rubric_id,
            scores=scores,
            rationale=rationale,
        )
