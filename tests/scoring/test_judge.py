"""
LLMQualitativeJudge tests

Parsing of the grader's JSON reply and wrapping of client failures.
"""

import pytest

from prompt_valuation_core.domain.errors import ScorerError
from prompt_valuation_core.domain.value_objects import ModelResponse
from prompt_valuation_core.scoring.judge import LLMQualitativeJudge
from prompt_valuation_core.scoring.rubrics import PVC_SYSTEM_INSTRUCTION, RUBRICS, SCOPE_SYSTEM_INSTRUCTION

PVC_REPLY = '{"G_r": 4, "C_r": 3, "S_r": 3, "D_r": 2, "F_r": 4, "A_r": 1, "R_r": 0, "reasoning": "Clear goal."}'
SCOPE_REPLY = '{"S": 0.8, "H": 0.6, "D": 0.7, "E": 0.1, "Teff": 0.9}'


class MockClient:
    """Model client double that records the last call"""

    def __init__(self, response_text: str = "", error: Exception | None = None):
        self._response_text = response_text
        self._error = error
        self.calls: list[dict] = []

    def generate(self, prompt, *, system_instruction=None, json_mode=False):
        self.calls.append({
            "prompt": prompt,
            "system_instruction": system_instruction,
            "json_mode": json_mode,
        })
        if self._error:
            raise self._error
        return ModelResponse(output=self._response_text, latency_ms=120, model_name="mock-grader")


class TestJudgeRequest:
    """What the judge sends to the client"""

    def test_sends_rubric_as_system_instruction(self):
        client = MockClient(PVC_REPLY)
        LLMQualitativeJudge(client).judge("Write a haiku.", "PVC")

        call = client.calls[0]
        assert call["prompt"] == "Write a haiku."
        assert call["system_instruction"] == PVC_SYSTEM_INSTRUCTION
        assert call["json_mode"] is True

    def test_scope_rubric(self):
        client = MockClient(SCOPE_REPLY)
        LLMQualitativeJudge(client).judge("Write a haiku.", "SCOPE")
        assert client.calls[0]["system_instruction"] == SCOPE_SYSTEM_INSTRUCTION

    def test_unknown_rubric_raises_without_calling(self):
        client = MockClient(PVC_REPLY)
        with pytest.raises(ScorerError, match="Unknown rubric"):
            LLMQualitativeJudge(client).judge("p", "ROI")
        assert client.calls == []

    def test_client_error_is_wrapped(self):
        client = MockClient(error=TimeoutError("deadline exceeded"))
        with pytest.raises(ScorerError, match="deadline exceeded") as exc_info:
            LLMQualitativeJudge(client).judge("p", "PVC")
        assert isinstance(exc_info.value.__cause__, TimeoutError)


class TestParseJudgment:
    """_parse_judgment() tests"""

    def _parse(self, text: str, rubric_id: str = "PVC"):
        judge = LLMQualitativeJudge(MockClient(text))
        return judge._parse_judgment(text, RUBRICS[rubric_id])

    def test_pvc_reply(self):
        judgment = self._parse(PVC_REPLY)
        assert judgment.rubric_id == "PVC"
        assert judgment["G_r"] == 4
        assert judgment["R_r"] == 0
        assert judgment.rationale == "Clear goal."
        assert "reasoning" not in judgment.scores

    def test_scope_reply(self):
        judgment = self._parse(SCOPE_REPLY, "SCOPE")
        assert judgment["Teff"] == pytest.approx(0.9)
        assert judgment.rationale is None

    def test_json_in_code_block(self):
        judgment = self._parse(f"```json\n{SCOPE_REPLY}\n```", "SCOPE")
        assert judgment["S"] == pytest.approx(0.8)

    def test_extra_fields_are_ignored(self):
        judgment = self._parse('{"S": 1, "H": 1, "D": 1, "E": 0, "Teff": 1, "note": "x"}', "SCOPE")
        assert set(judgment.scores) == {"S", "H", "D", "E", "Teff"}

    def test_not_json_raises(self):
        with pytest.raises(ScorerError, match="Failed to parse"):
            self._parse("The prompt is great, 4/4.")

    def test_empty_reply_raises(self):
        with pytest.raises(ScorerError):
            self._parse("")

    def test_non_object_raises(self):
        with pytest.raises(ScorerError, match="must be a JSON object"):
            self._parse("[1, 2, 3]")

    def test_missing_field_raises(self):
        with pytest.raises(ScorerError, match="missing fields"):
            self._parse('{"S": 0.8, "H": 0.6}', "SCOPE")

    def test_non_numeric_field_raises(self):
        with pytest.raises(ScorerError, match="not numeric"):
            self._parse('{"S": "high", "H": 0.6, "D": 0.7, "E": 0.1, "Teff": 0.9}', "SCOPE")

    def test_bool_field_raises(self):
        with pytest.raises(ScorerError, match="not numeric"):
            self._parse('{"S": true, "H": 0.6, "D": 0.7, "E": 0.1, "Teff": 0.9}', "SCOPE")

    def test_non_finite_field_raises(self):
        with pytest.raises(ScorerError, match="not finite"):
            self._parse('{"S": NaN, "H": 0.6, "D": 0.7, "E": 0.1, "Teff": 0.9}', "SCOPE")
