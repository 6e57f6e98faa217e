"""
Scorer health check tests
"""

from unittest.mock import MagicMock

from prompt_valuation_core.domain.value_objects import ModelResponse
from prompt_valuation_core.use_cases.health_check import HEALTH_CHECK_PROMPT, check_judge_health


class TestCheckJudgeHealth:
    """check_judge_health() tests"""

    def test_success(self):
        client = MagicMock()
        client.generate.return_value = ModelResponse(output="OK", latency_ms=42, model_name="m")
        create_fn = MagicMock(return_value=client)

        result = check_judge_health("gemini-2.5-flash", create_fn)

        create_fn.assert_called_once_with("gemini-2.5-flash")
        client.generate.assert_called_once_with(HEALTH_CHECK_PROMPT)
        assert result.success is True
        assert result.latency_ms == 42
        assert result.error is None

    def test_client_creation_failure(self):
        create_fn = MagicMock(side_effect=ValueError("ANTHROPIC_API_KEY is not set"))

        result = check_judge_health("claude-haiku-4-5-20251001", create_fn)

        assert result.success is False
        assert result.latency_ms is None
        assert "ANTHROPIC_API_KEY is not set" in result.error
        assert "Troubleshooting" in result.error

    def test_generate_failure(self):
        client = MagicMock()
        client.generate.side_effect = ConnectionError("refused")

        result = check_judge_health("lmstudio/qwen2.5-7b", MagicMock(return_value=client))

        assert result.success is False
        assert "refused" in result.error

    def test_empty_response_fails(self):
        client = MagicMock()
        client.generate.return_value = ModelResponse(output="", latency_ms=10, model_name="m")

        result = check_judge_health("gemini-2.5-flash", MagicMock(return_value=client))

        assert result.success is False
        assert result.latency_ms == 10
        assert "empty response" in result.error
