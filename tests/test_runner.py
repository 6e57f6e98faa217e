"""
CLI runner tests (model clients are mocked)
"""

import json
from unittest.mock import patch

import pandas as pd
import pytest

from prompt_valuation_core.domain.entities import HealthCheckResult
from prompt_valuation_core.domain.errors import InvalidInputError
from prompt_valuation_core.domain.value_objects import ModelResponse
from prompt_valuation_core.runner import build_request, main, parse_args

PROMPT = "Summarize the attached contract in exactly 5 bullet points. Output: markdown list."


class _GraderClient:
    def generate(self, prompt, *, system_instruction=None, json_mode=False):
        if '"Teff"' in (system_instruction or ""):
            output = '{"S": 0.9, "H": 0.9, "D": 0.9, "E": 0.05, "Teff": 0.95}'
        else:
            output = '{"G_r": 4, "C_r": 3, "S_r": 4, "D_r": 4, "F_r": 4, "A_r": 0, "R_r": 0, "reasoning": "ok"}'
        return ModelResponse(output=output, latency_ms=10, model_name="mock")


@pytest.fixture(autouse=True)
def _no_dotenv(monkeypatch):
    monkeypatch.setattr("prompt_valuation_core.runner.load_dotenv", lambda: None)
    for key in ("VALUATION_JUDGE_MODEL", "VALUATION_JUDGE_HEALTH_CHECK", "VALUATION_MAX_WORKERS"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def prompt_file(tmp_path):
    path = tmp_path / "prompt.txt"
    path.write_text(PROMPT, encoding="utf-8")
    return path


class TestParseArgs:
    def test_defaults(self):
        args = parse_args(["--prompt-file", "p.txt"])
        assert args.mode == "ALL"
        assert args.estimate is False
        assert args.csv is None

    def test_prompt_file_is_required(self):
        with pytest.raises(SystemExit):
            parse_args([])


class TestBuildRequest:
    def test_overrides_take_precedence_over_estimate(self):
        request = build_request(PROMPT, overrides={"hourly_wage": 200}, estimate=True)
        assert request.hourly_wage == 200
        assert request.output_char_count is not None

    def test_without_estimate_fields_are_omitted(self):
        request = build_request(PROMPT, title="Contract")
        assert request.prompt_title == "Contract"
        assert request.hourly_wage is None

    def test_unknown_override_raises(self):
        with pytest.raises(InvalidInputError):
            build_request(PROMPT, overrides={"wage": 1})


class TestMain:
    """main() end-to-end tests"""

    def test_numeric_method_prints_json(self, prompt_file, capsys):
        assert main(["--prompt-file", str(prompt_file), "--mode", "DLA"]) == 0

        reports = json.loads(capsys.readouterr().out)
        assert len(reports) == 1
        assert reports[0]["method"] == "DLA"
        assert reports[0]["watermark"].startswith("PV-DLA-")

    def test_request_json(self, prompt_file, tmp_path, capsys):
        request_path = tmp_path / "request.json"
        request_path.write_text(json.dumps({"yearly_volume": 0}), encoding="utf-8")

        assert main([
            "--prompt-file", str(prompt_file), "--mode", "PRICE", "--request-json", str(request_path),
        ]) == 0

        reports = json.loads(capsys.readouterr().out)
        assert reports[0]["calculations"]["total_asset_value"] == 0

    def test_invalid_request_json_returns_2(self, prompt_file, tmp_path):
        request_path = tmp_path / "request.json"
        request_path.write_text(json.dumps({"hourly_wage": -1}), encoding="utf-8")

        assert main([
            "--prompt-file", str(prompt_file), "--mode", "DLA", "--request-json", str(request_path),
        ]) == 2

    def test_unknown_mode_returns_2(self, prompt_file):
        assert main(["--prompt-file", str(prompt_file), "--mode", "ROI"]) == 2

    def test_health_check_failure_returns_1(self, prompt_file):
        failed = HealthCheckResult(model_name="gemini-2.5-flash", success=False, latency_ms=None, error="no key")
        with patch("prompt_valuation_core.runner.check_judge_health", return_value=failed) as mock_check:
            assert main(["--prompt-file", str(prompt_file), "--mode", "PVC"]) == 1
        mock_check.assert_called_once_with("gemini-2.5-flash")

    def test_all_with_csv(self, prompt_file, tmp_path, capsys):
        csv_path = tmp_path / "out" / "valuation.csv"
        with patch(
            "prompt_valuation_core.infrastructure.model_clients.factory.create_client",
            return_value=_GraderClient(),
        ):
            code = main([
                "--prompt-file", str(prompt_file),
                "--mode", "ALL",
                "--estimate",
                "--skip-health-check",
                "--csv", str(csv_path),
            ])

        assert code == 0
        reports = json.loads(capsys.readouterr().out)
        assert [r["method"] for r in reports] == ["DLA", "PVC", "SCOPE", "EAVP", "PRICE", "VECTOR"]
        df = pd.read_csv(csv_path)
        assert len(df) == 6
        assert "SEMANTIC_LEGEND" in df.loc[2, "badges"]

    def test_scorer_failure_returns_1(self, prompt_file):
        class _BrokenClient:
            def generate(self, prompt, *, system_instruction=None, json_mode=False):
                return ModelResponse(output="not json", latency_ms=1, model_name="mock")

        with patch(
            "prompt_valuation_core.infrastructure.model_clients.factory.create_client",
            return_value=_BrokenClient(),
        ):
            assert main(["--prompt-file", str(prompt_file), "--mode", "CORE", "--skip-health-check"]) == 1

    def test_scorer_client_creation_failure_returns_1(self, prompt_file, capsys):
        with patch(
            "prompt_valuation_core.infrastructure.model_clients.factory.create_client",
            side_effect=ValueError("Neither GEMINI_API_KEY nor GCP_PROJECT_ID is set"),
        ):
            code = main(["--prompt-file", str(prompt_file), "--mode", "CORE", "--skip-health-check"])

        assert code == 1
        assert "Could not create scorer client" in capsys.readouterr().err
