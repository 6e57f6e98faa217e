"""
prompt-valuation-core CLI Runner

Minimal CLI for valuing a prompt with one method, the CORE subset, or ALL methods.

Usage:
    python -m prompt_valuation_core.runner --prompt-file prompt.txt --mode ALL
    python -m prompt_valuation_core.runner --prompt-file prompt.txt --mode DLA --request-json telemetry.json

Estimate telemetry from the prompt's structure and write a CSV:
    python -m prompt_valuation_core.runner --prompt-file prompt.txt --mode ALL --estimate --csv results/valuation.csv
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict, replace
from pathlib import Path

from dotenv import load_dotenv

from prompt_valuation_core.domain.constants import BATCH_MODES, JUDGED_METHODS
from prompt_valuation_core.domain.entities import ValuationReport
from prompt_valuation_core.domain.errors import ValuationError
from prompt_valuation_core.domain.value_objects import ValuationRequest
from prompt_valuation_core.engine_config import load_config
from prompt_valuation_core.use_cases.export import reports_to_frame
from prompt_valuation_core.use_cases.health_check import check_judge_health
from prompt_valuation_core.use_cases.orchestration import resolve_methods, run
from prompt_valuation_core.use_cases.prompt_analysis import estimate_request


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="prompt-valuation-core: Estimate the economic value of a prompt",
    )
    parser.add_argument(
        "--prompt-file",
        required=True,
        help="Path to a text file containing the prompt",
    )
    parser.add_argument(
        "--mode",
        default="ALL",
        help="Method name (DLA, PVC, SCOPE, EAVP, PRICE, VECTOR), CORE or ALL (default: ALL)",
    )
    parser.add_argument(
        "--title",
        default=None,
        help="Optional prompt title echoed in reports",
    )
    parser.add_argument(
        "--request-json",
        default=None,
        help="Path to a JSON object with telemetry fields (omitted fields use method defaults)",
    )
    parser.add_argument(
        "--estimate",
        action="store_true",
        help="Estimate telemetry from the prompt's structure (values in --request-json take precedence)",
    )
    parser.add_argument(
        "--judge-model",
        default=None,
        help="Scorer model for PVC/SCOPE (default: VALUATION_JUDGE_MODEL from .env)",
    )
    parser.add_argument(
        "--csv",
        default=None,
        help="Write a flattened CSV of the reports to this path",
    )
    parser.add_argument(
        "--skip-health-check",
        action="store_true",
        help="Skip the scorer connectivity check",
    )
    return parser.parse_args(argv)


def build_request(
    prompt_text: str,
    title: str | None = None,
    overrides: dict | None = None,
    estimate: bool = False,
) -> ValuationRequest:
    """
    Build the request from the prompt, optional estimated telemetry and explicit overrides.

    Args:
        prompt_text: Prompt text
        title: Optional prompt title
        overrides: Explicit request fields (take precedence over estimates)
        estimate: Whether to fill telemetry from the prompt's structure

    Returns:
        ValuationRequest
    """
    data: dict = {}
    if estimate:
        data.update(asdict(estimate_request(prompt_text, prompt_title=title)))
    data.update(overrides or {})
    data["prompt_text"] = prompt_text
    if title is not None:
        data["prompt_title"] = title
    return ValuationRequest.from_dict(data)


def _format_report(report: ValuationReport) -> list[str]:
    """Return the summary lines printed for one report"""
    calc = report.calculations
    if report.method == "DLA":
        headline = f"True net value: ${calc.true_net_value:,.2f} ({'profitable' if calc.is_profitable else 'unprofitable'})"
    elif report.method == "PVC":
        headline = f"Final score: {calc.final_score:.1f} / 100"
    elif report.method == "SCOPE":
        headline = f"PVI: {calc.pvi:.3f} ({calc.tier})"
    elif report.method == "EAVP":
        headline = f"Audited value: ${calc.audited_value:,.2f} ({calc.net_minutes_saved:.1f} min saved)"
    elif report.method == "PRICE":
        headline = f"Asset value: ${calc.total_asset_value:,.2f} (freelance ${calc.freelance_price:,.2f})"
    else:
        headline = f"{calc.status}: annual ${calc.total_annual_value:,.2f} (Q={calc.q:.3f})"

    lines = [f"  [{report.method:<6}] {headline}", f"           Watermark: {report.watermark}"]
    if report.badges:
        lines.append("           Badges: " + ", ".join(f"{b.name} ({b.tier})" for b in report.badges))
    return lines


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = parse_args(argv)

    # Load config
    config = load_config()
    if args.judge_model:
        config = replace(config, judge=replace(config.judge, model=args.judge_model))

    try:
        methods = resolve_methods(args.mode)
    except ValuationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    # Load prompt and telemetry
    prompt_text = Path(args.prompt_file).read_text(encoding="utf-8")
    overrides = None
    if args.request_json:
        overrides = json.loads(Path(args.request_json).read_text(encoding="utf-8"))
        if not isinstance(overrides, dict):
            print("ERROR: --request-json must contain a JSON object", file=sys.stderr)
            return 2

    try:
        request = build_request(prompt_text, args.title, overrides, args.estimate)
    except ValuationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    print(f"\n=== Valuation: {args.mode.upper()} ===\n", file=sys.stderr)
    print(f"  Methods: {methods}", file=sys.stderr)
    print(f"  Prompt:  {len(prompt_text)} chars", file=sys.stderr)
    print(file=sys.stderr)

    # Step 1: Scorer health check (only when PVC/SCOPE will run)
    needs_judge = bool(JUDGED_METHODS.intersection(methods))
    if needs_judge and config.judge.health_check and not args.skip_health_check:
        print(f"  Scorer model: {config.judge.model}... ", end="", flush=True, file=sys.stderr)
        result = check_judge_health(config.judge.model)
        if not result.success:
            print("FAILED", file=sys.stderr)
            print(f"  {result.error}", file=sys.stderr)
            return 1
        print(f"OK ({result.latency_ms}ms)\n", file=sys.stderr)

    # Step 2: Run valuation
    try:
        outcome = run(request, args.mode, config=config)
    except ValuationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    reports = outcome if args.mode.strip().upper() in BATCH_MODES else [outcome]

    # Step 3: Summary
    print("=== Results ===\n", file=sys.stderr)
    for report in reports:
        for line in _format_report(report):
            print(line, file=sys.stderr)
    print(file=sys.stderr)

    # Step 4: Output
    print(json.dumps([r.to_dict() for r in reports], indent=2, ensure_ascii=False))

    if args.csv:
        csv_path = Path(args.csv)
        csv_path.parent.mkdir(parents=True, exist_ok=True)
        reports_to_frame(reports).to_csv(csv_path, index=False)
        print(f"=== Output ===\n\n  CSV: {csv_path}\n", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
