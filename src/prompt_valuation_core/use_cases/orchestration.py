"""
Valuation Orchestration

Entry point of the engine: runs one valuation method, the CORE subset, or all
six methods concurrently, and attaches badges to every report.
"""

from __future__ import annotations

import logging
import uuid
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable

from prompt_valuation_core.calculators.asset_pricing import calculate_price
from prompt_valuation_core.calculators.empirical_verification import calculate_eavp
from prompt_valuation_core.calculators.labor_arbitrage import calculate_dla
from prompt_valuation_core.calculators.quality import evaluate_pvc
from prompt_valuation_core.calculators.semantic_density import evaluate_scope
from prompt_valuation_core.calculators.viability_vector import calculate_vector
from prompt_valuation_core.domain.constants import (
    BATCH_MODES,
    DLA_DEFAULTS,
    EAVP_DEFAULTS,
    JUDGED_METHODS,
    METHODS,
    PRICE_DEFAULTS,
    VECTOR_DEFAULTS,
)
from prompt_valuation_core.domain.entities import MethodCalculation, ValuationReport
from prompt_valuation_core.domain.errors import BatchValuationError, InvalidInputError, ScorerError
from prompt_valuation_core.domain.value_objects import QualitativeJudgment, ValuationRequest
from prompt_valuation_core.engine_config import EngineConfig, load_config
from prompt_valuation_core.scoring.judge import LLMQualitativeJudge, QualitativeJudge
from prompt_valuation_core.use_cases.badges import evaluate_badges

logger = logging.getLogger(__name__)

# PRICE inputs that are echoed in the report but do not enter the formula
_PRICE_LABELS = ("use_case", "valued_parameter")

_MethodResult = tuple[dict, MethodCalculation, QualitativeJudgment | None]


def _value_dla(request: ValuationRequest, judge: QualitativeJudge | None) -> _MethodResult:
    inputs = request.resolve(DLA_DEFAULTS)
    return inputs, calculate_dla(**inputs), None


def _value_pvc(request: ValuationRequest, judge: QualitativeJudge | None) -> _MethodResult:
    judgment, calculation = evaluate_pvc(request.prompt_text, judge)
    return {"prompt_text": request.prompt_text}, calculation, judgment


def _value_scope(request: ValuationRequest, judge: QualitativeJudge | None) -> _MethodResult:
    judgment, calculation = evaluate_scope(request.prompt_text, judge)
    return {"prompt_text": request.prompt_text}, calculation, judgment


def _value_eavp(request: ValuationRequest, judge: QualitativeJudge | None) -> _MethodResult:
    inputs = request.resolve(EAVP_DEFAULTS)
    return inputs, calculate_eavp(**inputs), None


def _value_price(request: ValuationRequest, judge: QualitativeJudge | None) -> _MethodResult:
    inputs = request.resolve(PRICE_DEFAULTS)
    numeric = {k: v for k, v in inputs.items() if k not in _PRICE_LABELS}
    return inputs, calculate_price(**numeric), None


def _value_vector(request: ValuationRequest, judge: QualitativeJudge | None) -> _MethodResult:
    inputs = request.resolve(VECTOR_DEFAULTS)
    return inputs, calculate_vector(**inputs), None


_VALUATORS: dict[str, Callable[[ValuationRequest, QualitativeJudge | None], _MethodResult]] = {
    "DLA": _value_dla,
    "PVC": _value_pvc,
    "SCOPE": _value_scope,
    "EAVP": _value_eavp,
    "PRICE": _value_price,
    "VECTOR": _value_vector,
}

if set(_VALUATORS) != set(METHODS):
    raise RuntimeError(f"Valuator table out of sync with METHODS: {sorted(_VALUATORS)}")


def resolve_methods(mode: str) -> list[str]:
    """
    Resolve a mode name to the methods it runs, in canonical order

    Args:
        mode: One of the six method names, "CORE" or "ALL" (case-insensitive)

    Returns:
        List of method names

    Raises:
        InvalidInputError: For an unknown mode
    """
    if not isinstance(mode, str):
        raise InvalidInputError(f"mode must be a string, got {mode!r}")
    key = mode.strip().upper()
    if key in BATCH_MODES:
        return list(BATCH_MODES[key])
    if key in _VALUATORS:
        return [key]
    raise InvalidInputError(
        f"Unknown valuation mode: {mode} (available: {METHODS + list(BATCH_MODES)})"
    )


def new_watermark(method: str) -> str:
    """Opaque traceability identifier, fresh per report"""
    return f"PV-{method}-{uuid.uuid4().hex[:6].upper()}"


def run_method(
    request: ValuationRequest,
    method: str,
    judge: QualitativeJudge | None = None,
) -> ValuationReport:
    """
    Run a single valuation method and attach its badges

    Args:
        request: Valuation request
        method: Method name (one of METHODS)
        judge: Qualitative judge (required for PVC and SCOPE)

    Returns:
        ValuationReport
    """
    if method in JUDGED_METHODS and judge is None:
        raise ValueError(f"A qualitative judge is required for {method}")

    inputs, calculation, judgment = _VALUATORS[method](request, judge)
    report = ValuationReport(
        method=method,
        prompt_text=request.prompt_text,
        prompt_title=request.prompt_title,
        inputs=inputs,
        calculations=calculation,
        timestamp=datetime.now(timezone.utc).isoformat(),
        watermark=new_watermark(method),
        judgment=judgment,
    )
    return replace(report, badges=evaluate_badges(report))


def _run_batch(
    request: ValuationRequest,
    methods: list[str],
    judge: QualitativeJudge | None,
    max_workers: int,
) -> list[ValuationReport]:
    """
    Run methods concurrently and join fail-fast

    Results are returned in the order of `methods`. If any branch fails, pending
    branches are cancelled and the whole batch fails.
    """
    if max_workers < 1:
        raise ValueError("max_workers must be at least 1.")

    with ThreadPoolExecutor(max_workers=min(max_workers, len(methods))) as executor:
        futures = {
            method: executor.submit(run_method, request, method, judge)
            for method in methods
        }
        done, not_done = wait(futures.values(), return_when=FIRST_EXCEPTION)

        failed = [
            method for method, future in futures.items()
            if future in done and future.exception() is not None
        ]
        if failed:
            for future in not_done:
                future.cancel()
            method = failed[0]
            cause = futures[method].exception()
            logger.error("Batch valuation aborted: %s failed: %s", method, cause)
            raise BatchValuationError(method, cause) from cause

        return [futures[method].result() for method in methods]


def run(
    request: ValuationRequest | dict,
    mode: str,
    *,
    judge: QualitativeJudge | None = None,
    config: EngineConfig | None = None,
) -> ValuationReport | list[ValuationReport]:
    """
    Value a prompt with one method, the CORE subset, or ALL methods

    Single-method failures propagate unchanged. CORE/ALL return every report in
    canonical order (DLA, PVC, SCOPE, EAVP, PRICE, VECTOR) or raise
    BatchValuationError.

    Args:
        request: ValuationRequest (or a mapping accepted by ValuationRequest.from_dict)
        mode: Method name, "CORE" or "ALL"
        judge: Qualitative judge for PVC/SCOPE (built from config when omitted)
        config: EngineConfig (loads from env if not provided)

    Returns:
        One ValuationReport for a single method, otherwise a list of reports
    """
    if isinstance(request, dict):
        request = ValuationRequest.from_dict(request)
    methods = resolve_methods(mode)
    if config is None:
        config = load_config()

    if judge is None and JUDGED_METHODS.intersection(methods):
        from prompt_valuation_core.infrastructure.model_clients.factory import create_client
        try:
            client = create_client(config.judge.model, config)
        except Exception as e:
            logger.error("Could not create scorer client %s: %s", config.judge.model, e)
            raise ScorerError(f"Could not create scorer client {config.judge.model}: {e}") from e
        judge = LLMQualitativeJudge(client)

    is_batch = mode.strip().upper() in BATCH_MODES
    logger.info("Running valuation mode %s (%s)", mode, ", ".join(methods))

    if not is_batch:
        return run_method(request, methods[0], judge)
    return _run_batch(request, methods, judge, config.batch.max_workers)
