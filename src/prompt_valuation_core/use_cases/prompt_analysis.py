"""
Prompt Structure Analysis

Offline heuristics that read a prompt's structure and estimate the telemetry the
numeric valuation methods need when the caller has no measurements of their own.
"""

import re

from prompt_valuation_core.domain.constants import CHARS_PER_WORD, VECTOR_CONFIG
from prompt_valuation_core.domain.value_objects import PromptStructure, ValuationRequest

# Specific, measurable requirements
_HARD_CONSTRAINT_PATTERNS = [
    re.compile(r"\b(?:exactly|must be|maximum|minimum|only|no more than|at least)\b", re.IGNORECASE),
    re.compile(r"\b(?:JSON|XML|CSV|markdown|HTML)\b", re.IGNORECASE),
    re.compile(r"\b\d+\s*(?:words?|characters?|sentences?|paragraphs?|items?|lines?)\b", re.IGNORECASE),
    re.compile(r"\b(?:format|output|return|respond with):", re.IGNORECASE),
]

# Vague, subjective requirements
_SOFT_CONSTRAINT_PATTERNS = [
    re.compile(r"\b(?:professional|concise|clear|brief|detailed|friendly)\b", re.IGNORECASE),
    re.compile(r"\b(?:good|nice|appropriate|suitable)\b", re.IGNORECASE),
]

_OUTPUT_FORMAT_RE = re.compile(r"\b(?:format|structure|template|schema|output)\b", re.IGNORECASE)
_EXAMPLE_RE = re.compile(r"\b(?:example|for instance|such as|like this)\b|e\.g\.", re.IGNORECASE)
_QUOTED_EXAMPLE_RE = re.compile(r'"[^"]{10,}"')
_CONTEXT_RE = re.compile(r"\b(?:background|context|situation|scenario|given that|assuming)\b", re.IGNORECASE)
_SHORT_OUTPUT_RE = re.compile(r"\b(?:brief|short|quick|summary|one-liner)\b", re.IGNORECASE)
_LONG_OUTPUT_RE = re.compile(r"\b(?:detailed|comprehensive|thorough|extensive|full)\b", re.IGNORECASE)
_CREATIVE_RE = re.compile(r"\b(?:write|create|generate|compose|story|poem|creative)\b", re.IGNORECASE)
_TECHNICAL_RE = re.compile(r"\b(?:code|function|API|debug|script|program)\b", re.IGNORECASE)
_CONVERSATIONAL_RE = re.compile(r"\b(?:reply|respond|chat|conversation|message)\b", re.IGNORECASE)
_REPEATABLE_RE = re.compile(r"\b(?:template|every|each|all|batch|multiple|automate)\b", re.IGNORECASE)

OUTPUT_CHARS_BY_LENGTH = {"short": 500, "medium": 1500, "long": 4000}
WAGE_BY_TASK = {"creative": 75, "analytical": 85, "technical": 120, "conversational": 50}
LATENCY_BY_COMPLEXITY = {"simple": 3, "moderate": 8, "complex": 15}  # seconds
REVIEW_BY_LENGTH = {"short": 1, "medium": 3, "long": 8}  # minutes
FEASIBILITY_BY_COMPLEXITY = {"simple": 0.9, "moderate": 0.75, "complex": 0.6}
TYPING_WPM = 45
API_COST_PER_1K_CHARS = 0.02
SAFETY_FACTOR = 0.95


def analyze_prompt_structure(text: str) -> PromptStructure:
    """
    Extract structural characteristics of a prompt with regex heuristics

    Args:
        text: Prompt text

    Returns:
        PromptStructure
    """
    words = text.split()
    hard_constraint_count = sum(len(p.findall(text)) for p in _HARD_CONSTRAINT_PATTERNS)

    if len(words) > 100 or hard_constraint_count > 3:
        complexity_level = "complex"
    elif len(words) > 30 or hard_constraint_count > 1:
        complexity_level = "moderate"
    else:
        complexity_level = "simple"

    if _SHORT_OUTPUT_RE.search(text):
        estimated_output_length = "short"
    elif _LONG_OUTPUT_RE.search(text):
        estimated_output_length = "long"
    else:
        estimated_output_length = "medium"

    if _CREATIVE_RE.search(text):
        task_type = "creative"
    elif _TECHNICAL_RE.search(text):
        task_type = "technical"
    elif _CONVERSATIONAL_RE.search(text):
        task_type = "conversational"
    else:
        task_type = "analytical"

    is_repeatable = (
        bool(_REPEATABLE_RE.search(text))
        or task_type in ("technical", "conversational")
    )

    return PromptStructure(
        char_count=len(text),
        word_count=len(words),
        hard_constraint_count=hard_constraint_count,
        has_soft_constraints=any(p.search(text) for p in _SOFT_CONSTRAINT_PATTERNS),
        has_output_format=bool(_OUTPUT_FORMAT_RE.search(text)),
        has_examples=bool(
            _EXAMPLE_RE.search(text) or "```" in text or _QUOTED_EXAMPLE_RE.search(text)
        ),
        has_context=bool(_CONTEXT_RE.search(text)) or len(words) > 50,
        complexity_level=complexity_level,
        estimated_output_length=estimated_output_length,
        task_type=task_type,
        is_repeatable=is_repeatable,
    )


def _estimate_yearly_volume(structure: PromptStructure) -> int:
    if not structure.is_repeatable:
        return 50
    if structure.task_type == "conversational":
        return 5000
    if structure.task_type == "technical":
        return 500
    return 200


def _estimate_reliability(structure: PromptStructure) -> float:
    reliability = 0.6
    if structure.has_hard_constraints:
        reliability += 0.15
    if structure.has_output_format:
        reliability += 0.1
    if structure.has_examples:
        reliability += 0.1
    if structure.has_context:
        reliability += 0.05
    return round(min(reliability, 0.98), 4)


def _to_vector_score(fraction: float) -> int:
    return round(fraction * VECTOR_CONFIG["max_score"])


def estimate_request(text: str, prompt_title: str | None = None) -> ValuationRequest:
    """
    Build a ValuationRequest whose telemetry is estimated from the prompt's structure

    Args:
        text: Prompt text
        prompt_title: Optional title echoed in reports

    Returns:
        ValuationRequest with every numeric field populated
    """
    structure = analyze_prompt_structure(text)

    output_chars = OUTPUT_CHARS_BY_LENGTH[structure.estimated_output_length]
    wage = WAGE_BY_TASK[structure.task_type]
    review_minutes = REVIEW_BY_LENGTH[structure.estimated_output_length]

    base_fix_minutes = 2 if structure.has_hard_constraints else 5
    fix_reduction = min(structure.hard_constraint_count * 0.5, 3)
    fix_minutes = max(base_fix_minutes - fix_reduction, 1)
    edit_minutes = max(base_fix_minutes - fix_reduction + 1, 2)

    manual_minutes = output_chars / CHARS_PER_WORD / TYPING_WPM
    api_cost = output_chars / 1000 * API_COST_PER_1K_CHARS
    yearly_volume = _estimate_yearly_volume(structure)

    if not structure.is_repeatable:
        use_case = "Ad-hoc"
    elif yearly_volume >= 5000:
        use_case = "Pipeline"
    else:
        use_case = "SOP"

    constraint_fraction = min(0.3 + structure.hard_constraint_count * 0.15, 1.0)
    context_fraction = 0.85 if structure.has_context else 0.5

    return ValuationRequest(
        prompt_text=text,
        prompt_title=prompt_title,
        # DLA
        output_char_count=output_chars,
        api_latency_seconds=LATENCY_BY_COMPLEXITY[structure.complexity_level],
        edit_session_seconds=fix_minutes * 60,
        api_cost_usd=api_cost,
        human_wpm=TYPING_WPM,
        hourly_wage=wage,
        # EAVP
        output_chars=output_chars,
        user_wpm=TYPING_WPM,
        edit_time_minutes=edit_minutes,
        market_rate=wage,
        # PRICE
        human_time_minutes=manual_minutes,
        human_hourly_rate=wage,
        review_time_minutes=review_minutes,
        token_cost=api_cost,
        reliability=_estimate_reliability(structure),
        yearly_volume=yearly_volume,
        use_case=use_case,
        # VECTOR
        score_constraints=_to_vector_score(constraint_fraction),
        score_context=_to_vector_score(context_fraction),
        score_feasibility=_to_vector_score(FEASIBILITY_BY_COMPLEXITY[structure.complexity_level]),
        score_safety=_to_vector_score(1 - SAFETY_FACTOR),
        vector_hourly_rate=wage,
        time_saved_minutes=max(manual_minutes - review_minutes - fix_minutes, 0),
        annual_volume=yearly_volume,
        api_cost_per_run=api_cost,
    )
