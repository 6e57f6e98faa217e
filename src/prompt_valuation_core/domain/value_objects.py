"""
Domain Value Objects

Defines immutable data structures for valuation requests, qualitative judgments,
badges, prompt structure analysis and model responses.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from types import MappingProxyType

from prompt_valuation_core.domain.constants import PRICE_USE_CASES, VECTOR_CONFIG
from prompt_valuation_core.domain.errors import InvalidInputError

_NUMERIC_FIELDS = (
    # DLA
    "output_char_count",
    "api_latency_seconds",
    "edit_session_seconds",
    "api_cost_usd",
    "human_wpm",
    "human_reading_wpm",
    "hourly_wage",
    # EAVP
    "output_chars",
    "user_wpm",
    "edit_time_minutes",
    "regenerations",
    "market_rate",
    # PRICE
    "human_time_minutes",
    "human_hourly_rate",
    "review_time_minutes",
    "token_cost",
    "reliability",
    "yearly_volume",
    "parameter_weight",
    # VECTOR
    "score_constraints",
    "score_context",
    "score_feasibility",
    "score_safety",
    "vector_hourly_rate",
    "time_saved_minutes",
    "annual_volume",
    "api_cost_per_run",
)

_VECTOR_SCORE_FIELDS = ("score_constraints", "score_context", "score_feasibility", "score_safety")


@dataclass(frozen=True)
class ValuationRequest:
    """
    Superset of every input any valuation method consumes

    Only prompt_text is required. A field left as None is resolved to the
    method's documented default; an explicit 0 is kept as zero.

    Each method reads only its own fields. VECTOR's rate is vector_hourly_rate
    (default 100) and PRICE's is human_hourly_rate (default 80), so setting one
    leaves the other method on its own value.
    """
    prompt_text: str
    prompt_title: str | None = None

    # DLA (Differential Labor Arbitrage)
    output_char_count: float | None = None
    api_latency_seconds: float | None = None
    edit_session_seconds: float | None = None
    api_cost_usd: float | None = None
    human_wpm: float | None = None
    human_reading_wpm: float | None = None
    hourly_wage: float | None = None

    # EAVP (Empirical Asset Verification Protocol)
    output_chars: float | None = None
    user_wpm: float | None = None
    edit_time_minutes: float | None = None
    regenerations: float | None = None
    market_rate: float | None = None

    # PRICE
    human_time_minutes: float | None = None
    human_hourly_rate: float | None = None
    review_time_minutes: float | None = None
    token_cost: float | None = None
    reliability: float | None = None
    yearly_volume: float | None = None
    use_case: str | None = None
    valued_parameter: str | None = None
    parameter_weight: float | None = None

    # VECTOR
    score_constraints: float | None = None
    score_context: float | None = None
    score_feasibility: float | None = None
    score_safety: float | None = None
    vector_hourly_rate: float | None = None
    time_saved_minutes: float | None = None
    annual_volume: float | None = None
    api_cost_per_run: float | None = None

    def __post_init__(self):
        if not isinstance(self.prompt_text, str):
            raise InvalidInputError("prompt_text must be a string")

        for name in _NUMERIC_FIELDS:
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidInputError(f"{name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise InvalidInputError(f"{name} must be finite")
            if value < 0:
                raise InvalidInputError(f"{name} must be non-negative")

        if self.reliability is not None and self.reliability > 1:
            raise InvalidInputError("reliability must be between 0 and 1")

        max_score = VECTOR_CONFIG["max_score"]
        for name in _VECTOR_SCORE_FIELDS:
            value = getattr(self, name)
            if value is not None and value > max_score:
                raise InvalidInputError(f"{name} must be between 0 and {max_score}")

        if self.use_case is not None and self.use_case not in PRICE_USE_CASES:
            raise InvalidInputError(
                f"Unknown use_case: {self.use_case} (available: {list(PRICE_USE_CASES)})"
            )

    def resolve(self, defaults: dict) -> dict:
        """Return the given fields with omitted values replaced by their defaults"""
        return {
            name: default if getattr(self, name) is None else getattr(self, name)
            for name, default in defaults.items()
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ValuationRequest":
        """Create from a plain mapping (unknown keys are rejected)"""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise InvalidInputError(f"Unknown request fields: {unknown}")
        if "prompt_text" not in data:
            raise InvalidInputError("prompt_text is required")
        return cls(**data)


@dataclass(frozen=True)
class QualitativeJudgment:
    """Sub-scores returned by the qualitative scorer for one rubric (read-only)"""
    rubric_id: str
    scores: Mapping[str, float] = field(default_factory=dict)
    rationale: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "scores", MappingProxyType(dict(self.scores)))

    def __getitem__(self, name: str) -> float:
        return self.scores[name]


@dataclass(frozen=True)
class Badge:
    """Achievement badge from the static catalog"""
    id: str
    name: str
    description: str
    tier: str
    icon: str


@dataclass(frozen=True)
class PromptStructure:
    """Heuristic characteristics of a prompt"""
    char_count: int
    word_count: int
    hard_constraint_count: int
    has_soft_constraints: bool
    has_output_format: bool
    has_examples: bool
    has_context: bool
    complexity_level: str        # simple / moderate / complex
    estimated_output_length: str  # short / medium / long
    task_type: str               # creative / analytical / technical / conversational
    is_repeatable: bool

    @property
    def has_hard_constraints(self) -> bool:
        return self.hard_constraint_count > 0


@dataclass
class ModelResponse:
    """Model response"""
    output: str
    latency_ms: int
    model_name: str
    input_tokens: int = 0
    output_tokens: int = 0
