"""
Domain Entities

Defines the per-method calculation records and the valuation report that wraps them.
"""

from collections.abc import Mapping
from dataclasses import dataclass, fields, is_dataclass
from types import MappingProxyType
from typing import Union

from prompt_valuation_core.domain.value_objects import Badge, QualitativeJudgment


def to_plain(obj):
    """
    Recursively convert dataclasses and read-only mappings into plain dicts

    Tuples and lists keep their type; everything else is returned as is.
    """
    if is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: to_plain(getattr(obj, f.name)) for f in fields(obj)}
    if isinstance(obj, Mapping):
        return {key: to_plain(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return type(obj)(to_plain(value) for value in obj)
    return obj


@dataclass(frozen=True)
class DLACalculation:
    """Differential Labor Arbitrage result"""
    total_words: float
    manual_minutes: float
    gross_labor_value: float
    wait_cost: float
    reading_cost: float
    fixing_cost: float
    hidden_friction_cost: float
    true_net_value: float
    is_profitable: bool
    arbitrage_efficiency: float  # net / gross, 0 when gross is 0


@dataclass(frozen=True)
class EAVPCalculation:
    """Empirical Asset Verification result"""
    manual_creation_minutes: float
    correction_tax_minutes: float
    net_minutes_saved: float
    audited_value: float
    gross_labor_value: float
    correction_cost: float
    efficiency_ratio: float  # net minutes saved / manual minutes
    is_net_gain: bool


@dataclass(frozen=True)
class PRICECalculation:
    """Asset pricing result"""
    human_cost: float
    ai_cost: float
    review_cost: float
    operational_cost: float
    net_run_savings: float
    total_asset_value: float
    freelance_price: float
    marketplace_price: float


@dataclass(frozen=True)
class VECTORCalculation:
    """Viability vector result"""
    base_quality: float
    q: float  # reliability coefficient in [0, 1]
    gross_value_per_run: float
    correction_cost: float
    net_utility: float
    total_annual_value: float
    freelance_price: float
    marketplace_price: float
    status: str
    reason: str | None = None


@dataclass(frozen=True)
class PVCCalculation:
    """Prompt quality composite result"""
    normalized_scores: Mapping[str, float]
    base_quality: float
    quality_after_penalty: float
    token_count: int
    length_penalty: float
    final_score: float

    def __post_init__(self):
        object.__setattr__(self, "normalized_scores", MappingProxyType(dict(self.normalized_scores)))


@dataclass(frozen=True)
class SCOPECalculation:
    """Semantic density composite result"""
    pvi: float
    tier: str


MethodCalculation = Union[
    DLACalculation,
    PVCCalculation,
    SCOPECalculation,
    EAVPCalculation,
    PRICECalculation,
    VECTORCalculation,
]

CALCULATION_TYPES: dict[str, type] = {
    "DLA": DLACalculation,
    "PVC": PVCCalculation,
    "SCOPE": SCOPECalculation,
    "EAVP": EAVPCalculation,
    "PRICE": PRICECalculation,
    "VECTOR": VECTORCalculation,
}


@dataclass(frozen=True)
class ValuationReport:
    """Result of running one valuation method against one request (inputs is read-only)"""
    method: str
    prompt_text: str
    prompt_title: str | None
    inputs: Mapping
    calculations: MethodCalculation
    timestamp: str
    watermark: str
    judgment: QualitativeJudgment | None = None
    badges: tuple[Badge, ...] = ()

    def __post_init__(self):
        expected = CALCULATION_TYPES.get(self.method)
        if expected is None:
            raise ValueError(f"Unknown method: {self.method}")
        if not isinstance(self.calculations, expected):
            raise TypeError(
                f"{self.method} report requires {expected.__name__}, "
                f"got {type(self.calculations).__name__}"
            )
        object.__setattr__(self, "inputs", MappingProxyType(dict(self.inputs)))

    def to_dict(self) -> dict:
        """Convert to dictionary format"""
        return to_plain(self)


@dataclass
class HealthCheckResult:
    """Health check result"""
    model_name: str
    success: bool
    latency_ms: int | None
    error: str | None
