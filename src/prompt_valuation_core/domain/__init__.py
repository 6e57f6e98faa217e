"""
Domain Layer

Defines constants, errors, entities, and value objects that form the core of the valuation logic.
Has no dependencies on external libraries.
"""

from prompt_valuation_core.domain.constants import (
    BADGE_DEFINITIONS,
    BATCH_MODES,
    JUDGED_METHODS,
    METHODS,
)
from prompt_valuation_core.domain.entities import (
    CALCULATION_TYPES,
    DLACalculation,
    EAVPCalculation,
    HealthCheckResult,
    MethodCalculation,
    PRICECalculation,
    PVCCalculation,
    SCOPECalculation,
    VECTORCalculation,
    ValuationReport,
    to_plain,
)
from prompt_valuation_core.domain.errors import (
    BatchValuationError,
    InvalidInputError,
    ScorerError,
    ValuationError,
)
from prompt_valuation_core.domain.value_objects import (
    Badge,
    ModelResponse,
    PromptStructure,
    QualitativeJudgment,
    ValuationRequest,
)

__all__ = [
    # constants
    "BADGE_DEFINITIONS",
    "BATCH_MODES",
    "JUDGED_METHODS",
    "METHODS",
    # entities
    "CALCULATION_TYPES",
    "DLACalculation",
    "EAVPCalculation",
    "HealthCheckResult",
    "MethodCalculation",
    "PRICECalculation",
    "PVCCalculation",
    "SCOPECalculation",
    "VECTORCalculation",
    "ValuationReport",
    "to_plain",
    # errors
    "BatchValuationError",
    "InvalidInputError",
    "ScorerError",
    "ValuationError",
    # value objects
    "Badge",
    "ModelResponse",
    "PromptStructure",
    "QualitativeJudgment",
    "ValuationRequest",
]
