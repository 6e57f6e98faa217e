"""
Use Cases Layer

Aggregates the valuation workflows called from the package entry point and the runner.
"""

from prompt_valuation_core.use_cases.badges import (
    BADGE_CATALOG,
    BADGE_RULES,
    BadgeRule,
    evaluate_badges,
)
from prompt_valuation_core.use_cases.export import report_to_row, reports_to_frame
from prompt_valuation_core.use_cases.health_check import (
    HEALTH_CHECK_PROMPT,
    check_judge_health,
)
from prompt_valuation_core.use_cases.orchestration import (
    new_watermark,
    resolve_methods,
    run,
    run_method,
)
from prompt_valuation_core.use_cases.prompt_analysis import (
    analyze_prompt_structure,
    estimate_request,
)

__all__ = [
    # badges
    "BADGE_CATALOG",
    "BADGE_RULES",
    "BadgeRule",
    "evaluate_badges",
    # export
    "report_to_row",
    "reports_to_frame",
    # health_check
    "HEALTH_CHECK_PROMPT",
    "check_judge_health",
    # orchestration
    "new_watermark",
    "resolve_methods",
    "run",
    "run_method",
    # prompt_analysis
    "analyze_prompt_structure",
    "estimate_request",
]
